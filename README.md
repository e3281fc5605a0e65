# mindflow

A small study planner for students. It keeps the student's courses, each with
its grades and review sessions (sets of questions with scores), and a calendar
for the current year. Every day in the calendar has an agenda of events and
flags for exams, quizzes and assignments.

## Installation

```
pip install .
```

## Command line

```
mindflow
```

This builds a student record with a calendar for the current year. A February
has 29 days in leap years.

## Library use

```python
from mindflow.app import new_student, new_course, format_student

student = new_student(2024)
course = new_course(1)
print(format_student(student))
```

The package also provides the building blocks the planner uses:

- `mindflow.linkedlist.LinkedList`: a singly linked list with a cursor
  (`first`, `next`, `push_current`, `pop_current`) and a `sorted_insert`
  that takes a `lower_than` comparison.
- `mindflow.hashmap.HashMap`: a chained hash map with custom equality and
  hash functions, such as `string_equal` with `string_hash` (djb2) and
  `int_equal` with `int_hash`.
- `mindflow.extra.read_csv_line`: reads one CSV line with quoted fields,
  and `split_string`: splits text on a set of delimiter characters and
  trims the spaces around each piece.

## Running the tests

```
pip install .[test]
pytest
```