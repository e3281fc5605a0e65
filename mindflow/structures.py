"""Data types for a student's courses, grades, reviews and calendar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from mindflow.hashmap import HashMap, string_equal, string_hash
from mindflow.linkedlist import LinkedList


class Relevance(IntEnum):
    """Kinds of relevant events that can mark a day."""

    EXAM = 0
    CONTROL = 1
    WORK = 2

    @property
    def label(self) -> str:
        """Display name of the event kind."""
        return _RELEVANCE_LABELS[self]


_RELEVANCE_LABELS = {
    Relevance.EXAM: "Examen",
    Relevance.CONTROL: "Control",
    Relevance.WORK: "Trabajo",
}


@dataclass
class AgendaEvent:
    """An entry in a day's agenda."""

    name: str
    description: str = ""
    done: bool = False


@dataclass
class Day:
    """A calendar day; number 0 marks a day that does not exist in its month."""

    number: int = 0
    relevant: set[Relevance] = field(default_factory=set)
    agenda: Optional[LinkedList] = None

    def is_valid(self) -> bool:
        """Return whether the day exists in its month."""
        return self.number != 0


@dataclass
class Month:
    """A month with a slot for each of up to 31 days."""

    name: str
    number: int
    days: list[Day] = field(default_factory=list)


@dataclass
class Grade:
    """A grade and its weight in the course's final mark."""

    value: int
    weight: float


@dataclass
class Question:
    """A review question with its answer and a score from 0 to 100."""

    question: str
    answer: str
    score: int = 0


@dataclass
class Review:
    """A set of questions prepared for one exam."""

    questions: LinkedList = field(default_factory=LinkedList)
    average_score: int = 0
    previous_average_score: int = 0


@dataclass
class Course:
    """A course with its grades and reviews."""

    id: int
    name: str = ""
    grades: LinkedList = field(default_factory=LinkedList)
    reviews: LinkedList = field(default_factory=LinkedList)


def _course_map() -> HashMap:
    return HashMap(string_equal, string_hash)


@dataclass
class Student:
    """A student's courses, keyed by name, and the year's calendar."""

    courses: HashMap = field(default_factory=_course_map)
    months: list[Month] = field(default_factory=list)