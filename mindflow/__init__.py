"""Study planner: courses, grades, review questions and a yearly calendar."""

__version__ = "0.1.0"