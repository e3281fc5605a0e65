"""Building a student's year and rendering it as text."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from mindflow.hashmap import HashMap, string_equal, string_hash
from mindflow.linkedlist import LinkedList
from mindflow.structures import Course, Day, Month, Relevance, Student

MONTH_NAMES = (
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
)
DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MAX_DAYS = 31


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def build_calendar(year: int) -> list[Month]:
    """Return the twelve months of ``year``, each with 31 day slots.

    Days that exist get their number and an empty agenda; the remaining
    slots have number 0 and no agenda.
    """
    lengths = list(DAYS_PER_MONTH)
    if is_leap_year(year):
        lengths[1] = 29

    months = []
    for number, (name, length) in enumerate(zip(MONTH_NAMES, lengths), start=1):
        days = [Day(number=d, agenda=LinkedList()) for d in range(1, length + 1)]
        days.extend(Day() for _ in range(length, MAX_DAYS))
        months.append(Month(name=name, number=number, days=days))
    return months


def new_course(course_id: int) -> Course:
    """Return an unnamed course with no grades or reviews."""
    return Course(id=course_id)


def new_student(year: int) -> Student:
    """Return a student with no courses and the calendar of ``year``."""
    return Student(
        courses=HashMap(string_equal, string_hash),
        months=build_calendar(year),
    )


def _format_course(course: Course) -> list[str]:
    lines = [f"  - Curso ID: {course.id}, Nombre: {course.name}", "    Notas:"]
    if len(course.grades) == 0:
        lines.append("      (Sin notas registradas)")
    else:
        lines.extend(
            f"      Nota: {grade.value}, Ponderación: {grade.weight:.2f}"
            for grade in course.grades
        )
    lines.append("    Repasos:")
    if len(course.reviews) == 0:
        lines.append("      (Sin repasos registrados)")
    else:
        for review in course.reviews:
            lines.append(
                f"      Repaso (Puntaje Actual: {review.average_score}, "
                f"Anterior: {review.previous_average_score})"
            )
            for q in review.questions:
                lines.append(f"        Pregunta: {q.question}")
                lines.append(f"        Respuesta: {q.answer}")
                lines.append(f"        Puntuación: {q.score}")
    return lines


def _format_day(day: Day) -> list[str]:
    tags = "".join(f"[{kind.label}] " for kind in Relevance if kind in day.relevant)
    lines = [f"    Día {day.number:2d}: " + (tags or "(sin eventos relevantes)")]
    for event in day.agenda or ():
        lines.append(f"      - Evento: {event.name}")
        lines.append(f"        Descripción: {event.description}")
        lines.append(f"        Estado: {'Realizado' if event.done else 'Pendiente'}")
    return lines


def format_student(student: Student) -> str:
    """Render the student's courses and calendar as a text report."""
    lines = ["===== INFORMACIÓN DEL ESTUDIANTE =====", "", "Cursos registrados:"]
    if len(student.courses) == 0:
        lines.append("  (Ningún curso registrado aún)")
    else:
        for pair in student.courses:
            lines.extend(_format_course(pair.value))

    lines.extend(["", "Calendario:"])
    for month in student.months:
        lines.append(f"  Mes: {month.name} ({month.number})")
        for day in month.days:
            if day.is_valid():
                lines.extend(_format_day(day))
    lines.append("=======================================")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up a student for the current year."""
    new_student(datetime.now().year)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())