import pytest

from mindflow.app import (
    build_calendar,
    format_student,
    is_leap_year,
    main,
    new_course,
    new_student,
)
from mindflow.structures import AgendaEvent, Grade, Question, Relevance, Review


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (2023, False), (1900, False), (2000, True)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_calendar_has_twelve_named_months():
    months = build_calendar(2023)
    assert [m.number for m in months] == list(range(1, 13))
    assert months[0].name == "Enero"
    assert months[-1].name == "Diciembre"
    assert all(len(m.days) == 31 for m in months)


def test_february_length_depends_on_leap_year():
    leap = [d for d in build_calendar(2024)[1].days if d.is_valid()]
    common = [d for d in build_calendar(2023)[1].days if d.is_valid()]
    assert len(leap) == len(common) + 1
    assert leap[-1].number == 29


def test_invalid_slots_have_no_agenda():
    for month in build_calendar(2023):
        for day in month.days:
            if day.is_valid():
                assert day.agenda is not None and len(day.agenda) == 0
            else:
                assert day.agenda is None
            assert day.relevant == set()


def test_valid_days_are_numbered_in_order():
    for month in build_calendar(2024):
        numbers = [d.number for d in month.days if d.is_valid()]
        assert numbers == list(range(1, len(numbers) + 1))


def test_new_course():
    course = new_course(7)
    assert course.id == 7
    assert course.name == ""
    assert len(course.grades) == 0 and len(course.reviews) == 0


def test_new_student_is_empty():
    student = new_student(2024)
    assert len(student.courses) == 0
    assert len(student.months) == 12


def test_format_empty_student():
    text = format_student(new_student(2023))
    assert text.startswith("===== INFORMACIÓN DEL ESTUDIANTE =====\n")
    assert "  (Ningún curso registrado aún)\n" in text
    assert "  Mes: Enero (1)\n" in text
    assert "    Día  1: (sin eventos relevantes)\n" in text
    assert text.endswith("=======================================\n")


def test_format_student_with_course():
    student = new_student(2023)
    course = new_course(1)
    course.name = "Calculo"
    course.grades.push_back(Grade(6, 0.5))
    review = Review(average_score=80, previous_average_score=70)
    review.questions.push_back(Question("2+2", "4", 100))
    course.reviews.push_back(review)
    student.courses.insert(course.name, course)

    text = format_student(student)
    assert "  - Curso ID: 1, Nombre: Calculo\n" in text
    assert "      Nota: 6, Ponderación: 0.50\n" in text
    assert "      Repaso (Puntaje Actual: 80, Anterior: 70)\n" in text
    assert "        Pregunta: 2+2\n        Respuesta: 4\n        Puntuación: 100\n" in text


def test_format_course_without_grades_or_reviews():
    student = new_student(2023)
    student.courses.insert("Fisica", new_course(2))
    text = format_student(student)
    assert "      (Sin notas registradas)\n" in text
    assert "      (Sin repasos registrados)\n" in text


def test_format_relevant_day_and_agenda():
    student = new_student(2023)
    day = student.months[2].days[9]
    day.relevant.update({Relevance.WORK, Relevance.EXAM})
    day.agenda.push_back(AgendaEvent("Prueba", "Unidad 1", done=True))
    day.agenda.push_back(AgendaEvent("Informe", "Entrega"))

    text = format_student(student)
    assert "    Día 10: [Examen] [Trabajo] \n" in text
    assert "      - Evento: Prueba\n        Descripción: Unidad 1\n        Estado: Realizado\n" in text
    assert "        Estado: Pendiente\n" in text


def test_format_skips_invalid_days():
    text = format_student(new_student(2023))
    february = text.split("  Mes: Febrero (2)\n")[1].split("  Mes: Marzo")[0]
    assert "Día 28" in february
    assert "Día 29" not in february


def test_main_returns_zero():
    assert main() == 0