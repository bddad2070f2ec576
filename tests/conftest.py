from datetime import date

import pytest

from conduct_ledger.models import Event, Student
from conduct_ledger.services.calendar_service import CalendarResolver
from conduct_ledger.services.ledger_service import Ledger


@pytest.fixture(name="resolver")
def resolver_fixture() -> CalendarResolver:
    return CalendarResolver(
        date(2025, 9, 8),
        lunar_break=(date(2026, 2, 14), date(2026, 2, 22)),
        holidays=[date(2025, 9, 2), date(2026, 1, 1), date(2026, 4, 30)],
    )


@pytest.fixture(name="students")
def students_fixture() -> list[Student]:
    return [
        Student(id="S1", name="An", class_name="10A1"),
        Student(id="S2", name="Binh", class_name="10A1"),
        Student(id="S3", name="Chi", class_name="10A2"),
    ]


@pytest.fixture(name="ledger")
def ledger_fixture(students: list[Student]) -> Ledger:
    return Ledger(students)


def make_event(event_id: str, student_id: str, points: int, day: str = "15/09/2025", class_name: str = "10A1", **extra) -> Event:
    return Event(
        id=event_id,
        student_id=student_id,
        student_name=f"student {student_id}",
        class_name=class_name,
        date=day,
        type="Late to class" if points < 0 else "Good deed",
        points=points,
        **extra,
    )


@pytest.fixture(name="make_event")
def make_event_fixture():
    return make_event
