"""In-memory conduct ledger keeping student scores reconciled with their events."""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from contextlib import contextmanager
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence

from ..core.config import get_settings
from ..models import BASELINE_SCORE, ClassRemark, Event, LedgerOutcome, MonthlyRemark, Student

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base class for recoverable ledger conditions reported to the caller."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class EventNotFound(LedgerError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event {event_id} not found", status_code=404)
        self.event_id = event_id


class StudentNotFound(LedgerError):
    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student {student_id} not found", status_code=404)
        self.student_id = student_id


class DuplicateEvent(LedgerError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event {event_id} already exists", status_code=409)


class DuplicateStudent(LedgerError):
    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student {student_id} already exists", status_code=409)


class UnresolvableOwner(LedgerError):
    """Raised for unknown owners when strict owner checking is enabled."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Event owner {student_id} does not match any student", status_code=422)
        self.student_id = student_id


class InvalidPeriod(LedgerError):
    """A period filter whose type or value cannot select events."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail, status_code=422)


class EmptySelection(LedgerError):
    """A bulk deletion whose filter matched no events."""

    def __init__(self, detail: str = "Nothing to delete for the selected filter.") -> None:
        super().__init__(detail, status_code=404)


class InvariantViolation(AssertionError):
    """Score no longer equals baseline plus the sum of active event points."""


class Ledger:
    """Authoritative store of students, events and remarks.

    Every mutation runs under :meth:`transaction` and computes its full set of
    score changes before touching any state, so an operation either applies
    completely or not at all.
    Students handed in are copied, so scores only change through the ledger.
    """

    def __init__(
        self,
        students: Iterable[Student] = (),
        events: Iterable[Event] = (),
        *,
        baseline_score: int = BASELINE_SCORE,
        reject_unresolvable_owner: bool = False,
    ) -> None:
        self.baseline_score = baseline_score
        self.reject_unresolvable_owner = reject_unresolvable_owner
        self._lock = threading.RLock()
        self._students: dict[str, Student] = {}
        self._events: dict[str, Event] = {}
        self._monthly_remarks: dict[tuple[str, str], MonthlyRemark] = {}
        self._class_remarks: dict[tuple[str, str], ClassRemark] = {}

        for student in students:
            if student.id in self._students:
                raise DuplicateStudent(student.id)
            self._students[student.id] = student.model_copy()
        for event in events:
            if event.id in self._events:
                raise DuplicateEvent(event.id)
            self._events[event.id] = event
        self._reconcile_loaded_scores()

    def _reconcile_loaded_scores(self) -> None:
        totals = self._points_by_student(self._events.values())
        for student in self._students.values():
            expected = self.baseline_score + totals.get(student.id, 0)
            if student.score != expected:
                logger.info(
                    "reconciled loaded score for %s: %s -> %s", student.id, student.score, expected
                )
                student.score = expected

    @contextmanager
    def transaction(self) -> Iterator["Ledger"]:
        """Hold the ledger lock so a selection and its mutation form one unit."""

        with self._lock:
            yield self

    # Reads

    @property
    def events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    @property
    def students(self) -> list[Student]:
        with self._lock:
            return list(self._students.values())

    def get_event(self, event_id: str) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFound(event_id)
        return event

    def get_student(self, student_id: str) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFound(student_id)
        return student

    def list_students(
        self, *, class_name: Optional[str] = None, include_archived: bool = True
    ) -> list[Student]:
        with self._lock:
            students = list(self._students.values())
        return [
            s
            for s in students
            if (class_name is None or s.class_name == class_name) and (include_archived or not s.archived)
        ]

    def list_events(
        self, *, class_name: Optional[str] = None, student_id: Optional[str] = None
    ) -> list[Event]:
        with self._lock:
            events = list(self._events.values())
        return [
            e
            for e in events
            if (class_name is None or e.class_name == class_name)
            and (student_id is None or e.student_id == student_id)
        ]

    # Roster

    def add_student(self, student: Student) -> Student:
        """Register a student; the score is derived from any events already recorded for the id."""

        with self._lock:
            if student.id in self._students:
                raise DuplicateStudent(student.id)
            owned = sum(e.points for e in self._events.values() if e.student_id == student.id)
            student = student.model_copy(update={"score": self.baseline_score + owned})
            self._students[student.id] = student
            logger.info("student %s added to class %s", student.id, student.class_name)
            return student

    def archive_student(
        self, student_id: str, archive: bool, *, reason: Optional[str] = None, on: Optional[date] = None
    ) -> Student:
        with self._lock:
            student = self.get_student(student_id)
            student.archived = archive
            student.archived_at = (on or date.today()) if archive else None
            student.archived_reason = reason if archive else None
            return student

    # Event mutations

    def _resolve_owner(self, student_id: str) -> Optional[Student]:
        student = self._students.get(student_id)
        if student is None and self.reject_unresolvable_owner:
            raise UnresolvableOwner(student_id)
        return student

    def _apply(self, deltas: dict[str, int], outcome: LedgerOutcome) -> LedgerOutcome:
        for student_id, delta in deltas.items():
            student = self._students.get(student_id)
            if student is None:
                if student_id not in outcome.unresolved_owners:
                    outcome.unresolved_owners.append(student_id)
                logger.warning("no student %s to reconcile delta %s against", student_id, delta)
                continue
            student.score += delta
            outcome.scores[student_id] = student.score
        return outcome

    def insert(self, event: Event) -> LedgerOutcome:
        """Record ``event`` and add its points to the owner's score."""

        with self._lock:
            if event.id in self._events:
                raise DuplicateEvent(event.id)
            owner = self._resolve_owner(event.student_id)
            self._events[event.id] = event
            outcome = self._apply({event.student_id: event.points}, LedgerOutcome(event_ids=[event.id]))
            outcome.notify_parent = owner is not None and not event.is_collective
            logger.info("event %s recorded for %s (%+d)", event.id, event.student_id, event.points)
            return outcome

    def update(self, event_id: str, new_event: Event) -> LedgerOutcome:
        """Replace the stored event, shifting the owner's score by the points difference."""

        with self._lock:
            old = self.get_event(event_id)
            if new_event.id != event_id:
                new_event = new_event.model_copy(update={"id": event_id})
            if new_event.student_id != old.student_id:
                self._resolve_owner(new_event.student_id)

            deltas: dict[str, int] = defaultdict(int)
            deltas[old.student_id] -= old.points
            deltas[new_event.student_id] += new_event.points

            self._events[event_id] = new_event
            outcome = self._apply(dict(deltas), LedgerOutcome(event_ids=[event_id]))
            logger.info("event %s updated (%+d -> %+d)", event_id, old.points, new_event.points)
            return outcome

    def delete_one(self, event_id: str) -> LedgerOutcome:
        with self._lock:
            event = self.get_event(event_id)
            del self._events[event_id]
            outcome = self._apply({event.student_id: -event.points}, LedgerOutcome(event_ids=[event_id]))
            logger.info("event %s deleted", event_id)
            return outcome

    def delete_many(self, event_ids: Iterable[str]) -> LedgerOutcome:
        """Remove every known id in one batch, reverting each owner's points in a single step.

        Unknown ids are ignored; an empty match is a zero-effect success.
        """

        with self._lock:
            wanted = set(event_ids)
            doomed = [e for e in self._events.values() if e.id in wanted]
            reverted = self._points_by_student(doomed)

            for event in doomed:
                del self._events[event.id]
            outcome = self._apply(
                {student_id: -points for student_id, points in reverted.items()},
                LedgerOutcome(event_ids=[e.id for e in doomed]),
            )
            logger.info("batch delete removed %s events for %s students", len(doomed), len(reverted))
            return outcome

    def reset(self) -> LedgerOutcome:
        """Empty events and remarks and assign every student the baseline score."""

        with self._lock:
            removed = list(self._events)
            self._events.clear()
            self._monthly_remarks.clear()
            self._class_remarks.clear()

            outcome = LedgerOutcome(event_ids=removed)
            for student in self._students.values():
                student.score = self.baseline_score
                student.archived = False
                student.archived_at = None
                student.archived_reason = None
                outcome.scores[student.id] = student.score
            logger.info("ledger reset: %s events cleared, %s students restored", len(removed), len(outcome.scores))
            return outcome

    # Remarks

    def upsert_monthly_remark(self, remark: MonthlyRemark) -> MonthlyRemark:
        with self._lock:
            self._monthly_remarks[(remark.student_id, remark.month_year)] = remark
            return remark

    def upsert_class_remark(self, remark: ClassRemark) -> ClassRemark:
        with self._lock:
            self._class_remarks[(remark.class_name, remark.period)] = remark
            return remark

    @property
    def monthly_remarks(self) -> list[MonthlyRemark]:
        with self._lock:
            return list(self._monthly_remarks.values())

    @property
    def class_remarks(self) -> list[ClassRemark]:
        with self._lock:
            return list(self._class_remarks.values())

    # Checks

    @staticmethod
    def _points_by_student(events: Iterable[Event]) -> dict[str, int]:
        totals: dict[str, int] = defaultdict(int)
        for event in events:
            totals[event.student_id] += event.points
        return dict(totals)

    def check_invariant(self) -> None:
        """Raise :class:`InvariantViolation` if any score drifted from its events."""

        with self._lock:
            totals = self._points_by_student(self._events.values())
            students = list(self._students.values())
        for student in students:
            expected = self.baseline_score + totals.get(student.id, 0)
            if student.score != expected:
                raise InvariantViolation(
                    f"Student {student.id} has score {student.score}, expected {expected}"
                )


def build_ledger(
    students: Sequence[Student] = (),
    events: Sequence[Event] = (),
) -> Ledger:
    """Create a ledger configured from application settings."""

    settings = get_settings()
    return Ledger(
        students,
        events,
        baseline_score=settings.baseline_score,
        reject_unresolvable_owner=settings.reject_unresolvable_owner,
    )
