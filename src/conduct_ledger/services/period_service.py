"""Read-only event selections by class, school week and report month."""

from __future__ import annotations

from datetime import date
from typing import Callable, Collection, Iterable, Optional, Sequence

from ..models import Event, Student
from ..utils.datetime import report_month_label, report_month_sort_key
from .calendar_service import CalendarResolver, get_calendar_resolver
from .ledger_service import Ledger


def _select(
    ledger: Ledger,
    predicate: Callable[[Event], bool],
) -> list[Event]:
    return [event for event in ledger.events if predicate(event)]


def by_class(ledger: Ledger, class_names: Collection[str]) -> list[Event]:
    """Return every event recorded against one of ``class_names``."""

    wanted = set(class_names)
    return _select(ledger, lambda e: e.class_name in wanted)


def by_class_and_weeks(
    ledger: Ledger,
    class_names: Collection[str],
    week_indices: Collection[int],
    *,
    resolver: Optional[CalendarResolver] = None,
) -> list[Event]:
    """Return events in the cross product of the named classes and school weeks."""

    resolver = resolver or get_calendar_resolver()
    classes = set(class_names)
    weeks = set(week_indices)
    return _select(
        ledger,
        lambda e: e.class_name in classes and resolver.week_index(e.date) in weeks,
    )


def by_week(
    ledger: Ledger,
    week_index: int,
    *,
    resolver: Optional[CalendarResolver] = None,
) -> list[Event]:
    resolver = resolver or get_calendar_resolver()
    return _select(ledger, lambda e: resolver.week_index(e.date) == week_index)


def by_report_month(ledger: Ledger, label: str) -> list[Event]:
    return _select(ledger, lambda e: report_month_label(e.date) == label)


def by_week_label(
    ledger: Ledger,
    label: str,
    *,
    resolver: Optional[CalendarResolver] = None,
) -> list[Event]:
    """Return events whose resolved week label equals ``label`` (e.g. ``"pre-term"``)."""

    resolver = resolver or get_calendar_resolver()
    return _select(ledger, lambda e: resolver.resolve(e.date).week_label == label)


def available_report_months(
    events: Iterable[Event],
    *,
    today: Optional[date] = None,
) -> list[str]:
    """Return distinct report months of ``events`` plus the current month, newest first."""

    labels = {report_month_label(e.date) for e in events}
    labels.add(report_month_label(today or date.today()))
    return sorted(labels, key=report_month_sort_key, reverse=True)


def available_week_labels(
    events: Iterable[Event],
    *,
    today: Optional[date] = None,
    resolver: Optional[CalendarResolver] = None,
) -> list[str]:
    """Return labels of teaching weeks (not pre-term, not holidays) that hold events, newest first.

    The current week is included when it is itself a teaching week.
    """

    resolver = resolver or get_calendar_resolver()
    ranked: dict[str, int] = {}
    days = [e.date for e in events]
    days.append(today or date.today())
    for day in days:
        info = resolver.resolve(day)
        if info.week_index > 0 and not info.is_holiday:
            ranked[info.week_label] = info.week_index
    return sorted(ranked, key=lambda label: ranked[label], reverse=True)


def summarize(events: Sequence[Event], students: Sequence[Student]) -> dict[str, float]:
    """Return headline counts for a filtered event list and the roster average score."""

    return {
        "total_events": len(events),
        "violations": sum(1 for e in events if e.points < 0),
        "commendations": sum(1 for e in events if e.points > 0),
        "average_score": (sum(s.score for s in students) / len(students)) if students else 0.0,
    }
