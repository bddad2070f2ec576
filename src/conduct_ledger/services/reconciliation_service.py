"""Bulk deletions and reset combining period selection with ledger reconciliation."""

from __future__ import annotations

import logging
from typing import Collection, Literal, Optional, Sequence

from ..models import Event, LedgerOutcome
from . import period_service
from .calendar_service import CalendarResolver
from .ledger_service import EmptySelection, InvalidPeriod, Ledger

logger = logging.getLogger(__name__)

PeriodType = Literal["week", "month"]


def _delete_selection(ledger: Ledger, selection: Sequence[Event], description: str) -> LedgerOutcome:
    if not selection:
        logger.warning("nothing to delete for %s", description)
        raise EmptySelection(f"Nothing to delete for {description}.")
    outcome = ledger.delete_many(e.id for e in selection)
    logger.info("deleted %s events for %s", outcome.affected_count, description)
    return outcome


def delete_by_ids(ledger: Ledger, event_ids: Collection[str]) -> LedgerOutcome:
    with ledger.transaction():
        wanted = set(event_ids)
        selection = [e for e in ledger.events if e.id in wanted]
        return _delete_selection(ledger, selection, f"{len(wanted)} selected records")


def delete_by_classes(ledger: Ledger, class_names: Collection[str]) -> LedgerOutcome:
    """Delete the whole event history of the named classes."""

    if not class_names:
        raise EmptySelection("No classes selected.")
    with ledger.transaction():
        selection = period_service.by_class(ledger, class_names)
        return _delete_selection(ledger, selection, f"classes {sorted(class_names)}")


def delete_by_class_and_weeks(
    ledger: Ledger,
    class_names: Collection[str],
    week_indices: Collection[int],
    *,
    resolver: Optional[CalendarResolver] = None,
) -> LedgerOutcome:
    if not class_names or not week_indices:
        raise EmptySelection("No classes or weeks selected.")
    with ledger.transaction():
        selection = period_service.by_class_and_weeks(
            ledger, class_names, week_indices, resolver=resolver
        )
        return _delete_selection(
            ledger, selection, f"classes {sorted(class_names)} in weeks {sorted(week_indices)}"
        )


def delete_by_class_and_week(
    ledger: Ledger,
    class_name: str,
    week_index: int,
    *,
    resolver: Optional[CalendarResolver] = None,
) -> LedgerOutcome:
    with ledger.transaction():
        selection = period_service.by_class_and_weeks(
            ledger, [class_name], [week_index], resolver=resolver
        )
        return _delete_selection(ledger, selection, f"class {class_name} in week {week_index}")


def delete_by_period(
    ledger: Ledger,
    period_type: PeriodType,
    value: int | str,
    *,
    resolver: Optional[CalendarResolver] = None,
) -> LedgerOutcome:
    """Delete one school week (``"week"``, int) or report month (``"month"``, ``"M/YYYY"``) across all classes."""

    with ledger.transaction():
        if period_type == "week":
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPeriod(f"Week periods take an integer week index, got {value!r}.")
            selection = period_service.by_week(ledger, value, resolver=resolver)
            description = f"week {value}"
        elif period_type == "month":
            selection = period_service.by_report_month(ledger, str(value))
            description = f"month {value}"
        else:
            raise InvalidPeriod(f"Unknown period type: {period_type!r}.")
        return _delete_selection(ledger, selection, description)


def full_reset(ledger: Ledger) -> LedgerOutcome:
    """Clear every event and remark and restore all scores to the baseline."""

    return ledger.reset()
