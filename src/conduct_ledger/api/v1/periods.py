"""Week and report-month views over the ledger."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from ...core.store import get_ledger, get_resolver
from ...schemas import PeriodSummary
from ...services import period_service
from ...services.calendar_service import CalendarResolver
from ...services.ledger_service import Ledger

router = APIRouter(prefix="/periods", tags=["periods"])


@router.get("/ranges", response_model=List[str], summary="Selectable week labels or report months")
def list_ranges(
    *,
    mode: Literal["week", "month"] = Query("month"),
    class_name: Optional[str] = Query(None, description="Restrict to one class"),
    today: Optional[date] = Query(None, description="Override the current day"),
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> List[str]:
    """Return selectable ranges, newest first, always including the current one."""

    events = ledger.list_events(class_name=class_name)
    if mode == "week":
        return period_service.available_week_labels(events, today=today, resolver=resolver)
    return period_service.available_report_months(events, today=today)


@router.get("/summary", response_model=PeriodSummary, summary="Events and counts for one range")
def period_summary(
    *,
    mode: Literal["week", "month", "all"] = Query("all"),
    range_label: str = Query("All", alias="range", description="Week label or M/YYYY"),
    class_name: Optional[str] = Query(None, description="Restrict to one class"),
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> PeriodSummary:
    if mode == "week":
        events = period_service.by_week_label(ledger, range_label, resolver=resolver)
    elif mode == "month":
        events = period_service.by_report_month(ledger, range_label)
    else:
        events = ledger.events
    if class_name is not None:
        events = [e for e in events if e.class_name == class_name]

    students = ledger.list_students(class_name=class_name)
    stats = period_service.summarize(events, students)
    return PeriodSummary(mode=mode, range=range_label, events=events, **stats)
