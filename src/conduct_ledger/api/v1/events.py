"""Event endpoints: record, edit and delete point-bearing events."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.store import get_ledger, get_resolver
from ...models import Event, LedgerOutcome
from ...schemas import EventCreate, EventWriteResult
from ...services import period_service
from ...services.calendar_service import CalendarResolver
from ...services.ledger_service import Ledger, LedgerError

router = APIRouter(prefix="/events", tags=["events"])

_EXAMPLE_EVENT = {
    "id": "e-001",
    "student_id": "HS001",
    "student_name": "Nguyen Van A",
    "class_name": "10A1",
    "date": "15/09/2025",
    "type": "Late to class",
    "points": -10,
    "is_collective": False,
    "recorded_by": "Tran Thi C",
    "recorded_role": "TEACHER",
    "note": "",
}


@router.get("", response_model=List[Event], summary="List events")
def list_events(
    *,
    class_name: Optional[str] = Query(None, description="Restrict to one class"),
    student_id: Optional[str] = Query(None, description="Restrict to one student"),
    week: Optional[int] = Query(None, description="School week index (0 pre-term, -1 lunar break)"),
    report_month: Optional[str] = Query(None, description="Report month label, M/YYYY"),
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> List[Event]:
    """Return events in insertion order, filtered by class, student, week and month."""

    events = ledger.list_events(class_name=class_name, student_id=student_id)
    if week is not None:
        weekly = {e.id for e in period_service.by_week(ledger, week, resolver=resolver)}
        events = [e for e in events if e.id in weekly]
    if report_month is not None:
        monthly = {e.id for e in period_service.by_report_month(ledger, report_month)}
        events = [e for e in events if e.id in monthly]
    return events


@router.post(
    "",
    response_model=EventWriteResult,
    status_code=status.HTTP_201_CREATED,
    summary="Record an event",
    responses={
        201: {
            "description": "Event recorded and score reconciled",
            "content": {
                "application/json": {
                    "example": {
                        "event": _EXAMPLE_EVENT,
                        "outcome": {
                            "event_ids": ["e-001"],
                            "scores": {"HS001": 190},
                            "unresolved_owners": [],
                            "notify_parent": True,
                        },
                    }
                }
            },
        },
        409: {"description": "Event id already exists"},
        422: {"description": "Unparseable date or unknown owner (strict mode)"},
    },
)
def create_event(payload: EventCreate, ledger: Ledger = Depends(get_ledger)) -> EventWriteResult:
    """Record a violation (negative points) or commendation (positive points)."""

    event = payload.to_event()
    try:
        outcome = ledger.insert(event)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return EventWriteResult(event=event, outcome=outcome)


@router.put(
    "/{event_id}",
    response_model=EventWriteResult,
    summary="Edit an event",
    responses={404: {"description": "Event not found"}},
)
def update_event(
    event_id: str,
    payload: EventCreate,
    ledger: Ledger = Depends(get_ledger),
) -> EventWriteResult:
    """Replace an event; the owner's score moves by the points difference."""

    event = payload.to_event(event_id)
    try:
        outcome = ledger.update(event_id, event)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return EventWriteResult(event=event, outcome=outcome)


@router.delete(
    "/{event_id}",
    response_model=LedgerOutcome,
    summary="Delete an event",
    responses={404: {"description": "Event not found"}},
)
def delete_event(event_id: str, ledger: Ledger = Depends(get_ledger)) -> LedgerOutcome:
    try:
        return ledger.delete_one(event_id)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
