"""Bulk deletion and reset endpoints.

These calls are destructive and perform no confirmation of their own; the
caller is expected to confirm with the user first.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...core.store import get_ledger, get_resolver
from ...models import LedgerOutcome
from ...schemas import (
    DeleteByClassAndWeek,
    DeleteByClassAndWeeks,
    DeleteByClasses,
    DeleteByIds,
    DeleteByPeriod,
)
from ...services import reconciliation_service
from ...services.calendar_service import CalendarResolver
from ...services.ledger_service import Ledger, LedgerError

router = APIRouter(prefix="/reconciliation", tags=["reconciliation"])

_RESPONSES = {404: {"description": "Nothing to delete for the selected filter"}}


@router.post("/delete-by-ids", response_model=LedgerOutcome, responses=_RESPONSES)
def delete_by_ids(payload: DeleteByIds, ledger: Ledger = Depends(get_ledger)) -> LedgerOutcome:
    try:
        return reconciliation_service.delete_by_ids(ledger, payload.event_ids)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/delete-by-classes", response_model=LedgerOutcome, responses=_RESPONSES)
def delete_by_classes(payload: DeleteByClasses, ledger: Ledger = Depends(get_ledger)) -> LedgerOutcome:
    """Delete the whole event history of the selected classes."""

    try:
        return reconciliation_service.delete_by_classes(ledger, payload.class_names)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/delete-by-class-and-weeks", response_model=LedgerOutcome, responses=_RESPONSES)
def delete_by_class_and_weeks(
    payload: DeleteByClassAndWeeks,
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> LedgerOutcome:
    try:
        return reconciliation_service.delete_by_class_and_weeks(
            ledger, payload.class_names, payload.weeks, resolver=resolver
        )
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/delete-by-class-and-week", response_model=LedgerOutcome, responses=_RESPONSES)
def delete_by_class_and_week(
    payload: DeleteByClassAndWeek,
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> LedgerOutcome:
    try:
        return reconciliation_service.delete_by_class_and_week(
            ledger, payload.class_name, payload.week, resolver=resolver
        )
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/delete-by-period", response_model=LedgerOutcome, responses=_RESPONSES)
def delete_by_period(
    payload: DeleteByPeriod,
    ledger: Ledger = Depends(get_ledger),
    resolver: CalendarResolver = Depends(get_resolver),
) -> LedgerOutcome:
    """Delete one week or report month for every class."""

    try:
        return reconciliation_service.delete_by_period(
            ledger, payload.period_type, payload.value, resolver=resolver
        )
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/reset", response_model=LedgerOutcome, summary="Reset the whole system")
def reset(ledger: Ledger = Depends(get_ledger)) -> LedgerOutcome:
    """Remove every event and remark and return all scores to the baseline."""

    return reconciliation_service.full_reset(ledger)
