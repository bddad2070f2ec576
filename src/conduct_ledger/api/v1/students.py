"""Roster endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.store import get_ledger
from ...models import Student
from ...schemas import ArchiveRequest, StudentCreate
from ...services.ledger_service import Ledger, LedgerError

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=List[Student], summary="List students")
def list_students(
    *,
    class_name: Optional[str] = Query(None, description="Restrict to one class"),
    include_archived: bool = Query(False, description="Include archived students"),
    ledger: Ledger = Depends(get_ledger),
) -> List[Student]:
    """Return the roster, optionally scoped to an assigned class."""

    return ledger.list_students(class_name=class_name, include_archived=include_archived)


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    summary="Add a student",
    responses={409: {"description": "Student id already exists"}},
)
def add_student(payload: StudentCreate, ledger: Ledger = Depends(get_ledger)) -> Student:
    """Register a student at the baseline score.

    Example request body::

        {"id": "HS001", "name": "Nguyen Van A", "class": "10A1", "parent_name": "Nguyen Van B"}
    """

    try:
        return ledger.add_student(payload.to_student())
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("/{student_id}", response_model=Student, summary="Get a student")
def get_student(student_id: str, ledger: Ledger = Depends(get_ledger)) -> Student:
    try:
        return ledger.get_student(student_id)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post("/{student_id}/archive", response_model=Student, summary="Archive or restore a student")
def archive_student(
    student_id: str,
    payload: ArchiveRequest,
    ledger: Ledger = Depends(get_ledger),
) -> Student:
    """Toggle the archival flag; the score is unaffected."""

    try:
        return ledger.archive_student(student_id, payload.archive, reason=payload.reason)
    except LedgerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
