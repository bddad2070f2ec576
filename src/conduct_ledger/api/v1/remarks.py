"""Monthly student remarks and class remarks."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...core.store import get_ledger
from ...models import ClassRemark, MonthlyRemark
from ...services.ledger_service import Ledger

router = APIRouter(prefix="/remarks", tags=["remarks"])


@router.get("/monthly", response_model=List[MonthlyRemark])
def list_monthly_remarks(
    month_year: Optional[str] = Query(None, description="Report month, M/YYYY"),
    ledger: Ledger = Depends(get_ledger),
) -> List[MonthlyRemark]:
    return [r for r in ledger.monthly_remarks if month_year is None or r.month_year == month_year]


@router.put("/monthly", response_model=MonthlyRemark, summary="Create or replace a student's monthly remark")
def put_monthly_remark(payload: MonthlyRemark, ledger: Ledger = Depends(get_ledger)) -> MonthlyRemark:
    return ledger.upsert_monthly_remark(payload)


@router.get("/classes", response_model=List[ClassRemark])
def list_class_remarks(
    class_name: Optional[str] = Query(None),
    ledger: Ledger = Depends(get_ledger),
) -> List[ClassRemark]:
    return [r for r in ledger.class_remarks if class_name is None or r.class_name == class_name]


@router.put("/classes", response_model=ClassRemark, summary="Create or replace a class remark for a period")
def put_class_remark(payload: ClassRemark, ledger: Ledger = Depends(get_ledger)) -> ClassRemark:
    return ledger.upsert_class_remark(payload)
