"""School calendar lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.store import get_resolver
from ...models import WeekInfo
from ...services.calendar_service import CalendarResolver
from ...utils.datetime import UnparseableDate

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get(
    "/resolve",
    response_model=WeekInfo,
    summary="Resolve a day to its school week",
    responses={
        200: {
            "description": "Resolved week information",
            "content": {
                "application/json": {
                    "example": {
                        "week_index": 2,
                        "week_label": "Week 2 (15/09 - 21/09)",
                        "week_end_date": "2025-09-21",
                        "report_month_label": "9/2025",
                        "is_holiday": False,
                    }
                }
            },
        },
        422: {"description": "Unparseable date"},
    },
)
def resolve_day(
    day: str = Query(..., alias="date", description="Day as dd/mm/yyyy or yyyy-mm-dd"),
    resolver: CalendarResolver = Depends(get_resolver),
) -> WeekInfo:
    try:
        return resolver.resolve(day)
    except UnparseableDate as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
