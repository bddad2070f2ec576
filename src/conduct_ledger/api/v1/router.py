"""Primary API router definition."""

from fastapi import APIRouter

from . import calendar, events, periods, rankings, reconciliation, remarks, students

api_router = APIRouter()

api_router.include_router(students.router)
api_router.include_router(events.router)
api_router.include_router(calendar.router)
api_router.include_router(periods.router)
api_router.include_router(reconciliation.router)
api_router.include_router(rankings.router)
api_router.include_router(remarks.router)


@api_router.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Basic health probe endpoint."""
    return {"status": "ok"}
