"""Ledger handle and calendar resolver dependencies for request handlers."""

from fastapi import Request

from ..services.calendar_service import CalendarResolver, get_calendar_resolver
from ..services.ledger_service import Ledger


def get_ledger(request: Request) -> Ledger:
    """Return the ledger owned by the running application."""

    return request.app.state.ledger


def get_resolver() -> CalendarResolver:
    return get_calendar_resolver()
