"""Read-only context handed to the external advisory (AI) service."""

from __future__ import annotations

import enum
import logging
from typing import Optional, Protocol, Sequence

from pydantic import BaseModel, Field

from ..core.config import get_settings
from ..models import Event
from .ledger_service import Ledger, LedgerError

logger = logging.getLogger(__name__)

MAX_ACTIONS = 4


class AdvisoryUnavailable(LedgerError):
    """Raised when the advisory client fails or returns an unusable payload."""

    def __init__(self, detail: str = "Advisory service is unavailable.") -> None:
        super().__init__(detail, status_code=503)


class RosterEntry(BaseModel):
    id: str
    name: str
    class_name: str
    score: int


class AdvisorySnapshot(BaseModel):
    """Roster plus a bounded slice of the most recent events."""

    students: list[RosterEntry]
    recent_events: list[Event]


class ActionType(str, enum.Enum):
    REMIND_CLASS = "REMIND_CLASS"
    REMIND_STUDENT = "REMIND_STUDENT"
    PRAISE_CLASS = "PRAISE_CLASS"
    PRAISE_STUDENT = "PRAISE_STUDENT"
    MEETING_REQUEST = "MEETING_REQUEST"


class SuggestedAction(BaseModel):
    type: ActionType
    target: str = Field(..., description="Class or student name the action is aimed at.")
    reason: str
    label: str


class ActionableInsights(BaseModel):
    summary: str = ""
    actions: list[SuggestedAction] = Field(default_factory=list)


class ChatTurn(BaseModel):
    role: str
    text: str


class AdvisoryClient(Protocol):
    def chat(self, message: str, history: Sequence[ChatTurn], context: AdvisorySnapshot) -> str: ...

    def insights(self, context: AdvisorySnapshot) -> dict: ...


def build_snapshot(ledger: Ledger, *, recent_limit: int) -> AdvisorySnapshot:
    """Copy the roster and the last ``recent_limit`` events; nothing returned aliases ledger state."""

    roster = [
        RosterEntry(id=s.id, name=s.name, class_name=s.class_name, score=s.score)
        for s in ledger.students
    ]
    events = ledger.events
    recent = events[-recent_limit:] if recent_limit > 0 else []
    return AdvisorySnapshot(students=roster, recent_events=recent)


def ask_advisor(
    client: AdvisoryClient,
    ledger: Ledger,
    message: str,
    history: Sequence[ChatTurn] = (),
    *,
    recent_limit: Optional[int] = None,
) -> str:
    if recent_limit is None:
        recent_limit = get_settings().advisory_chat_events
    snapshot = build_snapshot(ledger, recent_limit=recent_limit)
    try:
        return client.chat(message, list(history), snapshot)
    except Exception as exc:
        logger.exception("advisory chat request failed")
        raise AdvisoryUnavailable() from exc


def actionable_insights(
    client: AdvisoryClient,
    ledger: Ledger,
    *,
    recent_limit: Optional[int] = None,
) -> ActionableInsights:
    """Ask the advisory client for up to four suggested actions and validate its payload."""

    if recent_limit is None:
        recent_limit = get_settings().advisory_insight_events
    snapshot = build_snapshot(ledger, recent_limit=recent_limit)
    try:
        payload = client.insights(snapshot)
    except Exception as exc:
        logger.exception("advisory insights request failed")
        raise AdvisoryUnavailable() from exc
    try:
        insights = ActionableInsights.model_validate(payload)
    except ValueError as exc:
        logger.warning("advisory insights payload rejected: %s", exc)
        raise AdvisoryUnavailable("Advisory service returned an unusable payload.") from exc
    insights.actions = insights.actions[:MAX_ACTIONS]
    return insights
