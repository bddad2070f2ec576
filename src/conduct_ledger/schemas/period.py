"""Period view schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from ..models import Event


class PeriodSummary(BaseModel):
    """Filtered events with headline counts for a week label or report month."""

    mode: Literal["week", "month", "all"]
    range: str
    total_events: int = Field(..., ge=0)
    violations: int = Field(..., ge=0)
    commendations: int = Field(..., ge=0)
    average_score: float
    events: list[Event]
