"""Pydantic schemas for event endpoints."""

import datetime
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from ..models import Event, LedgerOutcome
from ..utils.datetime import parse_day


class EventCreate(BaseModel):
    """Request body for recording a violation or commendation."""

    id: Optional[str] = Field(None, description="Client-supplied id; generated when omitted.")
    student_id: str
    student_name: str = ""
    class_name: str = ""
    date: datetime.date = Field(..., description="Day of the event, dd/mm/yyyy.")
    type: str = Field(..., min_length=1)
    points: int = Field(..., description="Signed delta; negative for violations.")
    is_collective: bool = False
    recorded_by: Optional[str] = None
    recorded_role: Optional[str] = None
    note: str = Field("", max_length=1000)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_day(value)

    def to_event(self, event_id: Optional[str] = None) -> Event:
        data = self.model_dump()
        data["id"] = event_id or self.id or uuid4().hex
        return Event.model_validate(data)


class EventWriteResult(BaseModel):
    """Stored event together with the score changes it caused."""

    event: Event
    outcome: LedgerOutcome
