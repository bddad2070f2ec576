"""Point-bearing event model (violations and commendations)."""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..utils.datetime import format_day, parse_day


class Event(BaseModel):
    """Single ledger entry; the sign of ``points`` separates violations from commendations."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    student_id: str
    student_name: str = ""
    class_name: str = ""
    date: datetime.date
    type: str
    points: int
    is_collective: bool = False
    recorded_by: Optional[str] = None
    recorded_role: Optional[str] = None
    note: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_day(value)

    @field_serializer("date")
    def _serialize_date(self, value: datetime.date) -> str:
        return format_day(value)

    @property
    def is_violation(self) -> bool:
        return self.points < 0
