"""Student domain model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

BASELINE_SCORE = 200


class Student(BaseModel):
    """Represents a student whose score is derived from the event ledger."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(..., min_length=1)
    name: str
    class_name: str = Field(..., alias="class")
    score: int = BASELINE_SCORE
    archived: bool = False
    archived_at: Optional[date] = None
    archived_reason: Optional[str] = None
    parent_name: Optional[str] = None
