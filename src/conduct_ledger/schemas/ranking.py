"""Ranking response schemas."""

from pydantic import BaseModel, Field

from ..services.ranking_service import ConductRating


class RankedStudent(BaseModel):
    """Student position in the conduct ranking."""

    id: str
    name: str
    class_name: str
    score: int
    rating: ConductRating


class ClassAverage(BaseModel):
    class_name: str
    average_score: float
    student_count: int = Field(..., ge=1)
