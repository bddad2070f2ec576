"""Conduct ranking endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...core.store import get_ledger
from ...schemas import ClassAverage, RankedStudent
from ...services import ranking_service
from ...services.ledger_service import Ledger

router = APIRouter(prefix="/rankings", tags=["rankings"])


@router.get(
    "/students",
    response_model=List[RankedStudent],
    summary="Top students by score",
    responses={
        200: {
            "description": "Students ordered by score",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "HS001",
                            "name": "Nguyen Van A",
                            "class_name": "10A1",
                            "score": 220,
                            "rating": "GOOD",
                        }
                    ]
                }
            },
        }
    },
)
def get_student_ranking(
    class_name: Optional[str] = Query(None, description="Restrict to one class"),
    limit: int = Query(10, ge=1, le=100, description="Number of students to return"),
    ledger: Ledger = Depends(get_ledger),
) -> List[RankedStudent]:
    entries = ranking_service.top_students(ledger, class_name=class_name, limit=limit)
    response: List[RankedStudent] = []
    for student, rating in entries:
        response.append(
            RankedStudent(
                id=student.id,
                name=student.name,
                class_name=student.class_name,
                score=student.score,
                rating=rating,
            )
        )
    return response


@router.get("/classes", response_model=List[ClassAverage], summary="Classes by average score")
def get_class_ranking(ledger: Ledger = Depends(get_ledger)) -> List[ClassAverage]:
    return [
        ClassAverage(class_name=name, average_score=average, student_count=count)
        for name, average, count in ranking_service.class_averages(ledger)
    ]
