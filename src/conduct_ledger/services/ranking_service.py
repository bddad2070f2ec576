"""Conduct ratings and ranking aggregation."""

from __future__ import annotations

import enum
from collections import defaultdict
from typing import Optional, Sequence

from ..models import Student
from .ledger_service import Ledger


class ConductRating(str, enum.Enum):
    """Rating bands over the running score."""

    GOOD = "GOOD"
    FAIR = "FAIR"
    PASS = "PASS"
    POOR = "POOR"


def rate(score: int) -> ConductRating:
    if score >= 200:
        return ConductRating.GOOD
    if score >= 180:
        return ConductRating.FAIR
    if score >= 150:
        return ConductRating.PASS
    return ConductRating.POOR


def top_students(
    ledger: Ledger,
    *,
    class_name: Optional[str] = None,
    limit: int = 10,
) -> Sequence[tuple[Student, ConductRating]]:
    """Return active students ordered by score (highest first) and id."""

    limit = max(1, min(limit, 100))
    students = ledger.list_students(class_name=class_name, include_archived=False)
    ordered = sorted(students, key=lambda s: (-s.score, s.id))
    return [(student, rate(student.score)) for student in ordered[:limit]]


def class_averages(ledger: Ledger) -> list[tuple[str, float, int]]:
    """Return ``(class_name, average_score, student_count)`` ordered by average, best first."""

    scores: dict[str, list[int]] = defaultdict(list)
    for student in ledger.list_students(include_archived=False):
        scores[student.class_name].append(student.score)

    rows = [(name, sum(values) / len(values), len(values)) for name, values in scores.items()]
    rows.sort(key=lambda row: (-row[1], row[0]))
    return rows
