import pytest

from conduct_ledger.services.ledger_service import Ledger
from conduct_ledger.services.ranking_service import ConductRating, class_averages, rate, top_students


@pytest.mark.parametrize(
    "score,rating",
    [
        (230, ConductRating.GOOD),
        (200, ConductRating.GOOD),
        (199, ConductRating.FAIR),
        (180, ConductRating.FAIR),
        (179, ConductRating.PASS),
        (150, ConductRating.PASS),
        (149, ConductRating.POOR),
        (-20, ConductRating.POOR),
    ],
)
def test_rating_bands(score, rating):
    assert rate(score) is rating


def test_top_students_skips_archived(ledger: Ledger, make_event):
    ledger.insert(make_event("e1", "S1", 30))
    ledger.insert(make_event("e2", "S2", -60))
    ledger.archive_student("S3", True)

    ranked = top_students(ledger)
    assert [(s.id, r) for s, r in ranked] == [("S1", ConductRating.GOOD), ("S2", ConductRating.POOR)]


def test_top_students_by_class_and_limit(ledger: Ledger):
    ranked = top_students(ledger, class_name="10A1", limit=1)
    assert [s.id for s, _ in ranked] == ["S1"]


def test_class_averages(ledger: Ledger, make_event):
    ledger.insert(make_event("e1", "S1", -40))
    ledger.insert(make_event("e2", "S3", 10, class_name="10A2"))
    assert class_averages(ledger) == [("10A2", 210.0, 1), ("10A1", 180.0, 2)]
