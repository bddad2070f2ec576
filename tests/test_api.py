import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from conduct_ledger.core.store import get_resolver
from conduct_ledger.main import create_app
from conduct_ledger.services.calendar_service import CalendarResolver
from conduct_ledger.services.ledger_service import Ledger


@pytest.fixture(name="app")
def app_fixture(ledger: Ledger, resolver: CalendarResolver):
    app = create_app(ledger)
    app.dependency_overrides[get_resolver] = lambda: resolver
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


def event_body(event_id: str, student_id: str, points: int, day: str = "15/09/2025", class_name: str = "10A1"):
    return {
        "id": event_id,
        "student_id": student_id,
        "student_name": "An",
        "class_name": class_name,
        "date": day,
        "type": "Late to class",
        "points": points,
        "recorded_by": "teacher1",
        "recorded_role": "TEACHER",
    }


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_create_update_delete_event(client: AsyncClient, ledger: Ledger):
    response = await client.post("/api/v1/events", json=event_body("e1", "S1", -10))
    assert response.status_code == 201
    body = response.json()
    assert body["event"]["date"] == "15/09/2025"
    assert body["outcome"]["scores"] == {"S1": 190}
    assert body["outcome"]["notify_parent"] is True

    response = await client.put("/api/v1/events/e1", json=event_body("e1", "S1", -5))
    assert response.status_code == 200
    assert response.json()["outcome"]["scores"] == {"S1": 195}

    response = await client.delete("/api/v1/events/e1")
    assert response.status_code == 200
    assert response.json()["scores"] == {"S1": 200}
    ledger.check_invariant()


@pytest.mark.asyncio
async def test_event_without_id_gets_generated_id(client: AsyncClient):
    body = event_body("ignored", "S2", 15)
    del body["id"]
    response = await client.post("/api/v1/events", json=body)
    assert response.status_code == 201
    assert response.json()["event"]["id"]


@pytest.mark.asyncio
async def test_unknown_event_returns_404(client: AsyncClient):
    response = await client.put("/api/v1/events/missing", json=event_body("missing", "S1", -5))
    assert response.status_code == 404
    response = await client.delete("/api/v1/events/missing")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unparseable_event_date_is_rejected(client: AsyncClient, ledger: Ledger):
    response = await client.post("/api/v1/events", json=event_body("e1", "S1", -5, day="32/13/2025"))
    assert response.status_code == 422
    assert ledger.events == []


@pytest.mark.asyncio
async def test_list_events_filters(client: AsyncClient):
    await client.post("/api/v1/events", json=event_body("e1", "S1", -10, day="08/09/2025"))
    await client.post("/api/v1/events", json=event_body("e2", "S3", -10, day="16/09/2025", class_name="10A2"))
    await client.post("/api/v1/events", json=event_body("e3", "S1", 10, day="01/10/2025"))

    response = await client.get("/api/v1/events", params={"class_name": "10A1"})
    assert [e["id"] for e in response.json()] == ["e1", "e3"]
    response = await client.get("/api/v1/events", params={"week": 2})
    assert [e["id"] for e in response.json()] == ["e2"]
    response = await client.get("/api/v1/events", params={"report_month": "9/2025"})
    assert [e["id"] for e in response.json()] == ["e1", "e2"]


@pytest.mark.asyncio
async def test_calendar_resolve(client: AsyncClient):
    response = await client.get("/api/v1/calendar/resolve", params={"date": "17/02/2026"})
    assert response.status_code == 200
    body = response.json()
    assert body["week_index"] == -1
    assert body["is_holiday"] is True

    response = await client.get("/api/v1/calendar/resolve", params={"date": "not a date"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_bulk_delete_with_empty_selection(client: AsyncClient, ledger: Ledger):
    await client.post("/api/v1/events", json=event_body("e1", "S1", -10))
    response = await client.post(
        "/api/v1/reconciliation/delete-by-class-and-weeks",
        json={"class_names": ["10A1"], "weeks": [9]},
    )
    assert response.status_code == 404
    assert "Nothing to delete" in response.json()["detail"]
    assert ledger.get_student("S1").score == 190


@pytest.mark.asyncio
async def test_bulk_delete_by_period_and_reset(client: AsyncClient, ledger: Ledger):
    await client.post("/api/v1/events", json=event_body("e1", "S1", -10))
    await client.post("/api/v1/events", json=event_body("e2", "S1", 20))
    await client.post("/api/v1/events", json=event_body("e3", "S3", -5, day="01/10/2025", class_name="10A2"))

    response = await client.post(
        "/api/v1/reconciliation/delete-by-period", json={"period_type": "week", "value": 2}
    )
    assert response.status_code == 200
    assert response.json()["scores"] == {"S1": 200}

    response = await client.post("/api/v1/reconciliation/reset")
    assert response.status_code == 200
    assert ledger.events == []
    assert {s.score for s in ledger.students} == {200}


@pytest.mark.asyncio
async def test_students_roster(client: AsyncClient):
    response = await client.post("/api/v1/students", json={"id": "S4", "name": "Dung", "class": "10A2"})
    assert response.status_code == 201
    assert response.json()["class"] == "10A2"
    assert response.json()["score"] == 200

    response = await client.post("/api/v1/students", json={"id": "S4", "name": "Dung", "class": "10A2"})
    assert response.status_code == 409

    response = await client.post("/api/v1/students/S4/archive", json={"archive": True, "reason": "moved"})
    assert response.json()["archived"] is True

    response = await client.get("/api/v1/students", params={"class_name": "10A2"})
    assert [s["id"] for s in response.json()] == ["S3"]

    response = await client.get("/api/v1/students/ghost")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_period_views(client: AsyncClient):
    await client.post("/api/v1/events", json=event_body("e1", "S1", -10, day="08/09/2025"))
    await client.post("/api/v1/events", json=event_body("e2", "S2", 10, day="16/09/2025"))

    response = await client.get("/api/v1/periods/ranges", params={"mode": "week", "today": "2025-09-01"})
    assert response.json() == ["Week 2 (15/09 - 21/09)", "Week 1 (08/09 - 14/09)"]

    response = await client.get(
        "/api/v1/periods/summary", params={"mode": "week", "range": "Week 1 (08/09 - 14/09)"}
    )
    body = response.json()
    assert [e["id"] for e in body["events"]] == ["e1"]
    assert body["violations"] == 1
    assert body["commendations"] == 0


@pytest.mark.asyncio
async def test_rankings_and_remarks(client: AsyncClient):
    await client.post("/api/v1/events", json=event_body("e1", "S2", 25))

    response = await client.get("/api/v1/rankings/students", params={"limit": 2})
    assert [(r["id"], r["rating"]) for r in response.json()] == [("S2", "GOOD"), ("S1", "GOOD")]

    response = await client.get("/api/v1/rankings/classes")
    assert response.json()[0]["class_name"] == "10A1"

    remark = {"student_id": "S1", "month_year": "9/2025", "content": "Needs to be on time"}
    await client.put("/api/v1/remarks/monthly", json=remark)
    await client.put("/api/v1/remarks/monthly", json={**remark, "content": "Improving"})
    response = await client.get("/api/v1/remarks/monthly")
    assert [r["content"] for r in response.json()] == ["Improving"]

    await client.post("/api/v1/reconciliation/reset")
    response = await client.get("/api/v1/remarks/monthly")
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"period_type": "week", "value": "Week 3"},
        {"period_type": "month", "value": "September"},
        {"period_type": "month", "value": 9},
    ],
)
async def test_delete_by_period_rejects_malformed_value(client: AsyncClient, ledger: Ledger, payload):
    await client.post("/api/v1/events", json=event_body("e1", "S1", -10))
    response = await client.post("/api/v1/reconciliation/delete-by-period", json=payload)
    assert response.status_code == 422
    assert [e.id for e in ledger.events] == ["e1"]
    assert ledger.get_student("S1").score == 190
