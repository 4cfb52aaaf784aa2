"""Tasks API Flow — create, fetch and update through HTTP against SQLite.

Invariants:
    - A created task is retrievable by the id in the create response
    - Update responds {} and is visible on the next fetch
    - Domain validation failures come back as 400 with per-field validations
"""

import uuid


async def test_create_fetch_update_round_trip(client):
    created = await client.post("/tasks", json={
        "description": "buy milk",
        "priority": "medium",
        "dates": {"start": "2026-10-19T09:00:00Z", "due": "2026-10-20T09:00:00Z"},
    })
    assert created.status_code == 201
    task = created.json()["task"]

    fetched = await client.get(f"/tasks/{task['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == {"task": task}

    updated = await client.put(f"/tasks/{task['id']}", json={
        "description": "buy oat milk",
        "is_done": True,
        "priority": "high",
        "dates": task["dates"],
    })
    assert updated.status_code == 200
    assert updated.json() == {}

    refetched = await client.get(f"/tasks/{task['id']}")
    assert refetched.json()["task"]["description"] == "buy oat milk"
    assert refetched.json()["task"]["priority"] == "high"


async def test_create_blank_description_reports_validations(client):
    res = await client.post("/tasks", json={"description": ""})

    assert res.status_code == 400
    assert res.json() == {
        "error": "create failed",
        "validations": {"description": "cannot be blank"},
    }


async def test_create_inverted_dates_reports_validations(client):
    res = await client.post("/tasks", json={
        "description": "x",
        "dates": {"start": "2026-10-20T00:00:00Z", "due": "2026-10-19T00:00:00Z"},
    })

    assert res.status_code == 400
    assert res.json()["validations"] == {"dates": "start date should be before due date"}


async def test_create_date_outside_utc_range_is_a_validation_error(client):
    res = await client.post("/tasks", json={
        "description": "x",
        "dates": {"start": "0001-01-01T00:00:00+05:00"},
    })

    assert res.status_code == 400
    assert res.json()["validations"] == {
        "dates": "date is out of range once converted to UTC",
    }


async def test_fetch_unknown_task_returns_404(client):
    res = await client.get(f"/tasks/{uuid.uuid4()}")

    assert res.status_code == 404
    assert res.json() == {"error": "find failed"}


async def test_update_unknown_task_returns_404(client):
    res = await client.put(f"/tasks/{uuid.uuid4()}", json={"description": "x"})

    assert res.status_code == 404
    assert res.json() == {"error": "update failed"}


async def test_health_endpoints(client):
    live = await client.get("/health/")
    ready = await client.get("/health/ready")

    assert live.status_code == 200
    assert ready.status_code == 200
    assert ready.json()["checks"] == {"database": "healthy"}


async def test_readiness_without_database_returns_503(client, monkeypatch):
    import todo_api.infrastructure.database as db_module

    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/health/ready")

    assert res.status_code == 503
