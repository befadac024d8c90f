import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_entry_store, get_pipeline
from api.main import app
from genie_notes.pipeline import CapturePipeline
from resolvers.mock_resolver import MockResolver
from storage.backends import InMemoryBackend
from storage.entry_store import EntryStore


@pytest.fixture
def client():
    store = EntryStore(InMemoryBackend())
    app.dependency_overrides[get_entry_store] = lambda: store
    app.dependency_overrides[get_pipeline] = lambda: CapturePipeline(MockResolver())
    yield TestClient(app)
    app.dependency_overrides.clear()


def _capture(client, text, **extra):
    res = client.post("/capture", json={"text": text, "now": "2026-10-19T09:00:00", **extra})
    assert res.status_code == 200
    return res.json()


def test_capture_stores_entries(client):
    body = _capture(client, "Buy milk\nMeet Sam tomorrow at 3pm")

    assert body["status"] == "processed"
    assert body["stored"] == 2
    assert [e["type"] for e in body["entries"]] == ["task", "event"]
    event = body["entries"][1]
    assert event["start_date"] == "2026-10-20T15:00:00"
    assert event["end_date"] == "2026-10-20T16:00:00"
    assert event["auto_actions"][0]["content"] == "Prepare for: Meet Sam tomorrow at 3pm"

    listed = client.get("/entries").json()
    assert listed["total"] == 2
    assert client.get("/entries", params={"type": "event"}).json()["total"] == 1


def test_capture_without_persist(client):
    body = _capture(client, "Buy milk", persist=False)
    assert body["stored"] == 0
    assert len(body["entries"]) == 1
    assert client.get("/entries").json()["total"] == 0


def test_empty_capture_stores_nothing(client):
    body = _capture(client, "")
    assert body["entries"] == []
    assert body["confidence"] == 0.0


def test_status_transitions_over_http(client):
    entry_id = _capture(client, "Buy milk")["entries"][0]["id"]

    res = client.patch(f"/entries/{entry_id}/status", json={"status": "completed"})
    assert res.status_code == 200
    assert res.json()["status"] == "completed"

    res = client.patch(f"/entries/{entry_id}/status", json={"status": "pending"})
    assert res.status_code == 409

    assert client.patch("/entries/missing/status", json={"status": "completed"}).status_code == 404
    assert client.get("/entries/active").json()["total"] == 0


def test_patch_and_delete_entry(client):
    entry_id = _capture(client, "Buy milk")["entries"][0]["id"]

    res = client.patch(f"/entries/{entry_id}", json={"tags": ["#home"], "due_date": "2026-10-21T10:00:00"})
    assert res.status_code == 200
    assert res.json()["tags"] == ["home"]
    assert res.json()["due_date"] == "2026-10-21T10:00:00"

    assert client.delete(f"/entries/{entry_id}").status_code == 200
    assert client.get(f"/entries/{entry_id}").status_code == 404


def test_complete_prep_action(client):
    event = _capture(client, "Meet Sam tomorrow at 3pm")["entries"][0]
    action_id = event["auto_actions"][0]["id"]

    res = client.post(f"/entries/{event['id']}/actions/{action_id}/complete")
    assert res.status_code == 200
    assert res.json()["auto_actions"][0]["completed"] is True
    assert client.post(f"/entries/{event['id']}/actions/nope/complete").status_code == 404


def test_brain_dump_then_confirm(client):
    res = client.post("/brain-dump", json={"text": "Buy oat milk #groceries\nI feel scattered today"})
    items = res.json()["items"]
    assert [i["id"] for i in items] == ["temp-0", "temp-1"]
    assert [i["type"] for i in items] == ["task", "journal"]

    res = client.post("/brain-dump/confirm", json={"items": items[:1]})
    body = res.json()
    assert body["status"] == "stored"
    assert body["stored"] == 1
    assert not body["items"][0]["id"].startswith("temp-")


def test_health(client):
    _capture(client, "Buy milk")
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["entries"] == 1


def test_metrics_endpoint_exposes_capture_counters(client):
    _capture(client, "Buy milk")

    res = client.get("/metrics")
    assert res.status_code == 200
    text = res.text
    assert 'genie_requests_total{endpoint="/capture",status="processed"}' in text
    assert 'genie_entries_classified_total{type="task"}' in text
    assert "genie_store_entries 1.0" in text
