"""Tests for Event CRUD, search, filters and capacity arithmetic.

Covers:
- Event create / get / update / delete
- Update round-trip refreshes the modification timestamp
- Search (case-insensitive, blank query falls back to list-all)
- Category and inclusive date-range filters
- Capacity status, never negative
- Delete cascades to registrations and feedback
"""
from datetime import datetime

from tests.conftest import create_test_event, create_test_student, register, submit_feedback


def _event_payload(**overrides) -> dict:
    payload = {
        "title": "Robotics Workshop",
        "description": "Hands-on session",
        "venue": "Lab 3",
        "date": "2030-10-05T14:00:00Z",
        "max_capacity": 30,
        "category": "Workshop",
    }
    payload.update(overrides)
    return payload


class TestEventCRUD:
    """Event create / get / update / delete / list."""

    def test_create_event(self, client):
        data = create_test_event(client, title="Dinner Talk", capacity=50)
        assert data["title"] == "Dinner Talk"
        assert data["max_capacity"] == 50
        assert data["category"] == "Academic"
        assert data["current_participant_count"] == 0
        assert data["has_remaining_spots"] is True
        assert data["created_at"] is not None
        assert data["modified_at"] is not None

    def test_create_event_rejects_invalid_fields(self, client):
        assert client.post("/api/events/", json=_event_payload(title="ab")).status_code == 422
        assert client.post("/api/events/", json=_event_payload(max_capacity=0)).status_code == 422
        assert client.post("/api/events/", json=_event_payload(max_capacity=10001)).status_code == 422
        assert client.post("/api/events/", json=_event_payload(venue="X")).status_code == 422
        assert client.post("/api/events/", json=_event_payload(category="Party")).status_code == 422
        assert client.post("/api/events/", json=_event_payload(description="d" * 501)).status_code == 422

    def test_get_event_not_found(self, client):
        resp = client.get("/api/events/9999")
        assert resp.status_code == 404

    def test_update_event_round_trip(self, client):
        event = create_test_event(client)
        updated = _event_payload(
            title="Renamed Orientation",
            venue="Hall B",
            date="2031-01-15T09:30:00Z",
            max_capacity=250,
            category="Seminar",
            registration_deadline="2031-01-10T00:00:00Z",
        )
        resp = client.put(f"/api/events/{event['id']}", json=updated)
        assert resp.status_code == 200

        fetched = client.get(f"/api/events/{event['id']}").json()
        assert fetched["title"] == "Renamed Orientation"
        assert fetched["description"] == "Hands-on session"
        assert fetched["venue"] == "Hall B"
        assert fetched["max_capacity"] == 250
        assert fetched["category"] == "Seminar"
        assert fetched["date"].startswith("2031-01-15T09:30:00")
        assert fetched["registration_deadline"].startswith("2031-01-10T00:00:00")
        assert datetime.fromisoformat(fetched["modified_at"]) > datetime.fromisoformat(event["modified_at"])
        assert fetched["created_at"] == event["created_at"]

    def test_update_event_not_found(self, client):
        resp = client.put("/api/events/9999", json=_event_payload())
        assert resp.status_code == 404

    def test_delete_event(self, client):
        event = create_test_event(client)
        assert client.delete(f"/api/events/{event['id']}").status_code == 204
        assert client.get(f"/api/events/{event['id']}").status_code == 404
        assert client.delete(f"/api/events/{event['id']}").status_code == 404

    def test_deleted_ids_are_not_reused(self, client):
        first = create_test_event(client, title="First Event")
        latest = create_test_event(client, title="Latest Event")
        assert client.delete(f"/api/events/{latest['id']}").status_code == 204

        replacement = create_test_event(client, title="Replacement Event")
        assert replacement["id"] > latest["id"]
        assert client.get(f"/api/events/{latest['id']}").status_code == 404
        assert client.get(f"/api/events/{first['id']}").json()["title"] == "First Event"

    def test_list_events_ordered_by_date(self, client):
        create_test_event(client, title="Later Event", date="2031-05-01T10:00:00Z")
        create_test_event(client, title="Earlier Event", date="2030-05-01T10:00:00Z")
        titles = [e["title"] for e in client.get("/api/events/").json()]
        assert titles == ["Earlier Event", "Later Event"]


class TestEventQueries:
    """Search and filtering."""

    def test_search_is_case_insensitive_across_fields(self, client):
        create_test_event(client, title="Quantum Computing Seminar", venue="Physics Building")
        create_test_event(client, title="Basketball Finals", venue="Sports Arena", description="Season closer")
        create_test_event(client, title="Poetry Night", venue="Library", description="Open mic in the QUANTUM lounge")

        titles = {e["title"] for e in client.get("/api/events/search", params={"q": "quantum"}).json()}
        assert titles == {"Quantum Computing Seminar", "Poetry Night"}

        titles = {e["title"] for e in client.get("/api/events/search", params={"q": "  ARENA "}).json()}
        assert titles == {"Basketball Finals"}

    def test_blank_search_returns_everything(self, client):
        create_test_event(client, title="Event One")
        create_test_event(client, title="Event Two")
        assert len(client.get("/api/events/search", params={"q": "   "}).json()) == 2
        assert len(client.get("/api/events/search").json()) == 2

    def test_search_treats_wildcards_literally(self, client):
        create_test_event(client, title="Discount 100% Fair")
        create_test_event(client, title="Plain Fair")
        titles = [e["title"] for e in client.get("/api/events/search", params={"q": "100%"}).json()]
        assert titles == ["Discount 100% Fair"]

    def test_filter_by_category(self, client):
        create_test_event(client, title="Chess Club", category="Social")
        create_test_event(client, title="Cricket Match", category="Sports")
        resp = client.get("/api/events/category/Sports")
        assert resp.status_code == 200
        assert [e["title"] for e in resp.json()] == ["Cricket Match"]

    def test_filter_by_date_range_inclusive(self, client):
        create_test_event(client, title="Start Edge", date="2030-03-01T00:00:00Z")
        create_test_event(client, title="Middle", date="2030-03-15T12:00:00Z")
        create_test_event(client, title="End Edge", date="2030-03-31T23:59:59Z")
        create_test_event(client, title="Outside", date="2030-04-01T00:00:00Z")

        resp = client.get("/api/events/date-range", params={
            "start": "2030-03-01T00:00:00Z",
            "end": "2030-03-31T23:59:59Z",
        })
        assert resp.status_code == 200
        assert [e["title"] for e in resp.json()] == ["Start Edge", "Middle", "End Edge"]

    def test_date_range_start_after_end(self, client):
        resp = client.get("/api/events/date-range", params={
            "start": "2030-04-01T00:00:00Z",
            "end": "2030-03-01T00:00:00Z",
        })
        assert resp.status_code == 400


class TestEventCapacity:
    """Participant counts and available capacity."""

    def test_capacity_status_tracks_registrations(self, client):
        event = create_test_event(client, capacity=3)
        alice = create_test_student(client, name="Alice", email="alice@u.edu")
        bob = create_test_student(client, name="Bob", email="bob@u.edu")
        reg = register(client, event["id"], alice["id"]).json()
        register(client, event["id"], bob["id"])

        status = client.get(f"/api/events/{event['id']}/capacity").json()
        assert status == {
            "event_id": event["id"],
            "has_open_spots": True,
            "remaining_capacity": 1,
            "total_capacity": 3,
            "current_participants": 2,
        }
        assert client.get(f"/api/events/{event['id']}").json()["current_participant_count"] == 2

        client.delete(f"/api/registrations/{reg['id']}")
        assert client.get(f"/api/events/{event['id']}/capacity").json()["current_participants"] == 1

    def test_available_capacity_never_negative(self, client):
        event = create_test_event(client, capacity=2)
        for i in range(2):
            student = create_test_student(client, name=f"Student {i}", email=f"s{i}@u.edu")
            register(client, event["id"], student["id"])

        # Shrink capacity below the current participant count
        client.put(f"/api/events/{event['id']}", json=_event_payload(max_capacity=1))
        status = client.get(f"/api/events/{event['id']}/capacity").json()
        assert status["remaining_capacity"] == 0
        assert status["has_open_spots"] is False
        assert status["current_participants"] == 2

    def test_capacity_status_not_found(self, client):
        assert client.get("/api/events/9999/capacity").status_code == 404


class TestEventDeleteCascade:

    def test_delete_event_removes_registrations_and_feedback(self, client):
        event = create_test_event(client)
        student = create_test_student(client)
        register(client, event["id"], student["id"])
        submit_feedback(client, event["id"], student["id"], rating=4)

        assert client.delete(f"/api/events/{event['id']}").status_code == 204
        assert client.get(f"/api/registrations/student/{student['id']}").json() == []
        assert client.get(f"/api/feedback/student/{student['id']}").json() == []
        assert client.get(f"/api/students/{student['id']}").json()["total_events_attended"] == 0
