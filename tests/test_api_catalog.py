"""
Tests for the catalog API endpoints.

Drives the real application through FastAPI's TestClient.
Validates status codes, headers, response bodies and the
end-to-end venue/event lifecycle.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from ticket_catalog.main import create_app
from tests.factories import EVENT_PAYLOAD, VENUE_PAYLOAD, make_settings


def _create_venue(client: TestClient, **overrides) -> dict:
    response = client.post("/api/venues", json={**VENUE_PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()


def _create_event(client: TestClient, **overrides) -> dict:
    response = client.post("/api/events", json={**EVENT_PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()


class TestVenueEndpoints:
    """Tests for /api/venues."""

    def test_create_returns_201_with_location(self, client) -> None:
        """A created venue gets id 1 and a Location pointing at it."""
        response = client.post("/api/venues", json=VENUE_PAYLOAD)
        assert response.status_code == 201
        assert response.json() == {"id": 1, **VENUE_PAYLOAD}
        assert response.headers["Location"].endswith("/api/venues/1")

    def test_strings_are_trimmed(self, client) -> None:
        venue = _create_venue(client, name="  Olympia Hall  ")
        assert venue["name"] == "Olympia Hall"

    def test_blank_name_rejected(self, client) -> None:
        response = client.post("/api/venues", json={**VENUE_PAYLOAD, "name": "   "})
        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["name"]

    def test_list_get_and_count(self, client) -> None:
        first = _create_venue(client)
        second = _create_venue(client, name="Bataclan")

        assert client.get("/api/venues").json() == [first, second]
        assert client.get(f"/api/venues/{second['id']}").json() == second
        assert client.get("/api/venues/count").json() == {"count": 2}

    def test_update_replaces_venue(self, client) -> None:
        venue = _create_venue(client)
        response = client.put(
            f"/api/venues/{venue['id']}",
            json={**VENUE_PAYLOAD, "capacity": 2000, "id": 55},
        )
        assert response.status_code == 200
        assert response.json()["id"] == venue["id"]
        assert response.json()["capacity"] == 2000

    def test_update_unknown_venue(self, client) -> None:
        response = client.put("/api/venues/4", json=VENUE_PAYLOAD)
        assert response.status_code == 404
        assert client.get("/api/venues/count").json() == {"count": 0}

    def test_delete_returns_204(self, client) -> None:
        venue = _create_venue(client)
        response = client.delete(f"/api/venues/{venue['id']}")
        assert response.status_code == 204
        assert response.content == b""

    def test_delete_unknown_venue(self, client) -> None:
        assert client.delete("/api/venues/1").status_code == 404


class TestEventEndpoints:
    """Tests for /api/events."""

    def test_create_event(self, client) -> None:
        _create_venue(client)
        response = client.post("/api/events", json=EVENT_PAYLOAD)
        body = response.json()

        assert response.status_code == 201
        assert response.headers["Location"].endswith("/api/events/1")
        assert body["id"] == 1
        assert body["venueId"] == 1
        assert body["eventDate"] == "2026-12-15T20:00:00"
        assert body["price"] == "49.90"

    def test_snake_case_input_accepted(self, client) -> None:
        _create_venue(client)
        payload = {
            "name": "Jazz Night",
            "event_date": "2026-12-15T20:00:00",
            "capacity": 300,
            "price": 49.9,
            "venue_id": 1,
        }
        assert client.post("/api/events", json=payload).status_code == 201

    @pytest.mark.parametrize(
        "field, value",
        [("price", "0"), ("price", "12.345"), ("capacity", 0), ("venueId", -1)],
    )
    def test_invalid_values_rejected(self, client, field, value) -> None:
        _create_venue(client)
        response = client.post("/api/events", json={**EVENT_PAYLOAD, field: value})
        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == [field]

    def test_missing_date_rejected(self, client) -> None:
        payload = {k: v for k, v in EVENT_PAYLOAD.items() if k != "eventDate"}
        response = client.post("/api/events", json=payload)
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "eventDate"

    def test_list_by_venue(self, client) -> None:
        _create_venue(client)
        _create_venue(client, name="Bataclan")
        jazz = _create_event(client)
        _create_event(client, name="Rock Night", venueId=2)

        assert client.get("/api/events/venue/1").json() == [jazz]
        assert client.get("/api/events/venue/9").json() == []
        assert client.get("/api/events/count").json() == {"count": 2}

    def test_update_to_missing_venue(self, client) -> None:
        _create_venue(client)
        event = _create_event(client)
        response = client.put(
            f"/api/events/{event['id']}", json={**EVENT_PAYLOAD, "venueId": 999}
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Venue not found with id: 999"
        assert client.get(f"/api/events/{event['id']}").json()["venueId"] == 1

    def test_update_event(self, client) -> None:
        _create_venue(client)
        event = _create_event(client)
        response = client.put(
            f"/api/events/{event['id']}", json={**EVENT_PAYLOAD, "capacity": 250}
        )
        assert response.status_code == 200
        assert response.json()["capacity"] == 250

    def test_delete_event(self, client) -> None:
        _create_venue(client)
        event = _create_event(client)
        assert client.delete(f"/api/events/{event['id']}").status_code == 204
        assert client.get(f"/api/events/{event['id']}").status_code == 404


class TestCatalogLifecycle:
    """Venue and event lifecycle across several requests."""

    def test_end_to_end_scenario(self, client) -> None:
        venue = client.post("/api/venues", json=VENUE_PAYLOAD)
        assert venue.status_code == 201
        assert venue.json()["id"] == 1
        assert venue.json()["capacity"] == 1500

        event = client.post("/api/events", json={**EVENT_PAYLOAD, "venueId": 1})
        assert event.status_code == 201
        assert event.json()["id"] == 1

        orphan = client.post("/api/events", json={**EVENT_PAYLOAD, "venueId": 999})
        assert orphan.status_code == 404
        assert orphan.json()["type"].endswith("/resource-not-found")
        assert client.get("/api/events/count").json() == {"count": 1}

        incomplete = {k: v for k, v in VENUE_PAYLOAD.items() if k != "city"}
        invalid = client.put("/api/venues/1", json=incomplete)
        assert invalid.status_code == 400
        assert len(invalid.json()["errors"]) == 1

        assert client.delete("/api/venues/1").status_code == 204
        gone = client.get("/api/venues/1")
        assert gone.status_code == 404
        assert "1" in gone.json()["detail"]


class TestSqlBackend:
    """The same API over the SQLAlchemy repositories."""

    @pytest.fixture
    def settings(self):
        return make_settings(storage_backend="sql", database_url="sqlite://")

    def test_crud_round_trip(self, client) -> None:
        venue = _create_venue(client)
        event = _create_event(client, venueId=venue["id"])
        assert client.get(f"/api/events/{event['id']}").json() == event
        assert client.get("/api/venues").json() == [venue]

    def test_deleting_referenced_venue_conflicts(self, client) -> None:
        """The foreign key rejects the delete; the driver message stays hidden."""
        venue = _create_venue(client)
        _create_event(client, venueId=venue["id"])

        response = client.delete(f"/api/venues/{venue['id']}")
        body = response.json()
        assert response.status_code == 409
        assert body["type"].endswith("/data-integrity-violation")
        assert "FOREIGN KEY" not in body["detail"]
        assert client.get("/api/venues/count").json() == {"count": 1}


class TestBackendParity:
    """Both storage backends answer the same request the same way."""

    @pytest.fixture(params=["memory", "sql"])
    def settings(self, request):
        return make_settings(storage_backend=request.param, database_url="sqlite://")

    def test_offset_aware_date_stored_as_utc(self, client) -> None:
        """The instant survives the round trip on every backend."""
        _create_venue(client)
        event = _create_event(client, eventDate="2026-12-15T20:00:00+02:00")

        assert event["eventDate"] == "2026-12-15T18:00:00"
        stored = client.get(f"/api/events/{event['id']}").json()
        assert stored["eventDate"] == "2026-12-15T18:00:00"

    @pytest.mark.parametrize(
        "path, payload, field",
        [
            ("/api/venues", {**VENUE_PAYLOAD, "capacity": 10**20}, "capacity"),
            ("/api/events", {**EVENT_PAYLOAD, "capacity": 10**20}, "capacity"),
            ("/api/events", {**EVENT_PAYLOAD, "venueId": 2**31}, "venueId"),
        ],
    )
    def test_integers_beyond_column_range_rejected(
        self, client, path, payload, field
    ) -> None:
        _create_venue(client)
        response = client.post(path, json=payload)
        body = response.json()
        assert response.status_code == 400
        assert body["type"].endswith("/validation-error")
        assert [e["field"] for e in body["errors"]] == [field]

    def test_largest_capacity_accepted(self, client) -> None:
        venue = _create_venue(client, capacity=2_147_483_647)
        assert client.get(f"/api/venues/{venue['id']}").json() == venue


class TestApiKeyAuthentication:
    """Write endpoints require X-API-Key once keys are configured."""

    @pytest.fixture
    def settings(self):
        return make_settings(api_keys={"key-123": "alice"})

    def test_missing_key(self, client) -> None:
        response = client.post("/api/venues", json=VENUE_PAYLOAD)
        body = response.json()
        assert response.status_code == 401
        assert body["type"].endswith("/authentication-required")
        assert body["detail"] == (
            "Authentication is required to access this resource. "
            "Please provide valid credentials."
        )

    def test_unknown_key(self, client) -> None:
        response = client.post(
            "/api/venues", json=VENUE_PAYLOAD, headers={"X-API-Key": "nope"}
        )
        assert response.status_code == 401
        assert response.json()["type"].endswith("/authentication-failed")

    def test_valid_key(self, client) -> None:
        response = client.post(
            "/api/venues", json=VENUE_PAYLOAD, headers={"X-API-Key": "key-123"}
        )
        assert response.status_code == 201

    def test_reads_stay_open(self, client) -> None:
        assert client.get("/api/venues").status_code == 200

    def test_delete_requires_key(self, client) -> None:
        assert client.delete("/api/venues/1").status_code == 401

    def test_rejected_key_logged_once(self, client, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            client.post("/api/venues", json=VENUE_PAYLOAD, headers={"X-API-Key": "nope"})
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert "AUTHENTICATION_FAILED" in warnings[0].getMessage()


class TestRateLimiting:
    """slowapi default limit rendered as a problem."""

    def test_limit_exceeded_returns_429(self) -> None:
        settings = make_settings(rate_limit_enabled=True, rate_limit_default="2/minute")
        client = TestClient(create_app(settings))

        assert client.get("/api/venues").status_code == 200
        assert client.get("/api/venues").status_code == 200
        response = client.get("/api/venues")

        assert response.status_code == 429
        assert response.headers["content-type"] == "application/problem+json"
        body = response.json()
        assert body["type"].endswith("/rate-limit-exceeded")
        assert body["title"] == "Too Many Requests"
        assert body["detail"].startswith("Rate limit exceeded")
        assert "X-Trace-Id" in response.headers


class TestTraceHeader:
    """Every response carries a trace id."""

    def test_generated_when_absent(self, client) -> None:
        response = client.get("/api/venues")
        assert len(response.headers["X-Trace-Id"]) == 36

    def test_caller_trace_id_echoed(self, client) -> None:
        response = client.get("/api/venues", headers={"X-Trace-Id": "abc-123"})
        assert response.headers["X-Trace-Id"] == "abc-123"
