"""Integration tests for the concerts HTTP API.

The service behind the views is wired to in-memory collaborators except
where a test needs the database.
Run with: pytest tests/test_concert_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from concerts.domain.errors import RemoteCallFailureError
from concerts.handlers import views
from concerts.services import ConcertService
from concerts.stores.django_store import DjangoConcertStore
from tests.fakes import FakeRegistry, FakeTicketsClient


def use_service(monkeypatch, service: ConcertService) -> None:
    monkeypatch.setattr(views, "build_concert_service", lambda: service)


@pytest.fixture
def wired(monkeypatch, service):
    use_service(monkeypatch, service)
    return service


class TestConcertDetail:
    """Tests for GET /api/concerts/{id}"""

    def test_get_concert_returns_decorated_concert(self, api_client: APIClient, wired):
        response = api_client.get("/api/concerts/c1")

        assert response.status_code == 200
        assert response.json() == {
            "id": "c1",
            "name": "Jazz Night",
            "band": "The Quartet",
            "concertDate": "2026-11-20T20:00:00Z",
            "availableTickets": "42",
            "isDeleted": False,
        }

    def test_get_concert_not_found(self, api_client: APIClient, wired):
        response = api_client.get("/api/concerts/missing")

        assert response.status_code == 404
        assert response.json() == {"code": "CONCERT_NOT_FOUND", "message": "Concert not found"}

    def test_get_concert_ambiguous_services(self, api_client, monkeypatch, store, tickets):
        use_service(monkeypatch, ConcertService(
            store=store, registry=FakeRegistry(["svc-a", "svc-b"]), tickets=tickets
        ))

        response = api_client.get("/api/concerts/c1")

        assert response.status_code == 409
        assert response.json()["code"] == "AMBIGUOUS_SERVICE"

    def test_get_concert_no_services(self, api_client, monkeypatch, store, tickets):
        use_service(monkeypatch, ConcertService(
            store=store, registry=FakeRegistry([]), tickets=tickets
        ))

        response = api_client.get("/api/concerts/c1")

        assert response.status_code == 503
        assert response.json()["code"] == "SERVICE_UNAVAILABLE"

    def test_get_concert_remote_failure_hides_details(self, api_client, monkeypatch, store, registry):
        tickets = FakeTicketsClient(error=RemoteCallFailureError("ticket-svc-7", "HTTP 500"))
        use_service(monkeypatch, ConcertService(store=store, registry=registry, tickets=tickets))

        response = api_client.get("/api/concerts/c1")

        assert response.status_code == 502
        assert response.json() == {
            "code": "REMOTE_CALL_FAILURE",
            "message": "Ticketing service call failed",
        }

    def test_update_concert(self, api_client: APIClient, wired, store):
        response = api_client.put(
            "/api/concerts/c1", {"name": "Blues Night"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Blues Night"
        assert response.json()["availableTickets"] == "42"
        assert store.rows["c1"].name == "Blues Night"

    def test_update_rejects_bad_date(self, api_client: APIClient, wired, store):
        response = api_client.put(
            "/api/concerts/c1", {"concertDate": "not a date"}, format="json"
        )

        assert response.status_code == 400
        assert store.saves == []

    def test_delete_concert(self, api_client: APIClient, wired, store):
        response = api_client.delete("/api/concerts/c1")

        assert response.status_code == 200
        assert response.json() == {"deleted": True}
        assert store.rows["c1"].is_deleted is True

    def test_delete_unknown_concert(self, api_client: APIClient, wired):
        response = api_client.delete("/api/concerts/missing")

        assert response.status_code == 404


class TestConcertList:
    """Tests for GET/POST /api/concerts"""

    def test_list_concerts_has_no_ticket_counts(self, api_client: APIClient, wired, tickets):
        response = api_client.get("/api/concerts")

        assert response.status_code == 200
        assert [c["availableTickets"] for c in response.json()] == [None]
        assert tickets.calls == []

    def test_search_by_name(self, api_client: APIClient, wired):
        response = api_client.get("/api/concerts", {"name": "Jazz"})

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == ["c1"]

    def test_search_by_name_no_match(self, api_client: APIClient, wired):
        response = api_client.get("/api/concerts", {"name": "Polka"})

        assert response.status_code == 404
        assert response.json()["code"] == "NO_MATCH_BY_NAME"

    def test_create_concert(self, api_client: APIClient, wired, store):
        response = api_client.post(
            "/api/concerts",
            {"id": "c2", "name": "Rock Night", "band": "Loud", "concertDate": "2027-02-01T21:00:00Z"},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["id"] == "c2"
        assert response.json()["availableTickets"] is None
        assert "c2" in store.rows

    def test_create_duplicate_concert(self, api_client: APIClient, wired):
        response = api_client.post(
            "/api/concerts",
            {"id": "c1", "name": "Again", "band": "Again", "concertDate": "2027-02-01T21:00:00Z"},
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CONCERT_ALREADY_EXISTS"

    def test_create_rejects_id_with_slash(self, api_client: APIClient, wired, store):
        response = api_client.post(
            "/api/concerts",
            {"id": "a/b", "name": "Rock Night", "band": "Loud", "concertDate": "2027-02-01T21:00:00Z"},
            format="json",
        )

        assert response.status_code == 400
        assert "id" in response.json()
        assert "a/b" not in store.rows

    def test_create_requires_fields(self, api_client: APIClient, wired):
        response = api_client.post("/api/concerts", {"name": "Only a name"}, format="json")

        assert response.status_code == 400


@pytest.mark.django_db
class TestConcertApiWithDatabase:
    """End to end through the ORM store."""

    def test_create_update_delete_round(self, api_client: APIClient, monkeypatch):
        tickets = FakeTicketsClient({"ticket-svc-7": 10})
        use_service(monkeypatch, ConcertService(
            store=DjangoConcertStore(),
            registry=FakeRegistry(["ticket-svc-7"]),
            tickets=tickets,
        ))

        created = api_client.post(
            "/api/concerts",
            {"name": "Jazz Night", "band": "The Quartet", "concertDate": "2026-11-20T20:00:00Z"},
            format="json",
        ).json()
        concert_id = created["id"]

        api_client.put(f"/api/concerts/{concert_id}", {"band": "Trio"}, format="json")
        tickets.counts["ticket-svc-7"] = 9
        fetched = api_client.get(f"/api/concerts/{concert_id}").json()

        assert fetched["band"] == "Trio"
        assert fetched["availableTickets"] == "9"

        assert api_client.delete(f"/api/concerts/{concert_id}").json() == {"deleted": True}
        assert api_client.delete(f"/api/concerts/{concert_id}").json() == {"deleted": True}
        assert api_client.get(f"/api/concerts/{concert_id}").json()["isDeleted"] is True
