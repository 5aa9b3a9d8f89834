"""In-memory collaborators for exercising ConcertService without I/O."""

from dataclasses import replace
from datetime import datetime, timezone

from concerts.clients import TicketsClient
from concerts.discovery import ServiceRegistry
from concerts.domain import Concert, ConcertId, ServiceEndpoint
from concerts.domain.errors import ConcertAlreadyExistsError
from concerts.stores import ConcertStore


class InMemoryConcertStore(ConcertStore):
    """Dict-backed store. Strips ticket counts the way a real store would."""

    def __init__(self, concerts: list[Concert] = ()) -> None:
        self.rows: dict[str, Concert] = {}
        self.saves: list[Concert] = []
        for concert in concerts:
            self.rows[concert.id.value] = replace(concert, available_tickets=None)

    async def insert(self, concert: Concert) -> Concert:
        if concert.id.value in self.rows:
            raise ConcertAlreadyExistsError(concert.id.value)
        self.rows[concert.id.value] = replace(concert, available_tickets=None)
        return self.rows[concert.id.value]

    async def find_all(self) -> list[Concert]:
        return list(self.rows.values())

    async def find_by_id(self, concert_id: ConcertId) -> Concert | None:
        return self.rows.get(concert_id.value)

    async def find_by_name(self, fragment: str) -> list[Concert]:
        return [c for c in self.rows.values() if fragment in c.name]

    async def save(self, concert: Concert) -> Concert:
        stored = replace(concert, available_tickets=None)
        self.rows[concert.id.value] = stored
        self.saves.append(stored)
        return stored


class FakeRegistry(ServiceRegistry):
    def __init__(self, names: list[str] = (), error: Exception | None = None) -> None:
        self.names = set(names)
        self.error = error
        self.calls = 0

    async def list_service_names(self) -> set[str]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return set(self.names)


class FakeTicketsClient(TicketsClient):
    def __init__(self, counts: dict[str, int] | None = None, error: Exception | None = None) -> None:
        self.counts = counts or {}
        self.error = error
        self.calls: list[str] = []

    async def available_tickets(self, endpoint: ServiceEndpoint) -> int:
        self.calls.append(endpoint.name)
        if self.error is not None:
            raise self.error
        return self.counts[endpoint.name]


JAZZ_NIGHT = Concert(
    id=ConcertId("c1"),
    name="Jazz Night",
    band="The Quartet",
    concert_date=datetime(2026, 11, 20, 20, 0, tzinfo=timezone.utc),
)


