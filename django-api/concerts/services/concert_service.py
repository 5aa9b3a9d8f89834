"""Concert service - all business logic lives here.

Services:
- Depend only on interfaces (stores, registries, clients)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Single-concert reads are decorated with the live ticket count from the one
registered ticketing service. Listings and name searches are not.
"""

import asyncio
import logging
import uuid
from dataclasses import replace
from datetime import datetime

from concerts.clients import TicketsClient
from concerts.discovery import ServiceRegistry, select_endpoint
from concerts.domain import Concert, ConcertId, ConcertPatch, decorate
from concerts.domain.errors import (
    ConcertNotFoundError,
    InvalidConcertIdError,
    NoMatchByNameError,
)
from concerts.stores.interfaces import ConcertStore

module_logger = logging.getLogger(__name__)


class CallLogger(logging.LoggerAdapter):
    """Prefixes every record with the concert the call is about."""

    def process(self, msg, kwargs):
        return f"[concert={self.extra['concert_id']}] {msg}", kwargs


class ConcertService:
    """Service for concert records decorated with live ticket availability."""

    def __init__(
        self,
        store: ConcertStore,
        registry: ServiceRegistry,
        tickets: TicketsClient,
        logger: logging.Logger | None = None,
        empty_name_match_is_error: bool = True,
    ) -> None:
        self._store = store
        self._registry = registry
        self._tickets = tickets
        self._logger = logger or module_logger
        self._empty_name_match_is_error = empty_name_match_is_error

    def _call_logger(self, concert_id: object) -> CallLogger:
        return CallLogger(self._logger, {"concert_id": concert_id})

    async def create_concert(
        self,
        name: str,
        band: str,
        concert_date: datetime,
        concert_id: str | None = None,
    ) -> Concert:
        """Insert a new, undecorated concert.

        Raises:
            InvalidConcertIdError: If an explicit ``concert_id`` is blank.
            ConcertAlreadyExistsError: If ``concert_id`` is already taken.
        """
        new_id = _parse_id(concert_id) if concert_id is not None else ConcertId(uuid.uuid4().hex)
        concert = await self._store.insert(
            Concert(id=new_id, name=name, band=band, concert_date=concert_date)
        )
        self._call_logger(new_id).info("Created concert %r", name)
        return concert

    async def list_concerts(self) -> list[Concert]:
        """Return every stored concert without ticket counts.

        The registered service names are logged along the way; a registry
        failure is only logged.
        """
        concerts, names = await asyncio.gather(
            self._store.find_all(),
            self._registry.list_service_names(),
            return_exceptions=True,
        )
        if isinstance(concerts, BaseException):
            raise concerts
        if isinstance(names, BaseException):
            self._logger.warning("Service discovery failed during listing: %s", names)
        else:
            for name in sorted(names):
                self._logger.info("Discovered service: %s", name)
        return concerts

    async def find_concerts_by_name(self, fragment: str) -> list[Concert]:
        """Return concerts whose name contains ``fragment``.

        Raises:
            NoMatchByNameError: If nothing matches and the service treats an
                empty match as an error.
        """
        concerts = await self._store.find_by_name(fragment)
        if not concerts and self._empty_name_match_is_error:
            raise NoMatchByNameError(fragment)
        return concerts

    async def get_concert(self, concert_id: str) -> Concert:
        """Return a concert decorated with the live ticket count.

        Raises:
            InvalidConcertIdError: If the concert_id is blank.
            ConcertNotFoundError: If the concert does not exist.
            ServiceUnavailableError: If no ticketing service is registered.
            AmbiguousServiceError: If more than one is registered.
            RemoteCallFailureError: If the ticketing service call fails.
        """
        parsed_id = _parse_id(concert_id)
        log = self._call_logger(parsed_id)

        concert, names = await asyncio.gather(
            self._store.find_by_id(parsed_id),
            self._registry.list_service_names(),
            return_exceptions=True,
        )
        # A missing concert wins over any discovery failure.
        if isinstance(concert, BaseException):
            raise concert
        if concert is None:
            raise ConcertNotFoundError(parsed_id.value)
        if isinstance(names, BaseException):
            raise names

        endpoint = select_endpoint(names)
        log.info("Tickets service discovered: %s", endpoint)

        available = await self._tickets.available_tickets(endpoint)
        log.info("Available tickets: %d", available)
        return decorate(concert, available)

    async def update_concert(self, concert_id: str, patch: ConcertPatch) -> Concert:
        """Apply ``patch`` to a concert and return it decorated.

        Fails with the same errors as :meth:`get_concert` before writing.
        """
        current = await self.get_concert(concert_id)
        updated = patch.apply(current)
        await self._store.save(updated)
        self._call_logger(current.id).info("Saved concert")
        return updated

    async def delete_concert(self, concert_id: str) -> bool:
        """Soft-delete a concert. Returns True once the flag is persisted.

        Fails with the same errors as :meth:`get_concert` before writing.
        """
        current = await self.get_concert(concert_id)
        await self._store.save(replace(current, is_deleted=True))
        self._call_logger(current.id).info("Soft-deleted concert")
        return True


def _parse_id(concert_id: str) -> ConcertId:
    try:
        return ConcertId.from_string(concert_id)
    except ValueError as exc:
        raise InvalidConcertIdError() from exc
