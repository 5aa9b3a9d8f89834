"""Ticketing service client.

The ticketing service answers ``GET /tickets`` with a bare integer: the
number of tickets currently available.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from concerts.domain import ServiceEndpoint
from concerts.domain.errors import RemoteCallFailureError

logger = logging.getLogger(__name__)


class TicketsClient(ABC):
    """Interface for querying ticket availability."""

    @abstractmethod
    async def available_tickets(self, endpoint: ServiceEndpoint) -> int:
        """Return the available-ticket count reported by ``endpoint``.

        Raises:
            RemoteCallFailureError: If the service is unreachable or answers
                with anything but an integer.
        """
        ...


class HttpTicketsClient(TicketsClient):
    """Queries ``http://<endpoint>/tickets`` with httpx."""

    tickets_path = "/tickets"

    def __init__(
        self,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def available_tickets(self, endpoint: ServiceEndpoint) -> int:
        async with httpx.AsyncClient(
            base_url=endpoint.base_url,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(self.tickets_path)
            except httpx.TimeoutException as exc:
                raise RemoteCallFailureError(endpoint.name, "timed out") from exc
            except httpx.HTTPError as exc:
                raise RemoteCallFailureError(endpoint.name, f"unreachable: {exc}") from exc

        if response.is_error:
            raise RemoteCallFailureError(
                endpoint.name, f"HTTP {response.status_code}"
            )
        return _parse_count(endpoint, response.text)


def _parse_count(endpoint: ServiceEndpoint, body: str) -> int:
    text = body.strip()
    try:
        count = int(text)
    except ValueError as exc:
        logger.warning("Non-integer ticket count from %s: %r", endpoint, text[:64])
        raise RemoteCallFailureError(endpoint.name, "non-integer response") from exc
    return count
