"""Service registry implementations."""

import logging
from collections.abc import Iterable

import httpx
from django.conf import settings

from concerts.discovery.interfaces import ServiceRegistry
from concerts.domain.errors import RegistryUnavailableError

logger = logging.getLogger(__name__)


class StaticServiceRegistry(ServiceRegistry):
    """Registry backed by a fixed list of names, typically from settings."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = frozenset(name.strip() for name in names if name.strip())

    async def list_service_names(self) -> set[str]:
        return set(self._names)


class ConsulServiceRegistry(ServiceRegistry):
    """Registry backed by a Consul agent's service catalog.

    ``GET /v1/catalog/services`` answers with a JSON object mapping each
    service name to its tags. The agent always lists itself as ``consul``;
    that entry is never a candidate. When ``tag`` is set only services
    carrying that tag are returned.
    """

    catalog_path = "/v1/catalog/services"
    agent_service = "consul"

    def __init__(
        self,
        base_url: str,
        tag: str | None = None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._tag = tag or None
        self._timeout = timeout
        self._transport = transport

    async def list_service_names(self) -> set[str]:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(self.catalog_path)
                response.raise_for_status()
                catalog = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("Consul catalog query to %s failed: %s", self._base_url, exc)
                raise RegistryUnavailableError(self._base_url) from exc

        if not isinstance(catalog, dict):
            raise RegistryUnavailableError(self._base_url)

        return {
            name
            for name, tags in catalog.items()
            if name != self.agent_service and self._has_tag(tags)
        }

    def _has_tag(self, tags) -> bool:
        if self._tag is None:
            return True
        return isinstance(tags, list) and self._tag in tags


def build_service_registry(
    transport: httpx.AsyncBaseTransport | None = None,
) -> ServiceRegistry:
    """Build the registry selected by ``TICKETS_DISCOVERY_BACKEND``."""
    backend = settings.TICKETS_DISCOVERY_BACKEND
    if backend == "static":
        return StaticServiceRegistry(settings.TICKETS_SERVICE_NAMES)
    if backend == "consul":
        return ConsulServiceRegistry(
            settings.TICKETS_CONSUL_URL,
            tag=settings.TICKETS_CONSUL_TAG,
            timeout=settings.TICKETS_REQUEST_TIMEOUT,
            transport=transport,
        )
    raise ValueError(f"Unknown discovery backend: {backend!r}")
