"""Ticketing endpoint selection over discovered service names."""

from collections.abc import Iterable

from concerts.domain import ServiceEndpoint
from concerts.domain.errors import AmbiguousServiceError, ServiceUnavailableError


def select_endpoint(names: Iterable[str]) -> ServiceEndpoint:
    """Pick the single registered ticketing service.

    Raises:
        ServiceUnavailableError: If no service is registered.
        AmbiguousServiceError: If more than one service is registered.
    """
    match sorted(names):
        case []:
            raise ServiceUnavailableError()
        case [name]:
            return ServiceEndpoint(name)
        case candidates:
            raise AmbiguousServiceError(candidates)
