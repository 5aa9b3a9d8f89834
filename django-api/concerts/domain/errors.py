"""Domain error codes for the concerts module."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CONCERT_NOT_FOUND = "CONCERT_NOT_FOUND"
    CONCERT_ALREADY_EXISTS = "CONCERT_ALREADY_EXISTS"
    NO_MATCH_BY_NAME = "NO_MATCH_BY_NAME"
    INVALID_CONCERT_ID = "INVALID_CONCERT_ID"
    AMBIGUOUS_SERVICE = "AMBIGUOUS_SERVICE"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    REMOTE_CALL_FAILURE = "REMOTE_CALL_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ConcertNotFoundError(DomainError):
    """Raised when no concert exists for an id."""

    def __init__(self, concert_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONCERT_NOT_FOUND,
            message="Concert not found",
        )
        object.__setattr__(self, "concert_id", concert_id)


class ConcertAlreadyExistsError(DomainError):
    """Raised when inserting a concert whose id is taken."""

    def __init__(self, concert_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONCERT_ALREADY_EXISTS,
            message="A concert with this ID already exists",
        )
        object.__setattr__(self, "concert_id", concert_id)


class NoMatchByNameError(DomainError):
    """Raised when a name search matches no concert."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.NO_MATCH_BY_NAME,
            message="No concert found with a matching name",
        )
        object.__setattr__(self, "name", name)


class InvalidConcertIdError(DomainError):
    """Raised when a concert ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONCERT_ID,
            message="Invalid concert ID",
        )


class AmbiguousServiceError(DomainError):
    """Raised when more than one ticketing service is registered."""

    def __init__(self, candidates: Iterable[str]) -> None:
        super().__init__(
            code=ErrorCode.AMBIGUOUS_SERVICE,
            message="More than one ticketing service is registered",
        )
        object.__setattr__(self, "candidates", sorted(candidates))


class ServiceUnavailableError(DomainError):
    """Raised when no ticketing service is registered."""

    def __init__(self, message: str = "No ticketing service is registered") -> None:
        super().__init__(
            code=ErrorCode.SERVICE_UNAVAILABLE,
            message=message,
        )


class RegistryUnavailableError(ServiceUnavailableError):
    """Raised when the discovery registry itself cannot be queried."""

    def __init__(self, registry: str) -> None:
        super().__init__(message="Service discovery is unavailable")
        object.__setattr__(self, "registry", registry)


class RemoteCallFailureError(DomainError):
    """Raised when the ticketing service fails or returns a non-integer."""

    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.REMOTE_CALL_FAILURE,
            message="Ticketing service call failed",
        )
        object.__setattr__(self, "endpoint", endpoint)
        object.__setattr__(self, "reason", reason)
