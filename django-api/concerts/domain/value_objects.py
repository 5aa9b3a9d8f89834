"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class ConcertId:
    """Unique identifier for a Concert."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("ConcertId cannot be blank")
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ServiceEndpoint:
    """A ticketing-service address resolved from the discovery registry.

    Derived per request; never persisted or reused across requests.
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("ServiceEndpoint name cannot be blank")

    @property
    def base_url(self) -> str:
        return f"http://{self.name}"

    def __str__(self) -> str:
        return self.name
