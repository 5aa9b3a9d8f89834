"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They never decorate:
every concert they return has ``available_tickets`` set to ``None``.
"""

from abc import ABC, abstractmethod

from concerts.domain import Concert, ConcertId


class ConcertStore(ABC):
    """Interface for concert persistence operations."""

    @abstractmethod
    async def insert(self, concert: Concert) -> Concert:
        """Persist a new concert.

        Raises:
            ConcertAlreadyExistsError: If the id is already taken.
        """
        ...

    @abstractmethod
    async def find_all(self) -> list[Concert]:
        """Return all concerts, soft-deleted ones included, oldest first."""
        ...

    @abstractmethod
    async def find_by_id(self, concert_id: ConcertId) -> Concert | None:
        """Return a concert by ID, or None if not found."""
        ...

    @abstractmethod
    async def find_by_name(self, fragment: str) -> list[Concert]:
        """Return concerts whose name contains ``fragment``, possibly none."""
        ...

    @abstractmethod
    async def save(self, concert: Concert) -> Concert:
        """Write the concert and return it once the write has committed."""
        ...
