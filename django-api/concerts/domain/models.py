"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in concerts/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime

from concerts.domain.value_objects import ConcertId


@dataclass(frozen=True)
class Concert:
    """Domain representation of a Concert.

    ``available_tickets`` is only ever set by :func:`decorate`; stores
    always hand back ``None`` for it.
    """

    id: ConcertId
    name: str
    band: str
    concert_date: datetime
    available_tickets: str | None = None
    is_deleted: bool = False


@dataclass(frozen=True)
class ConcertPatch:
    """Fields an update may change. ``None`` leaves the field untouched."""

    name: str | None = None
    band: str | None = None
    concert_date: datetime | None = None

    def apply(self, concert: Concert) -> Concert:
        changes = {
            field: value
            for field, value in (
                ("name", self.name),
                ("band", self.band),
                ("concert_date", self.concert_date),
            )
            if value is not None
        }
        return replace(concert, **changes)


def decorate(concert: Concert, available_tickets: int) -> Concert:
    """Return ``concert`` carrying the live ticket count as a string."""
    return replace(concert, available_tickets=str(available_tickets))
