"""Django ORM implementation of the ConcertStore."""

from django.db import IntegrityError
from django.db.models import Value
from django.db.models.functions import StrIndex

from concerts import models
from concerts.domain import Concert, ConcertId
from concerts.domain.errors import ConcertAlreadyExistsError
from concerts.stores.interfaces import ConcertStore


def _to_domain(row: models.Concert) -> Concert:
    return Concert(
        id=ConcertId(row.id),
        name=row.name,
        band=row.band,
        concert_date=row.concert_date,
        is_deleted=row.is_deleted,
    )


def _fields(concert: Concert) -> dict:
    return {
        "name": concert.name,
        "band": concert.band,
        "concert_date": concert.concert_date,
        "is_deleted": concert.is_deleted,
    }


class DjangoConcertStore(ConcertStore):
    """Relational concert store using Django's async ORM."""

    async def insert(self, concert: Concert) -> Concert:
        try:
            row = await models.Concert.objects.acreate(
                id=concert.id.value, **_fields(concert)
            )
        except IntegrityError as exc:
            raise ConcertAlreadyExistsError(concert.id.value) from exc
        return _to_domain(row)

    async def find_all(self) -> list[Concert]:
        return [_to_domain(row) async for row in models.Concert.objects.all()]

    async def find_by_id(self, concert_id: ConcertId) -> Concert | None:
        try:
            row = await models.Concert.objects.aget(pk=concert_id.value)
        except models.Concert.DoesNotExist:
            return None
        return _to_domain(row)

    async def find_by_name(self, fragment: str) -> list[Concert]:
        # LIKE ignores case on SQLite; INSTR/STRPOS do not.
        queryset = models.Concert.objects.annotate(
            position=StrIndex("name", Value(fragment))
        ).filter(position__gt=0)
        return [_to_domain(row) async for row in queryset]

    async def save(self, concert: Concert) -> Concert:
        row, _ = await models.Concert.objects.aupdate_or_create(
            id=concert.id.value, defaults=_fields(concert)
        )
        return _to_domain(row)
