"""Wires the concert service from Django settings."""

from django.conf import settings

from concerts.clients import HttpTicketsClient
from concerts.discovery.registries import build_service_registry
from concerts.services.concert_service import ConcertService
from concerts.stores.django_store import DjangoConcertStore


def build_concert_service() -> ConcertService:
    """Return a service backed by the ORM store and the configured registry.

    A fresh service is built per request; nothing here is shared.
    """
    return ConcertService(
        store=DjangoConcertStore(),
        registry=build_service_registry(),
        tickets=HttpTicketsClient(timeout=settings.TICKETS_REQUEST_TIMEOUT),
        empty_name_match_is_error=settings.CONCERTS_EMPTY_NAME_MATCH_IS_ERROR,
    )
