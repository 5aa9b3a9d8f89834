"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from concerts.services import ConcertService
from tests.fakes import JAZZ_NIGHT, FakeRegistry, FakeTicketsClient, InMemoryConcertStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryConcertStore:
    return InMemoryConcertStore([JAZZ_NIGHT])


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry(["ticket-svc-7"])


@pytest.fixture
def tickets() -> FakeTicketsClient:
    return FakeTicketsClient({"ticket-svc-7": 42})


@pytest.fixture
def service(store, registry, tickets) -> ConcertService:
    return ConcertService(store=store, registry=registry, tickets=tickets)
