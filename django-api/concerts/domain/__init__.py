from concerts.domain.models import Concert, ConcertPatch, decorate
from concerts.domain.value_objects import ConcertId, ServiceEndpoint

__all__ = [
    "Concert",
    "ConcertPatch",
    "decorate",
    "ConcertId",
    "ServiceEndpoint",
]
