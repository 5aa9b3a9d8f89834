from concerts.services.concert_service import ConcertService

__all__ = ["ConcertService"]
