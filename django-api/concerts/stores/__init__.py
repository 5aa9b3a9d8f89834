from concerts.stores.interfaces import ConcertStore

__all__ = ["ConcertStore"]
