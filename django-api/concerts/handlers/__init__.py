from concerts.handlers.views import ConcertDetailView, ConcertListView

__all__ = ["ConcertDetailView", "ConcertListView"]
