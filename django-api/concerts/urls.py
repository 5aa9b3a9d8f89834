from django.urls import path

from concerts.handlers import ConcertDetailView, ConcertListView

urlpatterns = [
    path("concerts", ConcertListView.as_view(), name="concert-list"),
    path("concerts/<str:concert_id>", ConcertDetailView.as_view(), name="concert-detail"),
]
