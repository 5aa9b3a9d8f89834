"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Available tickets are never stored; they are fetched live on every read.
"""

from django.db import models


class Concert(models.Model):
    """Persistence model for concerts."""

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    name = models.CharField(max_length=255)
    band = models.CharField(max_length=255)
    concert_date = models.DateTimeField()
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["name"], name="concert_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.band}"
