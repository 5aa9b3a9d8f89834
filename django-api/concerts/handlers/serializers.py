"""Serializers for transforming domain models to API responses.

Wire names follow the camelCase shape clients of the service already use.
"""

from rest_framework import serializers

from concerts.domain import ConcertPatch


class ConcertSerializer(serializers.Serializer):
    """Serializer for Concert domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    band = serializers.CharField()
    concertDate = serializers.DateTimeField(source="concert_date")
    availableTickets = serializers.CharField(source="available_tickets", allow_null=True)
    isDeleted = serializers.BooleanField(source="is_deleted")


class ConcertCreateSerializer(serializers.Serializer):
    """Validates the body of a create request."""

    # Ids travel in the URL path, so "/" is not allowed.
    id = serializers.RegexField(r"^[^/]+$", required=False, max_length=64)
    name = serializers.CharField(max_length=255)
    band = serializers.CharField(max_length=255)
    concertDate = serializers.DateTimeField(source="concert_date")


class ConcertUpdateSerializer(serializers.Serializer):
    """Validates the body of an update request. Omitted fields stay as they are."""

    name = serializers.CharField(max_length=255, required=False)
    band = serializers.CharField(max_length=255, required=False)
    concertDate = serializers.DateTimeField(source="concert_date", required=False)

    def to_patch(self) -> ConcertPatch:
        return ConcertPatch(**self.validated_data)
