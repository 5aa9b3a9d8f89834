"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from concerts.domain.errors import DomainError, ErrorCode
from concerts.handlers.serializers import (
    ConcertCreateSerializer,
    ConcertSerializer,
    ConcertUpdateSerializer,
)
from concerts.services.factory import build_concert_service

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.CONCERT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_MATCH_BY_NAME: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_CONCERT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONCERT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.AMBIGUOUS_SERVICE: status.HTTP_409_CONFLICT,
    ErrorCode.SERVICE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.REMOTE_CALL_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


def error_response(error: DomainError) -> Response:
    logger.info("Request failed: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


class ConcertListView(APIView):
    """Handler for GET/POST /api/concerts"""

    def get(self, request: Request) -> Response:
        service = build_concert_service()
        name = request.query_params.get("name")
        try:
            if name is not None:
                concerts = async_to_sync(service.find_concerts_by_name)(name)
            else:
                concerts = async_to_sync(service.list_concerts)()
        except DomainError as error:
            return error_response(error)
        return Response(ConcertSerializer(concerts, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = ConcertCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        service = build_concert_service()
        try:
            concert = async_to_sync(service.create_concert)(
                name=data["name"],
                band=data["band"],
                concert_date=data["concert_date"],
                concert_id=data.get("id"),
            )
        except DomainError as error:
            return error_response(error)
        return Response(ConcertSerializer(concert).data, status=status.HTTP_201_CREATED)


class ConcertDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/concerts/{concert_id}"""

    def get(self, request: Request, concert_id: str) -> Response:
        service = build_concert_service()
        try:
            concert = async_to_sync(service.get_concert)(concert_id)
        except DomainError as error:
            return error_response(error)
        return Response(ConcertSerializer(concert).data)

    def put(self, request: Request, concert_id: str) -> Response:
        serializer = ConcertUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = build_concert_service()
        try:
            concert = async_to_sync(service.update_concert)(
                concert_id, serializer.to_patch()
            )
        except DomainError as error:
            return error_response(error)
        return Response(ConcertSerializer(concert).data)

    def delete(self, request: Request, concert_id: str) -> Response:
        service = build_concert_service()
        try:
            deleted = async_to_sync(service.delete_concert)(concert_id)
        except DomainError as error:
            return error_response(error)
        return Response({"deleted": deleted})
