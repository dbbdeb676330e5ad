"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import PUBLIC_EVENTS_KEY
from events.domain import Member, UserId
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.serializers import (
    AssetSerializer,
    EventSerializer,
    MemberSerializer,
)
from events.services import EventService, build_event_service


def member_from_request(request: Request) -> Member:
    """Domain view of the authenticated user."""
    user = request.user
    return Member(id=UserId(user.pk), username=user.get_username())


class EventAPIView(APIView):
    """Base view that supplies the EventService and maps domain errors."""

    service_factory = staticmethod(build_event_service)

    def get_service(self) -> EventService:
        return self.service_factory()

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return error_response(exc)
        return super().handle_exception(exc)


class PublicEventListView(EventAPIView):
    """Handler for GET /api/events/public"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        data = cache.get(PUBLIC_EVENTS_KEY)
        if data is None:
            events = self.get_service().list_public_events()
            data = EventSerializer(events, many=True).data
            cache.set(PUBLIC_EVENTS_KEY, data, timeout=settings.EVENTS_CACHE_TIMEOUT)
        return Response(data)


class NearbyEventListView(EventAPIView):
    """Handler for GET /api/events/closeby"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        location = request.query_params.get("location")
        events = self.get_service().list_nearby_events(location)
        return Response(EventSerializer(events, many=True).data)


class EventMemberListView(EventAPIView):
    """Handler for GET /api/events/{event_id}/members"""

    permission_classes = [AllowAny]

    def get(self, request: Request, event_id: str) -> Response:
        members = self.get_service().list_members(event_id)
        return Response(MemberSerializer(members, many=True).data)


class EventAssetListView(EventAPIView):
    """Handler for GET /api/events/{event_id}/assets"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, event_id: str) -> Response:
        assets = self.get_service().list_assets(event_id, member_from_request(request))
        return Response(AssetSerializer(assets, many=True).data)


class EventAssetUploadView(EventAPIView):
    """Handler for POST /api/events/{event_id}/upload (multipart field "file")"""

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request, event_id: str) -> Response:
        asset = self.get_service().upload_asset(
            event_id, member_from_request(request), request.FILES.get("file")
        )
        return Response(AssetSerializer(asset).data, status=status.HTTP_201_CREATED)


class EventJoinView(EventAPIView):
    """Handler for POST /api/events/{event_id}/join"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        event = self.get_service().join_event(event_id, member_from_request(request))
        return Response(EventSerializer(event).data)


class EventCreateView(EventAPIView):
    """Handler for POST /api/events/create"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request) -> Response:
        event = self.get_service().create_event(
            member_from_request(request), request.data
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)
