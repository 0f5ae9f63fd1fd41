"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests into payloads
- Call services for business logic
- Leave domain errors to common.exception_handler
- Never contain business logic
"""

from rest_framework import status
from rest_framework.permissions import SAFE_METHODS, AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import EventId, EventPayload
from events.domain.errors import EventNotFoundError
from events.handlers.serializers import EventSerializer
from events.providers import get_event_service


def parse_event_id(event_id: str) -> EventId:
    """Non-numeric ids cannot name an event, so they are reported as not found."""
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise EventNotFoundError() from None


class PublicReadMixin:
    """Reads are open to anyone; writes need a valid token.

    Reads skip authentication entirely, so a stale token cannot block them.
    """

    def get_authenticators(self):
        if self.request.method in SAFE_METHODS:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return [IsAuthenticated()]


class EventListView(PublicReadMixin, APIView):
    """Handler for GET/POST /events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list()
        return Response(
            {
                "success": True,
                "message": "Events retrieved successfully",
                "events": EventSerializer(events, many=True).data,
            }
        )

    def post(self, request: Request) -> Response:
        event = get_event_service().create(EventPayload.from_data(request.data), owner_id=request.user.id)
        return Response(
            {
                "success": True,
                "message": "Event created successfully",
                "event": EventSerializer(event).data,
            },
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(PublicReadMixin, APIView):
    """Handler for GET/PUT/DELETE /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_or_raise(parse_event_id(event_id))
        return Response(
            {
                "success": True,
                "message": "Event retrieved successfully",
                "event": EventSerializer(event).data,
            }
        )

    def put(self, request: Request, event_id: str) -> Response:
        event = get_event_service().update(
            parse_event_id(event_id),
            EventPayload.from_data(request.data),
            caller_id=request.user.id,
        )
        return Response(
            {
                "success": True,
                "message": "Event updated successfully",
                "event": EventSerializer(event).data,
            }
        )

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete(parse_event_id(event_id), caller_id=request.user.id)
        return Response({"success": True, "message": "Event deleted successfully"})


class EventRegisterView(APIView):
    """Handler for POST /events/{event_id}/register"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        get_event_service().register(parse_event_id(event_id), request.user.id)
        return Response(
            {"success": True, "message": "Registered for event successfully"},
            status=status.HTTP_201_CREATED,
        )


class EventUnregisterView(APIView):
    """Handler for DELETE /events/{event_id}/unregister"""

    permission_classes = [IsAuthenticated]

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().unregister(parse_event_id(event_id), request.user.id)
        return Response({"success": True, "message": "Unregistered from event successfully"})
