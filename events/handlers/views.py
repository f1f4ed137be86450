"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors and outcomes to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import CATEGORY_LIST_KEY
from events.conf import events_settings
from events.domain import (
    ANONYMOUS,
    AuthenticatedUser,
    Capacity,
    CategoryId,
    DeletionOutcome,
    EventId,
    NewEvent,
    PageRequest,
    UserId,
    Viewer,
)
from events.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    InvalidCategoryIdError,
    InvalidEventIdError,
    InvalidPaginationError,
    InvalidUserIdError,
    NotEventOwnerError,
    NotRegisteredError,
    RegistrationRejectedError,
)
from events.handlers.serializers import (
    CategorySerializer,
    EventCreateSerializer,
    EventSerializer,
    PageQuerySerializer,
    PaginatedEventSerializer,
    RegistrationSerializer,
)
from events.services import EventService
from events.stores import get_event_store

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CATEGORY_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGINATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_CREATION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.REGISTRATION_REJECTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_REGISTERED: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOT_EVENT_OWNER: status.HTTP_403_FORBIDDEN,
}


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    reason = getattr(error, "reason", None)
    if reason is not None:
        body["reason"] = reason
    return Response(body, status=ERROR_STATUS[error.code])


def viewer_for(request: Request) -> Viewer:
    user = request.user
    if user is None or not user.is_authenticated:
        return ANONYMOUS
    return AuthenticatedUser(UserId(user.get_username()))


def parse_event_id(value: str) -> EventId:
    try:
        return EventId.from_string(value)
    except ValueError:
        raise InvalidEventIdError() from None


def parse_category_id(value: str) -> CategoryId:
    try:
        return CategoryId.from_string(value)
    except ValueError:
        raise InvalidCategoryIdError() from None


def parse_user_id(value: str) -> UserId:
    try:
        return UserId(value)
    except ValueError:
        raise InvalidUserIdError() from None


def parse_page_request(request: Request) -> PageRequest:
    serializer = PageQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        field, messages = next(iter(serializer.errors.items()))
        raise InvalidPaginationError(f"{field}: {messages[0]}")
    return PageRequest(
        page=serializer.validated_data["page"],
        page_size=serializer.validated_data.get(
            "page_size", events_settings.DEFAULT_PAGE_SIZE
        ),
    )


class EventServiceView(APIView):
    """Base handler that wires an EventService to the configured store."""

    authenticated_methods: tuple[str, ...] = ()

    def get_permissions(self):
        if self.request.method in self.authenticated_methods:
            return [IsAuthenticated()]
        return super().get_permissions()

    def get_service(self) -> EventService:
        return EventService(get_event_store())

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            if ERROR_STATUS[exc.code] >= 500:
                logger.error("Unhandled domain failure: %s", exc)
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(EventServiceView):
    """Handler for GET and POST /api/events"""

    authenticated_methods = ("POST",)

    def get(self, request: Request) -> Response:
        result = self.get_service().list_events(
            viewer_for(request), parse_page_request(request)
        )
        return Response(PaginatedEventSerializer(result).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        new_event = NewEvent(
            title=data["title"],
            description=data["description"],
            event_date=data["event_date"],
            capacity=Capacity(data["capacity"]),
            is_private=data["is_private"],
            address=data["address"] or None,
            category_ids=tuple(CategoryId(i) for i in data["category_ids"]),
        )
        requested_owner = data["created_by_id"]
        created = self.get_service().create_event(
            new_event,
            viewer_for(request),
            requested_created_by_id=UserId(requested_owner) if requested_owner else None,
        )
        return Response(EventSerializer(created).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventServiceView):
    """Handler for GET and DELETE /api/events/{event_id}"""

    authenticated_methods = ("DELETE",)

    def get(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        event = self.get_service().get_event(parsed_id, viewer_for(request))
        if event is None:
            raise EventNotFoundError(parsed_id.value)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        outcome = self.get_service().delete_event(parsed_id, viewer_for(request).user_id)
        if outcome is DeletionOutcome.NOT_OWNER:
            raise NotEventOwnerError()
        if not outcome:
            raise EventNotFoundError(parsed_id.value)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventRegistrationView(EventServiceView):
    """Handler for POST and DELETE /api/events/{event_id}/register"""

    authenticated_methods = ("POST", "DELETE")

    def post(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        requested_user = serializer.validated_data["user_id"]
        outcome = self.get_service().register_for_event(
            parsed_id,
            viewer_for(request),
            requested_user_id=UserId(requested_user) if requested_user else None,
        )
        if not outcome:
            raise RegistrationRejectedError(outcome.value)
        return Response({"code": outcome.value})

    def delete(self, request: Request, event_id: str) -> Response:
        parsed_id = parse_event_id(event_id)
        outcome = self.get_service().unregister_from_event(
            parsed_id, viewer_for(request).user_id
        )
        if not outcome:
            raise NotRegisteredError()
        return Response(status=status.HTTP_204_NO_CONTENT)


class CategoryListView(EventServiceView):
    """Handler for GET /api/events/categories"""

    def get(self, request: Request) -> Response:
        data = cache.get(CATEGORY_LIST_KEY)
        if data is None:
            categories = self.get_service().list_categories()
            data = [dict(item) for item in CategorySerializer(categories, many=True).data]
            cache.set(CATEGORY_LIST_KEY, data, events_settings.CATEGORY_CACHE_TIMEOUT)
        return Response(data)


class CategoryEventListView(EventServiceView):
    """Handler for GET /api/events/categories/{category_id}"""

    def get(self, request: Request, category_id: str) -> Response:
        result = self.get_service().list_events_by_category(
            parse_category_id(category_id),
            viewer_for(request),
            parse_page_request(request),
        )
        return Response(PaginatedEventSerializer(result).data)


class UserEventListView(EventServiceView):
    """Handler for GET /api/users/{user_id}/events"""

    def get(self, request: Request, user_id: str) -> Response:
        result = self.get_service().list_events_by_user(
            parse_user_id(user_id),
            viewer_for(request),
            parse_page_request(request),
        )
        return Response(PaginatedEventSerializer(result).data)
