"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the repositories built
by ``create_app`` (kept on ``app.state``) into use cases via constructor
injection. These are the composition root for the catalog context.
"""

import email.message

from fastapi import Request

from ticket_catalog.application.catalog.create_event import CreateEventUseCase
from ticket_catalog.application.catalog.create_venue import CreateVenueUseCase
from ticket_catalog.application.catalog.delete_event import DeleteEventUseCase
from ticket_catalog.application.catalog.delete_venue import DeleteVenueUseCase
from ticket_catalog.application.catalog.get_event import GetEventUseCase
from ticket_catalog.application.catalog.get_venue import GetVenueUseCase
from ticket_catalog.application.catalog.list_events import ListEventsUseCase
from ticket_catalog.application.catalog.list_venues import ListVenuesUseCase
from ticket_catalog.application.catalog.update_event import UpdateEventUseCase
from ticket_catalog.application.catalog.update_venue import UpdateVenueUseCase
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository
from ticket_catalog.shared.errors.exceptions import UnsupportedMediaTypeError

JSON_MEDIA_TYPE = "application/json"


def require_json(request: Request) -> None:
    """Reject request bodies that are not JSON.

    A request without ``Content-Type`` is parsed as JSON.

    Raises:
        UnsupportedMediaTypeError: For any other declared content type.
    """
    content_type = request.headers.get("content-type")
    if not content_type:
        return
    message = email.message.Message()
    message["content-type"] = content_type
    subtype = message.get_content_subtype()
    if message.get_content_maintype() == "application" and (
        subtype == "json" or subtype.endswith("+json")
    ):
        return
    raise UnsupportedMediaTypeError(content_type, [JSON_MEDIA_TYPE])


def get_venue_repository(request: Request) -> VenueRepository:
    return request.app.state.venue_repository


def get_event_repository(request: Request) -> EventRepository:
    return request.app.state.event_repository


def get_create_venue_use_case(request: Request) -> CreateVenueUseCase:
    """Build CreateVenueUseCase with its infrastructure dependencies."""
    return CreateVenueUseCase(venue_repo=get_venue_repository(request))


def get_get_venue_use_case(request: Request) -> GetVenueUseCase:
    """Build GetVenueUseCase with its infrastructure dependencies."""
    return GetVenueUseCase(venue_repo=get_venue_repository(request))


def get_list_venues_use_case(request: Request) -> ListVenuesUseCase:
    """Build ListVenuesUseCase with its infrastructure dependencies."""
    return ListVenuesUseCase(venue_repo=get_venue_repository(request))


def get_update_venue_use_case(request: Request) -> UpdateVenueUseCase:
    """Build UpdateVenueUseCase with its infrastructure dependencies."""
    return UpdateVenueUseCase(venue_repo=get_venue_repository(request))


def get_delete_venue_use_case(request: Request) -> DeleteVenueUseCase:
    """Build DeleteVenueUseCase with its infrastructure dependencies."""
    return DeleteVenueUseCase(venue_repo=get_venue_repository(request))


def get_create_event_use_case(request: Request) -> CreateEventUseCase:
    """Build CreateEventUseCase with its infrastructure dependencies."""
    return CreateEventUseCase(
        event_repo=get_event_repository(request),
        venue_repo=get_venue_repository(request),
    )


def get_get_event_use_case(request: Request) -> GetEventUseCase:
    """Build GetEventUseCase with its infrastructure dependencies."""
    return GetEventUseCase(event_repo=get_event_repository(request))


def get_list_events_use_case(request: Request) -> ListEventsUseCase:
    """Build ListEventsUseCase with its infrastructure dependencies."""
    return ListEventsUseCase(event_repo=get_event_repository(request))


def get_update_event_use_case(request: Request) -> UpdateEventUseCase:
    """Build UpdateEventUseCase with its infrastructure dependencies."""
    return UpdateEventUseCase(
        event_repo=get_event_repository(request),
        venue_repo=get_venue_repository(request),
    )


def get_delete_event_use_case(request: Request) -> DeleteEventUseCase:
    """Build DeleteEventUseCase with its infrastructure dependencies."""
    return DeleteEventUseCase(event_repo=get_event_repository(request))
