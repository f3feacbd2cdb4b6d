"""
FastAPI routers for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Request, Response, status

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
from ticket_catalog.interfaces.catalog.dependencies import (
    get_create_event_use_case,
    get_create_venue_use_case,
    get_delete_event_use_case,
    get_delete_venue_use_case,
    get_get_event_use_case,
    get_get_venue_use_case,
    get_list_events_use_case,
    get_list_venues_use_case,
    get_update_event_use_case,
    get_update_venue_use_case,
    require_json,
)
from ticket_catalog.interfaces.catalog.mappers import (
    to_event,
    to_event_response,
    to_venue,
    to_venue_response,
)
from ticket_catalog.interfaces.catalog.schemas import (
    INT_MAX,
    CountResponse,
    EventRequest,
    EventResponse,
    VenueRequest,
    VenueResponse,
)
from ticket_catalog.shared.errors.problem_details import ProblemDetails
from ticket_catalog.shared.security.api_key import require_api_key

PROBLEM = {"model": ProblemDetails}
READ_ERRORS = {400: PROBLEM, 404: PROBLEM}
WRITE_ERRORS = {400: PROBLEM, 401: PROBLEM, 404: PROBLEM, 409: PROBLEM, 415: PROBLEM}
WRITE_GUARDS = [Depends(require_api_key), Depends(require_json)]

venues_router = APIRouter(prefix="/venues", tags=["venues"])
events_router = APIRouter(prefix="/events", tags=["events"])


# ------------------------------------------------------------------
# Venues
# ------------------------------------------------------------------


@venues_router.get(
    "",
    response_model=list[VenueResponse],
    summary="List venues",
    description="Return every venue in creation order.",
)
def list_venues(
    use_case: ListVenuesUseCase = Depends(get_list_venues_use_case),
) -> list[VenueResponse]:
    """List all venues."""
    return [to_venue_response(venue) for venue in use_case.execute()]


@venues_router.get(
    "/count",
    response_model=CountResponse,
    summary="Count venues",
)
def count_venues(
    use_case: ListVenuesUseCase = Depends(get_list_venues_use_case),
) -> CountResponse:
    return CountResponse(count=use_case.count())


@venues_router.get(
    "/{venue_id}",
    response_model=VenueResponse,
    responses=READ_ERRORS,
    summary="Get a venue",
)
def get_venue(
    venue_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: GetVenueUseCase = Depends(get_get_venue_use_case),
) -> VenueResponse:
    """Get one venue by id."""
    return to_venue_response(use_case.execute(venue_id))


@venues_router.post(
    "",
    response_model=VenueResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    dependencies=WRITE_GUARDS,
    summary="Create a venue",
    description="Store a new venue. The response carries its Location.",
)
def create_venue(
    request: Request,
    response: Response,
    body: VenueRequest,
    use_case: CreateVenueUseCase = Depends(get_create_venue_use_case),
) -> VenueResponse:
    """Create a venue and point Location at it."""
    venue = use_case.execute(to_venue(body))
    response.headers["Location"] = str(request.url_for("get_venue", venue_id=venue.id))
    return to_venue_response(venue)


@venues_router.put(
    "/{venue_id}",
    response_model=VenueResponse,
    responses=WRITE_ERRORS,
    dependencies=WRITE_GUARDS,
    summary="Replace a venue",
    description="Replace every field of an existing venue.",
)
def update_venue(
    body: VenueRequest,
    venue_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: UpdateVenueUseCase = Depends(get_update_venue_use_case),
) -> VenueResponse:
    """Replace an existing venue."""
    return to_venue_response(use_case.execute(venue_id, to_venue(body)))


@venues_router.delete(
    "/{venue_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={401: PROBLEM, 404: PROBLEM, 409: PROBLEM},
    dependencies=[Depends(require_api_key)],
    summary="Delete a venue",
)
def delete_venue(
    venue_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: DeleteVenueUseCase = Depends(get_delete_venue_use_case),
) -> Response:
    """Delete a venue."""
    use_case.execute(venue_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ------------------------------------------------------------------
# Events
# ------------------------------------------------------------------


@events_router.get(
    "",
    response_model=list[EventResponse],
    summary="List events",
    description="Return every event in creation order.",
)
def list_events(
    use_case: ListEventsUseCase = Depends(get_list_events_use_case),
) -> list[EventResponse]:
    """List all events."""
    return [to_event_response(event) for event in use_case.execute()]


@events_router.get(
    "/count",
    response_model=CountResponse,
    summary="Count events",
)
def count_events(
    use_case: ListEventsUseCase = Depends(get_list_events_use_case),
) -> CountResponse:
    return CountResponse(count=use_case.count())


@events_router.get(
    "/venue/{venue_id}",
    response_model=list[EventResponse],
    responses=READ_ERRORS,
    summary="List events at a venue",
    description="Return the events held at a venue. Unknown venues yield an empty list.",
)
def list_events_by_venue(
    venue_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: ListEventsUseCase = Depends(get_list_events_use_case),
) -> list[EventResponse]:
    """List the events of one venue."""
    return [to_event_response(event) for event in use_case.execute_by_venue(venue_id)]


@events_router.get(
    "/{event_id}",
    response_model=EventResponse,
    responses=READ_ERRORS,
    summary="Get an event",
)
def get_event(
    event_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: GetEventUseCase = Depends(get_get_event_use_case),
) -> EventResponse:
    """Get one event by id."""
    return to_event_response(use_case.execute(event_id))


@events_router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
    dependencies=WRITE_GUARDS,
    summary="Create an event",
    description="Schedule a new event at an existing venue.",
)
def create_event(
    request: Request,
    response: Response,
    body: EventRequest,
    use_case: CreateEventUseCase = Depends(get_create_event_use_case),
) -> EventResponse:
    """Create an event and point Location at it."""
    event = use_case.execute(to_event(body))
    response.headers["Location"] = str(request.url_for("get_event", event_id=event.id))
    return to_event_response(event)


@events_router.put(
    "/{event_id}",
    response_model=EventResponse,
    responses=WRITE_ERRORS,
    dependencies=WRITE_GUARDS,
    summary="Replace an event",
    description="Replace every field of an existing event. The venue must exist.",
)
def update_event(
    body: EventRequest,
    event_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: UpdateEventUseCase = Depends(get_update_event_use_case),
) -> EventResponse:
    """Replace an existing event."""
    return to_event_response(use_case.execute(event_id, to_event(body)))


@events_router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={401: PROBLEM, 404: PROBLEM},
    dependencies=[Depends(require_api_key)],
    summary="Delete an event",
)
def delete_event(
    event_id: int = Path(..., gt=0, le=INT_MAX),
    use_case: DeleteEventUseCase = Depends(get_delete_event_use_case),
) -> Response:
    """Delete an event."""
    use_case.execute(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
