"""
Mapping between API schemas and catalog entities.

Pure functions: field-by-field copies, None in gives None out.
Identifiers are never read from request bodies.
"""

from typing import Optional

from ticket_catalog.domain.catalog.entities import Event, Venue
from ticket_catalog.interfaces.catalog.schemas import (
    EventRequest,
    EventResponse,
    VenueRequest,
    VenueResponse,
)


def to_venue(request: Optional[VenueRequest]) -> Optional[Venue]:
    if request is None:
        return None
    return Venue(
        name=request.name,
        address=request.address,
        city=request.city,
        country=request.country,
        capacity=request.capacity,
    )


def to_venue_response(venue: Optional[Venue]) -> Optional[VenueResponse]:
    if venue is None:
        return None
    return VenueResponse(
        id=venue.id,
        name=venue.name,
        address=venue.address,
        city=venue.city,
        country=venue.country,
        capacity=venue.capacity,
    )


def to_event(request: Optional[EventRequest]) -> Optional[Event]:
    if request is None:
        return None
    return Event(
        name=request.name,
        description=request.description,
        event_date=request.event_date,
        capacity=request.capacity,
        price=request.price,
        venue_id=request.venue_id,
    )


def to_event_response(event: Optional[Event]) -> Optional[EventResponse]:
    if event is None:
        return None
    return EventResponse(
        id=event.id,
        name=event.name,
        description=event.description,
        event_date=event.event_date,
        capacity=event.capacity,
        price=event.price,
        venue_id=event.venue_id,
    )
