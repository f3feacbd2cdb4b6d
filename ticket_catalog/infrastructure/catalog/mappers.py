"""
Domain <-> persistence record mapping.

Pure functions. ``None`` maps to ``None``; every other input is copied
field by field with no derived values.
"""

from typing import Optional

from ticket_catalog.domain.catalog.entities import Event, Venue
from ticket_catalog.infrastructure.catalog.records import EventRecord, VenueRecord


def venue_to_record(venue: Optional[Venue]) -> Optional[VenueRecord]:
    if venue is None:
        return None
    return VenueRecord(
        id=venue.id,
        name=venue.name,
        address=venue.address,
        city=venue.city,
        country=venue.country,
        capacity=venue.capacity,
    )


def venue_from_record(record: Optional[VenueRecord]) -> Optional[Venue]:
    if record is None:
        return None
    return Venue(
        id=record.id,
        name=record.name,
        address=record.address,
        city=record.city,
        country=record.country,
        capacity=record.capacity,
    )


def copy_venue_onto_record(venue: Venue, record: VenueRecord) -> None:
    """Overwrite the mutable columns of ``record``; the id is left alone."""
    record.name = venue.name
    record.address = venue.address
    record.city = venue.city
    record.country = venue.country
    record.capacity = venue.capacity


def event_to_record(event: Optional[Event]) -> Optional[EventRecord]:
    if event is None:
        return None
    return EventRecord(
        id=event.id,
        name=event.name,
        description=event.description,
        event_date=event.event_date,
        capacity=event.capacity,
        price=event.price,
        venue_id=event.venue_id,
    )


def event_from_record(record: Optional[EventRecord]) -> Optional[Event]:
    if record is None:
        return None
    return Event(
        id=record.id,
        name=record.name,
        description=record.description,
        event_date=record.event_date,
        capacity=record.capacity,
        price=record.price,
        venue_id=record.venue_id,
    )


def copy_event_onto_record(event: Event, record: EventRecord) -> None:
    """Overwrite the mutable columns of ``record``; the id is left alone."""
    record.name = event.name
    record.description = event.description
    record.event_date = event.event_date
    record.capacity = event.capacity
    record.price = event.price
    record.venue_id = event.venue_id
