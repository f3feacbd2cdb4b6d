"""
Adapter: Relational catalog repositories.

Implements the VenueRepository and EventRepository ports with SQLAlchemy.
Each operation runs in its own session and transaction. Integrity errors
raised by the driver (duplicate keys, dangling foreign keys, NULLs) are
not caught here; they propagate to the web boundary unchanged.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from ticket_catalog.domain.catalog.entities import Event, Venue
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository
from ticket_catalog.infrastructure.catalog.mappers import (
    copy_event_onto_record,
    copy_venue_onto_record,
    event_from_record,
    event_to_record,
    venue_from_record,
    venue_to_record,
)
from ticket_catalog.infrastructure.catalog.records import EventRecord, VenueRecord

logger = logging.getLogger(__name__)


class SqlVenueRepository(VenueRepository):
    """Venue storage in the ``venues`` table."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def find_all(self) -> list[Venue]:
        with self._session_factory() as session:
            records = session.scalars(select(VenueRecord).order_by(VenueRecord.id))
            return [venue_from_record(record) for record in records]

    def find_by_id(self, venue_id: int) -> Optional[Venue]:
        with self._session_factory() as session:
            return venue_from_record(session.get(VenueRecord, venue_id))

    def save(self, venue: Venue) -> Venue:
        with self._session_factory.begin() as session:
            record = venue_to_record(venue)
            session.add(record)
            session.flush()
            logger.debug("Inserted venue row id=%d", record.id)
            return venue_from_record(record)

    def update(self, venue: Venue) -> Optional[Venue]:
        if venue.id is None:
            raise ValueError("Cannot update a venue without an id")
        with self._session_factory.begin() as session:
            record = session.get(VenueRecord, venue.id)
            if record is None:
                return None
            copy_venue_onto_record(venue, record)
            session.flush()
            return venue_from_record(record)

    def delete_by_id(self, venue_id: int) -> bool:
        with self._session_factory.begin() as session:
            record = session.get(VenueRecord, venue_id)
            if record is None:
                return False
            session.delete(record)
            session.flush()
            return True

    def exists_by_id(self, venue_id: int) -> bool:
        with self._session_factory() as session:
            query = select(VenueRecord.id).where(VenueRecord.id == venue_id)
            return session.scalar(query) is not None

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(VenueRecord))


class SqlEventRepository(EventRepository):
    """Event storage in the ``events`` table."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def find_all(self) -> list[Event]:
        with self._session_factory() as session:
            records = session.scalars(select(EventRecord).order_by(EventRecord.id))
            return [event_from_record(record) for record in records]

    def find_by_id(self, event_id: int) -> Optional[Event]:
        with self._session_factory() as session:
            return event_from_record(session.get(EventRecord, event_id))

    def find_by_venue_id(self, venue_id: int) -> list[Event]:
        with self._session_factory() as session:
            query = (
                select(EventRecord)
                .where(EventRecord.venue_id == venue_id)
                .order_by(EventRecord.id)
            )
            return [event_from_record(record) for record in session.scalars(query)]

    def save(self, event: Event) -> Event:
        with self._session_factory.begin() as session:
            record = event_to_record(event)
            session.add(record)
            session.flush()
            logger.debug("Inserted event row id=%d", record.id)
            return event_from_record(record)

    def update(self, event: Event) -> Optional[Event]:
        if event.id is None:
            raise ValueError("Cannot update an event without an id")
        with self._session_factory.begin() as session:
            record = session.get(EventRecord, event.id)
            if record is None:
                return None
            copy_event_onto_record(event, record)
            session.flush()
            return event_from_record(record)

    def delete_by_id(self, event_id: int) -> bool:
        with self._session_factory.begin() as session:
            record = session.get(EventRecord, event_id)
            if record is None:
                return False
            session.delete(record)
            session.flush()
            return True

    def exists_by_id(self, event_id: int) -> bool:
        with self._session_factory() as session:
            query = select(EventRecord.id).where(EventRecord.id == event_id)
            return session.scalar(query) is not None

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(EventRecord))
