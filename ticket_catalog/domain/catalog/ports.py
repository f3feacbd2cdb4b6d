"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the persistence contracts the use cases require.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ticket_catalog.domain.catalog.entities import Event, Venue


class VenueRepository(ABC):
    """Port for persisting and retrieving venues."""

    @abstractmethod
    def find_all(self) -> list[Venue]:
        """Return every venue in insertion order.

        The returned list is a snapshot; callers may iterate it while
        other requests write.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, venue_id: int) -> Optional[Venue]:
        """Return a venue by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, venue: Venue) -> Venue:
        """Persist a new venue and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def update(self, venue: Venue) -> Optional[Venue]:
        """Replace the stored venue carrying the same ID.

        Returns:
            The updated venue, or None when no venue has that ID.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, venue_id: int) -> bool:
        """Remove a venue. Returns True if it existed."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, venue_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError


class EventRepository(ABC):
    """Port for persisting and retrieving events."""

    @abstractmethod
    def find_all(self) -> list[Event]:
        """Return every event in insertion order as a snapshot."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, event_id: int) -> Optional[Event]:
        """Return an event by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_by_venue_id(self, venue_id: int) -> list[Event]:
        """Return the events whose venue reference matches ``venue_id``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, event: Event) -> Event:
        """Persist a new event and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def update(self, event: Event) -> Optional[Event]:
        """Replace the stored event carrying the same ID.

        Returns:
            The updated event, or None when no event has that ID.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, event_id: int) -> bool:
        """Remove an event. Returns True if it existed."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, event_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
