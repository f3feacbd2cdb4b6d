"""
Use case: List events, optionally restricted to one venue.

Input: None, or a venue id
Output: list[Event] or a count
Side effects: None (read-only query).
Failure cases: None. An unknown venue id yields an empty list.
"""

from ticket_catalog.domain.catalog.entities import Event
from ticket_catalog.domain.catalog.ports import EventRepository


class ListEventsUseCase:
    """Read-only queries over the event catalog."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self) -> list[Event]:
        """Return all events in insertion order."""
        return self._event_repo.find_all()

    def execute_by_venue(self, venue_id: int) -> list[Event]:
        """Return the events held at the given venue."""
        return self._event_repo.find_by_venue_id(venue_id)

    def count(self) -> int:
        """Return the total number of events."""
        return self._event_repo.count()
