"""
Use case: Retrieve a single event.

Input: event id
Output: Event
Side effects: None (read-only query).
Failure cases: EventNotFoundError.
"""

from ticket_catalog.domain.catalog.entities import Event
from ticket_catalog.domain.catalog.errors import EventNotFoundError
from ticket_catalog.domain.catalog.ports import EventRepository


class GetEventUseCase:
    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, event_id: int) -> Event:
        """Return the event with the given id.

        Raises:
            EventNotFoundError: If no event has that id.
        """
        event = self._event_repo.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
