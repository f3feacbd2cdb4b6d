"""
Use case: Remove an event.

Input: event id
Output: None
Side effects: Deletes the event.
Failure cases: EventNotFoundError.
"""

import logging

from ticket_catalog.domain.catalog.errors import EventNotFoundError
from ticket_catalog.domain.catalog.ports import EventRepository

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    """Deletes an event by id."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def execute(self, event_id: int) -> None:
        """Delete the event with the given id.

        Raises:
            EventNotFoundError: If no event has that id.
        """
        if not self._event_repo.delete_by_id(event_id):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event id=%d", event_id)
