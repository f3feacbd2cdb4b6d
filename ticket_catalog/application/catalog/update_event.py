"""
Use case: Replace an existing event.

Input: event id, Event carrying the full replacement state
Output: the updated Event
Side effects: Overwrites the stored event.
Failure cases: EventNotFoundError, VenueNotFoundError. Never creates an event.
"""

import logging
from dataclasses import replace

from ticket_catalog.domain.catalog.entities import Event
from ticket_catalog.domain.catalog.errors import EventNotFoundError, VenueNotFoundError
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository

logger = logging.getLogger(__name__)


class UpdateEventUseCase:
    """Full-replace update of an event.

    The target event is checked first, then the (possibly new) venue
    reference, so a move to a missing venue is rejected like a create.
    """

    def __init__(
        self, event_repo: EventRepository, venue_repo: VenueRepository
    ) -> None:
        self._event_repo = event_repo
        self._venue_repo = venue_repo

    def execute(self, event_id: int, event: Event) -> Event:
        """Run the update event use case.

        Args:
            event_id: Identifier of the event to replace.
            event: Replacement state. Its own id is ignored.

        Returns:
            The event as stored after the update.

        Raises:
            EventNotFoundError: If no event has that id.
            VenueNotFoundError: If the referenced venue does not exist.
        """
        if not self._event_repo.exists_by_id(event_id):
            raise EventNotFoundError(event_id)
        if not self._venue_repo.exists_by_id(event.venue_id):
            raise VenueNotFoundError(event.venue_id)

        updated = self._event_repo.update(replace(event, id=event_id))
        if updated is None:
            raise EventNotFoundError(event_id)

        logger.info("Updated event id=%d", event_id)
        return updated
