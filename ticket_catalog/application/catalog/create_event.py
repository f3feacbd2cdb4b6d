"""
Use case: Schedule a new event at an existing venue.

Input: Event (unsaved)
Output: Event with its assigned id
Side effects: Persists the event.
Failure cases: VenueNotFoundError when the referenced venue does not exist.
"""

import logging
from dataclasses import replace

from ticket_catalog.domain.catalog.entities import Event
from ticket_catalog.domain.catalog.errors import VenueNotFoundError
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Orchestrates event creation.

    The referenced venue must exist at the moment of creation;
    nothing is stored otherwise.
    """

    def __init__(
        self, event_repo: EventRepository, venue_repo: VenueRepository
    ) -> None:
        self._event_repo = event_repo
        self._venue_repo = venue_repo

    def execute(self, event: Event) -> Event:
        """Run the create event use case.

        Args:
            event: The event to store. Any id it carries is discarded.

        Returns:
            The stored event with its server-assigned id.

        Raises:
            VenueNotFoundError: If ``event.venue_id`` does not resolve.
        """
        if not self._venue_repo.exists_by_id(event.venue_id):
            raise VenueNotFoundError(event.venue_id)

        saved = self._event_repo.save(replace(event, id=None))
        logger.info(
            "Created event id=%d venue_id=%d name=%s",
            saved.id,
            saved.venue_id,
            saved.name,
        )
        return saved
