"""
Use case: Register a new venue.

Input: Venue (unsaved)
Output: Venue with its assigned id
Side effects: Persists the venue.
Failure cases: None beyond storage errors.
"""

import logging
from dataclasses import replace

from ticket_catalog.domain.catalog.entities import Venue
from ticket_catalog.domain.catalog.ports import VenueRepository

logger = logging.getLogger(__name__)


class CreateVenueUseCase:
    """Stores a new venue through the VenueRepository port."""

    def __init__(self, venue_repo: VenueRepository) -> None:
        self._venue_repo = venue_repo

    def execute(self, venue: Venue) -> Venue:
        """Run the create venue use case.

        Args:
            venue: The venue to store. Any id it carries is discarded.

        Returns:
            The stored venue with its server-assigned id.
        """
        saved = self._venue_repo.save(replace(venue, id=None))
        logger.info("Created venue id=%d name=%s", saved.id, saved.name)
        return saved
