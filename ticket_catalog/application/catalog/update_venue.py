"""
Use case: Replace an existing venue.

Input: venue id, Venue carrying the full replacement state
Output: the updated Venue
Side effects: Overwrites the stored venue.
Failure cases: VenueNotFoundError. Never creates a venue.
"""

import logging
from dataclasses import replace

from ticket_catalog.domain.catalog.entities import Venue
from ticket_catalog.domain.catalog.errors import VenueNotFoundError
from ticket_catalog.domain.catalog.ports import VenueRepository

logger = logging.getLogger(__name__)


class UpdateVenueUseCase:
    """Full-replace update of a venue.

    Existence is checked first so that an unknown id surfaces as
    VenueNotFoundError instead of silently inserting a new venue.
    """

    def __init__(self, venue_repo: VenueRepository) -> None:
        self._venue_repo = venue_repo

    def execute(self, venue_id: int, venue: Venue) -> Venue:
        """Run the update venue use case.

        Args:
            venue_id: Identifier of the venue to replace.
            venue: Replacement state. Its own id is ignored.

        Returns:
            The venue as stored after the update.

        Raises:
            VenueNotFoundError: If no venue has that id.
        """
        if not self._venue_repo.exists_by_id(venue_id):
            raise VenueNotFoundError(venue_id)

        updated = self._venue_repo.update(replace(venue, id=venue_id))
        # Deleted between the existence check and the write.
        if updated is None:
            raise VenueNotFoundError(venue_id)

        logger.info("Updated venue id=%d", venue_id)
        return updated
