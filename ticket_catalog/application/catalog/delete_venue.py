"""
Use case: Remove a venue.

Input: venue id
Output: None
Side effects: Deletes the venue. Events referencing it are left untouched.
Failure cases: VenueNotFoundError.
"""

import logging

from ticket_catalog.domain.catalog.errors import VenueNotFoundError
from ticket_catalog.domain.catalog.ports import VenueRepository

logger = logging.getLogger(__name__)


class DeleteVenueUseCase:
    """Deletes a venue by id."""

    def __init__(self, venue_repo: VenueRepository) -> None:
        self._venue_repo = venue_repo

    def execute(self, venue_id: int) -> None:
        """Delete the venue with the given id.

        Raises:
            VenueNotFoundError: If no venue has that id.
        """
        if not self._venue_repo.delete_by_id(venue_id):
            raise VenueNotFoundError(venue_id)
        logger.info("Deleted venue id=%d", venue_id)
