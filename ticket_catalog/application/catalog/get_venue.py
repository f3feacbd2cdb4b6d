"""
Use case: Retrieve a single venue.

Input: venue id
Output: Venue
Side effects: None (read-only query).
Failure cases: VenueNotFoundError.
"""

from ticket_catalog.domain.catalog.entities import Venue
from ticket_catalog.domain.catalog.errors import VenueNotFoundError
from ticket_catalog.domain.catalog.ports import VenueRepository


class GetVenueUseCase:
    """Looks up one venue by id."""

    def __init__(self, venue_repo: VenueRepository) -> None:
        self._venue_repo = venue_repo

    def execute(self, venue_id: int) -> Venue:
        """Return the venue with the given id.

        Raises:
            VenueNotFoundError: If no venue has that id.
        """
        venue = self._venue_repo.find_by_id(venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue
