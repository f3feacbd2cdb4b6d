"""
Use case: List venues.

Input: None
Output: list[Venue] or a count
Side effects: None (read-only query).
Failure cases: None.
"""

from ticket_catalog.domain.catalog.entities import Venue
from ticket_catalog.domain.catalog.ports import VenueRepository


class ListVenuesUseCase:
    """Read-only queries over the whole venue catalog."""

    def __init__(self, venue_repo: VenueRepository) -> None:
        self._venue_repo = venue_repo

    def execute(self) -> list[Venue]:
        """Return all venues in insertion order."""
        return self._venue_repo.find_all()

    def count(self) -> int:
        """Return the total number of venues."""
        return self._venue_repo.count()
