"""
Domain entities for the catalog bounded context.

Entities carry identity and are validated at construction time.
They contain no framework imports and no IO operations.
An entity whose ``id`` is None has not been stored yet; repositories
assign identifiers on save.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


def _require_text(field_name: str, value: str) -> None:
    if value is None or not str(value).strip():
        raise ValueError(f"{field_name} must not be blank")


def _require_positive(field_name: str, value) -> None:
    if value is None or value <= 0:
        raise ValueError(f"{field_name} must be greater than zero")


@dataclass(frozen=True)
class Venue:
    """A place where events are held."""

    name: str
    address: str
    city: str
    country: str
    capacity: int
    id: Optional[int] = None

    def __post_init__(self) -> None:
        _require_text("Venue name", self.name)
        _require_text("Venue address", self.address)
        _require_text("Venue city", self.city)
        _require_text("Venue country", self.country)
        _require_positive("Venue capacity", self.capacity)


@dataclass(frozen=True)
class Event:
    """A ticketed event scheduled at a venue.

    ``venue_id`` refers to a Venue by identifier. The reference is only
    checked when the event is created or updated.
    """

    name: str
    event_date: datetime
    capacity: int
    price: Decimal
    venue_id: int
    description: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self) -> None:
        _require_text("Event name", self.name)
        if self.event_date is None:
            raise ValueError("Event date is required")
        _require_positive("Event capacity", self.capacity)
        _require_positive("Event price", self.price)
        _require_positive("Venue id", self.venue_id)
