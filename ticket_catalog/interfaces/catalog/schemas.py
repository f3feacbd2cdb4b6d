"""
Pydantic schemas for catalog API request/response validation.

These schemas enforce input validation and define the API contract.
JSON members are camelCase (``eventDate``, ``venueId``); snake_case
names are accepted on input as well.
No business logic belongs here.
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_MAX_LEN = 200
ADDRESS_MAX_LEN = 300
PLACE_MAX_LEN = 100
DESCRIPTION_MAX_LEN = 2000
# Largest value an INTEGER column holds on every supported database.
INT_MAX = 2_147_483_647


class CatalogSchema(BaseModel):
    """Base for catalog schemas: camelCase aliases, trimmed strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class VenueRequest(CatalogSchema):
    """Request schema for creating or replacing a venue.

    Attributes:
        name: Venue name (1-200 chars).
        address: Street address (1-300 chars).
        city: City (1-100 chars).
        country: Country (1-100 chars).
        capacity: Maximum attendance, strictly positive.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    address: str = Field(..., min_length=1, max_length=ADDRESS_MAX_LEN)
    city: str = Field(..., min_length=1, max_length=PLACE_MAX_LEN)
    country: str = Field(..., min_length=1, max_length=PLACE_MAX_LEN)
    capacity: int = Field(..., gt=0, le=INT_MAX, description="Maximum attendance")


class VenueResponse(CatalogSchema):
    """A stored venue."""

    id: int
    name: str
    address: str
    city: str
    country: str
    capacity: int


class EventRequest(CatalogSchema):
    """Request schema for creating or replacing an event.

    Attributes:
        name: Event name (1-200 chars).
        description: Optional free text.
        event_date: When the event takes place, normalized to naive UTC.
        capacity: Tickets available, strictly positive.
        price: Ticket price, strictly positive, two decimal places at most.
        venue_id: Identifier of an existing venue.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LEN)
    event_date: datetime = Field(..., description="Date and time of the event")
    capacity: int = Field(..., gt=0, le=INT_MAX, description="Tickets available")
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    venue_id: int = Field(..., gt=0, le=INT_MAX, description="Venue hosting the event")

    @field_validator("event_date")
    @classmethod
    def normalize_event_date(cls, v: datetime) -> datetime:
        """Event dates are kept as naive UTC; offset-aware input is converted."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class EventResponse(CatalogSchema):
    """A stored event."""

    id: int
    name: str
    description: str | None = None
    event_date: datetime
    capacity: int
    price: Decimal
    venue_id: int


class CountResponse(BaseModel):
    """Number of stored records."""

    count: int


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
