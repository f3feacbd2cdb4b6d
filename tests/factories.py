"""Builders for catalog entities, settings and request payloads."""

from datetime import datetime
from decimal import Decimal

from ticket_catalog.core.config import Settings
from ticket_catalog.domain.catalog.entities import Event, Venue

VENUE_PAYLOAD = {
    "name": "Olympia Hall",
    "address": "28 Boulevard des Capucines",
    "city": "Paris",
    "country": "France",
    "capacity": 1500,
}

EVENT_PAYLOAD = {
    "name": "Jazz Night",
    "description": "An evening of live jazz",
    "eventDate": "2026-12-15T20:00:00",
    "capacity": 300,
    "price": "49.90",
    "venueId": 1,
}


def make_settings(**overrides) -> Settings:
    """Settings isolated from the environment's .env file."""
    values = {"rate_limit_enabled": False, "storage_backend": "memory"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_venue(**overrides) -> Venue:
    values = {
        "name": "Olympia Hall",
        "address": "28 Boulevard des Capucines",
        "city": "Paris",
        "country": "France",
        "capacity": 1500,
    }
    values.update(overrides)
    return Venue(**values)


def make_event(**overrides) -> Event:
    values = {
        "name": "Jazz Night",
        "event_date": datetime(2026, 12, 15, 20, 0),
        "capacity": 300,
        "price": Decimal("49.90"),
        "venue_id": 1,
    }
    values.update(overrides)
    return Event(**values)
