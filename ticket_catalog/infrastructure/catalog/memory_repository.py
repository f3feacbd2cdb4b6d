"""
Adapter: In-memory catalog repositories.

Implements the VenueRepository and EventRepository ports on top of a
plain list guarded by a single lock. Concurrent saves never receive the
same id, and readers get a copy of the list taken under the lock.
"""

import itertools
import threading
from dataclasses import replace
from typing import Callable, Generic, Optional, TypeVar

from ticket_catalog.domain.catalog.entities import Event, Venue
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository

T = TypeVar("T", Venue, Event)


class _InMemoryStore(Generic[T]):
    """List-backed storage shared by both in-memory repositories.

    One lock covers id assignment, every write and the read snapshot, so
    a write always lands on the record whose id it names.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def all(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self.all() if predicate(item)]

    def get(self, item_id: int) -> Optional[T]:
        for item in self.all():
            if item.id == item_id:
                return item
        return None

    def add(self, item: T) -> T:
        with self._lock:
            if item.id is None:
                item = replace(item, id=next(self._ids))
            self._items.append(item)
            return item

    def replace(self, item: T) -> Optional[T]:
        if item.id is None:
            raise ValueError("Cannot update a record without an id")
        with self._lock:
            for index, current in enumerate(self._items):
                if current.id == item.id:
                    self._items[index] = item
                    return item
            return None

    def remove(self, item_id: int) -> bool:
        with self._lock:
            for index, current in enumerate(self._items):
                if current.id == item_id:
                    del self._items[index]
                    return True
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class InMemoryVenueRepository(VenueRepository):
    """Process-local venue storage. Contents are lost on restart."""

    def __init__(self) -> None:
        self._store: _InMemoryStore[Venue] = _InMemoryStore()

    def find_all(self) -> list[Venue]:
        return self._store.all()

    def find_by_id(self, venue_id: int) -> Optional[Venue]:
        return self._store.get(venue_id)

    def save(self, venue: Venue) -> Venue:
        return self._store.add(venue)

    def update(self, venue: Venue) -> Optional[Venue]:
        return self._store.replace(venue)

    def delete_by_id(self, venue_id: int) -> bool:
        return self._store.remove(venue_id)

    def exists_by_id(self, venue_id: int) -> bool:
        return self._store.get(venue_id) is not None

    def count(self) -> int:
        return len(self._store)


class InMemoryEventRepository(EventRepository):
    """Process-local event storage. Contents are lost on restart."""

    def __init__(self) -> None:
        self._store: _InMemoryStore[Event] = _InMemoryStore()

    def find_all(self) -> list[Event]:
        return self._store.all()

    def find_by_id(self, event_id: int) -> Optional[Event]:
        return self._store.get(event_id)

    def find_by_venue_id(self, venue_id: int) -> list[Event]:
        return self._store.filter(lambda event: event.venue_id == venue_id)

    def save(self, event: Event) -> Event:
        return self._store.add(event)

    def update(self, event: Event) -> Optional[Event]:
        return self._store.replace(event)

    def delete_by_id(self, event_id: int) -> bool:
        return self._store.remove(event_id)

    def exists_by_id(self, event_id: int) -> bool:
        return self._store.get(event_id) is not None

    def count(self) -> int:
        return len(self._store)
