"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import (
    AssetId,
    Coordinates,
    EventId,
    EventPeriod,
    LocationId,
    UserId,
)


@dataclass(frozen=True)
class Member:
    """A user as seen by the event core."""

    id: UserId
    username: str


@dataclass(frozen=True)
class Location:
    """Domain representation of a Location."""

    id: LocationId
    name: str
    coordinates: Coordinates


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    creator_id: UserId
    title: str
    description: str
    period: EventPeriod
    location: Location
    is_private: bool
    created_at: datetime


@dataclass(frozen=True)
class EventDraft:
    """Validated input for a new event, before it is persisted."""

    title: str
    description: str
    period: EventPeriod
    location_label: str
    is_private: bool


@dataclass(frozen=True)
class Asset:
    """Domain representation of an uploaded Asset."""

    id: AssetId
    event_id: EventId
    name: str
    url: str
    created_at: datetime
