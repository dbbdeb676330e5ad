"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self
from uuid import UUID

EVENT_DATE_FORMAT = "%d.%m.%Y"

_EVENT_DATE_PATTERN = re.compile(r"\d{2}\.\d{2}\.\d{4}")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AssetId:
    """Unique identifier for an Asset."""

    value: UUID


@dataclass(frozen=True)
class LocationId:
    """Unique identifier for a Location."""

    value: UUID


@dataclass(frozen=True)
class UserId:
    """Identifier of a user owned by the identity provider."""

    value: int


def parse_event_date(value: str) -> date:
    """Parse a strict dd.MM.yyyy date string.

    Raises:
        ValueError: If the value is not a real calendar date in that format.
    """
    if not isinstance(value, str) or not _EVENT_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Expected a dd.MM.yyyy date, got {value!r}")
    return datetime.strptime(value, EVENT_DATE_FORMAT).date()


@dataclass(frozen=True)
class EventPeriod:
    """Start and end day of an event."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Event cannot end before it starts")


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")
