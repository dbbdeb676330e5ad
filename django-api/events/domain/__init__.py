from events.domain.models import Asset, Event, EventDraft, Location, Member
from events.domain.value_objects import (
    AssetId,
    Coordinates,
    EventId,
    EventPeriod,
    LocationId,
    UserId,
    parse_event_date,
)

__all__ = [
    "Asset",
    "Event",
    "EventDraft",
    "Location",
    "Member",
    "AssetId",
    "EventId",
    "LocationId",
    "UserId",
    "Coordinates",
    "EventPeriod",
    "parse_event_date",
]
