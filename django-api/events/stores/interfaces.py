"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from events.domain import (
    Asset,
    Coordinates,
    Event,
    EventDraft,
    EventId,
    Location,
    Member,
    UserId,
)


class EventStore(ABC):
    """Interface for event persistence operations.

    Write methods raise PersistenceFailedError when the backend fails.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Return a context manager grouping writes into one unit."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_location(self, name: str, coordinates: Coordinates) -> Location:
        """Persist a new location."""
        ...

    @abstractmethod
    def create_event(
        self, draft: EventDraft, creator_id: UserId, location: Location
    ) -> Event:
        """Persist a new event owned by creator_id."""
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, user_id: UserId) -> bool:
        """Attach a user to an event if not already attached.

        Returns False, without writing, when the pair already exists.
        """
        ...

    @abstractmethod
    def is_participant(self, event_id: EventId, user_id: UserId) -> bool:
        """Check if a user is attached to an event."""
        ...

    @abstractmethod
    def list_participants(self, event_id: EventId) -> list[Member]:
        """Return an event's participants in join order."""
        ...

    @abstractmethod
    def add_asset(self, event_id: EventId, name: str, url: str) -> Asset:
        """Persist an asset owned by an event."""
        ...

    @abstractmethod
    def list_assets(self, event_id: EventId) -> list[Asset]:
        """Return an event's assets in insertion order."""
        ...
