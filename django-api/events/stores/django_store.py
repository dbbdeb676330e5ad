"""Django ORM implementation of the EventStore."""

import logging
from contextlib import AbstractContextManager

from django.db import DatabaseError, IntegrityError, transaction

from events import models
from events.domain import (
    Asset,
    AssetId,
    Coordinates,
    Event,
    EventDraft,
    EventId,
    EventPeriod,
    Location,
    LocationId,
    Member,
    UserId,
)
from events.domain.errors import PersistenceFailedError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _to_location(row: models.Location) -> Location:
    return Location(
        id=LocationId(row.id),
        name=row.name,
        coordinates=Coordinates(latitude=row.latitude, longitude=row.longitude),
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        creator_id=UserId(row.creator_id),
        title=row.title,
        description=row.description,
        period=EventPeriod(start=row.start_date, end=row.end_date),
        location=_to_location(row.location),
        is_private=row.is_private,
        created_at=row.created_at,
    )


def _to_asset(row: models.Asset) -> Asset:
    return Asset(
        id=AssetId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        url=row.url,
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def transaction(self) -> AbstractContextManager:
        return transaction.atomic()

    def list_events(self) -> list[Event]:
        rows = models.Event.objects.select_related("location").order_by("created_at")
        return [_to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = (
            models.Event.objects.select_related("location")
            .filter(pk=event_id.value)
            .first()
        )
        return _to_event(row) if row is not None else None

    def create_location(self, name: str, coordinates: Coordinates) -> Location:
        try:
            row = models.Location.objects.create(
                name=name,
                latitude=coordinates.latitude,
                longitude=coordinates.longitude,
            )
        except DatabaseError as exc:
            logger.exception("Failed to save location %r", name)
            raise PersistenceFailedError("create_location") from exc
        return _to_location(row)

    def create_event(
        self, draft: EventDraft, creator_id: UserId, location: Location
    ) -> Event:
        try:
            row = models.Event.objects.create(
                creator_id=creator_id.value,
                title=draft.title,
                description=draft.description,
                start_date=draft.period.start,
                end_date=draft.period.end,
                location_id=location.id.value,
                is_private=draft.is_private,
            )
        except DatabaseError as exc:
            logger.exception("Failed to save event %r", draft.title)
            raise PersistenceFailedError("create_event") from exc
        return Event(
            id=EventId(row.id),
            creator_id=creator_id,
            title=row.title,
            description=row.description,
            period=draft.period,
            location=location,
            is_private=row.is_private,
            created_at=row.created_at,
        )

    def add_participant(self, event_id: EventId, user_id: UserId) -> bool:
        try:
            # Savepoint so a duplicate does not poison an enclosing transaction.
            with transaction.atomic():
                models.Participation.objects.create(
                    event_id=event_id.value, user_id=user_id.value
                )
        except IntegrityError:
            return False
        except DatabaseError as exc:
            logger.exception("Failed to add participant to event %s", event_id)
            raise PersistenceFailedError("add_participant") from exc
        return True

    def is_participant(self, event_id: EventId, user_id: UserId) -> bool:
        return models.Participation.objects.filter(
            event_id=event_id.value, user_id=user_id.value
        ).exists()

    def list_participants(self, event_id: EventId) -> list[Member]:
        rows = (
            models.Participation.objects.filter(event_id=event_id.value)
            .select_related("user")
            .order_by("id")
        )
        return [
            Member(id=UserId(row.user_id), username=row.user.get_username())
            for row in rows
        ]

    def add_asset(self, event_id: EventId, name: str, url: str) -> Asset:
        try:
            row = models.Asset.objects.create(
                event_id=event_id.value, name=name, url=url
            )
        except DatabaseError as exc:
            logger.exception("Failed to save asset %s for event %s", url, event_id)
            raise PersistenceFailedError("add_asset") from exc
        return _to_asset(row)

    def list_assets(self, event_id: EventId) -> list[Asset]:
        rows = models.Asset.objects.filter(event_id=event_id.value).order_by(
            "created_at"
        )
        return [_to_asset(row) for row in rows]
