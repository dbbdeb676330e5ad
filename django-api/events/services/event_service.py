"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores, uploaders)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from django.core.files.uploadedfile import UploadedFile

from events.domain import (
    Asset,
    Coordinates,
    Event,
    EventDraft,
    EventId,
    EventPeriod,
    Member,
    parse_event_date,
)
from events.domain.errors import (
    AlreadyParticipantError,
    EventNotFoundError,
    FileTooLargeError,
    InvalidEventIdError,
    InvalidEventPayloadError,
    MissingFileError,
    NotParticipantError,
    PersistenceFailedError,
    UnknownEventError,
)
from events.stores.interfaces import EventStore
from events.uploads.interfaces import AssetUploader

logger = logging.getLogger(__name__)

DEFAULT_COORDINATES = Coordinates(latitude=42.0, longitude=21.0)


def asset_folder(event_id: EventId) -> str:
    """Logical storage folder for an event's assets."""
    return f"assets/{event_id.value}"


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def _text_field(payload: Mapping[str, Any], field: str, *, required: bool) -> str:
    value = payload.get(field)
    if not isinstance(value, str):
        raise InvalidEventPayloadError(field, "expected a string")
    if required and not value.strip():
        raise InvalidEventPayloadError(field, "must not be empty")
    return value


def _date_field(payload: Mapping[str, Any], field: str) -> date:
    try:
        return parse_event_date(payload.get(field))
    except ValueError as exc:
        raise InvalidEventPayloadError(field, "expected a dd.MM.yyyy date") from exc


def parse_event_draft(payload: Any) -> EventDraft:
    """Validate a creation payload into an EventDraft.

    Raises:
        InvalidEventPayloadError: Naming the first missing or malformed field.
    """
    if not isinstance(payload, Mapping):
        raise InvalidEventPayloadError("body", "expected a JSON object")

    title = _text_field(payload, "title", required=True)
    description = _text_field(payload, "description", required=False)
    start = _date_field(payload, "startDate")
    end = _date_field(payload, "endDate")
    location_label = _text_field(payload, "location", required=False)
    is_private = payload.get("isPrivate")
    if not isinstance(is_private, bool):
        raise InvalidEventPayloadError("isPrivate", "expected a boolean")

    try:
        period = EventPeriod(start=start, end=end)
    except ValueError as exc:
        raise InvalidEventPayloadError("endDate", "must not precede startDate") from exc

    return EventDraft(
        title=title.strip(),
        description=description,
        period=period,
        location_label=location_label.strip(),
        is_private=is_private,
    )


class EventService:
    """Service for event membership, creation, listing and asset uploads."""

    def __init__(
        self,
        store: EventStore,
        uploader: AssetUploader,
        *,
        max_upload_size: int | None = None,
        default_location_name: str = "Sofia",
        default_coordinates: Coordinates = DEFAULT_COORDINATES,
    ) -> None:
        self._store = store
        self._uploader = uploader
        self._max_upload_size = max_upload_size
        self._default_location_name = default_location_name
        self._default_coordinates = default_coordinates

    def _require_event(self, event_id: str) -> Event:
        event = self._store.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _require_participant(self, event: Event, member: Member) -> None:
        if not self._store.is_participant(event.id, member.id):
            logger.info(
                "User %s is not a participant of event %s", member.id.value, event.id
            )
            raise NotParticipantError(str(event.id))

    # Listing

    def list_public_events(self) -> list[Event]:
        """Return every event that is not private."""
        return [event for event in self._store.list_events() if not event.is_private]

    def list_nearby_events(self, location_name: str | None = None) -> list[Event]:
        """Return events, optionally only those at a named location.

        Without a location name every event is returned.
        """
        events = self._store.list_events()
        if not location_name or not location_name.strip():
            return events
        wanted = location_name.strip().casefold()
        return [e for e in events if e.location.name.casefold() == wanted]

    # Membership

    def list_members(self, event_id: str) -> list[Member]:
        """Return the participants of an event in join order.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            UnknownEventError: If the event does not exist.
        """
        parsed = _parse_event_id(event_id)
        if self._store.get_event(parsed) is None:
            raise UnknownEventError(event_id)
        return self._store.list_participants(parsed)

    def join_event(self, event_id: str, member: Member) -> Event:
        """Add member to the event's participants.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            AlreadyParticipantError: If member already participates.
        """
        event = self._require_event(event_id)
        if not self._store.add_participant(event.id, member.id):
            logger.info("User %s already joined event %s", member.id.value, event.id)
            raise AlreadyParticipantError(str(event.id))
        logger.info("User %s joined event %s", member.id.value, event.id)
        return event

    # Assets

    def list_assets(self, event_id: str, member: Member) -> list[Asset]:
        """Return the event's assets; participants only.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotParticipantError: If member does not participate.
        """
        event = self._require_event(event_id)
        self._require_participant(event, member)
        return self._store.list_assets(event.id)

    def upload_asset(
        self, event_id: str, member: Member, file_part: UploadedFile | None
    ) -> Asset:
        """Store an uploaded file and record it as an asset of the event.

        Bytes are written first. If the asset record cannot be saved, the
        written file is deleted again and the persistence error re-raised.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            NotParticipantError: If member does not participate.
            MissingFileError: If no file or an empty file was sent.
            FileTooLargeError: If the file exceeds the configured limit.
            UploadFailedError: If storage rejected the bytes.
            PersistenceFailedError: If the asset record could not be saved.
        """
        event = self._require_event(event_id)
        self._require_participant(event, member)
        if file_part is None or not file_part.size:
            raise MissingFileError()
        if self._max_upload_size and file_part.size > self._max_upload_size:
            raise FileTooLargeError(self._max_upload_size)

        folder = asset_folder(event.id)
        name = self._uploader.upload_file(file_part, folder)
        url = f"{folder}/{name}"
        try:
            asset = self._store.add_asset(event.id, name=name, url=url)
        except PersistenceFailedError:
            self._discard_orphan(folder, name)
            raise
        logger.info(
            "User %s uploaded %s to event %s", member.id.value, asset.url, event.id
        )
        return asset

    def _discard_orphan(self, folder: str, name: str) -> None:
        try:
            self._uploader.delete_file(folder, name)
        except OSError:
            logger.exception("Orphaned asset file left at %s/%s", folder, name)
        else:
            logger.warning("Removed asset file %s/%s after failed save", folder, name)

    # Creation

    def create_event(self, member: Member, payload: Any) -> Event:
        """Create an event with member as creator and first participant.

        Raises:
            InvalidEventPayloadError: If a field is missing or malformed.
            PersistenceFailedError: If the event could not be saved.
        """
        draft = parse_event_draft(payload)
        location_name = draft.location_label or self._default_location_name
        with self._store.transaction():
            location = self._store.create_location(
                location_name, self._default_coordinates
            )
            event = self._store.create_event(draft, member.id, location)
            self._store.add_participant(event.id, member.id)
        logger.info("User %s created event %s", member.id.value, event.id)
        return event
