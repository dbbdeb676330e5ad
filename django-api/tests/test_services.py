"""Unit tests for EventService.

These test invariants, authorization and domain error mapping against
in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import uuid

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

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


def photo(content: bytes = b"\x89PNG data") -> SimpleUploadedFile:
    return SimpleUploadedFile("photo.png", content, content_type="image/png")


class TestCreateEvent:
    """Tests for EventService.create_event."""

    def test_creator_is_first_participant(self, service, store, alice, meetup_payload):
        event = service.create_event(alice, meetup_payload)

        assert event.creator_id == alice.id
        assert store.is_participant(event.id, alice.id)
        assert service.list_members(str(event.id.value)) == [alice]

    def test_parses_dates_and_location(self, service, alice, meetup_payload):
        event = service.create_event(alice, meetup_payload)

        assert event.period.start.isoformat() == "2024-06-01"
        assert event.period.end.isoformat() == "2024-06-02"
        assert event.location.name == "Sofia"
        assert event.location.coordinates.latitude == 42.0

    def test_each_event_gets_a_fresh_location(self, service, store, alice, meetup_payload):
        service.create_event(alice, meetup_payload)
        service.create_event(alice, meetup_payload)

        assert len(store.locations) == 2

    def test_blank_location_falls_back_to_default(self, service, alice, meetup_payload):
        meetup_payload["location"] = "  "
        event = service.create_event(alice, meetup_payload)

        assert event.location.name == "Sofia"

    @pytest.mark.parametrize(
        "field", ["title", "description", "startDate", "endDate", "location", "isPrivate"]
    )
    def test_missing_field_is_invalid(self, service, alice, meetup_payload, field):
        del meetup_payload[field]
        with pytest.raises(InvalidEventPayloadError) as excinfo:
            service.create_event(alice, meetup_payload)
        assert excinfo.value.field == field

    @pytest.mark.parametrize(
        "field,value",
        [
            ("title", "   "),
            ("startDate", "2024-06-01"),
            ("endDate", "32.06.2024"),
            ("isPrivate", "false"),
        ],
    )
    def test_malformed_field_is_invalid(self, service, alice, meetup_payload, field, value):
        meetup_payload[field] = value
        with pytest.raises(InvalidEventPayloadError) as excinfo:
            service.create_event(alice, meetup_payload)
        assert excinfo.value.field == field

    def test_end_before_start_is_invalid(self, service, alice, meetup_payload):
        meetup_payload["endDate"] = "31.05.2024"
        with pytest.raises(InvalidEventPayloadError):
            service.create_event(alice, meetup_payload)

    def test_non_object_body_is_invalid(self, service, alice):
        with pytest.raises(InvalidEventPayloadError):
            service.create_event(alice, ["Meetup"])

    def test_invalid_payload_writes_nothing(self, service, store, alice, meetup_payload):
        meetup_payload["startDate"] = "tomorrow"
        with pytest.raises(InvalidEventPayloadError):
            service.create_event(alice, meetup_payload)
        assert store.events == {}
        assert store.locations == []


class TestListing:
    """Tests for public and nearby listings."""

    def test_public_listing_excludes_private_events(self, service, alice, meetup_payload):
        public = service.create_event(alice, meetup_payload)
        hidden = service.create_event(alice, {**meetup_payload, "isPrivate": True})

        listed = service.list_public_events()

        assert public in listed
        assert hidden not in listed

    def test_nearby_without_location_returns_everything(self, service, alice, meetup_payload):
        service.create_event(alice, meetup_payload)
        service.create_event(alice, {**meetup_payload, "isPrivate": True})

        assert len(service.list_nearby_events()) == 2

    def test_nearby_filters_by_location_name(self, service, alice, meetup_payload):
        sofia = service.create_event(alice, meetup_payload)
        service.create_event(alice, {**meetup_payload, "location": "Plovdiv"})

        assert service.list_nearby_events("sofia") == [sofia]


class TestMembership:
    """Tests for join_event and list_members."""

    def test_second_user_joins_once(self, service, alice, bob, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        event_id = str(event.id.value)

        assert service.join_event(event_id, bob) == event
        assert service.list_members(event_id) == [alice, bob]

        with pytest.raises(AlreadyParticipantError):
            service.join_event(event_id, bob)
        assert len(service.list_members(event_id)) == 2

    def test_creator_cannot_join_again(self, service, alice, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(AlreadyParticipantError):
            service.join_event(str(event.id.value), alice)

    def test_join_unknown_event(self, service, bob):
        with pytest.raises(EventNotFoundError):
            service.join_event(str(uuid.uuid4()), bob)

    def test_join_invalid_id(self, service, bob):
        with pytest.raises(InvalidEventIdError):
            service.join_event("42", bob)

    def test_list_members_unknown_event_is_invalid_request(self, service):
        with pytest.raises(UnknownEventError):
            service.list_members(str(uuid.uuid4()))

    def test_list_members_invalid_id(self, service):
        with pytest.raises(InvalidEventIdError):
            service.list_members("")


class TestAssets:
    """Tests for list_assets and upload_asset."""

    def test_upload_records_asset_under_event_folder(
        self, service, uploader, alice, meetup_payload
    ):
        event = service.create_event(alice, meetup_payload)

        asset = service.upload_asset(str(event.id.value), alice, photo())

        assert asset.url == f"assets/{event.id.value}/{asset.name}"
        assert uploader.files[asset.url] == b"\x89PNG data"
        assert service.list_assets(str(event.id.value), alice) == [asset]

    def test_joined_participant_sees_assets(self, service, alice, bob, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        event_id = str(event.id.value)
        asset = service.upload_asset(event_id, alice, photo())
        service.join_event(event_id, bob)

        assert service.list_assets(event_id, bob) == [asset]

    def test_assets_listed_in_upload_order(self, service, alice, meetup_payload):
        event_id = str(service.create_event(alice, meetup_payload).id.value)
        first = service.upload_asset(event_id, alice, photo(b"one"))
        second = service.upload_asset(event_id, alice, photo(b"two"))

        assert service.list_assets(event_id, alice) == [first, second]

    def test_non_participant_cannot_list_assets(self, service, alice, bob, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(NotParticipantError):
            service.list_assets(str(event.id.value), bob)

    def test_non_participant_cannot_upload(self, service, uploader, alice, bob, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(NotParticipantError):
            service.upload_asset(str(event.id.value), bob, photo())
        assert uploader.files == {}

    def test_non_participant_rejected_before_file_checks(
        self, service, alice, bob, meetup_payload
    ):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(NotParticipantError):
            service.upload_asset(str(event.id.value), bob, None)

    def test_upload_to_unknown_event(self, service, alice):
        with pytest.raises(EventNotFoundError):
            service.upload_asset(str(uuid.uuid4()), alice, photo())

    @pytest.mark.parametrize("file_part", [None, SimpleUploadedFile("empty.png", b"")])
    def test_upload_requires_non_empty_file(self, service, alice, meetup_payload, file_part):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(MissingFileError):
            service.upload_asset(str(event.id.value), alice, file_part)

    def test_upload_enforces_size_limit(self, service, uploader, alice, meetup_payload):
        event = service.create_event(alice, meetup_payload)
        with pytest.raises(FileTooLargeError):
            service.upload_asset(str(event.id.value), alice, photo(b"x" * 1025))
        assert uploader.files == {}

    def test_failed_asset_save_removes_written_file(
        self, service, store, uploader, alice, meetup_payload
    ):
        event = service.create_event(alice, meetup_payload)
        store.fail_asset_writes = True

        with pytest.raises(PersistenceFailedError):
            service.upload_asset(str(event.id.value), alice, photo())

        assert uploader.files == {}
        assert store.list_assets(event.id) == []
