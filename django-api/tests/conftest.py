"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from events.domain import Member, UserId
from events.services import EventService
from fakes import InMemoryAssetUploader, InMemoryEventStore

MEETUP_PAYLOAD = {
    "title": "Meetup",
    "description": "Monthly meetup",
    "startDate": "01.06.2024",
    "endDate": "02.06.2024",
    "location": "Sofia",
    "isPrivate": False,
}


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def meetup_payload() -> dict:
    return dict(MEETUP_PAYLOAD)


@pytest.fixture
def alice() -> Member:
    return Member(id=UserId(1), username="alice")


@pytest.fixture
def bob() -> Member:
    return Member(id=UserId(2), username="bob")


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore(usernames={1: "alice", 2: "bob"})


@pytest.fixture
def uploader() -> InMemoryAssetUploader:
    return InMemoryAssetUploader()


@pytest.fixture
def service(store, uploader) -> EventService:
    return EventService(store, uploader, max_upload_size=1024)


@pytest.fixture
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path
