from django.conf import settings

from events.domain import Coordinates
from events.services.event_service import EventService
from events.stores import DjangoEventStore
from events.uploads import StorageAssetUploader

__all__ = ["EventService", "build_event_service"]


def build_event_service() -> EventService:
    """Wire an EventService to the configured ORM store and file storage."""
    location = settings.EVENTS_DEFAULT_LOCATION
    return EventService(
        DjangoEventStore(),
        StorageAssetUploader(),
        max_upload_size=settings.EVENTS_MAX_UPLOAD_SIZE or None,
        default_location_name=location["name"],
        default_coordinates=Coordinates(
            latitude=location["latitude"], longitude=location["longitude"]
        ),
    )
