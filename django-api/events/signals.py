"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import PUBLIC_EVENTS_KEY
from events.models import Event, Location

logger = logging.getLogger(__name__)


def _invalidate_public_events() -> None:
    cache.delete(PUBLIC_EVENTS_KEY)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate the public listing once an event change is committed."""
    transaction.on_commit(_invalidate_public_events)
    logger.debug("Scheduled public events invalidation for event %s", instance.pk)


@receiver([post_save, post_delete], sender=Location)
def invalidate_location_cache(sender, instance, **kwargs):
    """Invalidate the public listing once a location change is committed."""
    transaction.on_commit(_invalidate_public_events)
