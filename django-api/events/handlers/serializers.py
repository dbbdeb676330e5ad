"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain.value_objects import EVENT_DATE_FORMAT


class LocationSerializer(serializers.Serializer):
    """Serializer for Location domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    latitude = serializers.FloatField(source="coordinates.latitude")
    longitude = serializers.FloatField(source="coordinates.longitude")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    creatorId = serializers.IntegerField(source="creator_id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    startDate = serializers.DateField(source="period.start", format=EVENT_DATE_FORMAT)
    endDate = serializers.DateField(source="period.end", format=EVENT_DATE_FORMAT)
    location = LocationSerializer()
    isPrivate = serializers.BooleanField(source="is_private")


class AssetSerializer(serializers.Serializer):
    """Serializer for Asset domain model."""

    id = serializers.CharField(source="id.value")
    eventId = serializers.CharField(source="event_id.value")
    name = serializers.CharField()
    url = serializers.CharField()


class MemberSerializer(serializers.Serializer):
    """Serializer for Member domain model."""

    id = serializers.IntegerField(source="id.value")
    username = serializers.CharField()
