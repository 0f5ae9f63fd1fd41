"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    date = serializers.CharField()
    location = serializers.CharField(allow_null=True)
    ownerId = serializers.IntegerField(source="owner_id.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
