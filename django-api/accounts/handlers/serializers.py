"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class AccountSerializer(serializers.Serializer):
    """Serializer for the Account domain model. The password hash is not a field."""

    id = serializers.IntegerField(source="id.value")
    email = serializers.CharField()
    name = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
