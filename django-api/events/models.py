"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    date = models.CharField(max_length=64)
    location = models.CharField(max_length=255, blank=True, null=True)
    owner = models.ForeignKey("accounts.Account", on_delete=models.CASCADE, related_name="events")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title


class Registration(models.Model):
    """Persistence model for event registrations."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="registrations")
    account = models.ForeignKey("accounts.Account", on_delete=models.CASCADE, related_name="registrations")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "registrations"
        constraints = [
            models.UniqueConstraint(fields=["event", "account"], name="unique_event_registration"),
        ]

    def __str__(self) -> str:
        return f"{self.account} - {self.event}"
