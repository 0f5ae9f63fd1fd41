from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class AccountsConfig(AppConfig):
    name = "accounts"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        if not getattr(settings, "TOKEN_SECRET", None):
            raise ImproperlyConfigured("TOKEN_SECRET must be set to sign account tokens")
