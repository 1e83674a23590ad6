from django.apps import AppConfig


class UiConfig(AppConfig):
    """App configuration for the UI entry point."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "ui"
