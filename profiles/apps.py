from django.apps import AppConfig


class ProfilesConfig(AppConfig):
    """App configuration for per-course student introduction profiles."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "profiles"
