"""Signals for automatic account profile management.

On user creation, create a default `UserProfile` with the student role.
Registration then writes the chosen role and display name; users created
through the admin or `createsuperuser` still get a usable profile.
"""
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile, Role


@receiver(post_save, sender=User)
def create_user_profile(sender, instance: User, created: bool, **kwargs):  # noqa: D401
    """Create a profile for new users (default role: student)."""
    if created:
        UserProfile.objects.get_or_create(
            user=instance,
            defaults={"role": Role.STUDENT, "display_name": instance.get_full_name() or instance.username},
        )
