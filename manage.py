#!/usr/bin/env python
"""
Django management utility for StudentIntro.

Run `python manage.py migrate` once (it is idempotent) to create the
schema, then `python manage.py runserver` for local development.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the StudentIntro project."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        # Provide a clear hint if Django is not installed in the environment.
        raise ImportError(
            "Django is not installed or not available on the PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
