"""WSGI entrypoint for StudentIntro."""
import os

from django.core.wsgi import get_wsgi_application

# Default to development settings for local runs; override in deployment.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

application = get_wsgi_application()
