"""WSGI config for the events system API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "eventsystem.settings")

application = get_wsgi_application()
