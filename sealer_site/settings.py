"""Django settings for the sealing service.

Values come from :mod:`sealer.config.settings` so that Django and the domain
package read the same ``SEALER_`` environment.
"""

from __future__ import annotations

from pathlib import Path

from sealer.config import settings as app_settings

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = app_settings.django_secret_key
DEBUG = app_settings.django_debug
ALLOWED_HOSTS = app_settings.allowed_host_list()

INSTALLED_APPS = [
    "sealer_app",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "sealer_site.urls"
WSGI_APPLICATION = "sealer_site.wsgi.application"
ASGI_APPLICATION = "sealer_site.asgi.application"

# No persistent state.
DATABASES: dict = {}

TEMPLATES: list = []

USE_TZ = True
TIME_ZONE = "UTC"

DATA_UPLOAD_MAX_MEMORY_SIZE = app_settings.max_body_bytes
APPEND_SLASH = False

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "sealer": {
            "level": "DEBUG" if DEBUG else "INFO",
        },
    },
}
