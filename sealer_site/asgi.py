"""ASGI config for the sealing service."""
from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sealer_site.settings")

application = get_asgi_application()

from sealer.bootstrap import bootstrap  # noqa: E402

bootstrap()
