"""WSGI config for the sealing service.

Configuration is hydrated before the application object exists, so a failed
load stops the process before it serves anything.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sealer_site.settings")

application = get_wsgi_application()

from sealer.bootstrap import bootstrap  # noqa: E402

bootstrap()
