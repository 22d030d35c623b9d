#!/usr/bin/env python
"""Management entrypoint: runserver, check_config, generate_openapi."""

from __future__ import annotations

import os
import sys

from django.core.management import execute_from_command_line


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sealer_site.settings")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
