"""CLI helpers exposed as project scripts."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable

from django.core.management import execute_from_command_line


def _configure_django() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sealer_site.settings")


def _manage_py() -> Path:
    return Path(__file__).resolve().parents[1] / "manage.py"


def _run_command(argv: Iterable[str]) -> None:
    args = list(argv)
    args[0] = str(_manage_py())
    sys.argv = args
    execute_from_command_line(args)


def run_dev_server() -> None:
    """Run Django's autoreloading development server.

    The WSGI module bootstraps configuration from SSM when it is imported.
    """
    _configure_django()
    host = os.environ.get("SEALER_DEV_HOST", "0.0.0.0")
    port = os.environ.get("SEALER_DEV_PORT", "8080")
    _run_command(["manage.py", "runserver", f"{host}:{port}"])


def run_prod_server() -> None:
    """Launch gunicorn, hydrating configuration once before workers fork."""
    _configure_django()
    from gunicorn.app.wsgiapp import WSGIApplication

    bind = os.environ.get("SEALER_GUNICORN_BIND", "0.0.0.0:8080")
    workers = os.environ.get("SEALER_GUNICORN_WORKERS", "4")
    threads = os.environ.get("SEALER_GUNICORN_THREADS", "1")

    sys.argv = [
        "gunicorn",
        "sealer_site.wsgi:application",
        "--bind",
        bind,
        "--workers",
        workers,
        "--threads",
        threads,
        "--preload",
    ]
    WSGIApplication().run()


def check_config() -> None:
    """Hydrate configuration from SSM and report which fields were populated."""
    _configure_django()
    _run_command(["manage.py", "check_config"])


__all__ = ["run_dev_server", "run_prod_server", "check_config"]
