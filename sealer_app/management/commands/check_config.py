"""Hydrate configuration from SSM and report the outcome per field."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from sealer.bootstrap import decode_secret_key, load_configuration
from sealer.config import settings
from sealer.config.records import SERVICE_CONFIG_MAP
from sealer.crypto import EnvelopeCipher
from sealer.errors import ConfigurationError, RemoteReadError
from sealer.schemas import ConfigReport


class Command(BaseCommand):
    help = "Load configuration from the parameter store and list which fields were set. Values are never printed."

    def add_arguments(self, parser) -> None:  # pragma: no cover - Django wires parser.
        parser.add_argument("--config-path", default=None)

    def handle(self, *args, **options) -> None:
        effective = settings
        if options.get("config_path"):
            effective = settings.model_copy(update={"config_path": options["config_path"]})

        try:
            result = load_configuration(effective)
        except (ConfigurationError, RemoteReadError) as exc:
            raise CommandError(str(exc)) from exc

        report = ConfigReport(
            config_path=effective.config_path,
            assigned=list(result.assigned),
            missing=list(result.missing),
            skipped=list(result.skipped),
            unbound=list(SERVICE_CONFIG_MAP.unbound_fields),
        )
        self.stdout.write(report.model_dump_json(indent=2))

        try:
            EnvelopeCipher(decode_secret_key(result.record.secret_app_key))
        except ConfigurationError as exc:
            raise CommandError(f"secret key unusable: {exc}") from exc
        self.stdout.write(self.style.SUCCESS("secret key is usable"))
