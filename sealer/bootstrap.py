"""One-shot startup: hydrate configuration and build the process cipher.

:func:`bootstrap` must finish before the server accepts requests. Any error
it raises is fatal to startup.
"""

from __future__ import annotations

import base64
import binascii
import logging
import time
from dataclasses import dataclass
from typing import Optional

from sealer.config.hydrator import HydrationResult, hydrate
from sealer.config.records import SERVICE_CONFIG_MAP, ServiceConfig
from sealer.config.settings import Settings, get_settings
from sealer.crypto import EnvelopeCipher
from sealer.errors import ConfigurationError
from sealer.storage.parameters import ParameterReader, SSMClientFactory, SSMParameterReader

logger = logging.getLogger("sealer")


@dataclass(frozen=True)
class Runtime:
    config: ServiceConfig
    cipher: EnvelopeCipher
    hydration: HydrationResult[ServiceConfig]


_runtime: Runtime | None = None


def decode_secret_key(value: str) -> bytes:
    """Decode the base64 secret key without ever echoing it."""
    if not value:
        raise ConfigurationError("secret application key is unset")
    try:
        key = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ConfigurationError("secret application key is not valid base64") from None
    if not key:
        raise ConfigurationError("secret application key is unset")
    return key


def build_reader(settings: Settings) -> SSMParameterReader:
    client = SSMClientFactory.client(
        region=settings.aws_region,
        profile=settings.aws_profile,
        connect_timeout=settings.ssm_connect_timeout,
        read_timeout=settings.ssm_read_timeout,
    )
    return SSMParameterReader(client)


def load_configuration(
    settings: Optional[Settings] = None,
    reader: Optional[ParameterReader] = None,
) -> HydrationResult[ServiceConfig]:
    settings = settings or get_settings()
    reader = reader or build_reader(settings)
    deadline = time.monotonic() + settings.startup_timeout_seconds
    return hydrate(
        SERVICE_CONFIG_MAP,
        reader,
        settings.config_path,
        deadline=deadline,
        page_size=settings.ssm_page_size,
    )


def bootstrap(
    settings: Optional[Settings] = None,
    reader: Optional[ParameterReader] = None,
) -> Runtime:
    """Hydrate configuration, decode the key and install the process runtime."""
    settings = settings or get_settings()
    hydration = load_configuration(settings, reader)
    key = decode_secret_key(hydration.record.secret_app_key)
    cipher = EnvelopeCipher(key, settings.auth_context_bytes())

    runtime = Runtime(config=hydration.record, cipher=cipher, hydration=hydration)
    install_runtime(runtime)
    logger.info(
        "bootstrap_complete config_path=%s assigned=%s missing=%s skipped=%s key_bits=%d",
        settings.config_path,
        ",".join(hydration.assigned),
        ",".join(hydration.missing),
        ",".join(hydration.skipped),
        len(key) * 8,
        extra={
            "config_path": settings.config_path,
            "assigned": list(hydration.assigned),
            "missing": list(hydration.missing),
            "skipped": list(hydration.skipped),
            "key_bits": len(key) * 8,
        },
    )
    return runtime


def install_runtime(runtime: Runtime | None) -> None:
    global _runtime
    _runtime = runtime


def get_runtime() -> Runtime:
    if _runtime is None:
        raise ConfigurationError("service has not been bootstrapped")
    return _runtime


__all__ = [
    "Runtime",
    "decode_secret_key",
    "build_reader",
    "load_configuration",
    "bootstrap",
    "install_runtime",
    "get_runtime",
]
