"""Populate configuration records from the parameter store.

All parameters at and below a namespace are read once, page by page, and
indexed by their name relative to the namespace. Each field bound in a
:class:`~sealer.config.records.ParameterMap` is then looked up by its
parameter path and assigned verbatim when the parameter is a ``String`` or
``SecureString``.

Hydration runs once at startup. A failed read is fatal; there is no retry
and no partial result.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from sealer.config.records import ParameterMap
from sealer.errors import ConfigurationError, RemoteReadError
from sealer.storage.parameters import ListRequest, ParameterReader, RemoteEntry, is_string_kind

logger = logging.getLogger("sealer.config")

SEPARATOR = "/"

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class HydrationResult(Generic[RecordT]):
    record: RecordT
    assigned: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()


def normalize_namespace(path: str) -> str:
    """Return ``path`` ending in exactly one separator."""
    if not path or not path.strip():
        raise ConfigurationError("configuration path must be specified")
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    return stripped + SEPARATOR


def _relative_name(name: str, namespace: str) -> str:
    if name.startswith(namespace):
        return name[len(namespace):]
    # Namespace configured without its leading separator.
    alt = SEPARATOR + namespace.lstrip(SEPARATOR)
    if name.startswith(alt):
        return name[len(alt):]
    return name


def fetch_parameters(
    reader: ParameterReader,
    request: ListRequest,
    *,
    deadline: Optional[float] = None,
) -> dict[str, RemoteEntry]:
    """Read every page under ``request.path`` and index entries by relative name.

    ``deadline`` is a :func:`time.monotonic` timestamp checked before each page.
    """
    indexed: dict[str, RemoteEntry] = {}
    next_token: str | None = None
    pages = 0
    while True:
        if deadline is not None and time.monotonic() > deadline:
            raise RemoteReadError(f"timed out reading parameters under {request.path} after {pages} page(s)")

        page = reader.list_under(request, next_token)
        pages += 1
        for entry in page.entries:
            indexed[_relative_name(entry.name, request.path)] = entry

        if not page.next_token:
            break
        next_token = page.next_token

    logger.info(
        "parameters_indexed namespace=%s pages=%d count=%d",
        request.path,
        pages,
        len(indexed),
        extra={"namespace": request.path, "pages": pages, "count": len(indexed)},
    )
    return indexed


def hydrate(
    parameter_map: ParameterMap[RecordT],
    reader: ParameterReader,
    namespace: str,
    *,
    deadline: Optional[float] = None,
    page_size: Optional[int] = None,
) -> HydrationResult[RecordT]:
    """Load the parameters under ``namespace`` into a new record.

    Raises:
        ConfigurationError: ``namespace`` is empty.
        RemoteReadError: the parameter store could not be read.
    """
    request = ListRequest(path=normalize_namespace(namespace), max_results=page_size)
    indexed = fetch_parameters(reader, request, deadline=deadline)

    values: dict[str, str] = {}
    assigned: list[str] = []
    missing: list[str] = []
    skipped: list[str] = []

    for field_name in parameter_map.unbound_fields:
        logger.debug("Field %s is not bound to a parameter", field_name)

    for binding in parameter_map:
        entry = indexed.get(binding.path)
        if entry is None:
            logger.info("Parameter %s is not included in the retrieved configuration", binding.path)
            missing.append(binding.field)
            continue

        if not is_string_kind(entry.kind):
            logger.warning(
                "Ignoring configuration field %s: parameter %s has type %s, expected String or SecureString",
                binding.field,
                binding.path,
                getattr(entry.kind, "value", entry.kind),
            )
            skipped.append(binding.field)
            continue

        logger.info("Setting field %s from parameter %s", binding.field, binding.path)
        values[binding.field] = entry.value
        assigned.append(binding.field)

    return HydrationResult(
        record=parameter_map.build(values),
        assigned=tuple(assigned),
        missing=tuple(missing),
        skipped=tuple(skipped),
    )


__all__ = ["HydrationResult", "normalize_namespace", "fetch_parameters", "hydrate"]
