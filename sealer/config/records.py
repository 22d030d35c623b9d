"""Configuration records and their parameter bindings.

A record is a frozen dataclass. Which of its fields are loaded from the
parameter store is declared by an explicit :class:`ParameterMap`; fields that
are not bound are never populated remotely.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, get_type_hints

from sealer.errors import ConfigurationError

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class ParameterBinding:
    """Bind a record field to a parameter name relative to the namespace."""

    field: str
    path: str

    def __post_init__(self) -> None:
        if not self.field:
            raise ConfigurationError("parameter binding requires a field name")
        if not self.path or not self.path.strip("/"):
            raise ConfigurationError(f"field {self.field} must declare a non-empty parameter path")


class ParameterMap(Generic[RecordT]):
    """The whitelist of string fields a record accepts from the parameter store."""

    def __init__(self, record_type: type[RecordT], bindings: Iterable[ParameterBinding]) -> None:
        if not dataclasses.is_dataclass(record_type):
            raise ConfigurationError(f"{record_type.__name__} is not a dataclass")

        fields = {item.name: item for item in dataclasses.fields(record_type)}
        hints = get_type_hints(record_type)
        for item in fields.values():
            if item.default is dataclasses.MISSING and item.default_factory is dataclasses.MISSING:
                raise ConfigurationError(f"{record_type.__name__}.{item.name} needs a default value")

        seen: dict[str, ParameterBinding] = {}
        for binding in bindings:
            if binding.field not in fields:
                raise ConfigurationError(f"{record_type.__name__} has no field {binding.field}")
            if hints.get(binding.field) is not str:
                raise ConfigurationError(
                    f"{record_type.__name__}.{binding.field} must be declared str to bind a parameter"
                )
            if binding.field in seen:
                raise ConfigurationError(f"{record_type.__name__}.{binding.field} is bound twice")
            seen[binding.field] = binding

        self.record_type = record_type
        self._bindings = tuple(seen.values())
        self._unbound = tuple(name for name in fields if name not in seen)

    def __iter__(self) -> Iterator[ParameterBinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    @property
    def unbound_fields(self) -> tuple[str, ...]:
        return self._unbound

    def build(self, values: dict[str, str]) -> RecordT:
        return self.record_type(**values)


@dataclass(frozen=True)
class ServiceConfig:
    """All of the service configuration, secret or otherwise."""

    secret_app_key: str = ""
    favorite_color: str = ""
    locale: str = ""

    # Not bound to a parameter; hydration never populates these.
    unmodeled_value_1: str = ""
    unmodeled_value_2: str = ""

    def __repr__(self) -> str:
        secret = "<set>" if self.secret_app_key else "<unset>"
        return (
            f"ServiceConfig(secret_app_key={secret}, favorite_color={self.favorite_color!r}, "
            f"locale={self.locale!r})"
        )


SERVICE_CONFIG_MAP: ParameterMap[ServiceConfig] = ParameterMap(
    ServiceConfig,
    [
        ParameterBinding("secret_app_key", "secretKey"),
        ParameterBinding("favorite_color", "favoriteColor"),
        ParameterBinding("locale", "preferences/locale"),
    ],
)


__all__ = ["ParameterBinding", "ParameterMap", "ServiceConfig", "SERVICE_CONFIG_MAP"]
