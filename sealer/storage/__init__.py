"""Remote configuration storage."""

from .parameters import (
    ListRequest,
    ParameterKind,
    ParameterPage,
    ParameterReader,
    RemoteEntry,
    SSMClientFactory,
    SSMParameterReader,
)

__all__ = [
    "ListRequest",
    "ParameterKind",
    "ParameterPage",
    "ParameterReader",
    "RemoteEntry",
    "SSMClientFactory",
    "SSMParameterReader",
]
