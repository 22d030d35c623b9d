"""Paginated reads from AWS SSM Parameter Store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from sealer.errors import ConfigurationError, RemoteReadError

logger = logging.getLogger("sealer.config")


class ParameterKind(str, Enum):
    STRING = "String"
    SECURE_STRING = "SecureString"
    STRING_LIST = "StringList"


STRING_KINDS = frozenset({ParameterKind.STRING, ParameterKind.SECURE_STRING})


@dataclass(frozen=True)
class RemoteEntry:
    name: str
    value: str
    kind: ParameterKind | str


@dataclass(frozen=True)
class ListRequest:
    """Options for a single listing, built fresh for each hydration."""

    path: str
    recursive: bool = True
    with_decryption: bool = True
    max_results: int | None = None


@dataclass(frozen=True)
class ParameterPage:
    entries: tuple[RemoteEntry, ...] = field(default_factory=tuple)
    next_token: str | None = None


class ParameterReader(Protocol):
    def list_under(self, request: ListRequest, next_token: str | None = None) -> ParameterPage:
        ...


def parse_kind(raw: ParameterKind | str | None) -> ParameterKind | str:
    try:
        return ParameterKind(raw)
    except ValueError:
        return raw or ""


def is_string_kind(kind: ParameterKind | str | None) -> bool:
    return parse_kind(kind) in STRING_KINDS


class SSMParameterReader:
    """Read one page of parameters per call via ``GetParametersByPath``."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def list_under(self, request: ListRequest, next_token: str | None = None) -> ParameterPage:
        params: dict[str, Any] = {
            "Path": request.path,
            "Recursive": request.recursive,
            "WithDecryption": request.with_decryption,
        }
        if request.max_results is not None:
            params["MaxResults"] = request.max_results
        if next_token:
            params["NextToken"] = next_token

        try:
            response = self._client.get_parameters_by_path(**params)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "Unknown")
            raise RemoteReadError(f"ssm get_parameters_by_path failed for {request.path} ({code})") from exc
        except BotoCoreError as exc:
            raise RemoteReadError(f"ssm get_parameters_by_path failed for {request.path}") from exc

        entries = tuple(
            RemoteEntry(name=item["Name"], value=item.get("Value", ""), kind=parse_kind(item.get("Type")))
            for item in response.get("Parameters", [])
        )
        logger.debug(
            "ssm_page_read path=%s count=%d",
            request.path,
            len(entries),
            extra={"path": request.path, "count": len(entries)},
        )
        return ParameterPage(entries=entries, next_token=response.get("NextToken") or None)


class SSMClientFactory:
    """Build SSM clients that never retry on their own."""

    @classmethod
    def config(cls, *, connect_timeout: float, read_timeout: float) -> Config:
        return Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={"total_max_attempts": 1, "mode": "standard"},
        )

    @classmethod
    def client(
        cls,
        *,
        region: str,
        profile: str | None = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 10.0,
    ):
        config = cls.config(connect_timeout=connect_timeout, read_timeout=read_timeout)
        if profile:
            try:
                session = boto3.session.Session(profile_name=profile)
            except ProfileNotFound as exc:
                raise ConfigurationError(f"aws profile '{profile}' not found") from exc
            return session.client("ssm", region_name=region, config=config)
        return boto3.client("ssm", region_name=region, config=config)


__all__ = [
    "ParameterKind",
    "STRING_KINDS",
    "parse_kind",
    "is_string_kind",
    "RemoteEntry",
    "ListRequest",
    "ParameterPage",
    "ParameterReader",
    "SSMParameterReader",
    "SSMClientFactory",
]
