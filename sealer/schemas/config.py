"""Hydration report schema, rendered by the check_config command."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConfigReport(BaseModel):
    config_path: str
    assigned: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    unbound: list[str] = Field(default_factory=list)
