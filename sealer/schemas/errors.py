"""Error payload schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: Any = Field(description="Human readable error message.")
