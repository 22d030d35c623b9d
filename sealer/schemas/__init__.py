"""Pydantic schema exports."""

from .health import HealthResponse
from .errors import ErrorResponse
from .config import ConfigReport

__all__ = ["HealthResponse", "ErrorResponse", "ConfigReport"]
