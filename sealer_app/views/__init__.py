from __future__ import annotations

from .docs import openapi_document, swagger_ui
from .envelope import seal, unseal
from .health import health

__all__ = [
    "health",
    "openapi_document",
    "swagger_ui",
    "seal",
    "unseal",
]
