from __future__ import annotations

import inspect
from typing import Any

from django.core.exceptions import RequestDataTooBig
from django.http import HttpRequest, JsonResponse

from sealer.errors import PayloadTooLarge


def json_response(data: Any, *, status: int = 200) -> JsonResponse:
    """Return a JSON response with UTF-8 safe dumps settings."""
    return JsonResponse(data, status=status, json_dumps_params={"ensure_ascii": False})


def json_error(detail: Any, *, status: int) -> JsonResponse:
    """Return a consistent error payload."""
    return json_response({"detail": detail}, status=status)


async def read_body(request: HttpRequest, *, limit: int) -> bytes:
    """Read the request body into bytes, refusing anything over ``limit``."""
    content_length = request.META.get("CONTENT_LENGTH")
    if content_length:
        try:
            declared = int(content_length)
        except ValueError:
            declared = 0
        if declared > limit:
            raise PayloadTooLarge(f"request body exceeds {limit} bytes")

    try:
        body = request.body
    except RequestDataTooBig as exc:
        raise PayloadTooLarge(f"request body exceeds {limit} bytes") from exc
    if inspect.isawaitable(body):
        body = await body
    if isinstance(body, str):
        body = body.encode("utf-8")
    body = body or b""
    if len(body) > limit:
        raise PayloadTooLarge(f"request body exceeds {limit} bytes")
    return body


__all__ = ["json_response", "json_error", "read_body"]
