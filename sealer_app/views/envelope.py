from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, HttpResponseNotAllowed
from django.views.decorators.csrf import csrf_exempt

from sealer.bootstrap import get_runtime
from sealer.config import settings
from sealer.errors import AuthFailure, ConfigurationError, InternalError, MalformedInput, PayloadTooLarge
from sealer.services import EnvelopeService
from sealer_app.views.utils import json_error, read_body


logger = logging.getLogger("sealer.audit")

INVALID_ENVELOPE = "invalid envelope"


def _service() -> EnvelopeService:
    return EnvelopeService(get_runtime().cipher, max_body_bytes=settings.max_body_bytes)


@csrf_exempt
async def seal(request: HttpRequest):
    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    try:
        body = await read_body(request, limit=settings.max_body_bytes)
        envelope = _service().seal(body)
    except PayloadTooLarge as exc:
        logger.warning("seal_rejected reason=%s", "too_large", extra={"reason": "too_large"})
        return json_error(str(exc), status=413)
    except (InternalError, ConfigurationError):
        logger.exception("seal_failed")
        return json_error("unable to seal payload", status=500)

    return HttpResponse(envelope, content_type="text/plain; charset=utf-8")


@csrf_exempt
async def unseal(request: HttpRequest):
    if request.method != "POST":
        return HttpResponseNotAllowed(["POST"])

    try:
        body = await read_body(request, limit=settings.max_body_bytes)
        plaintext = _service().unseal(body)
    except PayloadTooLarge as exc:
        logger.warning("unseal_rejected reason=%s", "too_large", extra={"reason": "too_large"})
        return json_error(str(exc), status=413)
    except MalformedInput as exc:
        logger.warning(
            "unseal_rejected reason=%s error=%s", "malformed", exc, extra={"reason": "malformed", "error": str(exc)}
        )
        return json_error(INVALID_ENVELOPE, status=400)
    except AuthFailure:
        logger.warning(
            "unseal_rejected reason=%s", "authentication_failed", extra={"reason": "authentication_failed"}
        )
        return json_error(INVALID_ENVELOPE, status=400)
    except (InternalError, ConfigurationError):
        logger.exception("unseal_failed")
        return json_error("unable to unseal envelope", status=500)

    return HttpResponse(plaintext, content_type="application/octet-stream")


__all__ = ["seal", "unseal"]
