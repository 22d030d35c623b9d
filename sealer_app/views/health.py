from __future__ import annotations

from django.http import HttpRequest, HttpResponseNotAllowed
from django.views.decorators.csrf import csrf_exempt

from sealer_app.views.utils import json_response


@csrf_exempt
async def health(request: HttpRequest):
    if request.method != "GET":
        return HttpResponseNotAllowed(["GET"])

    from sealer import get_version
    from sealer.config import settings
    from sealer.schemas import HealthResponse

    payload = HealthResponse(environment=settings.environment, version=get_version())
    return json_response(payload.model_dump())


__all__ = ["health"]
