"""Build an OpenAPI document for the sealing API."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sealer import get_version
from sealer.schemas import ErrorResponse, HealthResponse

Schema = Dict[str, Any]

ENVELOPE_PATTERN = "^[0-9a-f]{32,}:[0-9a-f]{24}$"


def _model_schema(model: type) -> Schema:
    return model.model_json_schema(ref_template="#/components/schemas/{model}")


def _json_ref(schema_name: str) -> Schema:
    return {"$ref": f"#/components/schemas/{schema_name}"}


def _error_response(description: str) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {
            "application/json": {
                "schema": _json_ref("ErrorResponse"),
            }
        },
    }


def build_openapi_schema(*, server_url: Optional[str] = None) -> Dict[str, Any]:
    """Return an OpenAPI 3.0 specification for the external API surface."""
    components = {
        "schemas": {
            "HealthResponse": _model_schema(HealthResponse),
            "ErrorResponse": _model_schema(ErrorResponse),
            "Envelope": {
                "type": "string",
                "pattern": ENVELOPE_PATTERN,
                "description": "hex(ciphertext || tag) ':' hex(12 byte nonce)",
                "example": "6f1c0d7e2a9b44c1a0e3b95f7d2c8e11a4b2:0f1e2d3c4b5a69788796a5b4",
            },
        },
    }

    paths: Dict[str, Any] = {
        "/api/health": {
            "get": {
                "operationId": "healthProbe",
                "summary": "Health check endpoint",
                "tags": ["Health"],
                "responses": {
                    "200": {
                        "description": "Service is reachable.",
                        "content": {"application/json": {"schema": _json_ref("HealthResponse")}},
                    }
                },
            }
        },
        "/api/seal": {
            "post": {
                "operationId": "seal",
                "summary": "Encrypt and authenticate an arbitrary payload.",
                "tags": ["Envelopes"],
                "requestBody": {
                    "required": False,
                    "content": {
                        "application/octet-stream": {"schema": {"type": "string", "format": "binary"}},
                    },
                },
                "responses": {
                    "200": {
                        "description": "Envelope produced.",
                        "content": {"text/plain": {"schema": _json_ref("Envelope")}},
                    },
                    "413": _error_response("Request body too large."),
                    "500": _error_response("Cipher or entropy failure."),
                },
            }
        },
        "/api/unseal": {
            "post": {
                "operationId": "unseal",
                "summary": "Verify an envelope and return the original payload.",
                "tags": ["Envelopes"],
                "requestBody": {
                    "required": True,
                    "content": {"text/plain": {"schema": _json_ref("Envelope")}},
                },
                "responses": {
                    "200": {
                        "description": "Envelope verified.",
                        "content": {
                            "application/octet-stream": {"schema": {"type": "string", "format": "binary"}},
                        },
                    },
                    "400": _error_response("Malformed envelope or failed authentication."),
                    "413": _error_response("Request body too large."),
                    "500": _error_response("Cipher failure."),
                },
            }
        },
    }

    effective_server = server_url or "http://localhost:8080"

    spec: Dict[str, Any] = {
        "openapi": "3.0.3",
        "info": {
            "title": "Sealer API",
            "version": get_version(),
            "description": "Authenticated envelope encryption for opaque payloads.",
        },
        "servers": [
            {"url": effective_server, "description": "API base URL"},
        ],
        "paths": paths,
        "components": components,
        "tags": [
            {"name": "Health"},
            {"name": "Envelopes"},
        ],
    }
    return spec


__all__ = ["build_openapi_schema"]
