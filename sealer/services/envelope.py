"""Request-scoped sealing and unsealing."""

from __future__ import annotations

import logging

from sealer.crypto import Envelope, EnvelopeCipher
from sealer.errors import PayloadTooLarge

logger = logging.getLogger("sealer.audit")

_WHITESPACE = b" \t\r\n"


class EnvelopeService:
    """Apply the process-wide cipher to one request body at a time."""

    def __init__(self, cipher: EnvelopeCipher, *, max_body_bytes: int) -> None:
        self._cipher = cipher
        self._max_body_bytes = max_body_bytes

    def _check_size(self, body: bytes) -> None:
        if len(body) > self._max_body_bytes:
            raise PayloadTooLarge(f"request body exceeds {self._max_body_bytes} bytes")

    def seal(self, body: bytes) -> str:
        self._check_size(body)
        envelope = self._cipher.seal(body).encode()
        logger.info("envelope_sealed plaintext_bytes=%d", len(body), extra={"plaintext_bytes": len(body)})
        return envelope

    def unseal(self, body: bytes) -> bytes:
        self._check_size(body)
        envelope = Envelope.parse(body.strip(_WHITESPACE))
        plaintext = self._cipher.open(envelope)
        logger.info("envelope_opened plaintext_bytes=%d", len(plaintext), extra={"plaintext_bytes": len(plaintext)})
        return plaintext


__all__ = ["EnvelopeService"]
