"""AES-GCM envelope sealing.

An envelope is the text ``hex(ciphertext) ":" hex(nonce)``. The ciphertext
carries the 16 byte GCM tag at its end and the nonce is always 12 bytes.
"""

from __future__ import annotations

import binascii
import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sealer.errors import AuthFailure, ConfigurationError, InternalError, MalformedInput

NONCE_SIZE = 12
TAG_SIZE = 16
KEY_SIZES = frozenset({16, 24, 32})
SEPARATOR = ":"


def _unhex(segment: str) -> bytes:
    try:
        return binascii.unhexlify(segment)
    except (binascii.Error, ValueError) as exc:
        raise MalformedInput("envelope segment is not valid hex") from exc


@dataclass(frozen=True)
class Envelope:
    """A sealed message: ciphertext (with tag) and the nonce used to produce it."""

    ciphertext: bytes
    nonce: bytes

    def encode(self) -> str:
        return f"{self.ciphertext.hex()}{SEPARATOR}{self.nonce.hex()}"

    @classmethod
    def parse(cls, text: str | bytes) -> "Envelope":
        """Decode envelope text, rejecting anything that is not two hex fields."""
        if isinstance(text, bytes):
            try:
                text = text.decode("ascii")
            except UnicodeDecodeError as exc:
                raise MalformedInput("envelope is not ASCII text") from exc

        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            raise MalformedInput(f"envelope must have 2 parts, got {len(parts)}")

        ciphertext = _unhex(parts[0])
        nonce = _unhex(parts[1])
        if len(nonce) != NONCE_SIZE:
            raise MalformedInput(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
        if len(ciphertext) < TAG_SIZE:
            raise MalformedInput("ciphertext is shorter than the authentication tag")
        return cls(ciphertext=ciphertext, nonce=nonce)


@dataclass(frozen=True)
class EnvelopeCipher:
    """Seal and open envelopes with AES-GCM under a fixed key and context.

    ``context`` is bound into the tag as associated data. It is not secret but
    must be byte-identical between :meth:`seal` and :meth:`open`.
    """

    key: bytes
    context: bytes = b""

    def __post_init__(self) -> None:
        if len(self.key) not in KEY_SIZES:
            raise ConfigurationError(
                f"key must be 16, 24, or 32 bytes (128/192/256-bit), got {len(self.key)}"
            )

    def __repr__(self) -> str:
        return f"EnvelopeCipher(key=<{len(self.key)} bytes>, context={self.context!r})"

    def _aead(self) -> AESGCM:
        try:
            return AESGCM(self.key)
        except ValueError as exc:
            raise ConfigurationError("unable to construct AES-GCM cipher") from exc

    @property
    def _associated_data(self) -> bytes | None:
        return self.context or None

    def seal(self, plaintext: bytes) -> Envelope:
        try:
            nonce = os.urandom(NONCE_SIZE)
        except (OSError, NotImplementedError) as exc:
            raise InternalError("unable to read nonce from the system entropy source") from exc

        aesgcm = self._aead()
        ciphertext = aesgcm.encrypt(nonce, plaintext, self._associated_data)
        return Envelope(ciphertext=ciphertext, nonce=nonce)

    def open(self, envelope: Envelope) -> bytes:
        aesgcm = self._aead()
        try:
            return aesgcm.decrypt(envelope.nonce, envelope.ciphertext, self._associated_data)
        except InvalidTag as exc:
            raise AuthFailure("envelope failed authentication") from exc


def seal(key: bytes, plaintext: bytes, context: bytes = b"") -> str:
    """Seal ``plaintext`` and return the envelope text."""
    return EnvelopeCipher(key, context).seal(plaintext).encode()


def unseal(key: bytes, envelope: str | bytes, context: bytes = b"") -> bytes:
    """Open envelope text produced by :func:`seal`.

    Raises:
        MalformedInput: the envelope is not two colon-delimited hex fields.
        AuthFailure: the tag did not verify for this key, nonce and context.
    """
    parsed = Envelope.parse(envelope)
    return EnvelopeCipher(key, context).open(parsed)


__all__ = [
    "NONCE_SIZE",
    "TAG_SIZE",
    "Envelope",
    "EnvelopeCipher",
    "seal",
    "unseal",
]
