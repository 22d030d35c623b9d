"""Cryptographic helpers."""

from .envelope import Envelope, EnvelopeCipher, seal, unseal

__all__ = ["Envelope", "EnvelopeCipher", "seal", "unseal"]
