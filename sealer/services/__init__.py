"""Service layer exported symbols."""

from .envelope import EnvelopeService

__all__ = ["EnvelopeService"]
