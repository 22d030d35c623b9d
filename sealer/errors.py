"""Exception hierarchy shared by the codec, the hydrator and the views."""

from __future__ import annotations


class SealerError(Exception):
    """Base exception for the sealing service."""


class ConfigurationError(SealerError):
    """Key material or configuration can never produce a working service."""


class MalformedInput(SealerError, ValueError):
    """An envelope or request body does not have the expected structure."""


class PayloadTooLarge(MalformedInput):
    """The request body exceeds the configured maximum size."""


class AuthFailure(SealerError):
    """The authentication tag of an envelope did not verify."""


class InternalError(SealerError):
    """Entropy or cipher failure while serving a request."""


class RemoteReadError(SealerError):
    """The parameter store could not be read during hydration."""


__all__ = [
    "SealerError",
    "ConfigurationError",
    "MalformedInput",
    "PayloadTooLarge",
    "AuthFailure",
    "InternalError",
    "RemoteReadError",
]
