"""Envelope sealing service package."""

from importlib import metadata

DISTRIBUTION = "sealer"
CHECKOUT_VERSION = "0.0.0+checkout"


def get_version() -> str:
    """Installed sealer version, or a checkout marker when run from source."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return CHECKOUT_VERSION


__all__ = ["get_version", "DISTRIBUTION", "CHECKOUT_VERSION"]
