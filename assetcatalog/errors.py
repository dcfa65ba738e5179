"""Exception types raised by the asset catalog models and encoder."""

from __future__ import annotations

from pydantic import ValidationError

__all__ = [
    "AssetCatalogError",
    "DecodeError",
    "SerializationError",
    "ValidationError",
]


class AssetCatalogError(Exception):
    """Base class for asset catalog failures outside model validation."""


class SerializationError(AssetCatalogError):
    """The JSON text encoder could not render a contents descriptor."""


class DecodeError(AssetCatalogError):
    """A contents descriptor was not well-formed JSON text."""
