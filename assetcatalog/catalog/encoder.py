"""Contents.json encoding: descriptor models to JSON text and back.

Every catalog family goes through the same :class:`AssetEncoder`, so wire
keys and layout stay consistent between icon sets and image sets.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from pydantic_core import PydanticSerializationError

from assetcatalog.config import Settings, settings
from assetcatalog.errors import DecodeError, SerializationError
from assetcatalog.models.app_icon_set import AppIconContents
from assetcatalog.models.base import CatalogContents
from assetcatalog.models.image_set import ImageSetContents

logger = logging.getLogger(__name__)

ContentsT = TypeVar("ContentsT", bound=CatalogContents)


@dataclass(frozen=True)
class AssetEncoder:
    """Text layout for descriptor files."""

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    def to_wire(self, contents: CatalogContents) -> dict[str, Any]:
        """Plain JSON-ready dict: wire keys, wire strings, unset axes omitted."""
        return contents.model_dump(mode="json", by_alias=True, exclude_none=True)

    def encode(self, contents: CatalogContents) -> str:
        try:
            text = json.dumps(
                self.to_wire(contents),
                indent=self.indent,
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise SerializationError(f"Cannot encode {type(contents).__name__}: {e}") from e
        logger.debug("Encoded %s: %d images, %d chars", type(contents).__name__, len(contents.images), len(text))
        return text

    def decode(self, text: str | bytes, contents_type: type[ContentsT]) -> ContentsT:
        """Parse descriptor text into ``contents_type``.

        Malformed JSON raises :class:`DecodeError`; well-formed JSON that breaks
        the schema raises ``ValidationError``.
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise DecodeError(f"Invalid {contents_type.__name__} JSON: {e}") from e
        contents = contents_type.model_validate(data)
        logger.debug("Decoded %s: %d images", contents_type.__name__, len(contents.images))
        return contents

    def decode_app_icon(self, text: str | bytes) -> AppIconContents:
        return self.decode(text, AppIconContents)

    def decode_image_set(self, text: str | bytes) -> ImageSetContents:
        return self.decode(text, ImageSetContents)


def asset_encoder(config: Settings | None = None) -> AssetEncoder:
    """Shared encoder configured from settings."""
    config = config or settings
    return AssetEncoder(
        indent=config.assetcatalog_json_indent,
        sort_keys=config.assetcatalog_sort_keys,
    )


def encode_contents(contents: CatalogContents, encoder: AssetEncoder | None = None) -> str:
    return (encoder or asset_encoder()).encode(contents)


def write_contents(
    contents: CatalogContents,
    directory: str | Path,
    encoder: AssetEncoder | None = None,
) -> Path:
    """Write the descriptor into an existing catalog directory. Returns the file path."""
    path = Path(directory) / settings.assetcatalog_contents_filename
    text = encode_contents(contents, encoder)
    path.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s (%d images)", path, len(contents.images))
    return path
