"""Shared kernel: wire naming, the descriptor base model and the authorship record."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Annotated, Any, ClassVar, Literal, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, computed_field, model_validator

logger = logging.getLogger(__name__)

AUTHOR = "AssetCatalog"
VERSION = 1

ModelT = TypeVar("ModelT", bound="AssetModel")


def wire_name(field_name: str) -> str:
    """Hyphenated wire key for an identifier-style field name (``cap_insets`` -> ``cap-insets``)."""
    return field_name.replace("_", "-")


def _require_filename(value: str) -> str:
    if not value.strip():
        raise ValueError("filename must not be blank")
    return value


Filename = Annotated[str, AfterValidator(_require_filename)]


class AssetModel(BaseModel):
    """Immutable descriptor value. Unknown keys are rejected, field names go out hyphenated."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=wire_name,
    )

    def replace(self: ModelT, **changes: Any) -> ModelT:
        """Return a copy with ``changes`` applied, validated like a fresh construction.

        Passing ``None`` for an optional axis clears it.
        """
        data = self.model_dump(exclude_none=True)
        data.update(changes)
        return type(self).model_validate(data)


class Info(AssetModel):
    """Authorship record embedded in every catalog."""

    author: Literal["AssetCatalog"] = AUTHOR
    version: Literal[1] = VERSION


INFO = Info()


class CatalogContents(AssetModel):
    """Serialization root for one catalog directory.

    ``info`` is always the shared :data:`INFO` record; an incoming ``info``
    object is discarded rather than validated, so callers and decoded files
    can never override authorship or version.
    """

    CATALOG_EXTENSION: ClassVar[str] = ""
    PERMITTED_CONTENT_EXTENSIONS: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _discard_info(cls, data: Any) -> Any:
        if isinstance(data, dict) and "info" in data:
            logger.debug("Ignoring supplied info for %s", cls.__name__)
            data = {k: v for k, v in data.items() if k != "info"}
        return data

    @computed_field
    @property
    def info(self) -> Info:
        return INFO

    @classmethod
    def directory_name(cls, name: str) -> str:
        """Catalog directory for ``name``, e.g. ``AppIcon.appiconset``."""
        return f"{name}.{cls.CATALOG_EXTENSION}"

    @classmethod
    def is_permitted_content(cls, filename: str) -> bool:
        """Whether ``filename`` has an extension this catalog family accepts."""
        suffix = PurePath(filename).suffix.lower().lstrip(".")
        return suffix in cls.PERMITTED_CONTENT_EXTENSIONS
