"""App icon set descriptor model."""

from __future__ import annotations

from typing import ClassVar

from assetcatalog.models.base import AssetModel, CatalogContents, Filename
from assetcatalog.models.variants import (
    DisplayGamut,
    IconSize,
    Idiom,
    MatchingStyle,
    Role,
    Scale,
    Subtype,
)


class AppIconImage(AssetModel):
    """One icon file and the variant it serves.

    ``idiom`` falls back to universal; every other axis is omitted from the
    descriptor until set.
    """

    filename: Filename
    idiom: Idiom = Idiom.UNIVERSAL
    size: IconSize | None = None
    scale: Scale | None = None
    subtype: Subtype | None = None  # watch only
    role: Role | None = None  # watch only
    display_gamut: DisplayGamut | None = None
    matching_style: MatchingStyle | None = None


class AppIconProperties(AssetModel):
    # iOS 6 compatibility: the icon already includes the mask and shine
    pre_rendered: bool = False


class AppIconContents(CatalogContents):
    """``Contents.json`` of an ``.appiconset`` directory."""

    CATALOG_EXTENSION: ClassVar[str] = "appiconset"
    PERMITTED_CONTENT_EXTENSIONS: ClassVar[tuple[str, ...]] = ("png",)

    images: tuple[AppIconImage, ...]
    properties: AppIconProperties | None = None
