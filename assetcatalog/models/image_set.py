"""Image set descriptor model.

Resizable images carry their slicing in ``alignment-insets.resizing``. The
resizing record is a union tagged by ``mode``: each variant only admits the
center dimensions its mode uses, so a horizontal three-part image cannot carry
a center height and a vertical one cannot carry a center width.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, ClassVar, Union

from pydantic import (
    Discriminator,
    Field,
    PlainSerializer,
    Tag,
    field_validator,
)

from assetcatalog.models.base import AssetModel, CatalogContents, Filename
from assetcatalog.models.variants import (
    CenterMode,
    ColorSpace,
    CompressionType,
    DisplayGamut,
    GraphicsFeatureSet,
    HeightClass,
    Idiom,
    LanguageDirection,
    Memory,
    ResizingMode,
    Scale,
    ScreenWidth,
    TemplateRenderingIntent,
    WidthClass,
)


def _compact_number(value: float) -> float | int:
    # 12.0 -> 12, matching the integral insets the packaging tool writes
    return int(value) if math.isfinite(value) and value.is_integer() else value


Inset = Annotated[
    float,
    Field(ge=0, allow_inf_nan=False),
    PlainSerializer(_compact_number, when_used="json"),
]


class CapInsets(AssetModel):
    """Non-resizable slice widths, in pixels, from each edge."""

    top: Inset
    bottom: Inset
    left: Inset
    right: Inset


class HorizontalCenter(AssetModel):
    mode: CenterMode
    width: Inset | None = None


class VerticalCenter(AssetModel):
    mode: CenterMode
    height: Inset | None = None


class NinePartCenter(AssetModel):
    mode: CenterMode
    width: Inset | None = None
    height: Inset | None = None


class _SlicedResizing(AssetModel):
    MODE: ClassVar[ResizingMode]

    @field_validator("mode", check_fields=False)
    @classmethod
    def _fixed_mode(cls, value: ResizingMode) -> ResizingMode:
        if value is not cls.MODE:
            raise ValueError(f"{cls.__name__} requires mode {cls.MODE.value!r}, got {value.value!r}")
        return value


class ThreePartHorizontalResizing(_SlicedResizing):
    """Fixed-width ends, the middle stretches horizontally."""

    MODE: ClassVar[ResizingMode] = ResizingMode.THREE_PART_HORIZONTAL

    mode: ResizingMode = ResizingMode.THREE_PART_HORIZONTAL
    center: HorizontalCenter
    cap_insets: CapInsets


class ThreePartVerticalResizing(_SlicedResizing):
    """Fixed-height ends, the middle stretches vertically."""

    MODE: ClassVar[ResizingMode] = ResizingMode.THREE_PART_VERTICAL

    mode: ResizingMode = ResizingMode.THREE_PART_VERTICAL
    center: VerticalCenter
    cap_insets: CapInsets


class NinePartResizing(_SlicedResizing):
    """Fixed corners, edge caps resize along one axis, the center along both."""

    MODE: ClassVar[ResizingMode] = ResizingMode.NINE_PART

    mode: ResizingMode = ResizingMode.NINE_PART
    center: NinePartCenter
    cap_insets: CapInsets


def _resizing_tag(value: Any) -> str | None:
    mode = value.get("mode") if isinstance(value, dict) else getattr(value, "mode", None)
    if isinstance(mode, ResizingMode):
        return mode.value
    return mode


Resizing = Annotated[
    Union[
        Annotated[ThreePartHorizontalResizing, Tag(ResizingMode.THREE_PART_HORIZONTAL.value)],
        Annotated[ThreePartVerticalResizing, Tag(ResizingMode.THREE_PART_VERTICAL.value)],
        Annotated[NinePartResizing, Tag(ResizingMode.NINE_PART.value)],
    ],
    Discriminator(_resizing_tag),
]


class AlignmentInsets(AssetModel):
    """Alignment rect insets in pixels, plus slicing when the image is resizable."""

    top: Inset
    bottom: Inset
    left: Inset
    right: Inset
    resizing: Resizing | None = None


class ImageSetImage(AssetModel):
    """One image file and the variant it serves.

    Only ``filename`` is required. ``idiom`` falls back to universal and every
    other axis is left out of the descriptor until set.
    """

    filename: Filename
    idiom: Idiom = Idiom.UNIVERSAL
    color_space: ColorSpace | None = None
    compression_type: CompressionType | None = None
    display_gamut: DisplayGamut | None = None
    graphics_feature_set: GraphicsFeatureSet | None = None
    language_direction: LanguageDirection | None = None
    memory: Memory | None = None
    scale: Scale | None = None
    screen_width: ScreenWidth | None = None
    template_rendering_intent: TemplateRenderingIntent | None = None
    width_class: WidthClass | None = None
    height_class: HeightClass | None = None
    alignment_insets: AlignmentInsets | None = None

    @property
    def is_resizable(self) -> bool:
        return self.alignment_insets is not None and self.alignment_insets.resizing is not None


class ImageSetProperties(AssetModel):
    on_demand_resource_tags: tuple[str, ...] = ()
    # keep the PDF vector data instead of rasterizing at build time
    preserves_vector_representation: bool = True


class ImageSetContents(CatalogContents):
    """``Contents.json`` of an ``.imageset`` directory."""

    CATALOG_EXTENSION: ClassVar[str] = "imageset"
    PERMITTED_CONTENT_EXTENSIONS: ClassVar[tuple[str, ...]] = ("avci", "heic", "heif", "png", "jpg", "pdf")

    images: tuple[ImageSetImage, ...]
    properties: ImageSetProperties | None = None

    @classmethod
    def single_universal(cls, name: str) -> ImageSetContents:
        """A catalog with one universal, unscoped ``<name>.png`` image."""
        return cls(images=[ImageSetImage(filename=f"{name}.png")])
