"""Leaf-node icon geometry helpers. Depends only on the variant vocabulary."""

from __future__ import annotations

from assetcatalog.models.variants import IconSize, Idiom, Scale

_EXTENT_POINTS: dict[IconSize, float] = {
    IconSize.SIZE_16X16: 16,
    IconSize.SIZE_20X20: 20,
    IconSize.SIZE_24X24: 24,
    IconSize.SIZE_27_5X27_5: 27.5,
    IconSize.SIZE_29X29: 29,
    IconSize.SIZE_32X32: 32,
    IconSize.SIZE_40X40: 40,
    IconSize.SIZE_44X44: 44,
    IconSize.SIZE_50X50: 50,
    IconSize.SIZE_60X60: 60,
    IconSize.SIZE_76X76: 76,
    IconSize.SIZE_83_5X83_5: 83.5,
    IconSize.SIZE_86X86: 86,
    IconSize.SIZE_98X98: 98,
    IconSize.SIZE_108X108: 108,
    IconSize.SIZE_128X128: 128,
    IconSize.SIZE_256X256: 256,
    IconSize.SIZE_512X512: 512,
    IconSize.SIZE_1024X1024: 1024,
}

_SCALE_MULTIPLIER: dict[Scale, float] = {
    Scale.UNSCALED: 1,
    Scale.RETINA: 2,
    Scale.RETINA_PLUS: 3,
}

_SCALE_SUFFIX: dict[Scale, str] = {
    Scale.UNSCALED: "",
    Scale.RETINA: "@2x",
    Scale.RETINA_PLUS: "@3x",
}


def extent_points(size: IconSize) -> float:
    """Edge length of an icon size in points."""
    return float(_EXTENT_POINTS[size])


def scale_multiplier(scale: Scale) -> float:
    """Pixels per point for a scale."""
    return float(_SCALE_MULTIPLIER[scale])


def pixel_size(scale: Scale, size: IconSize) -> tuple[float, float]:
    """(width, height) in pixels. Icons are square; no rounding is applied."""
    extent = extent_points(size) * scale_multiplier(scale)
    return (extent, extent)


def scale_suffix(scale: Scale) -> str:
    return _SCALE_SUFFIX[scale]


def idiom_suffix(idiom: Idiom) -> str:
    """File name modifier for an idiom. Only iPad gets one (``~ipad``)."""
    if idiom is Idiom.IPAD:
        return f"~{idiom.value}"
    return ""


def icon_filename(
    stem: str,
    size: IconSize,
    scale: Scale,
    idiom: Idiom | None = None,
    extension: str = "png",
) -> str:
    """Conventional icon file name, e.g. ``icon-60x60@2x.png`` or ``icon-76x76@2x~ipad.png``."""
    name = f"{stem}-{size.value}{scale_suffix(scale)}"
    if idiom is not None:
        name += idiom_suffix(idiom)
    return f"{name}.{extension}"
