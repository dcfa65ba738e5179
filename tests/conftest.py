"""Shared test fixtures."""

from __future__ import annotations

import pytest

from assetcatalog.models.app_icon_set import AppIconContents, AppIconImage, AppIconProperties
from assetcatalog.models.image_set import (
    AlignmentInsets,
    CapInsets,
    HorizontalCenter,
    ImageSetContents,
    ImageSetImage,
    ImageSetProperties,
    ThreePartHorizontalResizing,
)
from assetcatalog.models.variants import (
    CenterMode,
    ColorSpace,
    CompressionType,
    DisplayGamut,
    GraphicsFeatureSet,
    HeightClass,
    IconSize,
    Idiom,
    LanguageDirection,
    Memory,
    Scale,
    ScreenWidth,
    TemplateRenderingIntent,
    WidthClass,
)


# A typical iPhone + iPad + marketing icon set, in declaration order

ICON_IMAGES = (
    AppIconImage(filename="icon-20x20@2x.png", idiom=Idiom.IPHONE, size=IconSize.SIZE_20X20, scale=Scale.RETINA),
    AppIconImage(filename="icon-60x60@2x.png", idiom=Idiom.IPHONE, size=IconSize.SIZE_60X60, scale=Scale.RETINA),
    AppIconImage(filename="icon-60x60@3x.png", idiom=Idiom.IPHONE, size=IconSize.SIZE_60X60, scale=Scale.RETINA_PLUS),
    AppIconImage(filename="icon-76x76@2x~ipad.png", idiom=Idiom.IPAD, size=IconSize.SIZE_76X76, scale=Scale.RETINA),
    AppIconImage(
        filename="icon-83.5x83.5@2x~ipad.png",
        idiom=Idiom.IPAD,
        size=IconSize.SIZE_83_5X83_5,
        scale=Scale.RETINA,
        display_gamut=DisplayGamut.DISPLAY_P3,
    ),
    AppIconImage(
        filename="icon-1024x1024.png",
        idiom=Idiom.IOS_MARKETING,
        size=IconSize.SIZE_1024X1024,
        scale=Scale.UNSCALED,
    ),
)

BUTTON_INSETS = AlignmentInsets(
    top=0,
    bottom=2,
    left=1,
    right=1,
    resizing=ThreePartHorizontalResizing(
        center=HorizontalCenter(mode=CenterMode.STRETCH, width=4),
        cap_insets=CapInsets(top=0, bottom=0, left=12, right=12.5),
    ),
)

# Every optional axis set
FULL_IMAGE = ImageSetImage(
    filename="button@2x.png",
    idiom=Idiom.IPHONE,
    color_space=ColorSpace.DISPLAY_P3,
    compression_type=CompressionType.GPU_OPTIMIZED_BEST,
    display_gamut=DisplayGamut.DISPLAY_P3,
    graphics_feature_set=GraphicsFeatureSet.METAL_3V1,
    language_direction=LanguageDirection.LEFT_TO_RIGHT,
    memory=Memory.TWO_GB,
    scale=Scale.RETINA,
    screen_width=ScreenWidth.NOT_SMALL,
    template_rendering_intent=TemplateRenderingIntent.TEMPLATE,
    width_class=WidthClass.COMPACT,
    height_class=HeightClass.REGULAR,
    alignment_insets=BUTTON_INSETS,
)


@pytest.fixture
def icon_contents() -> AppIconContents:
    return AppIconContents(images=ICON_IMAGES, properties=AppIconProperties(pre_rendered=True))


@pytest.fixture
def image_contents() -> ImageSetContents:
    return ImageSetContents(
        images=[
            ImageSetImage(filename="button.pdf"),
            FULL_IMAGE,
        ],
        properties=ImageSetProperties(
            on_demand_resource_tags=["level-1", "buttons"],
            preserves_vector_representation=False,
        ),
    )
