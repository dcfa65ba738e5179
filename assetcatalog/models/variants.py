"""Variant vocabulary: one closed enumeration per axis.

Every member's value is its wire string. Member names are Python identifiers
only and never reach the descriptor, so renaming a member cannot change the
output.
"""

from __future__ import annotations

import enum


class Variant(str, enum.Enum):
    """A closed axis whose values serialize as fixed wire strings."""

    @property
    def wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class IconSize(Variant):
    """App icon size in points."""

    SIZE_16X16 = "16x16"  # macOS
    SIZE_20X20 = "20x20"  # iPhone/iPad notification
    SIZE_24X24 = "24x24"  # 38mm/40mm watch notification center
    SIZE_27_5X27_5 = "27.5x27.5"  # 42mm/44mm watch notification center
    SIZE_29X29 = "29x29"  # settings, watch companion settings
    SIZE_32X32 = "32x32"  # macOS
    SIZE_40X40 = "40x40"  # spotlight, main watch app icon
    SIZE_44X44 = "44x44"  # watch long look
    SIZE_50X50 = "50x50"  # watch long look
    SIZE_60X60 = "60x60"  # main iPhone app icon
    SIZE_76X76 = "76x76"  # main iPad app icon
    SIZE_83_5X83_5 = "83.5x83.5"  # iPad Pro app icon
    SIZE_86X86 = "86x86"  # 38mm watch short look
    SIZE_98X98 = "98x98"  # 40mm/42mm watch short look
    SIZE_108X108 = "108x108"  # 44mm watch short look
    SIZE_128X128 = "128x128"  # macOS
    SIZE_256X256 = "256x256"  # macOS
    SIZE_512X512 = "512x512"  # macOS
    SIZE_1024X1024 = "1024x1024"  # App Store


class Scale(Variant):
    """Target display scale. Unset means any scale (a vector file)."""

    UNSCALED = "1x"
    RETINA = "2x"
    RETINA_PLUS = "3x"


class Idiom(Variant):
    """Device family."""

    UNIVERSAL = "universal"
    IPHONE = "iphone"
    IPAD = "ipad"
    MAC = "mac"
    TV = "tv"
    WATCH = "watch"
    APP_LAUNCHER = "appLauncher"
    COMPANION_SETTINGS = "companionSettings"
    NOTIFICATION_CENTER = "notificationCenter"
    QUICK_LOOK = "quickLook"
    IOS_MARKETING = "ios-marketing"
    WATCH_MARKETING = "watch-marketing"


class DisplayGamut(Variant):
    """Display color gamut. Unset means sRGB."""

    SRGB = "srgb"
    DISPLAY_P3 = "display-p3"


class ColorSpace(Variant):
    """Image color space. Unset means sRGB."""

    SRGB = "srgb"
    DISPLAY_P3 = "display-p3"


class CompressionType(Variant):
    """Unset inherits from the parent, or lossless when there is none."""

    AUTOMATIC = "automatic"
    GPU_OPTIMIZED_BEST = "gpu-optimized-best"
    GPU_OPTIMIZED_SMALLEST = "gpu-optimized-smallest"
    LOSSLESS = "lossless"
    LOSSY = "lossy"


class GraphicsFeatureSet(Variant):
    """Minimum Metal GPU family, named after the iOS feature sets.

    Unset means any device with OpenGL ES 2.0.
    """

    METAL_1V2 = "metal1v2"
    METAL_1V3 = "metal1v3"
    METAL_2V2 = "metal2v2"
    METAL_2V3 = "metal2v3"
    METAL_3V1 = "metal3v1"
    METAL_3V2 = "metal3v2"
    METAL_4V1 = "metal4v1"


class LanguageDirection(Variant):
    """Unset means the image never mirrors."""

    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"


class Memory(Variant):
    """Minimum device memory."""

    ONE_GB = "1GB"
    TWO_GB = "2GB"
    THREE_GB = "3GB"
    FOUR_GB = "4GB"


class ScreenWidth(Variant):
    """Apple Watch screen width class."""

    SMALL = "<=145"  # 38mm, 40mm
    NOT_SMALL = ">145"  # 42mm, 44mm


class TemplateRenderingIntent(Variant):
    ORIGINAL = "original"
    TEMPLATE = "template"


class WidthClass(Variant):
    COMPACT = "compact"
    REGULAR = "regular"


class HeightClass(Variant):
    COMPACT = "compact"
    REGULAR = "regular"


class Role(Variant):
    """Apple Watch icon role. Unset means the icon is not for the watch."""

    NOTIFICATION_CENTER = "notificationCenter"
    COMPANION_SETTINGS = "companionSettings"
    APP_LAUNCHER = "appLauncher"
    LONG_LOOK = "longLook"
    QUICK_LOOK = "quickLook"
    ITUNES = "itunes"


class Subtype(Variant):
    """Watch case size for model-specific icons."""

    WATCH_38MM = "38mm"
    WATCH_40MM = "40mm"
    WATCH_42MM = "42mm"
    WATCH_44MM = "44mm"
    ITUNES = ""


class MatchingStyle(Variant):
    FULLY_QUALIFIED_NAME = "fully-qualified-name"


class ResizingMode(Variant):
    """How a sliced resizable image is divided."""

    THREE_PART_HORIZONTAL = "3-part-horizontal"
    THREE_PART_VERTICAL = "3-part-vertical"
    NINE_PART = "9-part"


class CenterMode(Variant):
    """How the central area of a resizable image fills the available size."""

    TILE = "tile"
    STRETCH = "stretch"
