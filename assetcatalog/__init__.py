"""Asset catalog descriptors: app icon sets, image sets and their Contents.json."""

from assetcatalog.catalog.encoder import AssetEncoder, asset_encoder, encode_contents, write_contents
from assetcatalog.errors import AssetCatalogError, DecodeError, SerializationError, ValidationError
from assetcatalog.models.app_icon_set import AppIconContents, AppIconImage, AppIconProperties
from assetcatalog.models.base import INFO, Info
from assetcatalog.models.image_set import (
    AlignmentInsets,
    CapInsets,
    HorizontalCenter,
    ImageSetContents,
    ImageSetImage,
    ImageSetProperties,
    NinePartCenter,
    NinePartResizing,
    ThreePartHorizontalResizing,
    ThreePartVerticalResizing,
    VerticalCenter,
)
from assetcatalog.utils.geometry import (
    extent_points,
    icon_filename,
    idiom_suffix,
    pixel_size,
    scale_multiplier,
    scale_suffix,
)

__version__ = "0.1.0"

__all__ = [
    "AssetEncoder",
    "asset_encoder",
    "encode_contents",
    "write_contents",
    "AssetCatalogError",
    "DecodeError",
    "SerializationError",
    "ValidationError",
    "AppIconContents",
    "AppIconImage",
    "AppIconProperties",
    "INFO",
    "Info",
    "AlignmentInsets",
    "CapInsets",
    "HorizontalCenter",
    "ImageSetContents",
    "ImageSetImage",
    "ImageSetProperties",
    "NinePartCenter",
    "NinePartResizing",
    "ThreePartHorizontalResizing",
    "ThreePartVerticalResizing",
    "VerticalCenter",
    "extent_points",
    "icon_filename",
    "idiom_suffix",
    "pixel_size",
    "scale_multiplier",
    "scale_suffix",
]
