# -*- coding: utf-8 -*-
"""
The Core Icon Lookup Package for WearPair.

Modules within this package:
- `brand_extractor`: Parses brand and model out of a device name.
- `asset_catalog`: Indexes the bundled icon files by stem.
- `asset_matcher`: Picks the best device image for a name.
- `icon_reference`: The icon value type and the raster/vector check.
- `icon_resolver`: The public resolvers with their fallback policies.
"""

from .asset_catalog import AssetCatalog, CatalogCache, CatalogLoadError
from .asset_matcher import match_device_asset
from .brand_extractor import BRAND_VOCABULARY, BrandModelDescriptor, extract_brand_and_model
from .icon_reference import IconKind, IconReference, is_image_icon

__all__ = [
    "AssetCatalog",
    "BRAND_VOCABULARY",
    "BrandModelDescriptor",
    "CatalogCache",
    "CatalogLoadError",
    "IconKind",
    "IconReference",
    "extract_brand_and_model",
    "is_image_icon",
    "match_device_asset",
]
