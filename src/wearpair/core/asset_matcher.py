# -*- coding: utf-8 -*-
"""
src/wearpair/core/asset_matcher.py

Finds the bundled device image that best fits a device name.

Matching runs in two passes over the catalog, both in catalog order:

1. Strong pass: the stem equals the whole device name, equals
   "<brand> <model>", or contains both the brand and the first
   space-separated token of the model.
2. Loose pass: the stem contains the brand and the first token of the model
   split on whitespace or '+' (so a model of "Watch+ Active" still finds
   "samsung_watch").
"""

import logging
import re
from pathlib import Path
from typing import Optional, Sequence

from .asset_catalog import AssetCatalog
from .brand_extractor import BRAND_VOCABULARY, extract_brand_and_model

logger = logging.getLogger(__name__)

LOOSE_TOKEN_SEPARATOR = re.compile(r"[\s+]")


def match_device_asset(
    device_name: Optional[str],
    catalog: AssetCatalog,
    brands: Sequence[str] = BRAND_VOCABULARY,
) -> Optional[Path]:
    """
    Looks up the catalog entry for a device name.

    Args:
        device_name (Optional[str]): The name reported by the device.
        catalog (AssetCatalog): The raster asset catalog to search.
        brands (Sequence[str]): Brand vocabulary in priority order.

    Returns:
        The path of the first matching asset, or None if nothing matched.
    """
    if not catalog:
        return None

    info = extract_brand_and_model(device_name, brands)
    if info is None:
        return None

    name_lower = device_name.lower()
    full_model_lower = info.full_model.lower()
    brand_lower = info.brand.lower()
    model_lower = info.model.lower()

    # Note: an empty model gives an empty token, which any stem contains.
    first_token = model_lower.split(" ")[0]
    for stem, path in catalog.items():
        if (stem == name_lower
                or stem == full_model_lower
                or (brand_lower in stem and first_token in stem)):
            logger.debug(f"Strong match for '{device_name}': '{stem}'")
            return path

    loose_token = LOOSE_TOKEN_SEPARATOR.split(model_lower)[0]
    for stem, path in catalog.items():
        if brand_lower in stem and loose_token in stem:
            logger.debug(f"Loose match for '{device_name}': '{stem}'")
            return path

    logger.debug(f"No asset matched '{device_name}' ({info.full_model}).")
    return None
