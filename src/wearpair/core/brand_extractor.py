# -*- coding: utf-8 -*-
"""
src/wearpair/core/brand_extractor.py

Derives a brand/model descriptor from the free-text name a wearable reports
during discovery (e.g. "Xiaomi Mi Band 9 Pro" -> brand "xiaomi", model "9 Pro").
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

# Priority order matters: when a name contains several brand tokens, the one
# listed first here wins, regardless of where it appears in the name.
BRAND_VOCABULARY = (
    "xiaomi",
    "apple",
    "samsung",
    "garmin",
    "fitbit",
    "huawei",
    "oppo",
    "vivo",
    "realme",
)

# A model number: the first run of digits plus any words/spaces trailing it.
# Digits and word characters are ASCII only; any Unicode space counts (NBSP, U+3000).
MODEL_PATTERN = re.compile(r"[0-9]+(?:\s|[A-Za-z0-9_])*")


@dataclass(frozen=True)
class BrandModelDescriptor:
    """Brand and model parsed out of a device name."""
    brand: str
    model: str
    full_model: str


def extract_brand_and_model(
    device_name: Optional[str],
    brands: Sequence[str] = BRAND_VOCABULARY,
) -> Optional[BrandModelDescriptor]:
    """
    Parses a device name into a BrandModelDescriptor.

    Args:
        device_name (Optional[str]): The name as reported by the device.
        brands (Sequence[str]): Lowercase brand tokens in priority order.

    Returns:
        The descriptor, or None if the name is empty or contains no known brand.
    """
    if not device_name:
        return None

    name_lower = device_name.lower()
    matched_brand = next((brand for brand in brands if brand in name_lower), None)
    if matched_brand is None:
        return None

    brand_index = name_lower.index(matched_brand)
    after_brand = device_name[brand_index + len(matched_brand):].strip()

    model_match = MODEL_PATTERN.search(after_brand)
    model = model_match.group(0).strip() if model_match else after_brand

    full_model = f"{matched_brand} {model}" if model else matched_brand
    return BrandModelDescriptor(brand=matched_brand, model=model, full_model=full_model)
