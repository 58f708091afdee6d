"""Tests for the raster/vector icon check."""

from pathlib import Path

import pytest

from wearpair.core.icon_reference import IconKind, IconReference, is_image_icon


@pytest.mark.parametrize("icon", [
    IconReference(Path("/assets/images/other.png"), IconKind.DEFAULT),
    IconReference(Path("/assets/images/xiaomi_band_9.png"), IconKind.RASTER),
    "/assets/images/garmin.JPEG",
    Path("apple_watch.webp"),
])
def test_raster_icons(icon):
    assert is_image_icon(icon)


@pytest.mark.parametrize("icon", [
    IconReference(Path("/assets/icons/macos.svg"), IconKind.VECTOR),
    "/assets/icons/windows.svg",
    "",
    None,
    42,
    "png",
])
def test_non_raster_icons(icon):
    assert not is_image_icon(icon)


def test_references_compare_by_value():
    first = IconReference(Path("a.png"), IconKind.RASTER)
    assert first == IconReference(Path("a.png"), IconKind.RASTER)
    assert first != IconReference(Path("a.png"), IconKind.DEFAULT)
    assert str(first) == "a.png"
