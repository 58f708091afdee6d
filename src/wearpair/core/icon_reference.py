# -*- coding: utf-8 -*-
"""
src/wearpair/core/icon_reference.py

The value handed to the rendering layer: a bundled raster image, a vector
platform icon, or the generic default device icon.
"""

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Union

RASTER_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp"})
VECTOR_EXTENSIONS = frozenset({".svg"})


class IconKind(enum.Enum):
    RASTER = "raster"
    VECTOR = "vector"
    DEFAULT = "default"


@dataclass(frozen=True)
class IconReference:
    """An icon located on disk, tagged with how it was produced."""
    path: Path
    kind: IconKind

    def __str__(self) -> str:
        return str(self.path)


def is_image_icon(icon: Union[IconReference, Path, str, None]) -> bool:
    """
    Tells whether an icon reference points at a raster image.

    Callers use this to choose between drawing a picture and drawing a
    vector glyph. The decision is made on the file suffix only, so the
    default icon counts as an image as long as it is itself a raster file.

    Args:
        icon: An IconReference, or a bare path/string.

    Returns:
        bool: True for raster files, False for vector icons, empty values and
              anything else.
    """
    if isinstance(icon, IconReference):
        icon = icon.path
    if not isinstance(icon, (str, Path)) or not str(icon):
        return False
    return Path(icon).suffix.lower() in RASTER_EXTENSIONS
