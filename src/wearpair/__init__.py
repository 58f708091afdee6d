"""
WearPair Icon Package.

This package contains the icon lookup used by the WearPair companion app:
matching a paired device's name to a bundled device image, and a platform
identifier to its vector icon.
"""

__version__ = "0.1.0"

from .core.icon_reference import IconKind, IconReference, is_image_icon
from .core.icon_resolver import DeviceIconResolver, PlatformIconResolver

__all__ = [
    "DeviceIconResolver",
    "IconKind",
    "IconReference",
    "PlatformIconResolver",
    "is_image_icon",
]
