# -*- coding: utf-8 -*-
"""
The Utilities Package for WearPair.

Modules:
- platform_info: Identifies the running platform for the platform icon lookup.
- logging_setup: Root logger configuration for entry points.
"""

from .logging_setup import configure_logging
from .platform_info import current_platform_id

__all__ = [
    "configure_logging",
    "current_platform_id",
]
