# -*- coding: utf-8 -*-
"""
src/wearpair/utils/platform_info.py

Maps the running operating system to the identifiers used to name the
platform icons (e.g. 'windows.svg', 'macos.svg').
"""

import platform

_PLATFORM_IDS = {
    "Windows": "windows",
    "Darwin": "macos",
    "Linux": "linux",
}


def current_platform_id() -> str:
    """
    Returns the canonical identifier of the current platform.

    Returns:
        str: 'windows', 'macos' or 'linux' for the common desktops; the
             lowercased platform.system() value otherwise (may be empty).
    """
    system = platform.system()
    return _PLATFORM_IDS.get(system, system.lower())
