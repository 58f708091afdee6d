# -*- coding: utf-8 -*-
"""
src/wearpair/cli.py

Command line front end for the icon lookup, useful for checking which
bundled image a device name resolves to.

Examples:
    wearpair "Xiaomi Smart Band 9 Pro"
    wearpair --platform
    wearpair --platform macos
    wearpair --list
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import find_default_icon, get_config
from .core.asset_catalog import CatalogLoadError
from .core.icon_resolver import DeviceIconResolver, PlatformIconResolver
from .utils.logging_setup import configure_logging
from .utils.platform_info import current_platform_id

logger = logging.getLogger(__name__)

_CURRENT_PLATFORM = object()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wearpair",
        description="Resolve the icon shown for a paired device or platform.",
    )
    parser.add_argument("device_name", nargs="?", default=None,
                        help="Device name as reported during discovery.")
    parser.add_argument("--platform", nargs="?", const=_CURRENT_PLATFORM, default=None,
                        metavar="ID", help="Resolve a platform icon (default: this platform).")
    parser.add_argument("--images-dir", type=Path, help="Override the device image directory.")
    parser.add_argument("--icons-dir", type=Path, help="Override the platform icon directory.")
    parser.add_argument("--list", action="store_true", help="Print the device catalog in match order.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the command line interface.

    Returns:
        int: Process exit code; 1 only if --list cannot read the catalog.
    """
    args = build_parser().parse_args(argv)
    config = get_config()
    configure_logging("DEBUG" if args.verbose else config.log_level)

    device_resolver = DeviceIconResolver.from_config(config)
    if args.images_dir is not None:
        device_resolver = DeviceIconResolver(
            images_dir=args.images_dir,
            default_icon=find_default_icon(args.images_dir, config.default_icon_filename),
            brands=config.brands,
            verify_images=config.verify_images,
            use_cache=False,
        )
    platform_resolver = PlatformIconResolver(
        icons_dir=args.icons_dir or config.icons_dir, use_cache=False
    )

    if args.list:
        try:
            catalog = device_resolver.load_catalog()
        except CatalogLoadError as e:
            logger.error(f"Could not load device catalog: {e}")
            return 1
        for stem, path in catalog.items():
            print(f"{stem}\t{path}")

    if args.device_name is not None:
        icon = device_resolver.resolve(args.device_name)
        print(f"{icon.kind.value}\t{icon}")

    if args.platform is not None:
        platform_id = current_platform_id() if args.platform is _CURRENT_PLATFORM else args.platform
        icon = platform_resolver.resolve(platform_id)
        print(f"{platform_id}\t{icon if icon is not None else ''}")

    return 0
