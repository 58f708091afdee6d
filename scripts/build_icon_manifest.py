"""
Builds the device icon manifest.

Scans the device image directory once, at build time, and writes the
catalog order and image sizes to 'icon_manifest.json' so the app can load
its catalog without scanning the directory at start-up.

Usage (from the project root):
    python scripts/build_icon_manifest.py [--images-dir DIR] [--output FILE]
"""

import argparse
import json
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

# --- Path Setup ---
# This script is intended to be run from the project root directory.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT / "src") not in sys.path:
    sys.path.append(str(PROJECT_ROOT / "src"))

from wearpair.config import BUNDLED_IMAGES_DIR
from wearpair.core.asset_catalog import MANIFEST_VERSION, RASTER_EXTENSIONS, AssetCatalog, CatalogLoadError
from wearpair.utils.logging_setup import configure_logging

MANIFEST_FILENAME = "icon_manifest.json"


def read_image_size(path: Path):
    """
    Opens an image with Pillow and returns its (width, height), or None if the
    file is not a readable image.
    """
    try:
        with Image.open(path) as image:
            return image.size
    except (UnidentifiedImageError, OSError) as e:
        print(f"  -> SKIPPING {path.name}: {e}")
        return None


def build_manifest(images_dir: Path, output_path: Path) -> dict:
    """
    Scans `images_dir` and returns the manifest dictionary.

    File names are stored relative to the manifest's directory, which must
    therefore be `images_dir` or one of its parents.
    """
    catalog = AssetCatalog.from_directory(images_dir, RASTER_EXTENSIONS)
    base_dir = output_path.resolve().parent

    entries = []
    for stem, path in catalog.items():
        size = read_image_size(path)
        if size is None:
            continue
        width, height = size
        entries.append({
            "stem": stem,
            "file": path.resolve().relative_to(base_dir).as_posix(),
            "width": width,
            "height": height,
        })
    return {"version": MANIFEST_VERSION, "entries": entries}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the device icon manifest.")
    parser.add_argument("--images-dir", type=Path, default=BUNDLED_IMAGES_DIR)
    parser.add_argument("--output", type=Path, default=None,
                        help=f"Output file (default: <images-dir>/{MANIFEST_FILENAME}).")
    args = parser.parse_args(argv)
    configure_logging("INFO")

    output_path = args.output or args.images_dir / MANIFEST_FILENAME
    print(f"--- Building icon manifest from {args.images_dir} ---")

    try:
        manifest = build_manifest(args.images_dir, output_path)
    except CatalogLoadError as e:
        print(f"\nERROR: {e}")
        return 1
    except ValueError as e:
        print(f"\nERROR: The manifest must be written inside the images directory tree: {e}")
        return 1

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, indent=2)
    except OSError as e:
        print(f"\nFATAL ERROR: Failed to write manifest file: {e}")
        return 1

    print(f"Wrote {len(manifest['entries'])} entries to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
