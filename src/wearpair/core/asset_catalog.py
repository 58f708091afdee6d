# -*- coding: utf-8 -*-
"""
src/wearpair/core/asset_catalog.py

This module defines the AssetCatalog, a read-only index of the icon files
bundled with the application, keyed by normalized filename stem.

Catalogs are built once, either by scanning an asset directory or from a
manifest written at build time by 'scripts/build_icon_manifest.py', and are
never modified afterwards. CatalogCache keeps one built catalog around and
swaps in a fresh one only when the asset bundle changes on disk.
"""

import json
import logging
import os
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, Iterator, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .icon_reference import RASTER_EXTENSIONS, VECTOR_EXTENSIONS

logger = logging.getLogger(__name__)

MANIFEST_VERSION = 1

__all__ = [
    "AssetCatalog",
    "CatalogCache",
    "CatalogLoadError",
    "RASTER_EXTENSIONS",
    "VECTOR_EXTENSIONS",
    "directory_signature",
]


class CatalogLoadError(OSError):
    """Raised when the asset bundle cannot be read at all."""


def _is_valid_image(path: Path) -> bool:
    """Checks that Pillow can identify and verify the image file."""
    try:
        with Image.open(path) as image:
            image.verify()
        return True
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Skipping unreadable image '{path.name}': {e}")
        return False


class AssetCatalog(Mapping):
    """
    An immutable mapping of lowercase filename stem -> asset path.

    Iteration follows the order the entries were discovered in, which is
    lexicographic file name order for directory scans and file order for
    manifests. Matching relies on this order being stable.
    """

    def __init__(
        self,
        entries: Iterable[Tuple[str, Path]] = (),
        source: Optional[Path] = None,
        normalize: bool = True,
    ):
        """
        Args:
            entries: (stem, path) pairs in catalog order. On duplicate keys the
                     first entry is kept.
            source (Optional[Path]): Where the entries came from, for logging.
            normalize (bool): Lowercase the stems. Disable for exact-key catalogs.
        """
        index: Dict[str, Path] = {}
        for stem, path in entries:
            key = stem.lower() if normalize else stem
            if key in index:
                logger.debug(f"Duplicate asset stem '{key}': keeping '{index[key].name}', ignoring '{Path(path).name}'.")
                continue
            index[key] = Path(path)
        self._entries = MappingProxyType(index)
        self.source = source

    def __getitem__(self, stem: str) -> Path:
        return self._entries[stem]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AssetCatalog(source={self.source!r}, entries={len(self)})"

    @classmethod
    def from_directory(
        cls,
        directory: Path,
        extensions: Iterable[str] = RASTER_EXTENSIONS,
        verify_images: bool = False,
        case_sensitive: bool = False,
    ) -> "AssetCatalog":
        """
        Builds a catalog from the files directly inside `directory`.

        Args:
            directory (Path): The bundled asset directory.
            extensions: Accepted file suffixes (compared case-insensitively).
            verify_images (bool): Open every file with Pillow and skip the ones
                                  that are not readable images.
            case_sensitive (bool): Keep stems exactly as spelled on disk instead
                                   of lowercasing them.

        Returns:
            The catalog; empty if the directory holds no matching files.

        Raises:
            CatalogLoadError: If the directory does not exist or cannot be listed.
        """
        directory = Path(directory)
        suffixes = {ext.lower() for ext in extensions}
        try:
            names = sorted(entry.name for entry in os.scandir(directory) if entry.is_file())
        except OSError as e:
            raise CatalogLoadError(f"Cannot read asset directory '{directory}': {e}") from e

        entries = []
        for name in names:
            path = directory / name
            if path.suffix.lower() not in suffixes:
                continue
            if verify_images and not _is_valid_image(path):
                continue
            entries.append((path.stem, path))

        catalog = cls(entries, source=directory, normalize=not case_sensitive)
        logger.info(f"Loaded {len(catalog)} assets from '{directory}'.")
        return catalog

    @classmethod
    def from_manifest(cls, manifest_path: Path) -> "AssetCatalog":
        """
        Builds a catalog from a JSON manifest written by the build script.

        File names in the manifest are resolved relative to the manifest's
        own directory.

        Raises:
            CatalogLoadError: If the manifest is missing, unreadable or malformed.
        """
        manifest_path = Path(manifest_path)
        try:
            with open(manifest_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if data.get("version") != MANIFEST_VERSION:
                raise ValueError(f"unsupported manifest version {data.get('version')!r}")
            base_dir = manifest_path.parent
            entries = [(item["stem"], base_dir / item["file"]) for item in data["entries"]]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise CatalogLoadError(f"Cannot load icon manifest '{manifest_path}': {e}") from e

        catalog = cls(entries, source=manifest_path)
        logger.info(f"Loaded {len(catalog)} assets from manifest '{manifest_path}'.")
        return catalog


def directory_signature(directory: Path) -> Hashable:
    """
    Summarizes a directory's contents so that changes to the bundle can be
    detected without rebuilding the catalog.

    Returns:
        A sorted tuple of (name, size, mtime_ns) for every file, or None if the
        directory cannot be listed.
    """
    try:
        return tuple(sorted(
            (entry.name, stat.st_size, stat.st_mtime_ns)
            for entry in os.scandir(directory)
            if entry.is_file()
            for stat in (entry.stat(),)
        ))
    except OSError:
        return None


class CatalogCache:
    """
    Holds one built catalog for the lifetime of the process and rebuilds it
    only when the signature of its source changes.

    A rebuild replaces the cached reference in a single assignment. Callers
    that already obtained the previous catalog keep a consistent snapshot.
    """

    def __init__(self, loader: Callable[[], AssetCatalog], signature: Callable[[], Hashable]):
        """
        Args:
            loader: Builds a fresh catalog; may raise CatalogLoadError.
            signature: Returns a value that changes whenever the bundle does.
        """
        self._loader = loader
        self._signature = signature
        self._lock = threading.Lock()
        self._catalog: Optional[AssetCatalog] = None
        self._catalog_signature: Hashable = None

    def get(self) -> AssetCatalog:
        """Returns the cached catalog, rebuilding it if the bundle changed."""
        current = self._signature()
        catalog = self._catalog
        if catalog is not None and current == self._catalog_signature:
            return catalog

        with self._lock:
            if self._catalog is not None and current == self._catalog_signature:
                return self._catalog
            logger.debug("Asset bundle changed or not loaded yet; rebuilding catalog.")
            fresh = self._loader()
            # Catalog before signature: the unlocked read above must never pair
            # the new signature with the old catalog.
            self._catalog = fresh
            self._catalog_signature = current
            return fresh

    def invalidate(self):
        """Drops the cached catalog so the next get() rebuilds it."""
        with self._lock:
            self._catalog = None
            self._catalog_signature = None
