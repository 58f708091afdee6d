# -*- coding: utf-8 -*-
"""
src/wearpair/core/icon_resolver.py

Public entry points for icon lookup.

DeviceIconResolver turns a device name into a bundled device image, falling
back to the generic device icon. PlatformIconResolver maps a platform
identifier ("windows", "macos", ...) to its vector icon, or to None.

Neither resolver lets an exception escape: catalog failures and unexpected
errors are logged and turned into the resolver's fallback value.
"""

import asyncio
import functools
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..utils.platform_info import current_platform_id
from .asset_catalog import (
    RASTER_EXTENSIONS,
    VECTOR_EXTENSIONS,
    AssetCatalog,
    CatalogCache,
    directory_signature,
)
from .asset_matcher import match_device_asset
from .brand_extractor import BRAND_VOCABULARY
from .icon_reference import IconKind, IconReference

logger = logging.getLogger(__name__)


class DeviceIconResolver:
    """
    Resolves device names to device images.

    The catalog is built from `images_dir` (or from a prebuilt manifest). With
    caching on, it is built once and rebuilt only when the bundle changes;
    with caching off, every lookup scans the bundle again.
    """

    def __init__(
        self,
        images_dir: Path,
        default_icon: Path,
        brands: Sequence[str] = BRAND_VOCABULARY,
        manifest_path: Optional[Path] = None,
        verify_images: bool = False,
        use_cache: bool = True,
    ):
        """
        Args:
            images_dir (Path): Directory of bundled raster device images.
            default_icon (Path): Image returned when no device image matches.
            brands (Sequence[str]): Brand vocabulary in priority order.
            manifest_path (Optional[Path]): Prebuilt manifest to load instead of
                                            scanning `images_dir`.
            verify_images (bool): Skip files Pillow cannot read.
            use_cache (bool): Keep the built catalog between calls.
        """
        self.images_dir = Path(images_dir)
        self.default_icon = IconReference(path=Path(default_icon), kind=IconKind.DEFAULT)
        self.brands = tuple(brands)
        self.manifest_path = Path(manifest_path) if manifest_path else None
        self.verify_images = verify_images
        self._cache = CatalogCache(self._build_catalog, self._bundle_signature) if use_cache else None

    @classmethod
    def from_config(cls, config) -> "DeviceIconResolver":
        """Creates a resolver from a wearpair.config.Config instance."""
        return cls(
            images_dir=config.images_dir,
            default_icon=config.default_icon_path,
            brands=config.brands,
            manifest_path=config.manifest_path,
            verify_images=config.verify_images,
            use_cache=config.cache_catalog,
        )

    def _build_catalog(self) -> AssetCatalog:
        if self.manifest_path is not None:
            return AssetCatalog.from_manifest(self.manifest_path)
        return AssetCatalog.from_directory(
            self.images_dir, RASTER_EXTENSIONS, verify_images=self.verify_images
        )

    def _bundle_signature(self):
        if self.manifest_path is not None:
            try:
                stat = self.manifest_path.stat()
            except OSError:
                return None
            return (stat.st_size, stat.st_mtime_ns)
        return directory_signature(self.images_dir)

    def load_catalog(self) -> AssetCatalog:
        """
        Returns the current catalog snapshot.

        Raises:
            CatalogLoadError: If the asset bundle cannot be read.
        """
        if self._cache is not None:
            return self._cache.get()
        return self._build_catalog()

    def _match(self, device_name: str, catalog: AssetCatalog) -> IconReference:
        asset_path = match_device_asset(device_name, catalog, self.brands)
        if asset_path is None:
            return self.default_icon
        return IconReference(path=asset_path, kind=IconKind.RASTER)

    def resolve(self, device_name: Optional[str]) -> IconReference:
        """
        Finds the icon for a device name.

        Args:
            device_name (Optional[str]): The human-readable device name.

        Returns:
            IconReference: The matching device image, or the default icon when
                           the name is empty, nothing matches, or the catalog
                           cannot be loaded.
        """
        if not device_name:
            return self.default_icon
        try:
            return self._match(device_name, self.load_catalog())
        except Exception as e:
            logger.error(f"Error resolving icon for device '{device_name}': {e}", exc_info=True)
            return self.default_icon

    async def resolve_async(self, device_name: Optional[str]) -> IconReference:
        """Coroutine version of resolve(); the catalog is loaded in a worker thread."""
        if not device_name:
            return self.default_icon
        try:
            catalog = await asyncio.to_thread(self.load_catalog)
            return self._match(device_name, catalog)
        except Exception as e:
            logger.error(f"Error resolving icon for device '{device_name}': {e}", exc_info=True)
            return self.default_icon


class PlatformIconResolver:
    """
    Resolves platform identifiers to vector icons by exact file stem.

    There is no default platform icon: misses and failures yield None.
    """

    def __init__(self, icons_dir: Path, use_cache: bool = True):
        self.icons_dir = Path(icons_dir)
        self._loader = functools.partial(
            AssetCatalog.from_directory, self.icons_dir, VECTOR_EXTENSIONS, case_sensitive=True
        )
        self._cache = (
            CatalogCache(self._loader, functools.partial(directory_signature, self.icons_dir))
            if use_cache else None
        )

    @classmethod
    def from_config(cls, config) -> "PlatformIconResolver":
        """Creates a resolver from a wearpair.config.Config instance."""
        return cls(icons_dir=config.icons_dir, use_cache=config.cache_catalog)

    def load_catalog(self) -> AssetCatalog:
        if self._cache is not None:
            return self._cache.get()
        return self._loader()

    @staticmethod
    def _lookup(platform_id: str, catalog: AssetCatalog) -> Optional[IconReference]:
        icon_path = catalog.get(platform_id)
        if icon_path is None:
            logger.debug(f"No platform icon for '{platform_id}'.")
            return None
        return IconReference(path=icon_path, kind=IconKind.VECTOR)

    def resolve(self, platform_id: Optional[str]) -> Optional[IconReference]:
        """
        Finds the vector icon for a platform identifier.

        Returns:
            The icon, or None for an empty identifier, an unknown platform, or
            an unreadable icon bundle.
        """
        if not platform_id:
            return None
        try:
            return self._lookup(platform_id, self.load_catalog())
        except Exception as e:
            logger.error(f"Error getting platform icon for '{platform_id}': {e}", exc_info=True)
            return None

    async def resolve_async(self, platform_id: Optional[str]) -> Optional[IconReference]:
        """Coroutine version of resolve()."""
        if not platform_id:
            return None
        try:
            catalog = await asyncio.to_thread(self.load_catalog)
            return self._lookup(platform_id, catalog)
        except Exception as e:
            logger.error(f"Error getting platform icon for '{platform_id}': {e}", exc_info=True)
            return None

    def resolve_current(self) -> Optional[IconReference]:
        """Resolves the icon of the platform this process runs on."""
        return self.resolve(current_platform_id())
