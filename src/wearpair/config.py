# -*- coding: utf-8 -*-
"""
src/wearpair/config.py

Module for handling application configuration.

This module defines default settings for WearPair's icon lookup, such as the
asset directories, the fallback device icon and the brand vocabulary. It
provides functionality to load user-defined settings from a configuration
file (config.ini), creating one with default values on the first run.
"""

import configparser
import functools
import logging
import os
import platform
from pathlib import Path
from typing import Optional, Tuple

from .core.brand_extractor import BRAND_VOCABULARY

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "WearPair"
HOME_ENV_VAR = "WEARPAIR_HOME"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_ICON_FILENAME = "other.png"
DEFAULT_LOG_LEVEL = "WARNING"

BUNDLED_ASSETS_DIR = Path(__file__).resolve().parent / "assets"
BUNDLED_IMAGES_DIR = BUNDLED_ASSETS_DIR / "images"
BUNDLED_ICONS_DIR = BUNDLED_ASSETS_DIR / "icons"


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - $WEARPAIR_HOME, if set
    - Windows: %APPDATA%/WearPair
    - macOS: ~/Library/Application Support/WearPair
    - Linux: ~/.config/WearPair

    Returns:
        Path: A Path object to the application's data directory.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        app_dir = Path(override)
    elif platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


def find_default_icon(images_dir: Path, filename: str = DEFAULT_ICON_FILENAME) -> Path:
    """
    Locates the generic device icon.

    Returns:
        Path: `images_dir/filename` if that file exists, otherwise the icon
              bundled with the app.
    """
    candidate = Path(images_dir) / filename
    if candidate.is_file():
        return candidate
    bundled = BUNDLED_IMAGES_DIR / DEFAULT_ICON_FILENAME
    logger.warning(f"Default icon '{candidate}' not found; using bundled '{bundled}'.")
    return bundled


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """Initializes the configuration manager."""
        self.parser = configparser.ConfigParser()
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["Assets"] = {
            "images_dir": "",
            "icons_dir": "",
            "default_icon": DEFAULT_ICON_FILENAME,
            "manifest": "",
        }
        self.parser["Matching"] = {
            "brands": ", ".join(BRAND_VOCABULARY),
            "verify_images": "False",
            "cache_catalog": "True",
        }
        self.parser["Logging"] = {
            "level": DEFAULT_LOG_LEVEL,
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
        else:
            try:
                self.parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                logger.error(f"Ignoring malformed config file '{self.config_file_path}': {e}")

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# Leave a directory empty to use the icons bundled with the app.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            # Non-critical: the defaults are still in effect.
            logger.warning(f"Could not write config file at {self.config_file_path}: {e}")

    def _optional_path(self, section: str, key: str) -> Optional[Path]:
        value = self.parser.get(section, key, fallback="").strip()
        return Path(value).expanduser() if value else None

    # --- Properties to access settings easily and with correct types ---

    @property
    def images_dir(self) -> Path:
        """Directory holding the raster device images."""
        return self._optional_path("Assets", "images_dir") or BUNDLED_IMAGES_DIR

    @property
    def icons_dir(self) -> Path:
        """Directory holding the vector platform icons."""
        return self._optional_path("Assets", "icons_dir") or BUNDLED_ICONS_DIR

    @property
    def default_icon_filename(self) -> str:
        """File name of the generic device icon inside images_dir."""
        filename = self.parser.get("Assets", "default_icon", fallback=DEFAULT_ICON_FILENAME).strip()
        return filename or DEFAULT_ICON_FILENAME

    @property
    def default_icon_path(self) -> Path:
        """The generic device icon returned when nothing matches."""
        return find_default_icon(self.images_dir, self.default_icon_filename)

    @property
    def manifest_path(self) -> Optional[Path]:
        """A prebuilt icon manifest to load instead of scanning images_dir."""
        return self._optional_path("Assets", "manifest")

    @property
    def brands(self) -> Tuple[str, ...]:
        """Brand tokens in priority order (lowercase)."""
        raw = self.parser.get("Matching", "brands", fallback="")
        brands = tuple(token.strip().lower() for token in raw.split(",") if token.strip())
        return brands or BRAND_VOCABULARY

    @property
    def verify_images(self) -> bool:
        """Whether to open each image with Pillow while building the catalog."""
        return self.parser.getboolean("Matching", "verify_images", fallback=False)

    @property
    def cache_catalog(self) -> bool:
        """Whether to keep built catalogs until the asset bundle changes."""
        return self.parser.getboolean("Matching", "cache_catalog", fallback=True)

    @property
    def log_level(self) -> str:
        """Logging level name for the entry points."""
        return self.parser.get("Logging", "level", fallback=DEFAULT_LOG_LEVEL).strip().upper()


@functools.lru_cache(maxsize=None)
def get_config() -> Config:
    """Returns the process-wide Config instance, creating it on first use."""
    return Config()
