"""Shared fixtures: throwaway asset bundles built under tmp_path."""

from pathlib import Path

import pytest
from PIL import Image


def write_png(path: Path, size=(4, 4)):
    Image.new("RGBA", size, (0, 0, 0, 255)).save(path, format="PNG")
    return path


@pytest.fixture
def make_images_dir(tmp_path):
    """Returns a factory creating a directory of PNG files with the given stems."""
    def _make(*names, name="images"):
        directory = tmp_path / name
        directory.mkdir()
        for filename in names:
            if "." not in filename:
                filename += ".png"
            write_png(directory / filename)
        return directory
    return _make


@pytest.fixture
def images_dir(make_images_dir):
    return make_images_dir(
        "other",
        "apple_watch_9",
        "huawei_watch_gt_4",
        "samsung_watch",
        "xiaomi 9 pro",
        "xiaomi_band_8",
    )


@pytest.fixture
def icons_dir(tmp_path):
    directory = tmp_path / "icons"
    directory.mkdir()
    for platform_id in ("windows", "macos", "linux"):
        (directory / f"{platform_id}.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8"
        )
    return directory


@pytest.fixture
def app_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    monkeypatch.setenv("WEARPAIR_HOME", str(home))
    return home
