"""Tests for the command line front end."""

import pytest

from wearpair import cli
from wearpair.config import BUNDLED_IMAGES_DIR, get_config


@pytest.fixture(autouse=True)
def isolated_config(app_home):
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_resolves_device_name(images_dir, capsys):
    assert cli.main(["Xiaomi Mi Band 9 Pro", "--images-dir", str(images_dir)]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"raster\t{images_dir / 'xiaomi 9 pro.png'}"


def test_unknown_device_prints_default(images_dir, capsys):
    cli.main(["Polar H10", "--images-dir", str(images_dir)])
    assert capsys.readouterr().out.strip() == f"default\t{images_dir / 'other.png'}"


def test_lists_catalog_in_match_order(images_dir, capsys):
    assert cli.main(["--list", "--images-dir", str(images_dir)]) == 0
    stems = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
    assert stems == ["apple_watch_9", "huawei_watch_gt_4", "other", "samsung_watch", "xiaomi 9 pro", "xiaomi_band_8"]


def test_list_fails_without_catalog(tmp_path):
    assert cli.main(["--list", "--images-dir", str(tmp_path / "missing")]) == 1


def test_platform_icon(icons_dir, capsys):
    cli.main(["--platform", "linux", "--icons-dir", str(icons_dir)])
    assert capsys.readouterr().out.strip() == f"linux\t{icons_dir / 'linux.svg'}"


def test_current_platform_icon(icons_dir, capsys, monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Darwin")
    cli.main(["--platform", "--icons-dir", str(icons_dir)])
    assert capsys.readouterr().out.strip() == f"macos\t{icons_dir / 'macos.svg'}"


def test_unknown_platform_prints_nothing(icons_dir, capsys):
    cli.main(["--platform", "android", "--icons-dir", str(icons_dir)])
    assert capsys.readouterr().out == "android\t\n"


def test_images_dir_without_default_icon_uses_bundled(make_images_dir, capsys):
    directory = make_images_dir("apple_watch_9", name="custom")
    cli.main(["Polar H10", "--images-dir", str(directory)])
    assert capsys.readouterr().out.strip() == f"default\t{BUNDLED_IMAGES_DIR / 'other.png'}"
