"""Tests for the device and platform resolvers and their fallbacks."""

import asyncio
import logging

import pytest

from wearpair.config import Config
from wearpair.core import icon_resolver
from wearpair.core.icon_reference import IconKind, is_image_icon
from wearpair.core.icon_resolver import DeviceIconResolver, PlatformIconResolver

from conftest import write_png


@pytest.fixture(params=[True, False], ids=["cached", "uncached"])
def device_resolver(request, images_dir):
    return DeviceIconResolver(images_dir, images_dir / "other.png", use_cache=request.param)


@pytest.fixture
def platform_resolver(icons_dir):
    return PlatformIconResolver(icons_dir)


class TestDeviceIconResolver:

    @pytest.mark.parametrize("name", [None, ""])
    def test_empty_name_gives_default(self, device_resolver, name):
        icon = device_resolver.resolve(name)
        assert icon == device_resolver.default_icon
        assert icon.kind is IconKind.DEFAULT

    def test_default_icon_is_an_image(self, device_resolver):
        assert is_image_icon(device_resolver.default_icon)

    def test_matching_name(self, device_resolver, images_dir):
        icon = device_resolver.resolve("Xiaomi Mi Band 9 Pro")
        assert icon.kind is IconKind.RASTER
        assert icon.path == images_dir / "xiaomi 9 pro.png"
        assert is_image_icon(icon)

    @pytest.mark.parametrize("name", ["Polar H10", "Garmin Venu 3", "Fitbit Charge 6"])
    def test_no_match_gives_default(self, device_resolver, name):
        assert device_resolver.resolve(name) == device_resolver.default_icon

    def test_idempotent(self, device_resolver):
        assert device_resolver.resolve("Huawei Watch GT 4") == device_resolver.resolve("Huawei Watch GT 4")

    def test_empty_catalog_gives_default(self, make_images_dir):
        directory = make_images_dir(name="empty")
        resolver = DeviceIconResolver(directory, directory / "other.png")
        for name in ("Xiaomi Mi Band 9", "Apple Watch 9", "Samsung Watch"):
            assert resolver.resolve(name) == resolver.default_icon

    def test_missing_directory_is_logged_not_raised(self, tmp_path, caplog):
        resolver = DeviceIconResolver(tmp_path / "missing", tmp_path / "other.png")
        with caplog.at_level(logging.ERROR, logger="wearpair.core.icon_resolver"):
            assert resolver.resolve("Xiaomi Mi Band 9") == resolver.default_icon
        assert "Xiaomi Mi Band 9" in caplog.text

    def test_unexpected_errors_give_default(self, device_resolver, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(icon_resolver, "match_device_asset", explode)
        assert device_resolver.resolve("Xiaomi Mi Band 9") == device_resolver.default_icon

    def test_picks_up_new_assets(self, device_resolver, images_dir):
        assert device_resolver.resolve("Garmin Venu 3") == device_resolver.default_icon
        write_png(images_dir / "garmin_venu_3.png")
        assert device_resolver.resolve("Garmin Venu 3").path == images_dir / "garmin_venu_3.png"

    def test_cached_catalog_is_reused(self, images_dir):
        resolver = DeviceIconResolver(images_dir, images_dir / "other.png")
        assert resolver.load_catalog() is resolver.load_catalog()

    def test_custom_brands(self, make_images_dir):
        directory = make_images_dir("amazfit_bip_5", "other")
        resolver = DeviceIconResolver(directory, directory / "other.png", brands=("amazfit",))
        assert resolver.resolve("Amazfit Bip 5").path == directory / "amazfit_bip_5.png"

    def test_manifest_catalog(self, images_dir):
        manifest = images_dir / "icon_manifest.json"
        manifest.write_text(
            '{"version": 1, "entries": [{"stem": "apple_watch_9", "file": "apple_watch_9.png"}]}',
            encoding="utf-8",
        )
        resolver = DeviceIconResolver(images_dir, images_dir / "other.png", manifest_path=manifest)
        assert resolver.resolve("Apple Watch Series 9").path == images_dir / "apple_watch_9.png"
        # Entries absent from the manifest are not considered.
        assert resolver.resolve("Xiaomi Mi Band 9 Pro") == resolver.default_icon

    def test_from_config(self, app_home, images_dir):
        config = Config()
        config.parser["Assets"]["images_dir"] = str(images_dir)
        config.parser["Matching"]["cache_catalog"] = "False"
        resolver = DeviceIconResolver.from_config(config)
        assert resolver.default_icon.path == images_dir / "other.png"
        assert resolver.resolve("Samsung Watch").path == images_dir / "samsung_watch.png"


class TestDeviceIconResolverAsync:

    def test_resolve_async_matches_sync(self, device_resolver):
        name = "Huawei Watch GT 4"
        assert asyncio.run(device_resolver.resolve_async(name)) == device_resolver.resolve(name)

    def test_concurrent_resolutions(self, device_resolver, images_dir):
        async def resolve_all():
            return await asyncio.gather(
                device_resolver.resolve_async("Xiaomi Mi Band 9 Pro"),
                device_resolver.resolve_async(""),
                device_resolver.resolve_async("Polar H10"),
            )

        matched, empty, unknown = asyncio.run(resolve_all())
        assert matched.path == images_dir / "xiaomi 9 pro.png"
        assert empty == device_resolver.default_icon
        assert unknown == device_resolver.default_icon

    def test_async_failure_gives_default(self, tmp_path):
        resolver = DeviceIconResolver(tmp_path / "missing", tmp_path / "other.png")
        assert asyncio.run(resolver.resolve_async("Apple Watch 9")) == resolver.default_icon


class TestPlatformIconResolver:

    def test_known_platform(self, platform_resolver, icons_dir):
        icon = platform_resolver.resolve("macos")
        assert icon.kind is IconKind.VECTOR
        assert icon.path == icons_dir / "macos.svg"
        assert not is_image_icon(icon)

    @pytest.mark.parametrize("platform_id", [None, ""])
    def test_empty_identifier(self, platform_resolver, platform_id):
        assert platform_resolver.resolve(platform_id) is None

    @pytest.mark.parametrize("platform_id", ["android", "MacOS", "macos.svg"])
    def test_exact_lookup_only(self, platform_resolver, platform_id):
        assert platform_resolver.resolve(platform_id) is None

    def test_missing_directory_gives_none(self, tmp_path):
        assert PlatformIconResolver(tmp_path / "missing").resolve("linux") is None

    def test_resolve_async(self, platform_resolver, icons_dir):
        icon = asyncio.run(platform_resolver.resolve_async("windows"))
        assert icon.path == icons_dir / "windows.svg"
        assert asyncio.run(platform_resolver.resolve_async("")) is None

    @pytest.mark.parametrize("system, expected", [
        ("Windows", "windows.svg"),
        ("Darwin", "macos.svg"),
        ("Linux", "linux.svg"),
    ])
    def test_resolve_current(self, platform_resolver, monkeypatch, system, expected):
        monkeypatch.setattr("platform.system", lambda: system)
        assert platform_resolver.resolve_current().path.name == expected

    def test_resolve_current_unknown_platform(self, platform_resolver, monkeypatch):
        monkeypatch.setattr("platform.system", lambda: "Java")
        assert platform_resolver.resolve_current() is None
