"""
Tests for the asset providers.
"""

import pygame
import pytest

from charselect.src.assets import FileSystemAssetProvider, InMemoryAssetProvider, is_frame_sprite_name
from charselect.src.rendering import AssetResolver, DirectionalFrameSelector
from common.src.sprites import Direction
from charselect.src.tests.helpers import make_image


def save_png(path, width, height):
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface((width, height)), str(path))


@pytest.fixture
def asset_root(tmp_path):
    """A small art pool on disk."""
    save_png(tmp_path / "Characters" / "Mage" / "mage_walk_south_02.png", 32, 32)
    save_png(tmp_path / "Characters" / "Mage" / "mage_walk_south_01.png", 32, 32)
    save_png(tmp_path / "Characters" / "Rogue" / "Rogue_walk.png", 128, 256)
    save_png(tmp_path / "Characters" / "Warrior" / "Warrior_Full_Sheet.png", 256, 256)
    (tmp_path / "Characters" / "Mage" / "notes.txt").write_text("not art")
    return tmp_path


class TestFrameSpriteNames:
    """Numbered stems are pre-cut frames."""

    @pytest.mark.parametrize("stem", ["mage_walk_south_01", "hero-3", "idle 12"])
    def test_numbered(self, stem):
        assert is_frame_sprite_name(stem)

    @pytest.mark.parametrize("stem", ["Mage_walk", "walk2", "Rogue_idle"])
    def test_sheets(self, stem):
        assert not is_frame_sprite_name(stem)


class TestInMemoryAssetProvider:
    """Recursive, case-insensitive folder queries."""

    def test_recursive_listing(self):
        provider = InMemoryAssetProvider()
        provider.add_image("Characters/Mage/Extra", make_image("mage_extra"))

        assert [i.name for i in provider.list_images("characters")] == ["mage_extra"]
        assert provider.list_images("Characters/Mage/Extra")[0].path == "Characters/Mage/Extra"

    def test_prefix_is_not_a_folder_match(self):
        provider = InMemoryAssetProvider()
        provider.add_sprite("Characters/Mages", make_image("mage_1"))

        assert provider.list_sprites("Characters/Mage") == []

    def test_unknown_path_is_empty(self):
        assert InMemoryAssetProvider().list_images("Nowhere") == []


class TestFileSystemAssetProvider:
    """PNG files on disk."""

    def test_sprites_and_sheets(self, asset_root):
        provider = FileSystemAssetProvider(asset_root)

        sprites = provider.list_sprites("Characters/Mage")
        sheets = provider.list_images("Characters")

        assert sorted(s.name for s in sprites) == ["mage_walk_south_01", "mage_walk_south_02"]
        assert sorted(s.name for s in sheets) == ["Rogue_walk", "Warrior_Full_Sheet"]
        assert sprites[0].surface is not None
        assert sprites[0].path == "Characters/Mage"

    def test_case_insensitive_folders(self, asset_root):
        provider = FileSystemAssetProvider(asset_root)

        assert [i.name for i in provider.list_images("characters/ROGUE")] == ["Rogue_walk"]

    def test_unknown_folder(self, asset_root):
        assert FileSystemAssetProvider(asset_root).list_images("Characters/Bard") == []

    def test_surfaces_are_cached(self, asset_root):
        provider = FileSystemAssetProvider(asset_root)

        first = provider.list_images("Characters/Rogue")[0]

        assert provider.list_images("Characters/Rogue")[0] is first
        provider.clear_memory_cache()
        assert provider.list_images("Characters/Rogue")[0] is not first

    def test_broken_file_is_skipped(self, asset_root, caplog):
        (asset_root / "Characters" / "Rogue" / "broken.png").write_bytes(b"not a png")
        provider = FileSystemAssetProvider(asset_root)

        images = provider.list_images("Characters/Rogue")

        assert [i.name for i in images] == ["Rogue_walk"]
        assert "broken.png" in caplog.text

    def test_end_to_end(self, asset_root):
        provider = FileSystemAssetProvider(asset_root)
        resolver = AssetResolver(provider)
        selector = DirectionalFrameSelector()

        mage = selector.select(resolver.resolve("Mage"), Direction.SOUTH)
        rogue = selector.select(resolver.resolve("Rogue"), Direction.WEST)

        assert [f.name for f in mage] == ["mage_walk_south_01", "mage_walk_south_02"]
        assert [f.y for f in rogue] == [192, 192]
        assert rogue[0].surface.get_size() == (64, 64)
        assert resolver.resolve("Warrior") == ()
