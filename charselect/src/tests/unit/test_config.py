"""
Tests for preview configuration loading.
"""

import pytest
import yaml
from pydantic import ValidationError

from common.src.sprites import Direction
from charselect.src.config import AnimationSettings, PreviewConfig, get_config, reload_config


class TestPreviewConfig:
    """YAML loading, defaults and environment overrides."""

    def test_defaults(self, preview_config):
        assert preview_config.animation.fps == 8.0
        assert preview_config.animation.direction_cooldown == 0.15
        assert preview_config.animation.class_select_debounce == 0.15
        assert preview_config.animation.gender_debounce == 0.2
        assert preview_config.animation.confirm_debounce == 0.5
        assert preview_config.animation.row_directions() == [
            Direction.SOUTH, Direction.EAST, Direction.NORTH, Direction.WEST,
        ]
        assert preview_config.assets.class_root == "Characters"

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PREVIEW_FPS", raising=False)
        path = tmp_path / "preview.yml"
        path.write_text(yaml.safe_dump({
            "assets": {"class_root": "Heroes", "nested_root": "Heroes/Packs"},
            "animation": {"fps": 12, "row_order": ["down", "left", "up", "right"]},
        }))

        config = PreviewConfig.from_yaml(path)

        assert config.animation.fps == 12
        assert config.animation.row_order == ["south", "west", "north", "east"]
        paths = config.assets.asset_paths()
        assert paths.class_folder("Mage") == "Heroes/Mage"
        assert paths.broad_scan_roots() == ["Heroes/Packs", "Heroes"]

    def test_missing_file_writes_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PREVIEW_FPS", raising=False)
        path = tmp_path / "preview.yml"

        config = PreviewConfig.from_yaml(path)

        assert path.exists()
        assert yaml.safe_load(path.read_text())["animation"]["fps"] == config.animation.fps

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ASSET_ROOT", "/srv/art")
        monkeypatch.setenv("PREVIEW_FPS", "4")
        monkeypatch.setenv("ASSET_QUERY_TIMEOUT", "1.5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        path = tmp_path / "preview.yml"
        path.write_text("{}\n")

        config = PreviewConfig.from_yaml(path)

        assert config.assets.root_dir == "/srv/art"
        assert config.animation.fps == 4.0
        assert config.assets.asset_query_timeout == 1.5
        assert config.debug.log_level == "DEBUG"

    def test_row_order_must_cover_each_direction(self):
        with pytest.raises(ValidationError):
            AnimationSettings(row_order=["south", "south", "north", "west"])

    def test_row_order_rejects_repeated_directions(self):
        with pytest.raises(ValidationError):
            AnimationSettings(row_order=["south", "east", "north", "west", "south"])

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValidationError):
            AnimationSettings(row_order=["south", "east", "north", "sideways"])

    def test_fps_must_be_positive(self):
        with pytest.raises(ValidationError):
            AnimationSettings(fps=0)

    def test_reload_config_replaces_singleton(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PREVIEW_FPS", raising=False)
        path = tmp_path / "preview.yml"
        path.write_text(yaml.safe_dump({"animation": {"fps": 3}}))

        config = reload_config(path)
        try:
            assert get_config() is config
            assert get_config().animation.fps == 3
        finally:
            del get_config._instance
