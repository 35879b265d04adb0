"""
Preview configuration management.

Loads configuration from preview_config.yml with environment variable overrides.
Uses Pydantic for validation and type safety.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from common.src.sprites import AssetPaths, Direction, DEFAULT_ROW_ORDER, parse_direction

DEFAULT_CONFIG_PATH = Path(__file__).parent / "preview_config.yml"


class AssetConfig(BaseModel):
    """Asset store layout and query settings."""
    root_dir: str = Field(default="assets", description="Directory the file asset store is rooted at")
    class_root: str = Field(default="Characters", description="Folder holding one sub-folder per class")
    nested_root: str = Field(
        default="Characters/New Characters/Character sprites",
        description="Folder of the nested 'Character sprites' pack layout",
    )
    asset_query_timeout: float = Field(default=5.0, gt=0, description="Seconds allowed for one async class resolution")

    def asset_paths(self) -> AssetPaths:
        return AssetPaths(class_root=self.class_root, nested_root=self.nested_root)


class AnimationSettings(BaseModel):
    """Preview animation and input timing."""
    fps: float = Field(default=8.0, gt=0, description="Preview animation frames per second")
    direction_cooldown: float = Field(default=0.15, ge=0, description="Lockout after a direction change in seconds")
    class_select_debounce: float = Field(default=0.15, ge=0, description="Debounce for class buttons in seconds")
    gender_debounce: float = Field(default=0.2, ge=0, description="Debounce for gender buttons in seconds")
    confirm_debounce: float = Field(default=0.5, ge=0, description="Debounce for the confirm button in seconds")
    row_order: List[str] = Field(
        default_factory=lambda: [d.value for d in DEFAULT_ROW_ORDER],
        description="Direction of each sheet row, top row first",
    )

    @field_validator("row_order")
    @classmethod
    def _validate_row_order(cls, value: List[str]) -> List[str]:
        directions = [parse_direction(item) for item in value]
        if len(directions) != len(Direction) or len(set(directions)) != len(Direction):
            raise ValueError("row_order must name each of the four directions exactly once")
        return [d.value for d in directions]

    def row_directions(self) -> List[Direction]:
        return [parse_direction(item) for item in self.row_order]


class DebugConfig(BaseModel):
    """Debug and development settings."""
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")


class PreviewConfig(BaseModel):
    """Complete preview configuration."""
    assets: AssetConfig = Field(default_factory=AssetConfig)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)
    debug: DebugConfig = Field(default_factory=DebugConfig)
    classes_file: Optional[str] = Field(default=None, description="YAML file with the class catalog")

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "PreviewConfig":
        """Load configuration from YAML file."""
        path = path or DEFAULT_CONFIG_PATH

        if not path.exists():
            # Return default configuration
            config = cls(**cls._apply_env_overrides({}))
            cls()._save_default(path)
            return config

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        # Apply environment variable overrides
        data = cls._apply_env_overrides(data)

        return cls(**data)

    @staticmethod
    def _apply_env_overrides(data: dict) -> dict:
        """Apply environment variable overrides to config data."""
        env_mappings = {
            "ASSET_ROOT": ("assets", "root_dir"),
            "ASSET_QUERY_TIMEOUT": ("assets", "asset_query_timeout"),
            "PREVIEW_FPS": ("animation", "fps"),
            "LOG_LEVEL": ("debug", "log_level"),
        }

        for env_var, (section, key) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                if section not in data:
                    data[section] = {}

                # Convert types based on default
                if key in ("fps", "asset_query_timeout"):
                    data[section][key] = float(value)
                else:
                    data[section][key] = value

        return data

    def _save_default(self, path: Path) -> None:
        """Save default configuration to file."""
        data = self.model_dump()
        try:
            with open(path, "w") as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logging.getLogger("charselect.config").warning("Could not write default config to %s: %s", path, e)


def get_config() -> PreviewConfig:
    """Get the singleton configuration instance."""
    if not hasattr(get_config, "_instance"):
        get_config._instance = PreviewConfig.from_yaml()
    return get_config._instance


def reload_config(path: Optional[Path] = None) -> PreviewConfig:
    """Reload configuration from file."""
    get_config._instance = PreviewConfig.from_yaml(path)
    return get_config._instance
