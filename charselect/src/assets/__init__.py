"""Asset store access for the character preview."""

from .provider import (
    AssetProvider,
    FileSystemAssetProvider,
    InMemoryAssetProvider,
    is_frame_sprite_name,
)

__all__ = [
    "AssetProvider",
    "FileSystemAssetProvider",
    "InMemoryAssetProvider",
    "is_frame_sprite_name",
]
