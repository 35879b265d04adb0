"""Character selection preview runtime."""

from .character_preview import CharacterPreview

__all__ = ["CharacterPreview"]
