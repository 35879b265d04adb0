"""
Asset Provider - Lists character art under logical asset paths.

Handles:
- The AssetProvider interface the resolver consumes
- An in-memory store for tooling and tests
- A directory-backed store that loads PNG files into pygame surfaces

Listing is recursive: a folder query returns everything below the folder.
Unknown folders yield an empty list, never an error.
"""

import os
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

import pygame

from common.src.sprites import NamedImage, join_path
from ..logging_config import get_logger

logger = get_logger("assets")

IMAGE_EXTENSIONS = (".png",)

# Stems ending in a separated number ("mage_walk_south_01") are pre-cut frames.
_FRAME_NUMBER_SUFFIX = re.compile(r"[_\-\s]\d+$")


class AssetProvider(Protocol):
    """Read-only view of an asset store."""

    def list_images(self, path: str) -> List[NamedImage]:
        """Whole images (sheets) at or below a logical path."""
        ...

    def list_sprites(self, path: str) -> List[NamedImage]:
        """Pre-cut single-frame sprites at or below a logical path."""
        ...


def _normalize(path: str) -> str:
    return join_path(*path.replace("\\", "/").split("/")).lower()


def _is_under(folder: str, candidate: str) -> bool:
    """Check whether candidate lies at or below folder (both normalized)."""
    if not folder:
        return True
    return candidate == folder or candidate.startswith(folder + "/")


def is_frame_sprite_name(stem: str) -> bool:
    """Check whether a file stem names a numbered, pre-cut frame."""
    return bool(_FRAME_NUMBER_SUFFIX.search(stem))


# =============================================================================
# IN-MEMORY PROVIDER
# =============================================================================

class InMemoryAssetProvider:
    """
    Asset store held in dictionaries.

    Images and sprites are registered under a folder path; queries match
    folders case-insensitively and recursively.
    """

    def __init__(self):
        self._images: List[Tuple[str, NamedImage]] = []
        self._sprites: List[Tuple[str, NamedImage]] = []

    def add_image(self, path: str, image: NamedImage) -> NamedImage:
        """Register a sheet under a folder."""
        image = self._with_path(path, image)
        self._images.append((_normalize(path), image))
        return image

    def add_sprite(self, path: str, sprite: NamedImage) -> NamedImage:
        """Register a pre-cut sprite under a folder."""
        sprite = self._with_path(path, sprite)
        self._sprites.append((_normalize(path), sprite))
        return sprite

    def list_images(self, path: str) -> List[NamedImage]:
        return self._query(self._images, path)

    def list_sprites(self, path: str) -> List[NamedImage]:
        return self._query(self._sprites, path)

    @staticmethod
    def _with_path(path: str, image: NamedImage) -> NamedImage:
        if image.path == path:
            return image
        return NamedImage(
            name=image.name,
            width=image.width,
            height=image.height,
            surface=image.surface,
            path=path,
        )

    @staticmethod
    def _query(entries: Iterable[Tuple[str, NamedImage]], path: str) -> List[NamedImage]:
        folder = _normalize(path)
        return [image for entry_path, image in entries if _is_under(folder, entry_path)]


# =============================================================================
# FILE SYSTEM PROVIDER
# =============================================================================

class FileSystemAssetProvider:
    """
    Asset store backed by a directory of PNG files.

    Numbered files (``mage_walk_south_01.png``) are listed as sprites, all
    other PNGs as sheets. Loaded surfaces are cached per file.
    """

    def __init__(self, root_dir: os.PathLike):
        self.root_dir = Path(root_dir)

        # In-memory surface cache: absolute file path -> NamedImage
        self._image_cache: Dict[str, NamedImage] = {}

        # Files that failed to load (don't retry until cleared)
        self._failed_paths: set = set()

    def list_images(self, path: str) -> List[NamedImage]:
        return [image for image, is_sprite in self._scan(path) if not is_sprite]

    def list_sprites(self, path: str) -> List[NamedImage]:
        return [image for image, is_sprite in self._scan(path) if is_sprite]

    def clear_memory_cache(self) -> None:
        """Clear loaded surfaces and the failed-file list."""
        self._image_cache.clear()
        self._failed_paths.clear()

    def _resolve_folder(self, path: str) -> Optional[Path]:
        folder = self.root_dir
        for part in path.replace("\\", "/").split("/"):
            if not part:
                continue
            folder = self._match_child(folder, part)
            if folder is None:
                return None
        return folder if folder.is_dir() else None

    @staticmethod
    def _match_child(folder: Path, name: str) -> Optional[Path]:
        """Find a child entry by name, case-insensitively."""
        exact = folder / name
        if exact.exists():
            return exact
        if not folder.is_dir():
            return None
        lowered = name.lower()
        for child in sorted(folder.iterdir()):
            if child.name.lower() == lowered:
                return child
        return None

    def _scan(self, path: str) -> List[Tuple[NamedImage, bool]]:
        folder = self._resolve_folder(path)
        if folder is None:
            return []

        found = []
        for dirpath, dirnames, filenames in os.walk(folder):
            dirnames.sort()
            for filename in sorted(filenames):
                stem, ext = os.path.splitext(filename)
                if ext.lower() not in IMAGE_EXTENSIONS:
                    continue
                image = self._load(Path(dirpath) / filename, stem)
                if image is not None:
                    found.append((image, is_frame_sprite_name(stem)))
        return found

    def _load(self, file_path: Path, stem: str) -> Optional[NamedImage]:
        key = str(file_path)
        if key in self._image_cache:
            return self._image_cache[key]
        if key in self._failed_paths:
            return None

        try:
            surface = pygame.image.load(key)
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
        except (pygame.error, OSError) as e:
            logger.warning("Error loading sprite %s: %s", file_path, e)
            self._failed_paths.add(key)
            return None

        logical = file_path.parent.relative_to(self.root_dir).as_posix()
        image = NamedImage.from_surface(stem, surface, path="" if logical == "." else logical)
        self._image_cache[key] = image
        return image
