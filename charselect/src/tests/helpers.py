"""Shared test doubles for the preview tests."""

from typing import List

from common.src.sprites import NamedImage
from charselect.src.assets import InMemoryAssetProvider


def make_image(name: str, width: int = 64, height: int = 64) -> NamedImage:
    """Build a surface-less image; the heuristics only need name and size."""
    return NamedImage(name=name, width=width, height=height)


class CountingAssetProvider(InMemoryAssetProvider):
    """In-memory provider that records every query it answers."""

    def __init__(self):
        super().__init__()
        self.calls: List[str] = []

    def list_images(self, path: str) -> List[NamedImage]:
        self.calls.append(f"images:{path}")
        return super().list_images(path)

    def list_sprites(self, path: str) -> List[NamedImage]:
        self.calls.append(f"sprites:{path}")
        return super().list_sprites(path)

    @property
    def call_count(self) -> int:
        return len(self.calls)


class RecordingSink:
    """Display sink that keeps every frame pushed to it."""

    def __init__(self):
        self.shown: List = []

    def __call__(self, frame) -> None:
        self.shown.append(frame)
