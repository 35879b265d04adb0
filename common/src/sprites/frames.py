"""
Image and frame value types.

A NamedImage is one loaded image (a sheet or a pre-cut sprite) and a Frame is
a rectangle inside one, in pygame pixel coordinates (origin top-left). Surfaces
are optional so that name/geometry heuristics can run without pixel data.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional

import pygame


@dataclass(frozen=True)
class NamedImage:
    """
    A loaded image plus the metadata the heuristics work from.

    Attributes:
        name: Asset name without extension (e.g. "Mage_walk")
        width: Pixel width
        height: Pixel height
        surface: Backing pygame surface, if pixel data is loaded
        path: Logical asset folder the image was listed under
    """
    name: str
    width: int
    height: int
    surface: Optional[pygame.Surface] = field(default=None, compare=False, repr=False)
    path: str = ""

    @classmethod
    def from_surface(cls, name: str, surface: pygame.Surface, path: str = "") -> "NamedImage":
        """Wrap a pygame surface, reading its size."""
        width, height = surface.get_size()
        return cls(name=name, width=width, height=height, surface=surface, path=path)


@dataclass(frozen=True)
class Frame:
    """
    One animation pose: a sub-rectangle of a NamedImage.

    Frames are immutable and shared read-only between caches.
    """
    image: NamedImage
    x: int
    y: int
    width: int
    height: int
    name: str

    @classmethod
    def whole(cls, image: NamedImage) -> "Frame":
        """Frame covering an entire pre-cut sprite."""
        return cls(image=image, x=0, y=0, width=image.width, height=image.height, name=image.name)

    @property
    def rect(self) -> pygame.Rect:
        """Pixel rect of the frame inside its image."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    @cached_property
    def surface(self) -> Optional[pygame.Surface]:
        """Display handle for this frame, a subsurface sharing the sheet pixels."""
        source = self.image.surface
        if source is None:
            return None
        if self.x == 0 and self.y == 0 and (self.width, self.height) == source.get_size():
            return source
        return source.subsurface(self.rect)
