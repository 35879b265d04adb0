"""
Sprite sheet slicing.

Cuts an unlabeled sheet into square frames. The grid is inferred from the
image size alone: sheets are assumed to stack four facing directions
vertically, and when the height does not split four ways a common pixel-art
cell size is guessed instead.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from .frames import Frame, NamedImage

logger = logging.getLogger("charselect.slicing")


# =============================================================================
# CONSTANTS
# =============================================================================

# Tried in order; the first size that divides both dimensions wins.
COMMON_CELL_SIZES: Tuple[int, ...] = (48, 64, 32, 96, 72, 144)

GCD_CELL_MIN = 16
GCD_CELL_MAX = 256
DEFAULT_CELL_SIZE = 64

DIRECTION_ROWS = 4


def guess_square_cell(
    width: int,
    height: int,
    candidates: Sequence[int] = COMMON_CELL_SIZES,
) -> int:
    """
    Guess the square cell size of a sheet.

    Args:
        width: Sheet width in pixels.
        height: Sheet height in pixels.
        candidates: Cell sizes to try, in order.

    Returns:
        The first candidate dividing both dimensions, else gcd(width, height)
        if it lies within [16, 256], else 64.
    """
    for size in candidates:
        if size > 0 and width % size == 0 and height % size == 0:
            return size

    gcd = max(1, math.gcd(width, height))
    if GCD_CELL_MIN <= gcd <= GCD_CELL_MAX:
        return gcd
    return DEFAULT_CELL_SIZE


def slice_grid(image: NamedImage, cell_width: int, cell_height: int) -> List[Frame]:
    """
    Cut an image into a grid of frames.

    Partial cells at the right or bottom edge are dropped. Frames are ordered
    top row first (y ascending), left to right within a row.

    Args:
        image: Sheet to cut.
        cell_width: Cell width in pixels.
        cell_height: Cell height in pixels.

    Returns:
        Ordered frames, empty if any dimension is not positive.
    """
    if cell_width <= 0 or cell_height <= 0 or image.width <= 0 or image.height <= 0:
        return []

    columns = image.width // cell_width
    rows = image.height // cell_height

    frames = [
        Frame(
            image=image,
            x=col * cell_width,
            y=row * cell_height,
            width=cell_width,
            height=cell_height,
            name=f"{image.name}_r{row}_c{col}",
        )
        for row in range(rows)
        for col in range(columns)
    ]
    frames.sort(key=lambda frame: (frame.y, frame.x))
    return frames


# =============================================================================
# SHEET SLICER
# =============================================================================

class SheetSlicer:
    """
    Slices sheets into square frames with an inferred cell size.

    Instances are callable so the resolver can take any
    ``Callable[[NamedImage], List[Frame]]`` as its slicer.
    """

    def __init__(self, candidates: Sequence[int] = COMMON_CELL_SIZES):
        self.candidates = tuple(candidates)

    def cell_size(self, width: int, height: int) -> int:
        """
        Infer the cell size, preferring a four-row direction split.

        Returns height // 4 when the height splits cleanly into four rows,
        otherwise the guess_square_cell() result.
        """
        cell = height // DIRECTION_ROWS
        if cell <= 0 or height % DIRECTION_ROWS != 0:
            cell = guess_square_cell(width, height, self.candidates)
        return cell

    def __call__(self, image: Optional[NamedImage]) -> List[Frame]:
        if image is None or image.width <= 0 or image.height <= 0:
            return []

        cell = self.cell_size(image.width, image.height)
        frames = slice_grid(image, cell, cell)
        logger.debug(
            "Sliced %s (%dx%d) into %d frames of %dpx",
            image.name, image.width, image.height, len(frames), cell,
        )
        return frames


_default_slicer = SheetSlicer()


def infer_cell_size(width: int, height: int) -> int:
    """Cell size the default slicer would use for a sheet of this size."""
    return _default_slicer.cell_size(width, height)


def slice_sheet(image: NamedImage) -> List[Frame]:
    """Slice a sheet with the default candidate list."""
    return _default_slicer(image)
