"""
Character Preview Sprite System - manifest-free sprite handling.

This package holds the value types and pure algorithms behind the character
selection preview: nothing here touches the asset store or the screen.

## Components

- **enums**: Facing directions and motion types with their name tokens
- **frames**: NamedImage and Frame value types
- **naming**: Name-based classification (bad sheets, tokens, frame numbers)
- **slicing**: Square-cell sheet slicing with grid inference
- **animation**: Frame clock, direction-row mapping and input cooldowns
- **paths**: Asset folder layout of a character art pool

## Quick Start

```python
from common.src.sprites import Direction, NamedImage, slice_sheet

sheet = NamedImage.from_surface("Mage_walk", surface)
frames = slice_sheet(sheet)       # top row first, left to right
facing = Direction.SOUTH.next()   # Direction.EAST
```
"""

# =============================================================================
# Enums - Directions and motions
# =============================================================================

from .enums import (
    Direction,
    MotionType,
    DIRECTION_TOKENS,
    MOTION_TOKENS,
    BAD_SHEET_TOKENS,
    parse_direction,
)

# =============================================================================
# Frames - Image and frame value types
# =============================================================================

from .frames import (
    NamedImage,
    Frame,
)

# =============================================================================
# Naming - Name-based classification
# =============================================================================

from .naming import (
    is_bad_sheet,
    contains_any,
    has_token,
    name_segments,
    trailing_number,
    sort_by_trailing_number,
)

# =============================================================================
# Slicing - Sheet grid inference
# =============================================================================

from .slicing import (
    SheetSlicer,
    COMMON_CELL_SIZES,
    guess_square_cell,
    infer_cell_size,
    slice_grid,
    slice_sheet,
)

# =============================================================================
# Animation - Frame clock and guards
# =============================================================================

from .animation import (
    AnimationClock,
    InputCooldowns,
    DisplaySink,
    MonotonicClock,
    DEFAULT_FPS,
    DEFAULT_ROW_ORDER,
    get_row_position,
)

# =============================================================================
# Paths - Asset folder layout
# =============================================================================

from .paths import (
    AssetPaths,
    join_path,
)

# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Enums
    "Direction",
    "MotionType",
    "DIRECTION_TOKENS",
    "MOTION_TOKENS",
    "BAD_SHEET_TOKENS",
    "parse_direction",

    # Value types
    "NamedImage",
    "Frame",

    # Naming
    "is_bad_sheet",
    "contains_any",
    "has_token",
    "name_segments",
    "trailing_number",
    "sort_by_trailing_number",

    # Slicing
    "SheetSlicer",
    "COMMON_CELL_SIZES",
    "guess_square_cell",
    "infer_cell_size",
    "slice_grid",
    "slice_sheet",

    # Animation
    "AnimationClock",
    "InputCooldowns",
    "DisplaySink",
    "MonotonicClock",
    "DEFAULT_FPS",
    "DEFAULT_ROW_ORDER",
    "get_row_position",

    # Paths
    "AssetPaths",
    "join_path",
]
