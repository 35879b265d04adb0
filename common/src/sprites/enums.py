"""
Character preview enums.

Facing directions and motion types used to classify sprite frames by name.
Each member carries an ordered list of synonym tokens; the first token is the
canonical one.
"""

from enum import Enum
from typing import Dict, List, Tuple


class Direction(str, Enum):
    """
    Cardinal facing directions.

    Declaration order is the rotation order used by the preview arrows:
    South -> East -> North -> West -> South.
    """
    SOUTH = "south"
    EAST = "east"
    NORTH = "north"
    WEST = "west"

    @property
    def index(self) -> int:
        """Position in the rotation (0=South .. 3=West)."""
        return _DIRECTION_ORDER.index(self)

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Synonym tokens, canonical token first."""
        return DIRECTION_TOKENS[self]

    def next(self) -> "Direction":
        """Rotate one step clockwise (South -> East)."""
        return _DIRECTION_ORDER[(self.index + 1) % len(_DIRECTION_ORDER)]

    def previous(self) -> "Direction":
        """Rotate one step counter-clockwise (South -> West)."""
        return _DIRECTION_ORDER[(self.index + len(_DIRECTION_ORDER) - 1) % len(_DIRECTION_ORDER)]

    @classmethod
    def from_index(cls, index: int) -> "Direction":
        """Get the direction at a rotation index, wrapping around."""
        return _DIRECTION_ORDER[index % len(_DIRECTION_ORDER)]


class MotionType(str, Enum):
    """
    Motion categories a frame can belong to.

    Walk is preferred over Idle unless Idle is asked for explicitly.
    """
    WALK = "walk"
    IDLE = "idle"

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Synonym tokens, canonical token first."""
        return MOTION_TOKENS[self]


_DIRECTION_ORDER: List[Direction] = [
    Direction.SOUTH,
    Direction.EAST,
    Direction.NORTH,
    Direction.WEST,
]


# =============================================================================
# Token Tables
# =============================================================================

DIRECTION_TOKENS: Dict[Direction, Tuple[str, ...]] = {
    Direction.SOUTH: ("south", "down", "front", "s"),
    Direction.EAST: ("east", "right", "e"),
    Direction.NORTH: ("north", "up", "back", "n"),
    Direction.WEST: ("west", "left", "w"),
}

MOTION_TOKENS: Dict[MotionType, Tuple[str, ...]] = {
    MotionType.WALK: ("walk", "move", "run"),
    MotionType.IDLE: ("idle", "stand"),
}

# Substrings that mark composite/reference art which must never be sliced
# into preview frames.
BAD_SHEET_TOKENS: Tuple[str, ...] = ("full", "sheet", "reference")


def parse_direction(value: str) -> Direction:
    """
    Parse a direction from its name or any of its synonym tokens.

    Args:
        value: Direction name or token (case-insensitive), e.g. "down", "W".

    Returns:
        The matching Direction.

    Raises:
        ValueError: If the value names no direction.
    """
    needle = value.strip().lower()
    for direction, tokens in DIRECTION_TOKENS.items():
        if needle in tokens:
            return direction
    raise ValueError(f"Unknown direction: {value!r}")
