"""
Directional Frame Selector - Picks the frames to show for a facing direction.

Selection order:
1. frames named with the direction and the preferred motion
2. frames named with the direction, any motion
3. the sheet row mapped to the direction, when no frame names a direction
4. an even four-way split of the pool, when there are fewer than four rows

Stages 1 and 2 are ordered by the trailing number in each frame name; stage 3
is ordered left to right.
"""

from typing import Dict, List, Optional, Sequence

from common.src.sprites import (
    DEFAULT_ROW_ORDER,
    Direction,
    Frame,
    MotionType,
    contains_any,
    get_row_position,
    has_token,
    sort_by_trailing_number,
)
from ..logging_config import get_logger

logger = get_logger("frame_selector")

DIRECTION_COUNT = 4


class DirectionalFrameSelector:
    """
    Selects an ordered frame sequence from a class's frame pool.

    Attributes:
        row_order: Direction of each sheet row, top row first
    """

    def __init__(self, row_order: Optional[Sequence[Direction]] = None):
        self.row_order = tuple(row_order) if row_order else DEFAULT_ROW_ORDER

    def select(
        self,
        pool: Sequence[Frame],
        direction: Direction,
        motion: MotionType = MotionType.WALK,
    ) -> List[Frame]:
        """
        Get the frames to display for a direction and motion.

        Args:
            pool: The class's frame pool.
            direction: Facing direction.
            motion: Preferred motion.

        Returns:
            Ordered frames; empty only when the pool is empty.
        """
        frames = [frame for frame in pool if frame is not None]
        if not frames:
            return []

        named = self.filter_by_tokens(frames, direction, motion)
        if named:
            return named

        logger.debug("No %s-named frames; mapping sheet rows", direction.value)
        return self.select_row(frames, direction)

    def filter_by_tokens(
        self,
        frames: Sequence[Frame],
        direction: Direction,
        motion: MotionType,
    ) -> List[Frame]:
        """
        Filter frames by the names they carry.

        Returns:
            Frames named with direction and motion; failing that, frames named
            with the direction alone; sorted by trailing number. Empty when
            no frame names the direction.
        """
        facing = [frame for frame in frames if has_token(frame.name, direction.tokens)]
        strict = [frame for frame in facing if contains_any(frame.name, motion.tokens)]
        return sort_by_trailing_number(strict or facing)

    def select_row(self, frames: Sequence[Frame], direction: Direction) -> List[Frame]:
        """
        Map a direction onto a row of a sliced sheet.

        Rows are grouped by the height of the first frame and counted from the
        top of the sheet. With four or more rows the direction's configured
        row position picks the row; otherwise the pool is split evenly.
        """
        cell_height = max(1, frames[0].height)
        rows: Dict[int, List[Frame]] = {}
        for frame in frames:
            rows.setdefault(frame.y // cell_height, []).append(frame)

        row_keys = sorted(rows)
        if len(row_keys) < DIRECTION_COUNT:
            logger.debug("Only %d sheet rows; splitting pool evenly", len(row_keys))
            return self.split_evenly(frames, direction)

        position = get_row_position(direction, self.row_order)
        pick = min(max(position, 0), len(row_keys) - 1)
        return sorted(rows[row_keys[pick]], key=lambda frame: frame.x)

    @staticmethod
    def split_evenly(frames: Sequence[Frame], direction: Direction) -> List[Frame]:
        """
        Take the direction's quarter of the pool.

        Returns:
            The contiguous chunk at the direction's index, or the whole pool
            when that chunk would be empty.
        """
        count = len(frames)
        per_direction = max(1, count // DIRECTION_COUNT)
        start = min(max(direction.index * per_direction, 0), max(0, count - 1))
        chunk = list(frames[start:min(count, start + per_direction)])
        return chunk or list(frames)
