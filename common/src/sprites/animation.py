"""
Preview animation timing.

Fixed-rate frame cycling for the character preview, the direction-row
convention used when a sheet carries no per-frame names, and the
"ignore input until" guards that debounce preview controls.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .enums import Direction
from .frames import Frame

DisplaySink = Callable[[Optional[Frame]], None]
MonotonicClock = Callable[[], float]

DEFAULT_FPS = 8.0


# =============================================================================
# Direction Row Mapping
# =============================================================================

# Top-to-bottom row order of a vertically stacked four-direction sheet.
# Most packs the preview was built against store South, East, North, West
# from the top down; other packs can supply their own order.
DEFAULT_ROW_ORDER: Tuple[Direction, ...] = (
    Direction.SOUTH,
    Direction.EAST,
    Direction.NORTH,
    Direction.WEST,
)


def get_row_position(
    direction: Direction,
    row_order: Sequence[Direction] = DEFAULT_ROW_ORDER,
) -> int:
    """
    Get the top-down row position of a direction in a sheet.

    Args:
        direction: The facing direction.
        row_order: Directions from the top row down.

    Returns:
        Row position counted from the top (0 = top row). Directions missing
        from row_order fall back to their rotation index.
    """
    try:
        return list(row_order).index(direction)
    except ValueError:
        return direction.index


# =============================================================================
# Animation Clock
# =============================================================================

@dataclass
class AnimationClock:
    """
    Cycles through a frame list at a fixed rate.

    Driven cooperatively: the owner calls tick() once per rendered frame with
    the time since the previous call. Whenever the active frame changes it is
    pushed to the display sink.

    Attributes:
        fps: Frames per second (the interval is 1 / max(1, fps))
        frames: Frames being cycled
        frame_index: Index of the active frame
        elapsed: Time accumulated towards the next advance
        sink: Callback receiving the active frame, or None to clear
    """
    fps: float = DEFAULT_FPS
    frames: List[Frame] = field(default_factory=list)
    frame_index: int = 0
    elapsed: float = 0.0
    sink: Optional[DisplaySink] = None

    @property
    def frame_duration(self) -> float:
        """Seconds each frame stays on screen."""
        return 1.0 / max(1.0, self.fps)

    @property
    def current(self) -> Optional[Frame]:
        """The active frame, or None when there is nothing to show."""
        if not self.frames:
            return None
        return self.frames[self.frame_index]

    def set_frames(self, frames: Sequence[Frame]) -> None:
        """
        Start cycling a new frame list from its first frame.

        Args:
            frames: Ordered frames; an empty list clears the display.
        """
        self.frames = list(frames)
        self.frame_index = 0
        self.elapsed = 0.0
        self._push()

    def tick(self, dt: float) -> Optional[Frame]:
        """
        Advance the clock.

        Args:
            dt: Seconds since the previous tick.

        Returns:
            The active frame after the tick.
        """
        if len(self.frames) <= 1:
            return self.current

        self.elapsed += dt
        if self.elapsed >= self.frame_duration:
            self.elapsed = 0.0
            self.frame_index = (self.frame_index + 1) % len(self.frames)
            self._push()

        return self.current

    def reset(self) -> None:
        """Drop all frames and clear the display."""
        self.set_frames([])

    def _push(self) -> None:
        if self.sink is not None:
            self.sink(self.current)


# =============================================================================
# Input Cooldowns
# =============================================================================

class InputCooldowns:
    """
    Per-action "ignore input until" guards.

    Each accepted action blocks further input of the same kind until its
    cooldown has elapsed on the monotonic clock. Different actions are
    independent.
    """

    def __init__(self, clock: MonotonicClock = time.monotonic):
        self._clock = clock
        self._blocked_until: Dict[str, float] = {}

    def is_blocked(self, action: str, now: Optional[float] = None) -> bool:
        """Check whether an action is still cooling down."""
        current_time = self._clock() if now is None else now
        return current_time < self._blocked_until.get(action, float("-inf"))

    def try_acquire(self, action: str, cooldown: float, now: Optional[float] = None) -> bool:
        """
        Accept an action if it is not cooling down, starting a new cooldown.

        Args:
            action: Action name (e.g. "direction", "class_select").
            cooldown: Seconds to block the action after accepting it.
            now: Clock reading to use instead of querying the clock.

        Returns:
            True if the action was accepted, False if it should be ignored.
        """
        current_time = self._clock() if now is None else now
        if current_time < self._blocked_until.get(action, float("-inf")):
            return False

        self._blocked_until[action] = current_time + max(0.0, cooldown)
        return True

    def release(self, action: Optional[str] = None) -> None:
        """Clear one action's cooldown, or all of them."""
        if action is None:
            self._blocked_until.clear()
        else:
            self._blocked_until.pop(action, None)
