"""
Tests for the preview animation clock and input cooldowns.
"""

import pytest

from common.src.sprites import (
    DEFAULT_ROW_ORDER,
    AnimationClock,
    Direction,
    Frame,
    InputCooldowns,
    get_row_position,
)
from charselect.src.tests.helpers import make_image


def frames(count):
    return [Frame.whole(make_image(f"walk_{n}", 32, 32)) for n in range(count)]


class TestAnimationClock:
    """Fixed-rate frame cycling."""

    def test_set_frames_pushes_first_frame(self, sink):
        clock = AnimationClock(fps=8, sink=sink)
        walk = frames(3)

        clock.set_frames(walk)

        assert sink.shown == [walk[0]]
        assert clock.current is walk[0]

    def test_tick_advances_after_interval(self, sink):
        clock = AnimationClock(fps=8, sink=sink)
        walk = frames(3)
        clock.set_frames(walk)

        assert clock.tick(0.1) is walk[0]
        assert clock.tick(0.03) is walk[1]
        assert sink.shown == [walk[0], walk[1]]
        assert clock.elapsed == 0.0

    def test_wraps_around(self):
        clock = AnimationClock(fps=10)
        walk = frames(2)
        clock.set_frames(walk)

        clock.tick(0.1)
        clock.tick(0.1)

        assert clock.frame_index == 0

    def test_single_frame_never_advances(self, sink):
        clock = AnimationClock(fps=8, sink=sink)
        clock.set_frames(frames(1))

        clock.tick(5.0)

        assert clock.frame_index == 0
        assert clock.elapsed == 0.0
        assert len(sink.shown) == 1

    def test_empty_clock_shows_nothing(self, sink):
        clock = AnimationClock(sink=sink)

        assert clock.tick(1.0) is None
        clock.reset()

        assert sink.shown == [None]

    def test_fps_floor(self):
        assert AnimationClock(fps=0.5).frame_duration == 1.0
        assert AnimationClock(fps=8).frame_duration == pytest.approx(0.125)

    def test_set_frames_resets_position(self):
        clock = AnimationClock(fps=10)
        clock.set_frames(frames(3))
        clock.tick(0.1)
        clock.tick(0.05)

        clock.set_frames(frames(2))

        assert clock.frame_index == 0
        assert clock.elapsed == 0.0


class TestInputCooldowns:
    """Ignore-until guards."""

    def test_blocks_until_cooldown_passes(self):
        guards = InputCooldowns()

        assert guards.try_acquire("direction", 0.15, now=10.0)
        assert not guards.try_acquire("direction", 0.15, now=10.1)
        assert guards.is_blocked("direction", now=10.1)
        assert guards.try_acquire("direction", 0.15, now=10.2)

    def test_actions_are_independent(self):
        guards = InputCooldowns()

        guards.try_acquire("direction", 1.0, now=0.0)

        assert guards.try_acquire("confirm", 0.5, now=0.1)

    def test_uses_injected_clock(self):
        readings = iter([1.0, 1.1, 2.0])
        guards = InputCooldowns(clock=lambda: next(readings))

        assert guards.try_acquire("gender", 0.2)
        assert not guards.try_acquire("gender", 0.2)
        assert guards.try_acquire("gender", 0.2)

    def test_release(self):
        guards = InputCooldowns()
        guards.try_acquire("a", 5.0, now=0.0)
        guards.try_acquire("b", 5.0, now=0.0)

        guards.release("a")
        assert not guards.is_blocked("a", now=1.0)
        assert guards.is_blocked("b", now=1.0)

        guards.release()
        assert not guards.is_blocked("b", now=1.0)


class TestRowPosition:
    """Configured row order lookup."""

    def test_default_order(self):
        assert [get_row_position(d) for d in Direction] == [0, 1, 2, 3]
        assert DEFAULT_ROW_ORDER[0] == Direction.SOUTH

    def test_missing_direction_falls_back_to_index(self):
        assert get_row_position(Direction.WEST, [Direction.SOUTH]) == 3
