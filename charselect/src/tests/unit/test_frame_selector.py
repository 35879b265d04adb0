"""
Tests for directional frame selection.
"""

import pytest

from common.src.sprites import Direction, Frame, MotionType, slice_grid
from charselect.src.rendering import AssetResolver, DirectionalFrameSelector
from charselect.src.tests.helpers import make_image


def named_frames(*names):
    return [Frame.whole(make_image(name, 32, 32)) for name in names]


@pytest.fixture
def selector() -> DirectionalFrameSelector:
    return DirectionalFrameSelector()


@pytest.fixture
def four_row_pool():
    """Unlabeled sheet: 3 columns by 4 rows of 64px cells, shuffled."""
    frames = slice_grid(make_image("hero", 192, 256), 64, 64)
    return list(reversed(frames))


class TestNamedSelection:
    """Frames carrying direction tokens."""

    def test_mage_walk_south_ordered_by_number(self, mage_provider, selector):
        pool = AssetResolver(mage_provider).resolve("Mage")

        frames = selector.select(pool, Direction.SOUTH, MotionType.WALK)

        assert [f.name for f in frames] == [f"mage_walk_south_0{n}" for n in range(1, 5)]

    def test_strict_match_prefers_motion(self, selector):
        pool = named_frames("hero_idle_east_1", "hero_walk_east_2", "hero_walk_east_1")

        frames = selector.select(pool, Direction.EAST, MotionType.WALK)

        assert [f.name for f in frames] == ["hero_walk_east_1", "hero_walk_east_2"]

    def test_direction_only_when_motion_missing(self, selector):
        pool = named_frames("hero_idle_left_2", "hero_idle_left_1", "hero_idle_right_1")

        frames = selector.select(pool, Direction.WEST, MotionType.WALK)

        assert [f.name for f in frames] == ["hero_idle_left_1", "hero_idle_left_2"]

    def test_synonym_tokens(self, selector):
        pool = named_frames("hero_up_1", "hero_down_1")

        assert [f.name for f in selector.select(pool, Direction.NORTH)] == ["hero_up_1"]
        assert [f.name for f in selector.select(pool, Direction.SOUTH)] == ["hero_down_1"]

    def test_single_letter_segment_tokens(self, selector):
        pool = named_frames("hero_walk_n_1", "hero_walk_e_1", "hero_walk_s_1", "hero_walk_w_1")

        assert [f.name for f in selector.select(pool, Direction.EAST)] == ["hero_walk_e_1"]

    def test_none_entries_are_ignored(self, selector):
        pool = [None] + named_frames("hero_walk_south_1")

        assert [f.name for f in selector.select(pool, Direction.SOUTH)] == ["hero_walk_south_1"]


class TestRowMapping:
    """Unlabeled sheets map directions to rows."""

    def test_south_is_the_first_row(self, four_row_pool, selector):
        frames = selector.select(four_row_pool, Direction.SOUTH)

        assert [(f.x, f.y) for f in frames] == [(0, 0), (64, 0), (128, 0)]

    def test_west_is_the_last_row(self, four_row_pool, selector):
        frames = selector.select(four_row_pool, Direction.WEST)

        assert [(f.x, f.y) for f in frames] == [(0, 192), (64, 192), (128, 192)]

    @pytest.mark.parametrize("direction,row", [
        (Direction.SOUTH, 0),
        (Direction.EAST, 1),
        (Direction.NORTH, 2),
        (Direction.WEST, 3),
    ])
    def test_each_direction_gets_its_row(self, four_row_pool, selector, direction, row):
        frames = selector.select(four_row_pool, direction)

        assert {f.y for f in frames} == {row * 64}

    def test_custom_row_order(self, four_row_pool):
        selector = DirectionalFrameSelector(
            row_order=[Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST]
        )

        assert {f.y for f in selector.select(four_row_pool, Direction.SOUTH)} == {128}
        assert {f.y for f in selector.select(four_row_pool, Direction.NORTH)} == {0}

    def test_extra_rows_are_ignored(self, selector):
        pool = slice_grid(make_image("tall", 64, 384), 64, 64)

        frames = selector.select(pool, Direction.WEST)

        assert [f.y for f in frames] == [192]


class TestEvenSplit:
    """Pools with fewer than four rows are split four ways."""

    def test_single_row_split(self, selector):
        pool = slice_grid(make_image("strip", 512, 64), 64, 64)

        frames = selector.select(pool, Direction.NORTH)

        assert [f.x for f in frames] == [256, 320]

    def test_small_pool_clamps_to_last_frame(self, selector):
        pool = named_frames("pose_1", "pose_2")

        assert [f.name for f in selector.select(pool, Direction.WEST)] == ["pose_2"]
        assert [f.name for f in selector.select(pool, Direction.SOUTH)] == ["pose_1"]

    def test_single_frame_pool(self, selector):
        pool = named_frames("portrait")

        for direction in Direction:
            assert [f.name for f in selector.select(pool, direction)] == ["portrait"]

    def test_empty_pool(self, selector):
        assert selector.select([], Direction.SOUTH) == []
        assert selector.select((), Direction.EAST, MotionType.IDLE) == []
