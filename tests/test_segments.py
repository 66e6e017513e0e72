"""
Tests for segment and ring arithmetic (no geometry kernel needed).
"""

import math
import pytest

from stanagclip.calculator.constants import (
    HIGH_PART_WIDTH_MM,
    LOW_PART_WIDTH_MM,
    CUT_BOTTOM_MM,
    TOP_DIFF_MM,
    BOTTOM_DIFF_MM,
    MID_MM,
)
from stanagclip.calculator.segments import (
    count_low_parts,
    segment_height,
    notch_offsets,
    cutaway_enabled,
    cutaway_angles,
    ring_offset_y,
    ring_centre,
    arc_points,
)


class TestRailConstants:
    """Derived rail dimensions."""

    def test_segment_widths(self):
        """High part is 4.75mm, low part 5.25mm, one pitch is 10mm."""
        assert HIGH_PART_WIDTH_MM == pytest.approx(4.75)
        assert LOW_PART_WIDTH_MM == pytest.approx(5.25)
        assert HIGH_PART_WIDTH_MM + LOW_PART_WIDTH_MM == pytest.approx(10.0)

    def test_flank_differences(self):
        assert TOP_DIFF_MM == pytest.approx(1.43)
        assert BOTTOM_DIFF_MM == pytest.approx(1.69)
        assert MID_MM == pytest.approx(1.37)

    def test_cut_bottom(self):
        """Notches start where the flattened tip meets the top flank."""
        assert CUT_BOTTOM_MM == pytest.approx(1.64)


class TestSegmentCounts:
    """Tests for count_low_parts and segment_height."""

    @pytest.mark.parametrize("high,ends_with_low,expected", [
        (1, False, 0),
        (1, True, 1),
        (3, False, 2),
        (3, True, 3),
        (500, False, 499),
    ])
    def test_count_low_parts(self, high, ends_with_low, expected):
        assert count_low_parts(high, ends_with_low) == expected

    def test_default_height(self):
        """3 high parts, ends high: 3 x 4.75 + 2 x 5.25."""
        assert segment_height(3, False) == pytest.approx(24.75)

    def test_ends_with_low_height(self):
        assert segment_height(2, True) == pytest.approx(20.0)

    def test_single_high_part(self):
        assert segment_height(1, False) == pytest.approx(4.75)

    def test_height_formula(self):
        """Height is 4.75N + 5.25L for every combination."""
        for n in (1, 2, 7, 50):
            for ends_with_low in (False, True):
                low = count_low_parts(n, ends_with_low)
                assert segment_height(n, ends_with_low) == pytest.approx(4.75 * n + 5.25 * low)


class TestNotchOffsets:
    """Tests for notch_offsets."""

    def test_default_offsets(self):
        offsets = notch_offsets(3, False)
        assert offsets == pytest.approx([4.75, 14.75])

    def test_no_notches_for_single_high_part(self):
        assert notch_offsets(1, False) == []

    def test_last_notch_reaches_end_when_ending_low(self):
        """A rail ending on a low part has its last notch flush with the end."""
        offsets = notch_offsets(3, True)
        assert len(offsets) == 3
        assert offsets[-1] + LOW_PART_WIDTH_MM == pytest.approx(segment_height(3, True))

    def test_offsets_spaced_by_pitch(self):
        offsets = notch_offsets(10, False)
        for a, b in zip(offsets, offsets[1:]):
            assert b - a == pytest.approx(10.0)


class TestCutaway:
    """Tests for the cutaway angle helpers."""

    @pytest.mark.parametrize("angle,expected", [
        (0, False),
        (0.0005, False),
        (0.001, False),
        (0.002, True),
        (110, True),
        (270, True),
    ])
    def test_cutaway_enabled(self, angle, expected):
        assert cutaway_enabled(angle) is expected

    def test_cutaway_centred_downwards(self):
        start, end = cutaway_angles(110)
        assert start == pytest.approx(215)
        assert end == pytest.approx(325)
        assert (start + end) / 2 == pytest.approx(270)


class TestRingPosition:
    """Tests for ring placement in rail-local coordinates."""

    def test_ring_offset(self):
        """Ring drops by its wall strength plus 3.01mm."""
        assert ring_offset_y(2.5) == pytest.approx(-5.51)

    def test_ring_centre(self):
        assert ring_centre(19.8, 2.5) == pytest.approx((0.0, -15.41))

    def test_ring_outer_top_below_rail_foot(self):
        """Outer top of the ring sits 3.01mm below the rail origin for any strength."""
        for w in (1.0, 2.5, 10.0):
            cx, cy = ring_centre(30.0, w)
            assert cy + 15.0 + w == pytest.approx(-3.01)


class TestArcPoints:
    """Tests for arc_points."""

    def test_points_on_radius(self):
        for x, y in arc_points(5.0, 10, 80):
            assert math.hypot(x, y) == pytest.approx(5.0)

    def test_end_points(self):
        points = arc_points(2.0, 0, 90)
        assert points[0] == pytest.approx((2.0, 0.0))
        assert points[-1] == pytest.approx((0.0, 2.0), abs=1e-12)

    def test_step_count_follows_circle_density(self):
        """110° at 128 segments per turn: floor(39.1) = 39 steps."""
        assert len(arc_points(1.0, 215, 325, 128)) == 40

    def test_tiny_arc_has_one_step(self):
        assert len(arc_points(1.0, 0, 0.5, 128)) == 2
