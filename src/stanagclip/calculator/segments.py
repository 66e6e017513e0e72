"""
Segment and ring arithmetic for the STANAG clip.

Pure Python - no build123d imports, so these can be used (and tested)
without the geometry kernel.
"""

import math
from typing import List, Tuple

from .constants import (
    HIGH_PART_WIDTH_MM,
    LOW_PART_WIDTH_MM,
    CIRCLE_SEGMENTS,
    CUTAWAY_CENTRE_ANGLE_DEG,
    RING_HOLE_ANGLE_TOLERANCE_DEG,
    RAIL_DEPTH_MM,
    RAIL_MID_DEPTH_MM,
    BOTTOM_DIFF_MM,
)

Point2D = Tuple[float, float]


def count_low_parts(count_high_parts: int, ends_with_low: bool) -> int:
    """
    Number of low (slot) segments on the rail.

    A rail always starts with a high part and alternates, so it has one low
    part fewer than high parts unless it ends on a low part.
    """
    return count_high_parts - (0 if ends_with_low else 1)


def segment_height(count_high_parts: int, ends_with_low: bool) -> float:
    """
    Total axial length of the clip (extrusion height of rail and ring).

    Args:
        count_high_parts: Number of high segments (>= 1)
        ends_with_low: True if the rail ends on a low segment

    Returns:
        Height in mm
    """
    low_parts = count_low_parts(count_high_parts, ends_with_low)
    return HIGH_PART_WIDTH_MM * count_high_parts + LOW_PART_WIDTH_MM * low_parts


def notch_offsets(count_high_parts: int, ends_with_low: bool) -> List[float]:
    """
    Axial start positions of the low-part notches, left to right.

    Notch i starts after i + 1 high parts and i low parts.
    """
    low_parts = count_low_parts(count_high_parts, ends_with_low)
    return [
        (i + 1) * HIGH_PART_WIDTH_MM + i * LOW_PART_WIDTH_MM
        for i in range(low_parts)
    ]


def cutaway_enabled(ring_hole_angle_deg: float) -> bool:
    """True if the ring gets a cutaway; angles within tolerance of zero do not."""
    return ring_hole_angle_deg > RING_HOLE_ANGLE_TOLERANCE_DEG


def ring_offset_y(ring_strength_mm: float) -> float:
    """
    Vertical shift of the ring from its construction position to rail-local
    coordinates. Places the ring's outer top just below the rail ridge.
    """
    return -ring_strength_mm - (RAIL_DEPTH_MM - RAIL_MID_DEPTH_MM - BOTTOM_DIFF_MM)


def ring_centre(ring_diameter_mm: float, ring_strength_mm: float) -> Point2D:
    """Centre of the ring in rail-local coordinates."""
    return (0.0, -ring_diameter_mm / 2 + ring_offset_y(ring_strength_mm))


def arc_points(
    radius: float,
    start_angle_deg: float,
    end_angle_deg: float,
    segments: int = CIRCLE_SEGMENTS,
) -> List[Point2D]:
    """
    Sample a circular arc around the origin into points.

    The step count follows the full-circle density ``segments``, with at
    least one step so the arc always has both end points.

    Args:
        radius: Arc radius in mm
        start_angle_deg: Start angle, counter-clockwise from +X
        end_angle_deg: End angle (> start_angle_deg)
        segments: Segments per full revolution

    Returns:
        List of (x, y) points from start to end
    """
    sweep = end_angle_deg - start_angle_deg
    steps = max(1, int(math.floor(segments * sweep / 360.0)))
    points = []
    for i in range(steps + 1):
        angle = math.radians(start_angle_deg + sweep * i / steps)
        points.append((radius * math.cos(angle), radius * math.sin(angle)))
    return points


def cutaway_angles(ring_hole_angle_deg: float) -> Tuple[float, float]:
    """Start and end angle of the cutaway arc, centred straight down."""
    half = ring_hole_angle_deg / 2
    return (CUTAWAY_CENTRE_ANGLE_DEG - half, CUTAWAY_CENTRE_ANGLE_DEG + half)
