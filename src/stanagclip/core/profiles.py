"""
2D cross-section profiles for the STANAG clip.

All profiles live in the rail's local XY plane (rail width along X, up along
+Y); solids are extruded from them along +Z, the rail axis.

The point-list functions are plain arithmetic. build_profiles() turns them
into build123d sketches and performs the 2D booleans and contour offset.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from build123d import Kind, Polygon, Pos, RegularPolygon, Sketch, offset

from ..calculator.constants import (
    RAIL_BASE_WIDTH_MM,
    RAIL_BASE_HEIGHT_MM,
    RAIL_CLIP_WIDTH_MM,
    RAIL_DEPTH_MM,
    RAIL_TOP_HEIGHT_MM,
    RAIL_CUT_TOP_MM,
    TOP_DIFF_MM,
    BOTTOM_DIFF_MM,
    MID_MM,
    CUT_BOTTOM_MM,
    BORDER_EXTENT_MM,
    CIRCLE_SEGMENTS,
    CUTAWAY_EPSILON_MM,
)
from ..calculator.segments import (
    Point2D,
    arc_points,
    cutaway_angles,
    cutaway_enabled,
    ring_centre,
    ring_offset_y,
)
from ..io.loaders import ClipParams

logger = logging.getLogger(__name__)


def rail_outline_points(extra_bottom: float) -> List[Point2D]:
    """
    Eight-point rail outline with pointy tips.

    The tips are the intersections of the 45° flanks, not yet flattened; the
    foot is extended down by ``extra_bottom`` so it reaches into the ring.
    """
    half = RAIL_BASE_WIDTH_MM / 2
    foot = -RAIL_DEPTH_MM + RAIL_TOP_HEIGHT_MM - extra_bottom
    return [
        (-half + TOP_DIFF_MM, RAIL_BASE_HEIGHT_MM + TOP_DIFF_MM),
        (-half - MID_MM, MID_MM),
        (-half + BOTTOM_DIFF_MM, -BOTTOM_DIFF_MM),
        (-half + BOTTOM_DIFF_MM, foot),
        (half - BOTTOM_DIFF_MM, foot),
        (half - BOTTOM_DIFF_MM, -BOTTOM_DIFF_MM),
        (half + MID_MM, MID_MM),
        (half - TOP_DIFF_MM, RAIL_BASE_HEIGHT_MM + TOP_DIFF_MM),
    ]


def right_border_points() -> List[Point2D]:
    """Block right of the clip width that flattens the right tip."""
    inner = RAIL_CLIP_WIDTH_MM / 2
    outer = inner + BORDER_EXTENT_MM
    return [
        (inner, RAIL_BASE_HEIGHT_MM),
        (inner, 0.0),
        (outer, 0.0),
        (outer, RAIL_BASE_HEIGHT_MM),
    ]


def left_border_points() -> List[Point2D]:
    """Mirror image of the right border."""
    return [(-x, y) for x, y in reversed(right_border_points())]


def segment_cut_points() -> List[Point2D]:
    """Rectangle removed from the rail above the locking ridge at each low part."""
    half = RAIL_CLIP_WIDTH_MM / 2
    return [
        (-half, CUT_BOTTOM_MM),
        (half, CUT_BOTTOM_MM),
        (half, RAIL_CUT_TOP_MM),
        (-half, RAIL_CUT_TOP_MM),
    ]


def cutaway_wedge_points(
    ring_diameter_mm: float,
    ring_strength_mm: float,
    ring_hole_angle_deg: float,
) -> List[Point2D]:
    """
    Wedge removed from the ring, in rail-local coordinates.

    An arc slightly outside the ring, centred straight down, closed through
    the ring centre.
    """
    radius = ring_diameter_mm / 2 + ring_strength_mm + CUTAWAY_EPSILON_MM
    start, end = cutaway_angles(ring_hole_angle_deg)
    cx, cy = ring_centre(ring_diameter_mm, ring_strength_mm)
    points = arc_points(radius, start, end, CIRCLE_SEGMENTS) + [(0.0, 0.0)]
    return [(x + cx, y + cy) for x, y in points]


def make_polygon(points: List[Point2D]) -> Sketch:
    """Closed polygon at its absolute coordinates."""
    return Polygon(*points, align=None)


@dataclass(frozen=True)
class ClipProfiles:
    """
    All cross-sections of one clip.

    ring_inner and ring_outer are in construction position (top of the inner
    contour at y=0); ring_offset moves them to rail-local coordinates.
    rail_outline is the finished rail section, with tips flattened and the
    ring outer contour removed. cutaway_wedge is None when the ring has no
    cutaway.
    """
    rail_outline_base: Sketch
    left_border: Sketch
    right_border: Sketch
    ring_inner: Sketch
    ring_outer: Sketch
    segment_cut: Sketch
    rail_outline: Sketch
    cutaway_wedge: Optional[Sketch]
    ring_offset: Tuple[float, float, float]


def build_ring_contours(ring_diameter_mm: float, ring_strength_mm: float) -> Tuple[Sketch, Sketch]:
    """
    Inner and outer ring contours.

    The inner contour is a polygonal circle hanging below the origin; the
    outer one is its outward offset, so both share the same tessellation.
    """
    radius = ring_diameter_mm / 2
    inner = Pos(0, -radius) * RegularPolygon(radius, CIRCLE_SEGMENTS, align=None)
    outer = offset(inner, amount=ring_strength_mm, kind=Kind.INTERSECTION)
    return inner, outer


def build_profiles(params: ClipParams) -> ClipProfiles:
    """
    Derive every profile for a parameter set.

    Args:
        params: Validated clip parameters

    Returns:
        ClipProfiles
    """
    ring_inner, ring_outer = build_ring_contours(params.ring_diameter_mm, params.ring_strength_mm)
    ring_offset = (0.0, ring_offset_y(params.ring_strength_mm), 0.0)

    # The foot reaches down to the ring centre, so the ring subtraction below
    # always leaves rail material on the ring's outer boundary
    extra_bottom = params.ring_radius_mm + params.ring_strength_mm

    rail_outline_base = make_polygon(rail_outline_points(extra_bottom))
    left_border = make_polygon(left_border_points())
    right_border = make_polygon(right_border_points())

    rail_outline = (
        rail_outline_base
        - left_border
        - right_border
        - Pos(*ring_offset) * ring_outer
    )

    cutaway_wedge = None
    if cutaway_enabled(params.ring_hole_angle_deg):
        cutaway_wedge = make_polygon(cutaway_wedge_points(
            params.ring_diameter_mm,
            params.ring_strength_mm,
            params.ring_hole_angle_deg,
        ))

    logger.debug(
        f"Profiles: ring r={params.ring_radius_mm:.2f}mm w={params.ring_strength_mm:.2f}mm, "
        f"rail area={rail_outline.area:.2f}mm², cutaway={cutaway_wedge is not None}"
    )

    return ClipProfiles(
        rail_outline_base=rail_outline_base,
        left_border=left_border,
        right_border=right_border,
        ring_inner=ring_inner,
        ring_outer=ring_outer,
        segment_cut=make_polygon(segment_cut_points()),
        rail_outline=rail_outline,
        cutaway_wedge=cutaway_wedge,
        ring_offset=ring_offset,
    )
