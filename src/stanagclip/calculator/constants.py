"""
Dimensional constants for the STANAG clip.

This module centralizes the fixed dimensions of the rail standard and the
tessellation/tolerance settings used by profile construction. None of these
are user parameters: they describe the mechanical standard the rail must
mate with, and the rail/ring fusion relies on them staying consistent.

MODIFICATION GUIDELINES:
- Never change STANAG 4694 dimensions without checking a mating rail
- Always include units in constant names (_MM, _DEG)
- Derived values are computed here once, never re-derived inline

Constants are grouped by category:
- STANAG 4694 / MIL-STD-1913: rail cross-section and slot spacing
- Parameter bounds: limits enforced at the parameter boundary
- Tessellation and tolerances
"""

from typing import Tuple

# =============================================================================
# STANAG 4694 / MIL-STD-1913 - Rail Cross-Section
# =============================================================================

# Width of the rail body between the 45° flanks
RAIL_BASE_WIDTH_MM: float = 19.0

# Height of the locking ridge (bottom of the rail to the flank apex)
RAIL_BASE_HEIGHT_MM: float = 2.74

# Height of the rail top surface
RAIL_TOP_HEIGHT_MM: float = 4.17

# Width of the rail foot below the lower flanks
RAIL_BOTTOM_WIDTH_MM: float = 15.62

# Overall width over the flattened tips
RAIL_CLIP_WIDTH_MM: float = 21.2

# Depth of the rail below the ridge, and its midpoint
RAIL_DEPTH_MM: float = 9.4
RAIL_MID_DEPTH_MM: float = 4.7

# Height of the top edge of the segment cut; anything above it is a "high" tooth
RAIL_CUT_TOP_MM: float = 10.0

# Derived cross-section offsets
TOP_DIFF_MM: float = RAIL_TOP_HEIGHT_MM - RAIL_BASE_HEIGHT_MM
BOTTOM_DIFF_MM: float = (RAIL_BASE_WIDTH_MM - RAIL_BOTTOM_WIDTH_MM) / 2
MID_MM: float = RAIL_BASE_HEIGHT_MM / 2

# Bottom edge of the notch cut: only material above the locking ridge goes
CUT_BOTTOM_MM: float = RAIL_BASE_HEIGHT_MM - (RAIL_CLIP_WIDTH_MM - RAIL_BASE_WIDTH_MM) / 2

# Horizontal extent of the tip-clipping borders beyond the clip width
BORDER_EXTENT_MM: float = 5.0

# =============================================================================
# STANAG 4694 / MIL-STD-1913 - Slot Spacing
# =============================================================================

# Axial width of a "high" (tooth) segment
HIGH_PART_WIDTH_MM: float = 10.0 - 5.25

# Axial width of a "low" (slot) segment
LOW_PART_WIDTH_MM: float = 5.25

# =============================================================================
# Parameter Bounds
# =============================================================================

COUNT_HIGH_PARTS_RANGE: Tuple[int, int] = (1, 500)
RING_DIAMETER_RANGE_MM: Tuple[float, float] = (15.6, 100.0)
RING_STRENGTH_RANGE_MM: Tuple[float, float] = (1.0, 10.0)
RING_HOLE_ANGLE_RANGE_DEG: Tuple[float, float] = (0.0, 270.0)

DEFAULT_COUNT_HIGH_PARTS: int = 3
DEFAULT_ENDS_WITH_LOW: bool = False
DEFAULT_RING_DIAMETER_MM: float = 19.8
DEFAULT_RING_STRENGTH_MM: float = 2.5
DEFAULT_RING_HOLE_ANGLE_DEG: float = 110.0

# =============================================================================
# Tessellation and Tolerances
# =============================================================================

# Segments per full revolution for circles and arcs
CIRCLE_SEGMENTS: int = 128

# Cutaway wedge radius exceeds the ring outer radius by this much,
# so the subtraction never works on coincident boundaries
CUTAWAY_EPSILON_MM: float = 0.01

# Cutaway angles at or below this are treated as no cutaway
RING_HOLE_ANGLE_TOLERANCE_DEG: float = 0.001

# Centre of the cutaway, measured counter-clockwise from +X (straight down)
CUTAWAY_CENTRE_ANGLE_DEG: float = 270.0

# =============================================================================
# Advisory Thresholds
# =============================================================================

# Ring walls thinner than this are fragile when printed
THIN_RING_WARNING_MM: float = 1.5

# Cutaways at or beyond this no longer hold a round accessory
OPEN_RING_WARNING_DEG: float = 180.0

# Rails longer than this many high parts are slow to build
LONG_RAIL_WARNING_PARTS: int = 100
