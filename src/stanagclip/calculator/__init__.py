"""
Clip Calculator - Dimensional arithmetic and validation for the STANAG clip.

Everything here is pure Python and does not import build123d, so parameter
checks and derived dimensions are available without the geometry kernel.

Example:
    >>> from stanagclip.calculator import segment_height, validate_params
    >>> segment_height(count_high_parts=3, ends_with_low=False)
    24.75
    >>> validate_params({"ringStrength": 1.2}).warnings[0].code
    'THIN_RING'
"""

from .segments import (
    count_low_parts,
    segment_height,
    notch_offsets,
    cutaway_enabled,
    cutaway_angles,
    ring_offset_y,
    ring_centre,
    arc_points,
)

from .validation import (
    validate_params,
    Severity,
    ValidationMessage,
    ValidationResult,
)

__all__ = [
    # Segment arithmetic
    "count_low_parts",
    "segment_height",
    "notch_offsets",
    "cutaway_enabled",
    "cutaway_angles",
    "ring_offset_y",
    "ring_centre",
    "arc_points",

    # Validation
    "validate_params",
    "Severity",
    "ValidationMessage",
    "ValidationResult",
]
