"""
Stanagclip Core - Pure geometry generation engine.

This module provides the 2D profile construction and 3D solid assembly of
the clip using build123d. No JSON dependencies - pure Python API.

Example:
    >>> from stanagclip.core import ClipGeometry
    >>> from stanagclip.io import ClipParams
    >>>
    >>> params = ClipParams(count_high_parts=3, ring_diameter_mm=19.8)
    >>> rail, ring = ClipGeometry(params).build()
"""

from .geometry_base import BaseGeometry, ClipGeometryError
from .profiles import (
    ClipProfiles,
    build_profiles,
    build_ring_contours,
    rail_outline_points,
    left_border_points,
    right_border_points,
    segment_cut_points,
    cutaway_wedge_points,
)
from .clip import ClipGeometry, extrude_profile, union_all

__all__ = [
    # Geometry classes
    "BaseGeometry",
    "ClipGeometry",
    "ClipGeometryError",

    # Profiles
    "ClipProfiles",
    "build_profiles",
    "build_ring_contours",
    "rail_outline_points",
    "left_border_points",
    "right_border_points",
    "segment_cut_points",
    "cutaway_wedge_points",

    # Solid helpers
    "extrude_profile",
    "union_all",
]
