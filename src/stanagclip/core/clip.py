"""
Clip geometry generation using build123d.

Builds the two solids of the clip from its profiles:
1. Rail: extruded rail section with a notch cut at every low part
2. Ring: extruded annulus, optionally with an angular cutaway

Both solids span z = 0 .. height in the same frame and touch along the
ring's outer boundary, so they can be exported as one connected assembly.
"""

import logging
import operator
from functools import reduce
from typing import Optional, Tuple

from build123d import Color, Part, Pos, Sketch, extrude

from ..calculator.constants import LOW_PART_WIDTH_MM
from ..calculator.segments import notch_offsets
from ..io.loaders import ClipParams
from .geometry_base import BaseGeometry, ClipGeometryError
from .profiles import ClipProfiles, build_profiles

logger = logging.getLogger(__name__)

RAIL_COLOR = Color(0.27, 0.51, 0.71)
RING_COLOR = Color(1.0, 0.65, 0.0)


def extrude_profile(profile: Sketch, height: float) -> Part:
    """Extrude a profile straight up the rail axis (+Z) from z=0."""
    return extrude(profile, amount=height, dir=(0, 0, 1))


def union_all(solids) -> Optional[Part]:
    """Fuse solids into one; None for an empty sequence."""
    solids = list(solids)
    if not solids:
        return None
    return reduce(operator.add, solids)


class ClipGeometry(BaseGeometry):
    """
    Generates 3D geometry for a rail clip with a retaining ring.

    Example:
        >>> geo = ClipGeometry(ClipParams(count_high_parts=3))
        >>> rail, ring = geo.build()
        >>> geo.export_step("clip.step")
    """

    _part_names = ("rail", "ring")

    def __init__(self, params: ClipParams):
        """
        Initialize clip geometry generator.

        Args:
            params: Validated clip parameters
        """
        self.params = params
        self.height = params.height_mm

        self._profiles = None
        self._rail = None
        self._ring = None

    @property
    def profiles(self) -> ClipProfiles:
        if self._profiles is None:
            self._profiles = self._stage("profiles", build_profiles, self.params)
        return self._profiles

    def build(self) -> Tuple[Part, Part]:
        """
        Build rail and ring.

        Returns:
            (rail, ring) build123d Parts

        Raises:
            ClipGeometryError: If the geometry kernel fails at any stage
        """
        if self._rail is not None and self._ring is not None:
            return self._rail, self._ring

        logger.info(
            f"Building clip: {self.params.count_high_parts} high / "
            f"{self.params.count_low_parts} low parts, height {self.height:.2f}mm"
        )

        rail = self._stage("rail", self.build_rail)
        ring = self._stage("ring", self.build_ring)

        rail.label, rail.color = "rail", RAIL_COLOR
        ring.label, ring.color = "ring", RING_COLOR

        logger.info(f"Built rail: volume={rail.volume:.2f} mm³")
        logger.info(f"Built ring: volume={ring.volume:.2f} mm³")

        self._rail, self._ring = rail, ring
        return rail, ring

    def build_rail(self) -> Part:
        """Rail section extruded to full height, minus the low-part notches."""
        rail = extrude_profile(self.profiles.rail_outline, self.height)
        cuts = self.build_notch_cuts()
        if cuts is None:
            return rail
        return rail - cuts

    def build_notch_cuts(self) -> Optional[Part]:
        """
        One notch block per low part, placed left to right along the axis and
        fused into a single solid. None when the rail has no low parts.
        """
        notch = extrude_profile(self.profiles.segment_cut, LOW_PART_WIDTH_MM)
        offsets = notch_offsets(self.params.count_high_parts, self.params.ends_with_low)
        logger.debug(f"Notch offsets: {[round(z, 2) for z in offsets]}")
        return union_all(Pos(0, 0, z) * notch for z in offsets)

    def build_whole_ring(self) -> Part:
        """Annulus at full height, in rail-local position."""
        profiles = self.profiles
        annulus = (
            extrude_profile(profiles.ring_outer, self.height)
            - extrude_profile(profiles.ring_inner, self.height)
        )
        return Pos(*profiles.ring_offset) * annulus

    def build_ring(self) -> Part:
        """Annulus minus the cutaway wedge, if the ring has one."""
        ring = self.build_whole_ring()
        wedge = self.profiles.cutaway_wedge
        if wedge is None:
            return ring
        return ring - extrude_profile(wedge, self.height)

    def _stage(self, name: str, func, *args):
        """Run one construction stage; kernel errors become ClipGeometryError."""
        try:
            result = func(*args)
        except ClipGeometryError:
            raise
        except Exception as e:
            logger.error(f"Clip {name} construction failed: {e}")
            raise ClipGeometryError(f"{name} construction failed: {e}") from e

        if isinstance(result, Part) and not result.is_valid:
            logger.error(f"Clip {name} is not a valid solid")
            raise ClipGeometryError(f"{name} construction produced an invalid solid")
        return result
