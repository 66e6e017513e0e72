"""
Base class for clip geometry classes.

Provides shared export and display methods for geometry classes that build
several named parts in one common coordinate frame.
"""

import logging
from typing import Tuple

from build123d import Compound, Part, export_step, export_stl

logger = logging.getLogger(__name__)


class ClipGeometryError(RuntimeError):
    """Geometry kernel failure while building a part. No partial result exists."""


class BaseGeometry:
    """Base class providing shared export/display methods for geometry classes.

    Subclasses must:
    - Implement build() -> tuple of Parts, in the order of _part_names
    - Set _part_names class attribute for labels and log messages
    """

    _part_names: Tuple[str, ...] = ()

    def build(self) -> Tuple[Part, ...]:
        raise NotImplementedError

    def named_parts(self) -> dict:
        """Built parts keyed by name."""
        return dict(zip(self._part_names, self.build()))

    def assembly(self) -> Compound:
        """All parts as one compound, each child keeping its label and colour."""
        return Compound(label="assembly", children=list(self.build()))

    def show(self):
        """Display in OCP viewer (requires ocp_vscode)."""
        parts = self.build()
        try:
            from ocp_vscode import show as ocp_show
            ocp_show(*parts, names=list(self._part_names))
        except ImportError:
            pass
        return parts

    def export_step(self, filepath: str):
        """Export all parts as one STEP assembly (builds if not already built)."""
        assembly = self.assembly()
        for name, part in self.named_parts().items():
            logger.info(f"Exporting {name}: volume={part.volume:.2f} mm³")
        export_step(assembly, filepath)
        logger.info(f"Exported {', '.join(self._part_names)} to {filepath}")

    def export_stl(self, filepath: str, tolerance: float = 0.001, angular_tolerance: float = 0.1):
        """Export all parts fused into one STL mesh (builds if not already built)."""
        parts = self.build()
        export_stl(
            Compound(list(parts)), filepath,
            tolerance=tolerance, angular_tolerance=angular_tolerance,
        )
        logger.info(f"Exported {', '.join(self._part_names)} to {filepath}")
