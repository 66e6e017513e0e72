"""
Shared export and packaging logic for clip geometry.

Produces one output package per parameter set: STEP (rail, ring and the
combined assembly), 3MF, STL, params.json and clip.md. The CLI writes the
files to a directory, optionally also as a ZIP.
"""

import io
import logging
import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from build123d import Compound, Mesher, Part, Unit, export_step, export_stl

from .loaders import ClipParams

logger = logging.getLogger(__name__)

# Mesh settings for print-ready output
LINEAR_DEFLECTION = 0.001
ANGULAR_DEFLECTION = 0.1


def _unify_for_export(part: Part, name: str) -> Part:
    """Merge adjacent faces on the same surface before STEP export.

    Notch cuts split the rail's flat faces into many coplanar pieces.
    """
    try:
        from OCP.ShapeUpgrade import ShapeUpgrade_UnifySameDomain

        unifier = ShapeUpgrade_UnifySameDomain(part.wrapped, True, True, True)
        unifier.Build()
        unified = Part(unifier.Shape())
        unified.label, unified.color = part.label, part.color
        return unified
    except Exception as e:
        logger.warning(f"Face unification failed for {name}: {e}")
        return part


def export_part_step(part: Part, name: str = "part") -> bytes:
    """Export Part to STEP bytes.

    Args:
        part: build123d Part to export.
        name: Label for log messages.

    Returns:
        STEP file contents as bytes.
    """
    unified = _unify_for_export(part, name)

    with tempfile.NamedTemporaryFile(suffix=".step", delete=False) as tmp:
        tmp_path = Path(tmp.name)

    try:
        export_step(unified, str(tmp_path))
        return tmp_path.read_bytes()
    finally:
        tmp_path.unlink(missing_ok=True)


def export_part_3mf(*parts: Part) -> Optional[bytes]:
    """Export one or more Parts to 3MF bytes.

    Returns None if meshing fails (non-fatal).
    """
    with tempfile.NamedTemporaryFile(suffix=".3mf", delete=False) as tmp:
        tmp_path = Path(tmp.name)

    try:
        mesher = Mesher(unit=Unit.MM)
        for part in parts:
            mesher.add_shape(
                part,
                linear_deflection=LINEAR_DEFLECTION,
                angular_deflection=ANGULAR_DEFLECTION,
            )
        mesher.write(str(tmp_path))
        return tmp_path.read_bytes()
    except Exception as e:
        logger.warning(f"3MF export failed (non-fatal): {e}")
        return None
    finally:
        tmp_path.unlink(missing_ok=True)


def export_part_stl(part: Part) -> bytes:
    """Export Part to STL bytes."""
    with tempfile.NamedTemporaryFile(suffix=".stl", delete=False) as tmp:
        tmp_path = Path(tmp.name)

    try:
        export_stl(
            part,
            str(tmp_path),
            tolerance=LINEAR_DEFLECTION,
            angular_tolerance=ANGULAR_DEFLECTION,
        )
        return tmp_path.read_bytes()
    finally:
        tmp_path.unlink(missing_ok=True)


def export_assembly_step(rail: Part, ring: Part) -> bytes:
    """Export rail and ring as a two-part STEP assembly."""
    assembly = Compound(
        label="clip",
        children=[_unify_for_export(rail, "rail"), _unify_for_export(ring, "ring")],
    )

    with tempfile.NamedTemporaryFile(suffix=".step", delete=False) as tmp:
        tmp_path = Path(tmp.name)

    try:
        export_step(assembly, str(tmp_path))
        return tmp_path.read_bytes()
    finally:
        tmp_path.unlink(missing_ok=True)


@dataclass
class PackageFiles:
    """Container for all output files from geometry generation."""

    rail_step: Optional[bytes] = None
    ring_step: Optional[bytes] = None
    assembly_step: Optional[bytes] = None
    rail_3mf: Optional[bytes] = None
    ring_3mf: Optional[bytes] = None
    assembly_3mf: Optional[bytes] = None
    rail_stl: Optional[bytes] = None
    ring_stl: Optional[bytes] = None
    params_json: Optional[str] = None
    clip_md: Optional[str] = None

    def file_map(self) -> Dict[str, Optional[bytes]]:
        """Binary outputs keyed by file name."""
        return {
            "rail.step": self.rail_step,
            "ring.step": self.ring_step,
            "clip.step": self.assembly_step,
            "rail.3mf": self.rail_3mf,
            "ring.3mf": self.ring_3mf,
            "clip.3mf": self.assembly_3mf,
            "rail.stl": self.rail_stl,
            "ring.stl": self.ring_stl,
        }

    def text_map(self) -> Dict[str, Optional[str]]:
        """Text outputs keyed by file name."""
        return {
            "params.json": self.params_json,
            "clip.md": self.clip_md,
        }


def generate_package(
    params: ClipParams,
    rail: Part,
    ring: Part,
    include_3mf: bool = True,
    include_stl: bool = True,
    validation=None,
    log: Optional[Callable[[str], None]] = None,
) -> PackageFiles:
    """Generate all output files for a built clip.

    Args:
        params: Parameters the clip was built from.
        rail: Built rail Part.
        ring: Built ring Part.
        include_3mf: Generate 3MF files (default True).
        include_stl: Generate STL files (default True).
        validation: Optional ValidationResult for params.json/clip.md output.
        log: Optional logging callback (e.g. print).

    Returns:
        PackageFiles with all generated file data.
    """
    files = PackageFiles()

    def _log(msg: str):
        if log:
            log(msg)

    for name, part in (("rail", rail), ("ring", ring)):
        _log(f"Exporting {name} STEP...")
        data = export_part_step(part, name)
        setattr(files, f"{name}_step", data)
        _log(f"  STEP: {len(data) / 1024:.1f} KB")

        if include_3mf:
            _log(f"Exporting {name} 3MF...")
            data = export_part_3mf(part)
            setattr(files, f"{name}_3mf", data)
            if data:
                _log(f"  3MF: {len(data) / 1024:.1f} KB")

        if include_stl:
            _log(f"Exporting {name} STL...")
            data = export_part_stl(part)
            setattr(files, f"{name}_stl", data)
            _log(f"  STL: {len(data) / 1024:.1f} KB")

    _log("Exporting assembly STEP...")
    files.assembly_step = export_assembly_step(rail, ring)

    if include_3mf:
        _log("Exporting assembly 3MF...")
        files.assembly_3mf = export_part_3mf(rail, ring)

    # Lazy import to avoid circular dependency (io -> calculator -> io)
    from ..calculator.output import to_json, to_markdown

    _log("Generating params.json and clip.md...")
    files.params_json = to_json(params, validation=validation)
    files.clip_md = to_markdown(params, validation=validation)

    return files


def package_filename(params: ClipParams) -> str:
    """Base filename from parameters.

    Format: stanag_clip_{high}h{low}l_d{diameter}
    """
    diameter = f"{params.ring_diameter_mm:.1f}".replace(".", "_")
    return f"stanag_clip_{params.count_high_parts}h{params.count_low_parts}l_d{diameter}"


def save_package_to_dir(files: PackageFiles, output_dir: Path) -> list[Path]:
    """Write all PackageFiles to a directory with standard naming.

    Args:
        files: PackageFiles from generate_package().
        output_dir: Directory to write files into (created if needed).

    Returns:
        List of Paths written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for name, data in files.file_map().items():
        if data is not None:
            path = output_dir / name
            path.write_bytes(data)
            written.append(path)

    for name, text in files.text_map().items():
        if text is not None:
            path = output_dir / name
            path.write_text(text, encoding="utf-8")
            written.append(path)

    return written


def create_package_zip(files: PackageFiles, params: ClipParams) -> bytes:
    """Create ZIP archive from PackageFiles.

    All files sit in a folder named after package_filename().

    Args:
        files: PackageFiles from generate_package().
        params: Parameters for the folder name.

    Returns:
        ZIP file contents as bytes.
    """
    buf = io.BytesIO()
    base = package_filename(params)

    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in files.file_map().items():
            if data is not None:
                zf.writestr(f"{base}/{name}", data)

        for name, text in files.text_map().items():
            if text is not None:
                zf.writestr(f"{base}/{name}", text)

    return buf.getvalue()
