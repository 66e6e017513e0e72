"""
Command-line interface for STANAG clip geometry generation.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ..io.loaders import ClipParams, load_params_json, save_params_json
from ..io.schema import get_parameter_definitions
from ..io.package import (
    generate_package,
    save_package_to_dir,
    create_package_zip,
    package_filename,
)
from ..calculator.validation import validate_params
from ..core.clip import ClipGeometry
from ..core.geometry_base import ClipGeometryError

# CLI flag -> ClipParams field
_PARAM_FLAGS = {
    'count_high_parts': 'count_high_parts',
    'ends_with_low': 'ends_with_low',
    'ring_diameter': 'ring_diameter_mm',
    'ring_strength': 'ring_strength_mm',
    'ring_hole_angle': 'ring_hole_angle_deg',
}


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the stanag-clip command."""
    parser = argparse.ArgumentParser(
        prog='stanag-clip',
        description="Generate a STANAG rail clip with retaining ring as STEP/3MF/STL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default clip (3 high parts, 19.8mm ring, 110° cutaway)
  stanag-clip

  # Longer rail ending on a low part
  stanag-clip --count-high-parts 5 --ends-with-low

  # Closed ring for a 30mm tube, thicker wall
  stanag-clip --ring-diameter 30 --ring-strength 4 --ring-hole-angle 0

  # Parameters from JSON, one value overridden on the command line
  stanag-clip --params clip.json --ring-hole-angle 90

  # Show the parameter table
  stanag-clip --list-parameters

  # View in OCP viewer without saving
  stanag-clip --view --no-save
        """
    )

    parser.add_argument(
        '--params',
        type=str,
        default=None,
        help='JSON file with clip parameters (CLI flags override its values)'
    )

    parser.add_argument(
        '--count-high-parts',
        type=int,
        default=None,
        help='Number of high parts in the rail (1-500, default: 3)'
    )

    parser.add_argument(
        '--ends-with-low',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Rail ends on a low part (default: no)'
    )

    parser.add_argument(
        '--ring-diameter',
        type=float,
        default=None,
        help='Inner diameter of the ring in mm (15.6-100, default: 19.8)'
    )

    parser.add_argument(
        '--ring-strength',
        type=float,
        default=None,
        help='Wall thickness of the ring in mm (1-10, default: 2.5)'
    )

    parser.add_argument(
        '--ring-hole-angle',
        type=float,
        default=None,
        help='Angle of the cutaway in the ring in degrees (0-270, 0 = closed ring, default: 110)'
    )

    parser.add_argument(
        '-o', '--output-dir',
        type=str,
        default='.',
        help='Output directory for generated files (default: current directory)'
    )

    parser.add_argument(
        '--no-3mf',
        action='store_true',
        help='Do not generate 3MF files'
    )

    parser.add_argument(
        '--no-stl',
        action='store_true',
        help='Do not generate STL files'
    )

    parser.add_argument(
        '--zip',
        action='store_true',
        help='Also write all files as a single ZIP archive'
    )

    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Save the effective parameters to a JSON file'
    )

    parser.add_argument(
        '--list-parameters',
        action='store_true',
        help='Print the parameter table (defaults and bounds) and exit'
    )

    parser.add_argument(
        '--view',
        action='store_true',
        help='View in OCP viewer (requires ocp_vscode extension)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not save output files (use with --view)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug logging from the geometry builder'
    )

    return parser


def print_parameter_table() -> None:
    print(f"{'Parameter':<22} {'Type':<6} {'Default':>8} {'Min':>7} {'Max':>7}  Caption")
    for d in get_parameter_definitions():
        low = "" if d.min is None else f"{d.min:g}"
        high = "" if d.max is None else f"{d.max:g}"
        print(f"{d.name:<22} {d.type:<6} {str(d.initial):>8} {low:>7} {high:>7}  {d.caption}")


def resolve_params(args: argparse.Namespace) -> ClipParams:
    """
    Effective parameters: CLI flag > JSON file > default.

    Raises:
        FileNotFoundError, ValueError, ValidationError: On bad input
    """
    values = {}
    if args.params:
        values = load_params_json(args.params).model_dump()

    for flag, field_name in _PARAM_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            values[field_name] = value

    return ClipParams.model_validate(values)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.list_parameters:
        print_parameter_table()
        return 0

    try:
        if args.params:
            print(f"Loading parameters from {args.params}...")
        params = resolve_params(args)
    except ValidationError as e:
        print(f"Invalid parameters:\n{e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading parameters: {e}", file=sys.stderr)
        return 1

    validation = validate_params(params)
    for msg in validation.warnings:
        print(f"  WARNING: {msg.message}")
        if msg.suggestion:
            print(f"           {msg.suggestion}")

    cutaway_desc = f"{params.ring_hole_angle_deg:g}° cutaway" if params.has_cutaway else "closed ring"
    print(
        f"\nGenerating clip ({params.count_high_parts} high / {params.count_low_parts} low parts, "
        f"ring {params.ring_diameter_mm:g}mm x {params.ring_strength_mm:g}mm, {cutaway_desc})..."
    )

    geometry = ClipGeometry(params)
    try:
        rail, ring = geometry.build()
    except ClipGeometryError as e:
        print(f"Geometry generation failed: {e}", file=sys.stderr)
        return 2

    print(f"  Length: {params.height_mm:.2f} mm")
    print(f"  Rail volume: {rail.volume:.2f} mm³")
    print(f"  Ring volume: {ring.volume:.2f} mm³")

    if not args.no_save:
        output_dir = Path(args.output_dir)
        print(f"\nExporting to {output_dir}...")
        files = generate_package(
            params,
            rail,
            ring,
            include_3mf=not args.no_3mf,
            include_stl=not args.no_stl,
            validation=validation,
            log=print,
        )
        for path in save_package_to_dir(files, output_dir):
            print(f"  Saved: {path}")

        if args.zip:
            zip_path = output_dir / f"{package_filename(params)}.zip"
            zip_path.write_bytes(create_package_zip(files, params))
            print(f"  Saved: {zip_path}")

    if args.save_json:
        output_path = Path(args.save_json)
        save_params_json(params, output_path)
        print(f"\nSaved parameters: {output_path}")

    if args.view:
        try:
            from ocp_vscode import show
            show(rail, ring, names=["rail", "ring"], colors=["steelblue", "orange"])
            print("Displayed in OCP viewer")
        except ImportError:
            print("\nWarning: ocp_vscode not available for viewing", file=sys.stderr)
            print("Install with: pip install ocp_vscode", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
