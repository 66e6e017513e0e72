"""Output formatters for clip parameter sets.

Converts typed ClipParams models to JSON and Markdown output. The JSON form
is the same document load_params_json() reads back; derived dimensions and
validation results are added alongside for reference.
"""

import json
from typing import Optional, TYPE_CHECKING

from ..io.loaders import ClipParams
from ..io.schema import SCHEMA_VERSION
from .constants import HIGH_PART_WIDTH_MM, LOW_PART_WIDTH_MM
from .segments import notch_offsets

if TYPE_CHECKING:
    from .validation import ValidationResult


def _messages_to_dicts(messages) -> list:
    return [
        {
            'severity': msg.severity.value,
            'code': msg.code,
            'message': msg.message,
            'suggestion': msg.suggestion
        }
        for msg in messages
    ]


def derived_dimensions(params: ClipParams) -> dict:
    """Dimensions that follow from the parameters, for reports."""
    return {
        'count_low_parts': params.count_low_parts,
        'height_mm': params.height_mm,
        'ring_outer_diameter_mm': params.ring_diameter_mm + 2 * params.ring_strength_mm,
        'notch_offsets_mm': notch_offsets(params.count_high_parts, params.ends_with_low),
        'has_cutaway': params.has_cutaway,
    }


def to_json(
    params: ClipParams,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
) -> str:
    """Convert ClipParams to JSON string.

    Args:
        params: Clip parameters
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, parameters, derived dimensions and
        optional validation results
    """
    data = {
        'schema_version': SCHEMA_VERSION,
        'params': params.model_dump(mode='json'),
        'derived': derived_dimensions(params),
    }

    if validation:
        data['validation'] = {
            'valid': validation.valid,
            'errors': _messages_to_dicts(validation.errors),
            'warnings': _messages_to_dicts(validation.warnings),
            'infos': _messages_to_dicts(validation.infos),
        }

    return json.dumps(data, indent=indent)


def to_markdown(
    params: ClipParams,
    validation: Optional["ValidationResult"] = None,
) -> str:
    """Convert ClipParams to a markdown specification.

    Args:
        params: Clip parameters
        validation: Optional validation results to include

    Returns:
        Markdown specification string
    """
    derived = derived_dimensions(params)

    md = "# STANAG Clip Specification\n\n"

    md += "## Rail\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| High Parts | {params.count_high_parts} × {HIGH_PART_WIDTH_MM:.2f} mm |\n"
    md += f"| Low Parts | {derived['count_low_parts']} × {LOW_PART_WIDTH_MM:.2f} mm |\n"
    md += f"| Ends With | {'low' if params.ends_with_low else 'high'} part |\n"
    md += f"| Length | {derived['height_mm']:.2f} mm |\n\n"

    md += "## Ring\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Inner Diameter | {params.ring_diameter_mm:.2f} mm |\n"
    md += f"| Wall Strength | {params.ring_strength_mm:.2f} mm |\n"
    md += f"| Outer Diameter | {derived['ring_outer_diameter_mm']:.2f} mm |\n"
    if params.has_cutaway:
        md += f"| Cutaway | {params.ring_hole_angle_deg:.1f}° |\n"
    else:
        md += "| Cutaway | none |\n"
    md += "\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Parameters are valid\n\n"
        else:
            md += "**Status:** ❌ Parameters have errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- All dimensions in millimeters unless otherwise noted\n"
    md += "- Rail cross-section follows STANAG 4694 / MIL-STD-1913\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by stanag-clip*\n"

    return md
