"""
Parameter schema for STANAG clip generation.

Defines the recognised parameters with their types, defaults, bounds and
UI captions. This table is the contract between a host UI (form, web page,
CLI) and the geometry generator: a UI renders its controls from it and
enforces the bounds before the generator is invoked.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Union

from ..calculator.constants import (
    COUNT_HIGH_PARTS_RANGE,
    RING_DIAMETER_RANGE_MM,
    RING_STRENGTH_RANGE_MM,
    RING_HOLE_ANGLE_RANGE_DEG,
    DEFAULT_COUNT_HIGH_PARTS,
    DEFAULT_ENDS_WITH_LOW,
    DEFAULT_RING_DIAMETER_MM,
    DEFAULT_RING_STRENGTH_MM,
    DEFAULT_RING_HOLE_ANGLE_DEG,
)

SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class ParameterDefinition:
    """
    UI metadata for one clip parameter.

    Attributes:
        name: Field name in ClipParams
        alias: camelCase name accepted in JSON input
        type: "int", "float" or "bool"
        initial: Default value
        caption: Human-readable label
        min: Inclusive lower bound (None for booleans)
        max: Inclusive upper bound (None for booleans)
        step: UI step size (None for booleans)
    """
    name: str
    alias: str
    type: str
    initial: Union[int, float, bool]
    caption: str
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


PARAMETER_DEFINITIONS: List[ParameterDefinition] = [
    ParameterDefinition(
        name="count_high_parts",
        alias="countHighParts",
        type="int",
        initial=DEFAULT_COUNT_HIGH_PARTS,
        caption="Number of high parts in rail",
        min=COUNT_HIGH_PARTS_RANGE[0],
        max=COUNT_HIGH_PARTS_RANGE[1],
        step=1,
    ),
    ParameterDefinition(
        name="ends_with_low",
        alias="endsWithLow",
        type="bool",
        initial=DEFAULT_ENDS_WITH_LOW,
        caption="Rail ends on low part",
    ),
    ParameterDefinition(
        name="ring_diameter_mm",
        alias="ringDiameter",
        type="float",
        initial=DEFAULT_RING_DIAMETER_MM,
        caption="Diameter of ring [mm]",
        min=RING_DIAMETER_RANGE_MM[0],
        max=RING_DIAMETER_RANGE_MM[1],
        step=0.1,
    ),
    ParameterDefinition(
        name="ring_strength_mm",
        alias="ringStrength",
        type="float",
        initial=DEFAULT_RING_STRENGTH_MM,
        caption="Strength of ring [mm]",
        min=RING_STRENGTH_RANGE_MM[0],
        max=RING_STRENGTH_RANGE_MM[1],
        step=0.1,
    ),
    ParameterDefinition(
        name="ring_hole_angle_deg",
        alias="ringHoleAngle",
        type="float",
        initial=DEFAULT_RING_HOLE_ANGLE_DEG,
        caption="Angle of cutaway in ring [deg]",
        min=RING_HOLE_ANGLE_RANGE_DEG[0],
        max=RING_HOLE_ANGLE_RANGE_DEG[1],
        step=1,
    ),
]


def get_parameter_definitions() -> List[ParameterDefinition]:
    """Return the parameter table in display order."""
    return list(PARAMETER_DEFINITIONS)


def get_parameter_definition(name: str) -> ParameterDefinition:
    """
    Look up a parameter by field name or camelCase alias.

    Raises:
        KeyError: If no parameter has that name
    """
    for definition in PARAMETER_DEFINITIONS:
        if name in (definition.name, definition.alias):
            return definition
    raise KeyError(f"Unknown clip parameter: {name!r}")


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Check the structure of a parameter JSON document.

    Bounds are not checked here (see ClipParams / validate_params); this only
    reports version mismatches, unknown keys and wrong value types.

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors = []
    warnings = []

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    params = data.get("params", data)
    if not isinstance(params, dict):
        errors.append("'params' section must be an object")
        params = {}

    for key, value in params.items():
        if key == "schema_version":
            continue
        try:
            definition = get_parameter_definition(key)
        except KeyError:
            warnings.append(f"Unknown parameter '{key}' (ignored)")
            continue

        if definition.type == "bool":
            if not isinstance(value, bool):
                errors.append(f"'{key}' must be a boolean, got {type(value).__name__}")
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"'{key}' must be a number, got {type(value).__name__}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version,
    }
