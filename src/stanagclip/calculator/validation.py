"""
Clip Calculator - Validation Rules

Advisory checks on a parameter set before geometry is built. Bounds are
hard errors; everything else is a warning or note for the user.

This module accepts both dict and ClipParams inputs, so raw UI/JSON values
can be checked before they are turned into a ClipParams.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union, Dict, Any, TYPE_CHECKING
from enum import Enum

from .constants import (
    COUNT_HIGH_PARTS_RANGE,
    RING_DIAMETER_RANGE_MM,
    RING_STRENGTH_RANGE_MM,
    RING_HOLE_ANGLE_RANGE_DEG,
    DEFAULT_COUNT_HIGH_PARTS,
    DEFAULT_ENDS_WITH_LOW,
    DEFAULT_RING_DIAMETER_MM,
    DEFAULT_RING_STRENGTH_MM,
    DEFAULT_RING_HOLE_ANGLE_DEG,
    THIN_RING_WARNING_MM,
    OPEN_RING_WARNING_DEG,
    LONG_RAIL_WARNING_PARTS,
)
from .segments import cutaway_enabled

if TYPE_CHECKING:
    from ..io.loaders import ClipParams

ParamsInput = Union[Dict[str, Any], "ClipParams"]

# field name -> (camelCase alias, default)
_FIELDS = {
    'count_high_parts': ('countHighParts', DEFAULT_COUNT_HIGH_PARTS),
    'ends_with_low': ('endsWithLow', DEFAULT_ENDS_WITH_LOW),
    'ring_diameter_mm': ('ringDiameter', DEFAULT_RING_DIAMETER_MM),
    'ring_strength_mm': ('ringStrength', DEFAULT_RING_STRENGTH_MM),
    'ring_hole_angle_deg': ('ringHoleAngle', DEFAULT_RING_HOLE_ANGLE_DEG),
}


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def _get(params: ParamsInput, name: str):
    """Read a field from ClipParams, or from a dict by name or alias."""
    alias, default = _FIELDS[name]
    if isinstance(params, dict):
        if name in params:
            return params[name]
        return params.get(alias, default)
    return getattr(params, name, default)


def validate_params(params: ParamsInput) -> ValidationResult:
    """
    Validate a clip parameter set.

    Args:
        params: ClipParams or a dict of raw values (snake_case or camelCase)

    Returns:
        ValidationResult with all findings
    """
    messages = []
    messages.extend(_validate_bounds(params))

    # Advisory checks only make sense once the values are in range
    if not messages:
        messages.extend(_validate_ring_wall(params))
        messages.extend(_validate_cutaway(params))
        messages.extend(_validate_rail_length(params))

    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def _validate_bounds(params: ParamsInput) -> List[ValidationMessage]:
    """Check types and inclusive bounds of every parameter."""
    messages = []

    ranges = {
        'count_high_parts': COUNT_HIGH_PARTS_RANGE,
        'ring_diameter_mm': RING_DIAMETER_RANGE_MM,
        'ring_strength_mm': RING_STRENGTH_RANGE_MM,
        'ring_hole_angle_deg': RING_HOLE_ANGLE_RANGE_DEG,
    }

    for name, (low, high) in ranges.items():
        value = _get(params, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="NOT_A_NUMBER",
                message=f"{name} must be a number, got {value!r}",
            ))
            continue
        if value < low or value > high:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="OUT_OF_RANGE",
                message=f"{name} = {value} is outside [{low}, {high}]",
                suggestion=f"Choose a value between {low} and {high}",
            ))

    count = _get(params, 'count_high_parts')
    if isinstance(count, float) and not count.is_integer():
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NOT_AN_INTEGER",
            message=f"count_high_parts must be a whole number, got {count}",
        ))

    if not isinstance(_get(params, 'ends_with_low'), bool):
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NOT_A_BOOLEAN",
            message="ends_with_low must be true or false",
        ))

    return messages


def _validate_ring_wall(params: ParamsInput) -> List[ValidationMessage]:
    """Warn about ring walls too thin to print reliably."""
    strength = _get(params, 'ring_strength_mm')
    if strength < THIN_RING_WARNING_MM:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="THIN_RING",
            message=f"Ring wall {strength}mm is below {THIN_RING_WARNING_MM}mm",
            suggestion="Increase ring strength for a sturdier print",
        )]
    return []


def _validate_cutaway(params: ParamsInput) -> List[ValidationMessage]:
    """Report on the cutaway wedge."""
    angle = _get(params, 'ring_hole_angle_deg')

    if not cutaway_enabled(angle):
        return [ValidationMessage(
            severity=Severity.INFO,
            code="NO_CUTAWAY",
            message="Ring is closed (no cutaway)",
        )]

    if angle >= OPEN_RING_WARNING_DEG:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="OPEN_RING",
            message=f"Cutaway of {angle}° leaves less than half of the ring",
            suggestion=f"Use a cutaway below {OPEN_RING_WARNING_DEG}° to retain a round accessory",
        )]
    return []


def _validate_rail_length(params: ParamsInput) -> List[ValidationMessage]:
    """Warn about very long rails (one boolean per notch)."""
    count = _get(params, 'count_high_parts')
    if count > LONG_RAIL_WARNING_PARTS:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="LONG_RAIL",
            message=f"{int(count)} high parts - geometry generation will be slow",
        )]
    return []
