"""
JSON input/output for clip parameters.

Uses Pydantic for automatic validation and bound checking. Accepts both the
snake_case field names and the camelCase names of the web form parameter
interface (countHighParts, endsWithLow, ...).
"""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

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
from ..calculator.segments import count_low_parts, segment_height, cutaway_enabled
from .schema import SCHEMA_VERSION


class ClipParams(BaseModel):
    """Clip parameters, validated once at the boundary."""

    model_config = ConfigDict(extra='ignore', frozen=True, populate_by_name=True)

    count_high_parts: int = Field(
        DEFAULT_COUNT_HIGH_PARTS,
        alias='countHighParts',
        ge=COUNT_HIGH_PARTS_RANGE[0],
        le=COUNT_HIGH_PARTS_RANGE[1],
    )
    ends_with_low: bool = Field(DEFAULT_ENDS_WITH_LOW, alias='endsWithLow')
    ring_diameter_mm: float = Field(
        DEFAULT_RING_DIAMETER_MM,
        alias='ringDiameter',
        ge=RING_DIAMETER_RANGE_MM[0],
        le=RING_DIAMETER_RANGE_MM[1],
    )
    ring_strength_mm: float = Field(
        DEFAULT_RING_STRENGTH_MM,
        alias='ringStrength',
        ge=RING_STRENGTH_RANGE_MM[0],
        le=RING_STRENGTH_RANGE_MM[1],
    )
    ring_hole_angle_deg: float = Field(
        DEFAULT_RING_HOLE_ANGLE_DEG,
        alias='ringHoleAngle',
        ge=RING_HOLE_ANGLE_RANGE_DEG[0],
        le=RING_HOLE_ANGLE_RANGE_DEG[1],
    )

    @field_validator('count_high_parts', mode='before')
    @classmethod
    def coerce_count(cls, v):
        # UI number fields hand over floats like 3.0
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @property
    def count_low_parts(self) -> int:
        return count_low_parts(self.count_high_parts, self.ends_with_low)

    @property
    def height_mm(self) -> float:
        return segment_height(self.count_high_parts, self.ends_with_low)

    @property
    def ring_radius_mm(self) -> float:
        return self.ring_diameter_mm / 2

    @property
    def has_cutaway(self) -> bool:
        return cutaway_enabled(self.ring_hole_angle_deg)


def load_params_json(filepath: Union[str, Path]) -> ClipParams:
    """
    Load clip parameters from a JSON file.

    Args:
        filepath: Path to JSON file, either a flat parameter object or one
            wrapped in a 'params' key

    Returns:
        ClipParams (missing fields take their defaults)

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is not an object
        ValidationError: If a value is out of bounds or of the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Parameter file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid parameter JSON - expected an object")

    if 'params' in data:
        data = data['params']

    return ClipParams.model_validate(data)


def save_params_json(params: ClipParams, filepath: Union[str, Path]) -> None:
    """
    Save clip parameters to a JSON file.

    Args:
        params: Clip parameters
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = {'schema_version': SCHEMA_VERSION}
    data.update(params.model_dump(mode='json'))

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
