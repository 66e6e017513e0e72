"""
Tests for the IO module - ClipParams, JSON loading and the parameter schema.
"""

import json
import pytest
from pydantic import ValidationError

from stanagclip import ClipParams, load_params_json, save_params_json
from stanagclip.io.schema import (
    SCHEMA_VERSION,
    get_parameter_definitions,
    get_parameter_definition,
    validate_json_schema,
)


class TestClipParams:
    """Tests for the ClipParams model."""

    def test_defaults(self, default_params):
        assert default_params.count_high_parts == 3
        assert default_params.ends_with_low is False
        assert default_params.ring_diameter_mm == 19.8
        assert default_params.ring_strength_mm == 2.5
        assert default_params.ring_hole_angle_deg == 110.0

    def test_derived_properties(self, default_params):
        assert default_params.count_low_parts == 2
        assert default_params.height_mm == pytest.approx(24.75)
        assert default_params.ring_radius_mm == pytest.approx(9.9)
        assert default_params.has_cutaway is True

    def test_closed_ring(self, closed_ring_params):
        assert closed_ring_params.has_cutaway is False

    def test_camel_case_aliases(self, sample_params_dict):
        params = ClipParams.model_validate(sample_params_dict)
        assert params.count_high_parts == 4
        assert params.ends_with_low is True
        assert params.ring_diameter_mm == 25.0
        assert params.ring_strength_mm == 3.0
        assert params.ring_hole_angle_deg == 90.0

    @pytest.mark.parametrize("field,value", [
        ("count_high_parts", 0),
        ("count_high_parts", 501),
        ("ring_diameter_mm", 15.5),
        ("ring_diameter_mm", 101),
        ("ring_strength_mm", 0.9),
        ("ring_strength_mm", 10.5),
        ("ring_hole_angle_deg", -0.1),
        ("ring_hole_angle_deg", 270.5),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            ClipParams(**{field: value})

    def test_accepts_whole_float_count(self):
        """UI number fields send 3.0 for 3."""
        params = ClipParams(count_high_parts=3.0)
        assert params.count_high_parts == 3
        assert isinstance(params.count_high_parts, int)

    def test_rejects_fractional_count(self):
        with pytest.raises(ValidationError):
            ClipParams(count_high_parts=3.5)

    def test_frozen(self, default_params):
        with pytest.raises(ValidationError):
            default_params.count_high_parts = 5

    def test_unknown_keys_ignored(self):
        params = ClipParams.model_validate({"countHighParts": 2, "colour": "red"})
        assert params.count_high_parts == 2


class TestLoadParamsJson:
    """Tests for load_params_json."""

    def test_load_camel_case_file(self, temp_json_file):
        params = load_params_json(temp_json_file)
        assert isinstance(params, ClipParams)
        assert params.count_high_parts == 4
        assert params.ends_with_low is True

    def test_load_wrapped_params(self, tmp_path):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({
            "schema_version": SCHEMA_VERSION,
            "params": {"count_high_parts": 7},
        }))
        assert load_params_json(path).count_high_parts == 7

    def test_missing_fields_take_defaults(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"ringHoleAngle": 0}))
        params = load_params_json(path)
        assert params.ring_hole_angle_deg == 0
        assert params.ring_diameter_mm == 19.8

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_params_json(tmp_path / "nonexistent.json")

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="expected an object"):
            load_params_json(path)

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"ringDiameter": 200}))
        with pytest.raises(ValidationError):
            load_params_json(path)


class TestSaveParamsJson:
    """Tests for save_params_json."""

    def test_save_and_reload(self, tmp_path):
        params = ClipParams(count_high_parts=6, ends_with_low=True, ring_hole_angle_deg=45)
        path = tmp_path / "out.json"
        save_params_json(params, path)
        assert load_params_json(path) == params

    def test_saved_document(self, tmp_path, default_params):
        path = tmp_path / "out.json"
        save_params_json(default_params, path)
        data = json.loads(path.read_text())
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["count_high_parts"] == 3
        assert data["ring_hole_angle_deg"] == 110.0


class TestParameterDefinitions:
    """Tests for the parameter table."""

    def test_covers_every_field(self):
        names = [d.name for d in get_parameter_definitions()]
        assert names == list(ClipParams.model_fields)

    def test_defaults_match_model(self, default_params):
        for d in get_parameter_definitions():
            assert getattr(default_params, d.name) == d.initial

    def test_bounds_match_model(self):
        """Every numeric bound is accepted by ClipParams; one step past it is not."""
        for d in get_parameter_definitions():
            if d.type == "bool":
                assert d.min is None and d.max is None
                continue
            ClipParams(**{d.name: d.min})
            ClipParams(**{d.name: d.max})
            with pytest.raises(ValidationError):
                ClipParams(**{d.name: d.max + d.step})

    def test_lookup_by_alias(self):
        assert get_parameter_definition("ringDiameter").name == "ring_diameter_mm"
        assert get_parameter_definition("ring_diameter_mm").alias == "ringDiameter"

    def test_lookup_unknown(self):
        with pytest.raises(KeyError):
            get_parameter_definition("ringColour")

    def test_to_dict(self):
        d = get_parameter_definition("countHighParts").to_dict()
        assert d["caption"] == "Number of high parts in rail"
        assert d["min"] == 1
        assert d["max"] == 500


class TestValidateJsonSchema:
    """Tests for validate_json_schema."""

    def test_valid_document(self):
        result = validate_json_schema({
            "schema_version": SCHEMA_VERSION,
            "params": {"countHighParts": 3, "endsWithLow": False},
        })
        assert result["valid"]
        assert result["errors"] == []
        assert result["warnings"] == []

    def test_missing_version_warns(self):
        result = validate_json_schema({"count_high_parts": 3})
        assert result["valid"]
        assert any("schema_version" in w for w in result["warnings"])

    def test_version_mismatch_warns(self):
        result = validate_json_schema({"schema_version": "0.1"})
        assert any("0.1" in w for w in result["warnings"])

    def test_unknown_key_warns(self):
        result = validate_json_schema({"schema_version": SCHEMA_VERSION, "colour": "red"})
        assert result["valid"]
        assert any("colour" in w for w in result["warnings"])

    def test_wrong_types(self):
        result = validate_json_schema({
            "schema_version": SCHEMA_VERSION,
            "endsWithLow": 1,
            "ringDiameter": "wide",
        })
        assert not result["valid"]
        assert len(result["errors"]) == 2

    def test_params_not_object(self):
        result = validate_json_schema({"schema_version": SCHEMA_VERSION, "params": [1]})
        assert not result["valid"]
