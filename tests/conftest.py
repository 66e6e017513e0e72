"""
Pytest configuration and shared fixtures for stanagclip tests.
"""

import json
import pytest

from stanagclip.io.loaders import ClipParams


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: builds 3D geometry with build123d"
    )


@pytest.fixture
def default_params():
    """Default clip: 3 high / 2 low parts, 19.8mm ring, 110° cutaway."""
    return ClipParams()


@pytest.fixture
def closed_ring_params():
    """Default clip with the cutaway turned off."""
    return ClipParams(ring_hole_angle_deg=0)


@pytest.fixture
def short_params():
    """Single high part - no notches, quickest build."""
    return ClipParams(count_high_parts=1)


@pytest.fixture(scope="module")
def default_clip():
    """Built default clip, shared per module (geometry is slow)."""
    from stanagclip.core.clip import ClipGeometry

    geo = ClipGeometry(ClipParams())
    geo.build()
    return geo


@pytest.fixture(scope="module")
def closed_clip():
    """Built clip without a cutaway, shared per module."""
    from stanagclip.core.clip import ClipGeometry

    geo = ClipGeometry(ClipParams(ring_hole_angle_deg=0))
    geo.build()
    return geo


@pytest.fixture
def sample_params_dict():
    """Parameter document as the web form stores it (camelCase)."""
    return {
        "countHighParts": 4,
        "endsWithLow": True,
        "ringDiameter": 25.0,
        "ringStrength": 3.0,
        "ringHoleAngle": 90.0,
    }


@pytest.fixture
def temp_json_file(tmp_path, sample_params_dict):
    """Create a temporary JSON file with sample parameters."""
    json_file = tmp_path / "clip.json"
    with open(json_file, 'w') as f:
        json.dump(sample_params_dict, f)
    return json_file
