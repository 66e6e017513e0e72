"""
Stanagclip - Parametric STANAG rail clip with retaining ring.

Builds a rail segment (STANAG 4694 / MIL-STD-1913 cross-section) fused to a
circular ring with an optional cutaway, ready for STEP/3MF/STL export.

Example:
    >>> from stanagclip import ClipParams, ClipGeometry
    >>>
    >>> params = ClipParams(count_high_parts=3, ring_diameter_mm=19.8,
    ...                     ring_strength_mm=2.5, ring_hole_angle_deg=110)
    >>> rail, ring = ClipGeometry(params).build()
    >>> ClipGeometry(params).export_step("clip.step")

Note: All imports are lazy-loaded for fast startup. The calculator can be
imported without triggering geometry (build123d) imports.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_CALCULATOR = {
    "count_low_parts",
    "segment_height",
    "notch_offsets",
    "cutaway_enabled",
    "validate_params",
    "Severity",
    "ValidationResult",
}

_IO = {
    "ClipParams",
    "load_params_json",
    "save_params_json",
    "get_parameter_definitions",
    "ParameterDefinition",
    "generate_package",
    "save_package_to_dir",
    "create_package_zip",
}

_CORE = {
    "ClipGeometry",
    "ClipGeometryError",
    "ClipProfiles",
    "build_profiles",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'stanagclip' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Geometry (lazy loaded from core)
    "ClipGeometry",
    "ClipGeometryError",
    "ClipProfiles",
    "build_profiles",

    # Calculator (lazy loaded from calculator)
    "count_low_parts",
    "segment_height",
    "notch_offsets",
    "cutaway_enabled",
    "validate_params",
    "Severity",
    "ValidationResult",

    # IO (lazy loaded from io)
    "ClipParams",
    "load_params_json",
    "save_params_json",
    "get_parameter_definitions",
    "ParameterDefinition",
    "generate_package",
    "save_package_to_dir",
    "create_package_zip",
]
