"""
Stanagclip IO - parameter schema, JSON loaders, and exporters.

Example:
    >>> from stanagclip.io import ClipParams, load_params_json, save_params_json
    >>>
    >>> params = ClipParams(count_high_parts=5, ring_hole_angle_deg=90)
    >>> save_params_json(params, "clip.json")
    >>> loaded = load_params_json("clip.json")
"""

from .loaders import (
    ClipParams,
    load_params_json,
    save_params_json,
)

from .package import (
    PackageFiles,
    generate_package,
    package_filename,
    save_package_to_dir,
    create_package_zip,
)

from .schema import (
    SCHEMA_VERSION,
    ParameterDefinition,
    PARAMETER_DEFINITIONS,
    get_parameter_definitions,
    get_parameter_definition,
    validate_json_schema,
)

__all__ = [
    # Loaders
    "ClipParams",
    "load_params_json",
    "save_params_json",

    # Package export
    "PackageFiles",
    "generate_package",
    "package_filename",
    "save_package_to_dir",
    "create_package_zip",

    # Schema
    "SCHEMA_VERSION",
    "ParameterDefinition",
    "PARAMETER_DEFINITIONS",
    "get_parameter_definitions",
    "get_parameter_definition",
    "validate_json_schema",
]
