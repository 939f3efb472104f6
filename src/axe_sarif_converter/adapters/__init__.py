# adapters/__init__.py

from .providers import (
    get_artifact_location,
    get_artifact_properties,
    get_axe_tool_properties,
    get_converter_properties,
    get_environment_data,
    get_invocations,
    with_axe_version,
)

__all__ = [
    "get_artifact_location",
    "get_artifact_properties",
    "get_axe_tool_properties",
    "get_converter_properties",
    "get_environment_data",
    "get_invocations",
    "with_axe_version",
]
