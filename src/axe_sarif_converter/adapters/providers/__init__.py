# providers/__init__.py

from .artifact import get_artifact_location, get_artifact_properties
from .conversion import get_converter_properties
from .environment import get_environment_data
from .invocation import get_invocations
from .tool import get_axe_tool_properties, with_axe_version

__all__ = [
    "get_artifact_location",
    "get_artifact_properties",
    "get_axe_tool_properties",
    "get_converter_properties",
    "get_environment_data",
    "get_invocations",
    "with_axe_version",
]
