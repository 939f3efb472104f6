# schemas/__init__.py

from .axe_results import (
    CheckResult,
    NodeResult,
    RuleResult,
    ScanEngine,
    ScanResultDocument,
)
from .options import ConverterOptions
from .sarif import (
    SARIF_SCHEMA_URI,
    SARIF_VERSION,
    Artifact,
    ArtifactContent,
    ArtifactLocation,
    Conversion,
    Invocation,
    Location,
    LogicalLocation,
    Message,
    PhysicalLocation,
    Region,
    ReportingDescriptor,
    ReportingDescriptorReference,
    ReportingDescriptorRelationship,
    Result,
    Run,
    SarifLog,
    Tool,
    ToolComponent,
    ToolComponentReference,
    to_json,
)

__all__ = [
    # axe results
    "CheckResult",
    "NodeResult",
    "RuleResult",
    "ScanEngine",
    "ScanResultDocument",
    # options
    "ConverterOptions",
    # sarif
    "SARIF_SCHEMA_URI",
    "SARIF_VERSION",
    "Artifact",
    "ArtifactContent",
    "ArtifactLocation",
    "Conversion",
    "Invocation",
    "Location",
    "LogicalLocation",
    "Message",
    "PhysicalLocation",
    "Region",
    "ReportingDescriptor",
    "ReportingDescriptorReference",
    "ReportingDescriptorRelationship",
    "Result",
    "Run",
    "SarifLog",
    "Tool",
    "ToolComponent",
    "ToolComponentReference",
    "to_json",
]
