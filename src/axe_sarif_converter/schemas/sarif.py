# schemas/sarif.py

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA_URI = (
    "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0-rtm.5.json"
)


class SarifModel(BaseModel):
    """
    Base for all SARIF 2.1.0 output objects.

    Fields are declared in snake_case and serialised under their camelCase
    SARIF names. Instances are immutable once attached to a log.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class Message(SarifModel):
    text: str
    markdown: str | None = None


class ArtifactContent(SarifModel):
    text: str


class Region(SarifModel):
    snippet: ArtifactContent


class ArtifactLocation(SarifModel):
    uri: str | None = None
    index: int | None = None


class PhysicalLocation(SarifModel):
    artifact_location: ArtifactLocation
    region: Region | None = None


class LogicalLocation(SarifModel):
    fully_qualified_name: str
    kind: str


class Location(SarifModel):
    physical_location: PhysicalLocation
    logical_locations: tuple[LogicalLocation, ...] = ()


class ToolComponentReference(SarifModel):
    name: str
    index: int
    guid: str | None = None


class ReportingDescriptorReference(SarifModel):
    id: str
    index: int
    tool_component: ToolComponentReference


class ReportingDescriptorRelationship(SarifModel):
    target: ReportingDescriptorReference
    kinds: tuple[str, ...] = ("superset",)


class ReportingDescriptor(SarifModel):
    """
    A rule (in a driver) or a taxon (in a taxonomy).
    """

    id: str
    name: str | None = None
    short_description: Message | None = None
    full_description: Message | None = None
    help_uri: str | None = None
    relationships: tuple[ReportingDescriptorRelationship, ...] | None = None
    properties: dict[str, Any] | None = None


class ToolComponent(SarifModel):
    """
    A driver or a taxonomy.

    Drivers carry rules; taxonomies carry taxa.
    """

    name: str
    full_name: str | None = None
    short_description: Message | None = None
    organization: str | None = None
    version: str | None = None
    semantic_version: str | None = None
    guid: str | None = None
    information_uri: str | None = None
    download_uri: str | None = None
    is_comprehensive: bool | None = None
    rules: tuple[ReportingDescriptor, ...] | None = None
    taxa: tuple[ReportingDescriptor, ...] | None = None
    supported_taxonomies: tuple[ToolComponentReference, ...] | None = None
    properties: dict[str, Any] | None = None


class Tool(SarifModel):
    driver: ToolComponent


class Conversion(SarifModel):
    tool: Tool


class Invocation(SarifModel):
    execution_successful: bool
    start_time_utc: str | None = None
    end_time_utc: str | None = None


class Artifact(SarifModel):
    location: ArtifactLocation
    source_language: str | None = None
    roles: tuple[str, ...] | None = None
    description: Message | None = None


class Result(SarifModel):
    """
    One evaluated element under one rule.
    """

    rule_id: str
    rule_index: int
    kind: str
    level: str
    message: Message
    locations: tuple[Location, ...] = ()


class Run(SarifModel):
    tool: Tool
    conversion: Conversion | None = None
    invocations: tuple[Invocation, ...] = ()
    artifacts: tuple[Artifact, ...] = ()
    results: tuple[Result, ...] = ()
    taxonomies: tuple[ToolComponent, ...] = ()
    properties: dict[str, str] | None = None


class SarifLog(SarifModel):
    """
    Top-level SARIF document.

    Serialise with ``to_json`` (or ``model_dump(by_alias=True,
    exclude_none=True)``) so that field names follow the SARIF schema and
    absent optional members are omitted.
    """

    version: str = SARIF_VERSION
    schema_uri: str = Field(default=SARIF_SCHEMA_URI, alias="$schema")
    runs: tuple[Run, ...] = ()


def to_json(log: SarifLog, indent: int | None = 2) -> str:
    """
    Serialise a SARIF log deterministically.

    Identical logs always produce identical text, which makes the output
    suitable for equality and diff comparisons across scan runs.

    Args:
        log (SarifLog): The log to serialise.
        indent (int | None): JSON indentation, or None for compact output.

    Returns:
        str: The SARIF JSON document.
    """
    return log.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
