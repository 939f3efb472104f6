# providers/tool.py

from axe_sarif_converter.domain.conversion.models import (
    ConverterSettings,
    default_settings,
)
from axe_sarif_converter.schemas import Message, ToolComponent, ToolComponentReference


def get_axe_tool_properties(
    settings: ConverterSettings | None = None,
) -> ToolComponent:
    """
    Describe axe-core as the run's driver.

    The rule list is left empty; the converter fills it with the rules found
    in the scan document.

    Args:
        settings (ConverterSettings | None): Optional tool identity constants
            (defaults to standard settings).

    Returns:
        ToolComponent: The axe-core driver descriptor.
    """
    active_settings = settings or default_settings()

    return ToolComponent(
        name=active_settings.axe_name,
        full_name=active_settings.axe_full_name,
        short_description=Message(text=active_settings.axe_short_description),
        information_uri=active_settings.axe_information_uri,
        rules=(),
        supported_taxonomies=(
            ToolComponentReference(
                name=active_settings.wcag_name,
                index=active_settings.wcag_taxonomy_index,
                guid=active_settings.wcag_guid,
            ),
        ),
        properties={"microsoft/qualityDomain": active_settings.quality_domain},
    )


def with_axe_version(
    tool: ToolComponent,
    version: str | None,
    settings: ConverterSettings | None = None,
) -> ToolComponent:
    """
    Stamp the scanning engine's version onto a driver that lacks one.

    Args:
        tool (ToolComponent): The driver descriptor.
        version (str | None): The axe-core version reported by the scan.
        settings (ConverterSettings | None): Optional tool identity constants.

    Returns:
        ToolComponent: The driver, versioned when a version is known.
    """
    if tool.version or not version:
        return tool

    active_settings = settings or default_settings()

    return tool.model_copy(
        update={
            "version": version,
            "semantic_version": version,
            "full_name": f"{tool.full_name or tool.name} v{version}",
            "download_uri": active_settings.axe_download_uri_base + version,
        },
    )
