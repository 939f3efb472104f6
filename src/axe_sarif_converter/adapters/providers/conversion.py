# providers/conversion.py

from axe_sarif_converter.domain.conversion.models import (
    ConverterSettings,
    default_settings,
)
from axe_sarif_converter.schemas import Conversion, Tool, ToolComponent


def get_converter_properties(
    settings: ConverterSettings | None = None,
) -> Conversion:
    """
    Describe this converter as the tool that produced the SARIF run.

    Args:
        settings (ConverterSettings | None): Optional converter identity
            constants (defaults to standard settings).

    Returns:
        Conversion: The run's conversion block.
    """
    active_settings = settings or default_settings()
    version = active_settings.converter_version

    return Conversion(
        tool=Tool(
            driver=ToolComponent(
                name=active_settings.converter_name,
                full_name=f"{active_settings.converter_name} v{version}",
                version=version,
                semantic_version=version,
                information_uri=active_settings.converter_information_uri,
            ),
        ),
    )
