# providers/artifact.py

from axe_sarif_converter.domain.conversion.models import (
    ConverterSettings,
    EnvironmentData,
    default_settings,
)
from axe_sarif_converter.schemas import Artifact, ArtifactLocation, Message


def get_artifact_location(
    environment_data: EnvironmentData,
    settings: ConverterSettings | None = None,
) -> ArtifactLocation:
    """
    Reference the scanned page within the run's artifacts.

    Args:
        environment_data (EnvironmentData): The scan context.
        settings (ConverterSettings | None): Optional artifact index settings.

    Returns:
        ArtifactLocation: The page url and its artifact index.
    """
    active_settings = settings or default_settings()

    return ArtifactLocation(
        uri=environment_data.target_page_url,
        index=active_settings.artifact_index,
    )


def get_artifact_properties(
    environment_data: EnvironmentData,
    settings: ConverterSettings | None = None,
) -> Artifact:
    """
    Describe the scanned page as the run's analysis target.

    Args:
        environment_data (EnvironmentData): The scan context.
        settings (ConverterSettings | None): Optional artifact index settings.

    Returns:
        Artifact: The html page, described by its title when known.
    """
    title = environment_data.target_page_title

    return Artifact(
        location=get_artifact_location(environment_data, settings),
        source_language="html",
        roles=("analysisTarget",),
        description=Message(text=title) if title else None,
    )
