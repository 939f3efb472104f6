# conversion/convert.py

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import partial

from pydantic import ValidationError

from axe_sarif_converter.adapters.providers import (
    get_artifact_location,
    get_artifact_properties,
    get_axe_tool_properties,
    get_converter_properties,
    get_environment_data,
    get_invocations,
    with_axe_version,
)
from axe_sarif_converter.domain._utils import AXE_TAGS_TO_WCAG_LINK_DATA, WcagLinkData
from axe_sarif_converter.schemas import (
    Artifact,
    ArtifactLocation,
    Conversion,
    ConverterOptions,
    Invocation,
    Result,
    Run,
    SarifLog,
    ScanResultDocument,
    Tool,
    ToolComponent,
)

from .errors import InvalidInputError
from .models import (
    CLASSIFICATION_ORDER,
    Classification,
    ConverterSettings,
    EnvironmentData,
    default_settings,
    rule_results_in,
)
from .results import project_results, project_results_without_nodes
from .rules import RuleIndex, link_rules
from .taxonomy import build_wcag_taxonomy, index_guideline_tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SarifConverter:
    """
    Converts axe scan results into a SARIF 2.1.0 log.

    The collaborators that describe the tool, the invocation and the scanned
    artifact are injected as plain functions, as is the WCAG lookup table.
    A converter holds no per-conversion state: every call builds its own
    taxonomy and rule indices, so repeated calls on the same input return
    equal logs.

    Args:
        get_converter_properties: Describes this converter.
        get_axe_properties: Describes the scanning tool (rules left empty).
        get_invocations: Builds the run's invocations from the scan context.
        get_artifact_properties: Describes the scanned page.
        get_artifact_location: References the scanned page from results.
        get_environment_data: Extracts the scan context from a document.
        link_data: Guideline tag -> title and url lookup.
        settings: Converter constants.
    """

    get_converter_properties: Callable[[], Conversion] = get_converter_properties
    get_axe_properties: Callable[[], ToolComponent] = get_axe_tool_properties
    get_invocations: Callable[[EnvironmentData], tuple[Invocation, ...]] = (
        get_invocations
    )
    get_artifact_properties: Callable[[EnvironmentData], Artifact] = (
        get_artifact_properties
    )
    get_artifact_location: Callable[[EnvironmentData], ArtifactLocation] = (
        get_artifact_location
    )
    get_environment_data: Callable[[ScanResultDocument], EnvironmentData] = (
        get_environment_data
    )
    link_data: Mapping[str, WcagLinkData] = field(
        default_factory=lambda: AXE_TAGS_TO_WCAG_LINK_DATA,
    )
    settings: ConverterSettings = field(default_factory=default_settings)

    def convert(
        self,
        document: ScanResultDocument | Mapping[str, object],
        options: ConverterOptions | Mapping[str, object] | None = None,
    ) -> SarifLog:
        """
        Convert one scan document into a SARIF log with a single run.

        Args:
            document: The scan results, validated or as raw JSON data.
            options: Optional scan name, test case id and scan id.

        Returns:
            SarifLog: The complete SARIF document.

        Raises:
            InvalidInputError: If the document or options are malformed, or a
                result references an unknown rule.
        """
        scan = parse_scan_results(document)
        converter_options = parse_options(options)

        run = self._convert_run(scan, converter_options)

        logger.info(
            "Converted scan results: %d results across %d rules (%d WCAG taxa).",
            len(run.results),
            len(run.tool.driver.rules or ()),
            len(run.taxonomies[0].taxa or ()),
        )

        return SarifLog(runs=(run,))

    def _convert_run(
        self,
        scan: ScanResultDocument,
        options: ConverterOptions,
    ) -> Run:
        """
        Assemble the run: tool and rules, invocations, artifacts, results and
        taxonomy, plus the run properties requested by the options.

        Returns:
            Run: The converted run.
        """
        environment_data = self.get_environment_data(scan)

        taxonomy_index = index_guideline_tags(scan, self.link_data)
        rule_index = link_rules(scan, taxonomy_index, self.link_data, self.settings)

        driver = with_axe_version(
            self.get_axe_properties(),
            environment_data.axe_version,
            self.settings,
        ).model_copy(update={"rules": rule_index.descriptors})

        return Run(
            conversion=self.get_converter_properties(),
            tool=Tool(driver=driver),
            invocations=tuple(self.get_invocations(environment_data)),
            artifacts=(self.get_artifact_properties(environment_data),),
            results=self._convert_results(scan, rule_index, environment_data),
            taxonomies=(
                build_wcag_taxonomy(taxonomy_index, self.link_data, self.settings),
            ),
            properties=_run_properties(options),
        )

    def _convert_results(
        self,
        scan: ScanResultDocument,
        rule_index: RuleIndex,
        environment_data: EnvironmentData,
    ) -> tuple[Result, ...]:
        """
        Concatenate the results of every bucket in the fixed bucket order.

        Returns:
            tuple[Result, ...]: Violations, then passes, then incomplete.
        """
        artifact_location = self.get_artifact_location(environment_data)
        results: list[Result] = []

        for classification in CLASSIFICATION_ORDER:
            rule_results = rule_results_in(scan, classification)

            if classification is Classification.INAPPLICABLE:
                results.extend(
                    project_results_without_nodes(classification, rule_results),
                )
                continue

            results.extend(
                project_results(
                    classification,
                    rule_results,
                    rule_index,
                    artifact_location,
                    self.settings,
                ),
            )

        return tuple(results)


def default_sarif_converter(
    settings: ConverterSettings | None = None,
) -> SarifConverter:
    """
    Return a converter wired to the standard collaborators.

    The collaborators that depend on settings are bound to the same settings
    as the converter itself.

    Args:
        settings: Optional converter constants (defaults to standard settings).

    Returns:
        SarifConverter: Converter using the bundled WCAG 2.1 lookup table.
    """
    active_settings = settings or default_settings()

    return SarifConverter(
        get_converter_properties=partial(get_converter_properties, active_settings),
        get_axe_properties=partial(get_axe_tool_properties, active_settings),
        get_artifact_properties=partial(
            get_artifact_properties,
            settings=active_settings,
        ),
        get_artifact_location=partial(get_artifact_location, settings=active_settings),
        settings=active_settings,
    )


def convert(
    document: ScanResultDocument | Mapping[str, object],
    options: ConverterOptions | Mapping[str, object] | None = None,
) -> SarifLog:
    """
    Convert axe scan results into a SARIF 2.1.0 log.

    Args:
        document: The scan results, validated or as raw JSON data.
        options: Optional ``scanName``, ``testCaseId`` and ``scanId``.

    Returns:
        SarifLog: The complete SARIF document.

    Raises:
        InvalidInputError: If the input cannot be converted.
    """
    return default_sarif_converter().convert(document, options)


def parse_scan_results(
    document: ScanResultDocument | Mapping[str, object],
) -> ScanResultDocument:
    """
    Validate raw scan results.

    Args:
        document: A validated document (returned as is) or raw JSON data.

    Returns:
        ScanResultDocument: The validated document.

    Raises:
        InvalidInputError: If the data does not describe axe results.
    """
    if isinstance(document, ScanResultDocument):
        return document

    try:
        return ScanResultDocument.model_validate(document)
    except ValidationError as error:
        raise InvalidInputError(f"Malformed scan results: {error}") from error


def parse_options(
    options: ConverterOptions | Mapping[str, object] | None,
) -> ConverterOptions:
    """
    Normalise converter options.

    Returns:
        ConverterOptions: The options, empty when none were given.

    Raises:
        InvalidInputError: If an option has the wrong type.
    """
    if options is None:
        return ConverterOptions()
    if isinstance(options, ConverterOptions):
        return options

    try:
        return ConverterOptions.model_validate(options)
    except ValidationError as error:
        raise InvalidInputError(f"Malformed converter options: {error}") from error


def _run_properties(options: ConverterOptions) -> dict[str, str] | None:
    """
    Build run properties from the options that were supplied.

    Returns:
        dict[str, str] | None: The properties, or None when there are none.
    """
    if options.scan_id is not None:
        logger.debug("Ignoring reserved scanId option %r.", options.scan_id)

    properties = {
        name: value
        for name, value in (
            ("scanName", options.scan_name),
            ("testCaseId", options.test_case_id),
        )
        if value is not None
    }
    return properties or None
