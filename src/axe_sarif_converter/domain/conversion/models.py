# conversion/models.py

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from axe_sarif_converter.schemas import RuleResult, ScanResultDocument


class Classification(Enum):
    """
    The four axe result buckets, valued by their key in the scan document.

    Attributes:
        VIOLATIONS: Rules that failed on at least one element.
        PASSES: Rules that passed on every element they applied to.
        INCOMPLETE: Rules whose outcome needs manual review.
        INAPPLICABLE: Rules that matched no element.
    """

    VIOLATIONS = "violations"
    PASSES = "passes"
    INCOMPLETE = "incomplete"
    INAPPLICABLE = "inapplicable"


# Fixed bucket order for rule discovery and result emission
CLASSIFICATION_ORDER: tuple[Classification, ...] = (
    Classification.VIOLATIONS,
    Classification.PASSES,
    Classification.INCOMPLETE,
    Classification.INAPPLICABLE,
)


class ResultKind(NamedTuple):
    """
    SARIF kind and level emitted for a classification.

    Attributes:
        kind: SARIF result kind (fail, pass, open, notApplicable).
        level: SARIF result level; anything but a failure is "none".
    """

    kind: str
    level: str


RESULT_KINDS: dict[Classification, ResultKind] = {
    Classification.VIOLATIONS: ResultKind("fail", "error"),
    Classification.PASSES: ResultKind("pass", "none"),
    Classification.INCOMPLETE: ResultKind("open", "none"),
    Classification.INAPPLICABLE: ResultKind("notApplicable", "none"),
}


@dataclass(frozen=True)
class ConverterSettings:
    """
    Constants describing the converter, the scanning tool and the taxonomy.
    """

    # Converter identity, reported under run.conversion
    converter_name: str = "axe-sarif-converter"
    converter_version: str = "0.1.0"
    converter_information_uri: str = (
        "https://github.com/microsoft/axe-sarif-converter"
    )
    # Scanning tool identity, reported under run.tool.driver
    axe_name: str = "axe-core"
    axe_full_name: str = "axe for Web"
    axe_short_description: str = (
        "An open source accessibility rules library for automated testing."
    )
    axe_information_uri: str = "https://www.deque.com/axe/axe-for-web/"
    axe_download_uri_base: str = "https://www.npmjs.com/package/axe-core/v/"
    quality_domain: str = "Accessibility"
    # WCAG taxonomy component
    wcag_name: str = "WCAG"
    wcag_full_name: str = "Web Content Accessibility Guidelines (WCAG) 2.1"
    wcag_organization: str = "W3C"
    wcag_guid: str = "ca34e0e1-5faf-4f55-a989-cdae42a98f18"
    wcag_information_uri: str = "https://www.w3.org/TR/WCAG21"
    wcag_download_uri: str = "https://www.w3.org/TR/WCAG21/#requirements-for-wcag-2-1"
    # Position of the WCAG taxonomy in run.taxonomies
    wcag_taxonomy_index: int = 0
    # Position of the scanned page in run.artifacts
    artifact_index: int = 0
    # Logical location kind for an element selector path
    logical_location_kind: str = "element"
    # Separator joining the segments of a node's target path
    target_separator: str = ";"


def default_settings() -> ConverterSettings:
    """
    Return default converter settings.

    Returns:
        ConverterSettings: Default configuration values.
    """
    return ConverterSettings()


@dataclass(frozen=True)
class EnvironmentData:
    """
    Scan context extracted from the scan document.
    """

    timestamp: str | None = None
    target_page_url: str | None = None
    target_page_title: str | None = None
    axe_version: str | None = None


def rule_results_in(
    document: ScanResultDocument,
    classification: Classification,
) -> tuple[RuleResult, ...]:
    """
    Return the rule results held in one classification bucket.

    Returns:
        tuple[RuleResult, ...]: The bucket's rule results in input order.
    """
    return getattr(document, classification.value)
