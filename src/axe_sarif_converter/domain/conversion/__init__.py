# conversion/__init__.py

from .convert import (
    SarifConverter,
    convert,
    default_sarif_converter,
    parse_options,
    parse_scan_results,
)
from .errors import InvalidInputError
from .messages import escape_for_markdown, synthesise_message
from .models import (
    CLASSIFICATION_ORDER,
    RESULT_KINDS,
    Classification,
    ConverterSettings,
    EnvironmentData,
    ResultKind,
    default_settings,
)
from .results import project_results, project_results_without_nodes
from .rules import RuleIndex, link_rules
from .taxonomy import TaxonomyIndex, build_wcag_taxonomy, index_guideline_tags

__all__ = [
    # convert
    "SarifConverter",
    "convert",
    "default_sarif_converter",
    "parse_options",
    "parse_scan_results",
    # errors
    "InvalidInputError",
    # messages
    "escape_for_markdown",
    "synthesise_message",
    # models
    "CLASSIFICATION_ORDER",
    "RESULT_KINDS",
    "Classification",
    "ConverterSettings",
    "EnvironmentData",
    "ResultKind",
    "default_settings",
    # results
    "project_results",
    "project_results_without_nodes",
    # rules
    "RuleIndex",
    "link_rules",
    # taxonomy
    "TaxonomyIndex",
    "build_wcag_taxonomy",
    "index_guideline_tags",
]
