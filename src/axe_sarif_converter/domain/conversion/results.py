# conversion/results.py

import logging
from collections.abc import Sequence

from axe_sarif_converter.schemas import (
    ArtifactContent,
    ArtifactLocation,
    Location,
    LogicalLocation,
    NodeResult,
    PhysicalLocation,
    Region,
    Result,
    RuleResult,
)

from .messages import synthesise_message
from .models import RESULT_KINDS, Classification, ConverterSettings
from .rules import RuleIndex

logger = logging.getLogger(__name__)


def project_results(
    classification: Classification,
    rule_results: Sequence[RuleResult],
    rule_index: RuleIndex,
    artifact_location: ArtifactLocation,
    settings: ConverterSettings,
) -> tuple[Result, ...]:
    """
    Emit one SARIF result per node of a node-bearing bucket.

    Rule results and their nodes are visited in input order, so a rule
    without nodes contributes nothing.

    Args:
        classification (Classification): The bucket being converted.
        rule_results (Sequence[RuleResult]): The bucket's rule results.
        rule_index (RuleIndex): Rule id -> index lookup for the run.
        artifact_location (ArtifactLocation): Reference to the scanned page.
        settings (ConverterSettings): Location kind and target separator.

    Returns:
        tuple[Result, ...]: The bucket's results.

    Raises:
        InvalidInputError: If a rule id is missing from the rule index.
    """
    result_kind = RESULT_KINDS[classification]

    return tuple(
        Result(
            rule_id=rule_result.id,
            rule_index=rule_index.index_of(rule_result.id),
            kind=result_kind.kind,
            level=result_kind.level,
            message=synthesise_message(node, classification),
            locations=(_to_location(node, artifact_location, settings),),
        )
        for rule_result in rule_results
        for node in rule_result.nodes
    )


def project_results_without_nodes(
    classification: Classification,
    rule_results: Sequence[RuleResult],
) -> tuple[Result, ...]:
    """
    Convert a bucket that carries no per-node detail (inapplicable rules).

    Such rules are already listed among the run's rule descriptors and no
    result entries are emitted for them.

    Args:
        classification (Classification): The bucket being converted.
        rule_results (Sequence[RuleResult]): The bucket's rule results.

    Returns:
        tuple[Result, ...]: Always empty.
    """
    logger.debug(
        "Emitting no results for %d %s rules.",
        len(rule_results),
        classification.value,
    )
    return ()


def _to_location(
    node: NodeResult,
    artifact_location: ArtifactLocation,
    settings: ConverterSettings,
) -> Location:
    """
    Locate a node both physically (html snippet) and logically (selector).

    Returns:
        Location: The node's location within the scanned page.
    """
    return Location(
        physical_location=PhysicalLocation(
            artifact_location=artifact_location,
            region=Region(snippet=ArtifactContent(text=node.html)),
        ),
        logical_locations=(
            LogicalLocation(
                fully_qualified_name=settings.target_separator.join(node.target),
                kind=settings.logical_location_kind,
            ),
        ),
    )
