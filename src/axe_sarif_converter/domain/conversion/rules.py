# conversion/rules.py

from collections.abc import Mapping
from dataclasses import dataclass

from axe_sarif_converter.domain._utils import WcagLinkData
from axe_sarif_converter.schemas import (
    Message,
    ReportingDescriptor,
    ReportingDescriptorReference,
    ReportingDescriptorRelationship,
    RuleResult,
    ScanResultDocument,
    ToolComponentReference,
)

from .errors import InvalidInputError
from .models import CLASSIFICATION_ORDER, ConverterSettings, rule_results_in
from .taxonomy import TaxonomyIndex


@dataclass(frozen=True)
class RuleIndex:
    """
    The run's rule list and the index of every rule id in it.

    Attributes:
        descriptors: Rule descriptors in first-seen order.
        rule_ids_to_indices: Rule id -> position in ``descriptors``.
        rule_ids_to_taxa_indices: Rule id -> indices of its related taxa.
    """

    descriptors: tuple[ReportingDescriptor, ...]
    rule_ids_to_indices: Mapping[str, int]
    rule_ids_to_taxa_indices: Mapping[str, tuple[int, ...]]

    def index_of(self, rule_id: str) -> int:
        """
        Look up the rule index a result must reference.

        Args:
            rule_id (str): The rule id carried by the result.

        Returns:
            int: The rule's position in the run's rule list.

        Raises:
            InvalidInputError: If the rule id was never indexed.
        """
        try:
            return self.rule_ids_to_indices[rule_id]
        except KeyError as error:
            raise InvalidInputError(
                f"Result references unknown rule id {rule_id!r}.",
            ) from error


def link_rules(
    document: ScanResultDocument,
    taxonomy_index: TaxonomyIndex,
    link_data: Mapping[str, WcagLinkData],
    settings: ConverterSettings,
) -> RuleIndex:
    """
    Build one descriptor per distinct rule and link it to the taxonomy.

    Rules are ordered by first appearance across violations, passes,
    incomplete and inapplicable; the first occurrence of a rule supplies its
    metadata. A rule whose tags match no taxon still gets a descriptor, with
    an empty relationship list.

    Args:
        document (ScanResultDocument): The scan document.
        taxonomy_index (TaxonomyIndex): The document's tag ordering.
        link_data (Mapping[str, WcagLinkData]): Read-only tag lookup table.
        settings (ConverterSettings): Taxonomy identity constants.

    Returns:
        RuleIndex: Ordered descriptors and the rule id -> index lookup.
    """
    first_seen = _first_seen_rules(document)

    descriptors = tuple(
        _to_descriptor(rule_result, taxonomy_index, link_data, settings)
        for rule_result in first_seen
    )

    return RuleIndex(
        descriptors=descriptors,
        rule_ids_to_indices={
            rule_result.id: index for index, rule_result in enumerate(first_seen)
        },
        rule_ids_to_taxa_indices={
            rule_result.id: taxonomy_index.indices_for(rule_result.tags)
            for rule_result in first_seen
        },
    )


def _first_seen_rules(document: ScanResultDocument) -> list[RuleResult]:
    """
    Deduplicate rule results by id, keeping the first occurrence.

    Returns:
        list[RuleResult]: One rule result per distinct id, in bucket order.
    """
    seen: dict[str, RuleResult] = {}
    for classification in CLASSIFICATION_ORDER:
        for rule_result in rule_results_in(document, classification):
            seen.setdefault(rule_result.id, rule_result)
    return list(seen.values())


def _to_descriptor(
    rule_result: RuleResult,
    taxonomy_index: TaxonomyIndex,
    link_data: Mapping[str, WcagLinkData],
    settings: ConverterSettings,
) -> ReportingDescriptor:
    """
    Convert a rule result's metadata into a SARIF rule descriptor.

    Returns:
        ReportingDescriptor: The rule with its taxonomy relationships.
    """
    relationships = tuple(
        _to_relationship(tag, taxonomy_index, link_data, settings)
        for tag in taxonomy_index.known_tags(rule_result.tags)
    )

    return ReportingDescriptor(
        id=rule_result.id,
        name=rule_result.help,
        short_description=_optional_message(rule_result.help),
        full_description=_optional_message(rule_result.description),
        help_uri=rule_result.help_url,
        relationships=relationships,
    )


def _to_relationship(
    tag: str,
    taxonomy_index: TaxonomyIndex,
    link_data: Mapping[str, WcagLinkData],
    settings: ConverterSettings,
) -> ReportingDescriptorRelationship:
    return ReportingDescriptorRelationship(
        target=ReportingDescriptorReference(
            id=link_data[tag].title,
            index=taxonomy_index.tags_to_indices[tag],
            tool_component=ToolComponentReference(
                name=settings.wcag_name,
                index=settings.wcag_taxonomy_index,
                guid=settings.wcag_guid,
            ),
        ),
    )


def _optional_message(text: str | None) -> Message | None:
    return Message(text=text) if text else None
