# conversion/taxonomy.py

from collections.abc import Mapping
from dataclasses import dataclass

from axe_sarif_converter.domain._utils import WcagLinkData
from axe_sarif_converter.schemas import (
    ReportingDescriptor,
    ScanResultDocument,
    ToolComponent,
)

from .models import CLASSIFICATION_ORDER, ConverterSettings, rule_results_in


@dataclass(frozen=True)
class TaxonomyIndex:
    """
    Stable ordering of the guideline tags observed in one scan document.

    Attributes:
        sorted_tags: Known tags in lexicographic order; a tag's position is its
            taxon index.
        tags_to_indices: Tag -> taxon index lookup.
    """

    sorted_tags: tuple[str, ...]
    tags_to_indices: Mapping[str, int]

    def known_tags(self, tags: tuple[str, ...]) -> tuple[str, ...]:
        """
        Intersect a rule's tags with the taxonomy.

        Unknown tags are dropped; the rule's tag order is kept and repeated
        tags appear once.

        Args:
            tags (tuple[str, ...]): The rule's declared tags.

        Returns:
            tuple[str, ...]: The rule's tags that have a taxon.
        """
        return tuple(dict.fromkeys(tag for tag in tags if tag in self.tags_to_indices))

    def indices_for(self, tags: tuple[str, ...]) -> tuple[int, ...]:
        """
        Resolve a rule's tags to taxon indices.

        Returns:
            tuple[int, ...]: Taxon indices for the rule's known tags.
        """
        return tuple(self.tags_to_indices[tag] for tag in self.known_tags(tags))


def index_guideline_tags(
    document: ScanResultDocument,
    link_data: Mapping[str, WcagLinkData],
) -> TaxonomyIndex:
    """
    Build the taxonomy ordering for every known tag used by any rule.

    Scans the tags of all four buckets, keeps those present in the lookup
    table and sorts them lexicographically, so that identical documents
    always yield identical indices.

    Args:
        document (ScanResultDocument): The scan document to index.
        link_data (Mapping[str, WcagLinkData]): Read-only tag lookup table.

    Returns:
        TaxonomyIndex: Sorted tags and their indices.
    """
    observed = {
        tag
        for classification in CLASSIFICATION_ORDER
        for rule_result in rule_results_in(document, classification)
        for tag in rule_result.tags
        if tag in link_data
    }
    sorted_tags = tuple(sorted(observed))

    return TaxonomyIndex(
        sorted_tags=sorted_tags,
        tags_to_indices={tag: index for index, tag in enumerate(sorted_tags)},
    )


def build_wcag_taxonomy(
    taxonomy_index: TaxonomyIndex,
    link_data: Mapping[str, WcagLinkData],
    settings: ConverterSettings,
) -> ToolComponent:
    """
    Render the WCAG taxonomy component of a run.

    Each taxon carries the criterion title as its id, the Understanding page
    as its help link and its own index as a property. Only criteria used by
    the document are listed, so the taxonomy is never comprehensive.

    Args:
        taxonomy_index (TaxonomyIndex): The document's tag ordering.
        link_data (Mapping[str, WcagLinkData]): Read-only tag lookup table.
        settings (ConverterSettings): Taxonomy identity constants.

    Returns:
        ToolComponent: The taxonomy, with taxa in index order.
    """
    taxa = tuple(
        ReportingDescriptor(
            id=link_data[tag].title,
            name=tag,
            help_uri=link_data[tag].url,
            properties={"index": index},
        )
        for index, tag in enumerate(taxonomy_index.sorted_tags)
    )

    return ToolComponent(
        name=settings.wcag_name,
        full_name=settings.wcag_full_name,
        organization=settings.wcag_organization,
        guid=settings.wcag_guid,
        information_uri=settings.wcag_information_uri,
        download_uri=settings.wcag_download_uri,
        is_comprehensive=False,
        taxa=taxa,
    )
