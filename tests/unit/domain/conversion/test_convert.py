# conversion/test_convert.py

import json

import pytest

from axe_sarif_converter import convert, to_json
from axe_sarif_converter.domain.conversion.convert import (
    SarifConverter,
    default_sarif_converter,
    parse_options,
    parse_scan_results,
)
from axe_sarif_converter.domain.conversion.errors import InvalidInputError
from axe_sarif_converter.domain.conversion.models import (
    ConverterSettings,
    EnvironmentData,
)
from axe_sarif_converter.schemas import (
    ConverterOptions,
    Invocation,
    ScanResultDocument,
)

pytestmark = pytest.mark.unit


def _scan() -> dict:
    """
    Build a small axe results payload touching every bucket.

    Returns:
        dict: Raw axe results JSON data.
    """
    return {
        "url": "https://example.com/",
        "timestamp": "2026-10-18T12:00:00.000Z",
        "targetPageTitle": "Example",
        "testEngine": {"name": "axe-core", "version": "4.8.2"},
        "violations": [
            {
                "id": "image-alt",
                "tags": ["cat.text-alternatives", "wcag2a", "wcag111"],
                "help": "Images must have alternate text",
                "nodes": [
                    {
                        "html": '<img src="logo.png">',
                        "target": ["#header", "img"],
                        "all": [],
                        "none": [],
                        "any": [{"id": "has-alt", "message": "Element has no alt"}],
                    },
                ],
            },
        ],
        "passes": [
            {
                "id": "image-alt",
                "tags": ["wcag111"],
                "nodes": [
                    {
                        "html": '<img src="photo.png" alt="A photo">',
                        "target": ["#gallery img"],
                        "any": [{"id": "has-alt", "message": "Element has alt"}],
                    },
                ],
            },
            {
                "id": "html-has-lang",
                "tags": ["wcag311"],
                "nodes": [{"html": '<html lang="en">', "target": ["html"]}],
            },
        ],
        "incomplete": [
            {
                "id": "color-contrast",
                "tags": ["wcag143"],
                "nodes": [
                    {
                        "html": "<p>Faint</p>",
                        "target": ["p"],
                        "any": [{"id": "color-contrast"}],
                    },
                ],
            },
        ],
        "inapplicable": [
            {"id": "frame-title", "tags": ["wcag241", "wcag412"], "nodes": []},
        ],
    }


def test_convert_produces_single_run() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert
    ASSERT:  log has version 2.1.0 and one run
    """
    actual = convert(_scan())

    assert (actual.version, len(actual.runs)) == ("2.1.0", 1)


def test_convert_is_deterministic() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert twice and serialise
    ASSERT:  both serialisations are identical
    """
    first = to_json(convert(_scan(), {}))
    second = to_json(convert(_scan(), {}))

    assert first == second


def test_convert_result_rule_indices_resolve() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert
    ASSERT:  every result's rule index points at a rule with the same id
    """
    run = convert(_scan()).runs[0]
    rules = run.tool.driver.rules

    assert all(rules[result.rule_index].id == result.rule_id for result in run.results)


def test_convert_rule_relationships_resolve_to_taxa() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert
    ASSERT:  every relationship index is valid and names the matching taxon
    """
    run = convert(_scan()).runs[0]
    taxa = run.taxonomies[0].taxa

    targets = [
        relationship.target
        for rule in run.tool.driver.rules
        for relationship in rule.relationships
    ]

    assert all(
        0 <= target.index < len(taxa) and taxa[target.index].id == target.id
        for target in targets
    )


def test_convert_lists_rules_in_first_seen_order() -> None:
    """
    ARRANGE: scan payload with image-alt in violations and passes
    ACT:     convert
    ASSERT:  rules are deduplicated in bucket order
    """
    rules = convert(_scan()).runs[0].tool.driver.rules

    assert [rule.id for rule in rules] == [
        "image-alt",
        "html-has-lang",
        "color-contrast",
        "frame-title",
    ]


def test_convert_taxonomy_covers_known_tags_only() -> None:
    """
    ARRANGE: scan payload tagged with WCAG criteria and level tags
    ACT:     convert
    ASSERT:  taxa are the sorted WCAG criteria used by any rule
    """
    taxa = convert(_scan()).runs[0].taxonomies[0].taxa

    assert [taxon.id for taxon in taxa] == [
        "WCAG 1.1.1",
        "WCAG 1.4.3",
        "WCAG 2.4.1",
        "WCAG 3.1.1",
        "WCAG 4.1.2",
    ]


def test_convert_orders_violations_before_passes() -> None:
    """
    ARRANGE: image-alt as both a violation and a pass
    ACT:     convert
    ASSERT:  the violation comes first and both share a rule index
    """
    results = convert(_scan()).runs[0].results
    image_alt = [result for result in results if result.rule_id == "image-alt"]

    assert [(result.kind, result.rule_index) for result in image_alt] == [
        ("fail", 0),
        ("pass", 0),
    ]


def test_convert_emits_results_in_bucket_order() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert
    ASSERT:  kinds run fail, pass, pass, open with no notApplicable results
    """
    results = convert(_scan()).runs[0].results

    assert [result.kind for result in results] == ["fail", "pass", "pass", "open"]


def test_convert_empty_document() -> None:
    """
    ARRANGE: document with four empty buckets
    ACT:     convert
    ASSERT:  rules, results and taxa are all empty
    """
    payload = {"violations": [], "passes": [], "incomplete": [], "inapplicable": []}

    run = convert(payload).runs[0]

    assert (run.tool.driver.rules, run.results, run.taxonomies[0].taxa) == (
        (),
        (),
        (),
    )


def test_convert_empty_document_serialises_empty_lists() -> None:
    """
    ARRANGE: empty document
    ACT:     convert and serialise
    ASSERT:  rules, results and taxa are written as empty lists
    """
    run = json.loads(to_json(convert({})))["runs"][0]

    assert (
        run["tool"]["driver"]["rules"],
        run["results"],
        run["taxonomies"][0]["taxa"],
    ) == ([], [], [])


def test_convert_omits_properties_without_options() -> None:
    """
    ARRANGE: no options
    ACT:     convert and serialise
    ASSERT:  the run has no properties
    """
    run = json.loads(to_json(convert(_scan())))["runs"][0]

    assert "properties" not in run


def test_convert_adds_supplied_options_as_properties() -> None:
    """
    ARRANGE: scanName and testCaseId options
    ACT:     convert
    ASSERT:  both appear as run properties
    """
    options = {"scanName": "nightly", "testCaseId": "TC-7"}

    actual = convert(_scan(), options).runs[0].properties

    assert actual == {"scanName": "nightly", "testCaseId": "TC-7"}


def test_convert_adds_only_supplied_options() -> None:
    """
    ARRANGE: only a test case id
    ACT:     convert
    ASSERT:  properties hold testCaseId alone
    """
    actual = convert(_scan(), ConverterOptions(test_case_id="TC-7")).runs[0].properties

    assert actual == {"testCaseId": "TC-7"}


def test_convert_ignores_scan_id() -> None:
    """
    ARRANGE: only a scan id
    ACT:     convert
    ASSERT:  the run has no properties
    """
    actual = convert(_scan(), {"scanId": "scan-1"}).runs[0].properties

    assert actual is None


def test_convert_describes_invocation_and_artifact() -> None:
    """
    ARRANGE: scan payload with timestamp, url and title
    ACT:     convert
    ASSERT:  invocation times and artifact location come from the scan
    """
    run = convert(_scan()).runs[0]

    assert (
        run.invocations[0].start_time_utc,
        run.artifacts[0].location.uri,
        run.artifacts[0].description.text,
    ) == ("2026-10-18T12:00:00.000Z", "https://example.com/", "Example")


def test_convert_stamps_axe_version_on_driver() -> None:
    """
    ARRANGE: scan payload from axe-core 4.8.2
    ACT:     convert
    ASSERT:  driver name is axe-core and version is 4.8.2
    """
    driver = convert(_scan()).runs[0].tool.driver

    assert (driver.name, driver.version) == ("axe-core", "4.8.2")


def test_convert_reports_converter() -> None:
    """
    ARRANGE: scan payload
    ACT:     convert
    ASSERT:  conversion tool is axe-sarif-converter
    """
    actual = convert(_scan()).runs[0].conversion.tool.driver.name

    assert actual == "axe-sarif-converter"


def test_convert_accepts_validated_document() -> None:
    """
    ARRANGE: pre-validated ScanResultDocument
    ACT:     convert
    ASSERT:  result matches conversion of the raw payload
    """
    document = ScanResultDocument.model_validate(_scan())

    assert convert(document) == convert(_scan())


def test_convert_rejects_malformed_bucket() -> None:
    """
    ARRANGE: violations given as a string
    ACT:     convert
    ASSERT:  raises InvalidInputError
    """
    with pytest.raises(InvalidInputError):
        convert({"violations": "image-alt"})


def test_convert_rejects_malformed_options() -> None:
    """
    ARRANGE: scanName given as a list
    ACT:     convert
    ASSERT:  raises InvalidInputError
    """
    with pytest.raises(InvalidInputError):
        convert(_scan(), {"scanName": ["a", "b"]})


def test_converter_uses_injected_collaborators() -> None:
    """
    ARRANGE: converter with an injected invocation provider
    ACT:     convert
    ASSERT:  the run carries the injected invocation
    """
    expected = Invocation(execution_successful=False)

    def _failed_invocations(environment_data: EnvironmentData) -> list[Invocation]:
        return [expected]

    converter = SarifConverter(get_invocations=_failed_invocations)

    actual = converter.convert(_scan()).runs[0].invocations

    assert actual == (expected,)


def test_converter_uses_injected_link_data() -> None:
    """
    ARRANGE: converter with an empty lookup table
    ACT:     convert
    ASSERT:  no taxa and no relationships are produced
    """
    converter = SarifConverter(link_data={})

    run = converter.convert(_scan()).runs[0]

    assert (
        run.taxonomies[0].taxa,
        {rule.relationships for rule in run.tool.driver.rules},
    ) == ((), {()})


def test_default_sarif_converter_matches_module_convert() -> None:
    """
    ARRANGE: default converter
    ACT:     convert with converter and module function
    ASSERT:  both logs are equal
    """
    assert default_sarif_converter().convert(_scan()) == convert(_scan())


def test_parse_scan_results_returns_validated_document_unchanged() -> None:
    """
    ARRANGE: validated ScanResultDocument
    ACT:     parse_scan_results
    ASSERT:  the same instance is returned
    """
    document = ScanResultDocument()

    assert parse_scan_results(document) is document


def test_parse_scan_results_rejects_non_mapping() -> None:
    """
    ARRANGE: a list instead of a document
    ACT:     parse_scan_results
    ASSERT:  raises InvalidInputError
    """
    with pytest.raises(InvalidInputError):
        parse_scan_results([{"id": "image-alt"}])


def test_parse_options_defaults_to_empty_options() -> None:
    """
    ARRANGE: no options
    ACT:     parse_options
    ASSERT:  returns ConverterOptions with nothing set
    """
    assert parse_options(None) == ConverterOptions()


def test_default_sarif_converter_binds_custom_settings() -> None:
    """
    ARRANGE: settings with converter version 9.9.9 and separator " > "
    ACT:     convert with default_sarif_converter(settings)
    ASSERT:  conversion version and logical location name use the settings
    """
    settings = ConverterSettings(converter_version="9.9.9", target_separator=" > ")

    run = default_sarif_converter(settings).convert(_scan()).runs[0]

    assert (
        run.conversion.tool.driver.version,
        run.results[0].locations[0].logical_locations[0].fully_qualified_name,
    ) == ("9.9.9", "#header > img")
