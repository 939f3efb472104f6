# schemas/axe_results.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Input models mirror axe-core's JSON (camelCase keys), but also accept
# snake_case names so tests and callers can build them directly.
_INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    # ignore the many axe fields the converter never reads
    extra="ignore",
    frozen=True,
)


class CheckResult(BaseModel):
    """
    A single evaluated check on one element.

    Only the identifier and the (optional) human message are used; the check
    has already been executed by the scanner.
    """

    model_config = _INPUT_CONFIG

    id: str
    message: str | None = None
    impact: str | None = None


class NodeResult(BaseModel):
    """
    The outcome of one rule against one element.

    Args:
        target (tuple[str, ...]): Selector path to the element.
        html (str): Serialised html snippet of the element.
        all (tuple[CheckResult, ...]): Checks that must all pass.
        any (tuple[CheckResult, ...]): Checks of which any one must pass.
        none (tuple[CheckResult, ...]): Checks that must all fail.
    """

    model_config = _INPUT_CONFIG

    target: tuple[str, ...] = ()
    html: str = ""
    all: tuple[CheckResult, ...] = ()
    any: tuple[CheckResult, ...] = ()
    none: tuple[CheckResult, ...] = ()
    impact: str | None = None
    failure_summary: str | None = None

    @field_validator("target", mode="before")
    @classmethod
    def _flatten_target(cls, value: object) -> object:
        """
        Flatten nested selector segments (iframe and shadow DOM paths).

        axe reports a target as a list whose items are either selectors or
        lists of selectors; nested lists are joined with commas.

        Returns:
            object: The flattened target, or the value untouched when it is
                not a list (left for pydantic to reject).
        """
        if value is None:
            return ()
        if not isinstance(value, list | tuple):
            return value
        return tuple(
            ",".join(segment) if isinstance(segment, list | tuple) else segment
            for segment in value
        )

    @field_validator("html", mode="before")
    @classmethod
    def _default_html(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("all", "any", "none", mode="before")
    @classmethod
    def _default_checks(cls, value: object) -> object:
        return () if value is None else value


class RuleResult(BaseModel):
    """
    One rule's evaluation within a classification bucket.

    The optional description, help and help_url fields are present on
    decorated results and flow into the rule descriptors of the SARIF run.
    """

    model_config = _INPUT_CONFIG

    id: str
    tags: tuple[str, ...] = ()
    nodes: tuple[NodeResult, ...] = ()
    description: str | None = None
    help: str | None = None
    help_url: str | None = None
    impact: str | None = None

    @field_validator("tags", "nodes", mode="before")
    @classmethod
    def _default_sequences(cls, value: object) -> object:
        return () if value is None else value


class ScanEngine(BaseModel):
    """
    Name and version of the scanning engine.
    """

    model_config = _INPUT_CONFIG

    name: str | None = None
    version: str | None = None


class ScanResultDocument(BaseModel):
    """
    A complete accessibility scan, as produced by axe-core.

    Carries the four classification buckets plus the environment fields used
    to describe the invocation and the scanned artifact.

    Args:
        violations (tuple[RuleResult, ...]): Rules that failed.
        passes (tuple[RuleResult, ...]): Rules that passed.
        incomplete (tuple[RuleResult, ...]): Rules needing manual review.
        inapplicable (tuple[RuleResult, ...]): Rules that matched no element.

    Returns:
        ScanResultDocument: Validated, immutable scan document.
    """

    model_config = _INPUT_CONFIG

    violations: tuple[RuleResult, ...] = ()
    passes: tuple[RuleResult, ...] = ()
    incomplete: tuple[RuleResult, ...] = ()
    inapplicable: tuple[RuleResult, ...] = ()
    url: str | None = None
    timestamp: str | None = None
    target_page_title: str | None = None
    test_engine: ScanEngine = Field(default_factory=ScanEngine)

    @field_validator(
        "violations",
        "passes",
        "incomplete",
        "inapplicable",
        mode="before",
    )
    @classmethod
    def _default_buckets(cls, value: object) -> object:
        return () if value is None else value
