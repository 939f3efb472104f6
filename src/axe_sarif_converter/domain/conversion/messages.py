# conversion/messages.py

from collections.abc import Sequence

from axe_sarif_converter.schemas import CheckResult, Message, NodeResult

from .models import Classification

FIX_ALL_HEADING = "Fix all of the following:"
FIX_ANY_HEADING = "Fix any of the following:"
PASSED_HEADING = "The following tests passed:"


def synthesise_message(node: NodeResult, classification: Classification) -> Message:
    """
    Describe which checks fired on a node, as plain text and markdown.

    For a violation, the ``all`` and ``none`` checks form one group (every one
    of them needs fixing) and the ``any`` checks a second group (fixing one
    suffices). For passes and incomplete results all checks form a single
    group. Empty groups are left out, so a node without checks produces two
    empty strings.

    Args:
        node (NodeResult): The evaluated element.
        classification (Classification): The bucket the node was reported in.

    Returns:
        Message: The text and markdown renderings.
    """
    if classification is Classification.VIOLATIONS:
        groups = (
            (FIX_ALL_HEADING, node.all + node.none),
            (FIX_ANY_HEADING, node.any),
        )
    else:
        groups = ((PASSED_HEADING, node.all + node.none + node.any),)

    rendered = [
        _render_group(heading, checks) for heading, checks in groups if checks
    ]

    return Message(
        text=" ".join(text for text, _ in rendered),
        markdown="\n\n".join(markdown for _, markdown in rendered),
    )


def escape_for_markdown(text: str) -> str:
    """
    Escape angle brackets so check messages cannot inject markup.

    Returns:
        str: The text with ``<`` and ``>`` replaced by entities.
    """
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _render_group(heading: str, checks: Sequence[CheckResult]) -> tuple[str, str]:
    """
    Render one heading and its checks.

    Returns:
        tuple[str, str]: The group as plain text and as markdown.
    """
    lines = [_check_line(check) for check in checks]

    text = " ".join([heading, *(f"{line}." for line in lines)])
    markdown = "\n".join(
        [
            escape_for_markdown(heading),
            *(f"- {escape_for_markdown(line)}" for line in lines),
        ],
    )
    return text, markdown


def _check_line(check: CheckResult) -> str:
    # checks without a human message fall back to their id
    return check.message or check.id
