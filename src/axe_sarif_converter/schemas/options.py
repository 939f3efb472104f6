# schemas/options.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConverterOptions(BaseModel):
    """
    Optional per-conversion settings.

    Accepts either snake_case names or the camelCase keys used by callers of
    the original converter (``scanName``, ``testCaseId``, ``scanId``). Options
    left unset are omitted from the output rather than written as null.

    Args:
        scan_name (str | None): Added as the run property ``scanName``.
        test_case_id (str | None): Added as the run property ``testCaseId``.
        scan_id (str | None): Reserved; accepted but not written.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    scan_name: str | None = None
    test_case_id: str | None = None
    scan_id: str | None = None
