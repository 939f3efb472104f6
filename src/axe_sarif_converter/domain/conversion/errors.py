# conversion/errors.py


class InvalidInputError(ValueError):
    """
    Raised when a scan document cannot be converted.

    Covers documents that fail schema validation (for example a bucket that
    is not a sequence) and results that reference an unknown rule id.
    """
