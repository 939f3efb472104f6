# axe_sarif_converter/__init__.py

from .domain import (
    ConverterSettings,
    InvalidInputError,
    SarifConverter,
    convert,
    default_sarif_converter,
)
from .schemas import ConverterOptions, SarifLog, ScanResultDocument, to_json

__all__ = [
    "convert",
    "default_sarif_converter",
    "to_json",
    "ConverterOptions",
    "ConverterSettings",
    "InvalidInputError",
    "SarifConverter",
    "SarifLog",
    "ScanResultDocument",
]
