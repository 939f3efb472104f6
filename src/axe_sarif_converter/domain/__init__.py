# domain/__init__.py

from .conversion import (
    ConverterSettings,
    InvalidInputError,
    SarifConverter,
    convert,
    default_sarif_converter,
)

__all__ = [
    "ConverterSettings",
    "InvalidInputError",
    "SarifConverter",
    "convert",
    "default_sarif_converter",
]
