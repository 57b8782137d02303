"""
Conversion of Go type descriptors to TypeScript declarations.

This package provides the `Converter` engine together with the per-function
configuration and the intermediate models produced while expanding structs and
functions.
"""

from go2ts.converter.core import Converter
from go2ts.converter.errors import ConversionError
from go2ts.converter.models import (
    ExtractedFunction,
    ExtractedStruct,
    FunctionConfig,
    Param,
    StructField,
)

__all__ = [
    "Converter",
    "ConversionError",
    "ExtractedFunction",
    "ExtractedStruct",
    "FunctionConfig",
    "Param",
    "StructField",
]
