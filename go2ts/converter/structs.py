"""Expansion of struct types into TypeScript object literals."""

from collections.abc import Callable

from loguru import logger

from go2ts.converter.models import ExtractedStruct, StructField
from go2ts.converter.naming import is_exported
from go2ts.types import TypeDescriptor

Convert = Callable[[TypeDescriptor], str]


def extract_struct(descriptor: TypeDescriptor, convert: Convert) -> ExtractedStruct:
    """Extract the exported fields of a struct.

    Args:
        descriptor: Struct type to extract
        convert: Converts a nested type to its TypeScript declaration

    Returns:
        ExtractedStruct with the exported fields in declaration order
    """
    sinfo = ExtractedStruct(name=descriptor.name)
    for f in descriptor.fields():
        if not is_exported(f.name):
            logger.trace(f"Skipping unexported field {f.name} of {descriptor}")
            continue
        sinfo.fields.append(StructField(name=f.name, type=convert(f.type)))
    return sinfo


def convert_struct(descriptor: TypeDescriptor, convert: Convert) -> str:
    return extract_struct(descriptor, convert).render()
