"""Naming helpers for struct fields and function parameters."""

from collections.abc import Mapping

from go2ts.converter.constants import UNNAMED_PARAM
from go2ts.types import Kind, TypeDescriptor


def is_upper(name: str) -> bool:
    """Check if every letter in name is upper-case (e.g. 'ID', 'URL2')."""
    return name.isupper()


def is_exported(name: str) -> bool:
    """Check if a struct field is visible outside its package."""
    return name[:1].isupper()


def param_name(descriptor: TypeDescriptor, names: Mapping[TypeDescriptor, str]) -> str:
    """Derive a parameter name from the parameter's type.

    Args:
        descriptor: Type of the parameter
        names: Preferred names by type, consulted first

    Returns:
        Table entry if present, otherwise the element type's name for pointers
        and slices, otherwise the declared type name with its first letter
        lower-cased (fully lower-cased for all-caps names, '_' when unnamed)
    """
    if descriptor in names:
        return names[descriptor]
    if descriptor.kind in (Kind.POINTER, Kind.SLICE):
        return param_name(descriptor.elem(), names)

    name = descriptor.name
    if not name:
        return UNNAMED_PARAM
    if is_upper(name):
        return name.lower()
    return name[0].lower() + name[1:]
