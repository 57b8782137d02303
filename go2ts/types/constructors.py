"""Builders for Go type descriptors.

Examples:
    >>> user = named("User", struct_of(field("Name", STRING)), pkg_path="app")
    >>> str(pointer_to(user))
    '*app.User'
    >>> str(map_of(STRING, slice_of(INT)))
    'map[string][]int'
"""

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from .base import Kind
from .descriptor import GoType, StructMember
from .errors import DescriptorError


def named(
    name: str, underlying: GoType, pkg_path: str = "", is_error: bool | None = None
) -> GoType:
    """Declare a defined type with the given underlying type.

    Args:
        name: Declared type name
        underlying: Descriptor the new type is defined over
        pkg_path: Import path of the declaring package
        is_error: Override of the error contract flag, inherited when None

    Returns:
        Descriptor of the defined type
    """
    if not name:
        raise DescriptorError("defined types need a name", underlying)
    flag = underlying.is_error if is_error is None else is_error
    return replace(underlying, name=name, pkg_path=pkg_path, is_error=flag)


def pointer_to(elem: GoType) -> GoType:
    return GoType(Kind.POINTER, elem_type=elem)


def slice_of(elem: GoType) -> GoType:
    return GoType(Kind.SLICE, elem_type=elem)


def array_of(length: int, elem: GoType) -> GoType:
    if length < 0:
        raise DescriptorError(f"negative array length {length}", elem)
    return GoType(Kind.ARRAY, elem_type=elem, length=length)


def map_of(key: GoType, value: GoType) -> GoType:
    return GoType(Kind.MAP, key_type=key, elem_type=value)


def chan_of(elem: GoType) -> GoType:
    return GoType(Kind.CHAN, elem_type=elem)


def interface_of(is_error: bool = False) -> GoType:
    """Build an unnamed interface type, optionally satisfying error."""
    return GoType(Kind.INTERFACE, is_error=is_error)


def field(name: str, type_: GoType, tag: str = "") -> StructMember:
    if not name:
        raise DescriptorError("struct fields need a name", type_)
    return StructMember(name=name, type=type_, tag=tag)


def struct_of(*members: StructMember) -> GoType:
    """Build an unnamed struct type from fields in declaration order.

    Raises:
        DescriptorError: If two fields share a name
    """
    seen: set[str] = set()
    for member in members:
        if member.name in seen:
            raise DescriptorError(f"duplicate field {member.name}", members)
        seen.add(member.name)
    return GoType(Kind.STRUCT, members=tuple(members))


def func_of(
    params: Iterable[GoType] = (), returns: Iterable[GoType] = ()
) -> GoType:
    """Build an unnamed func type.

    Args:
        params: Parameter types, receiver first for method expressions
        returns: Return types in declaration order

    Returns:
        Descriptor of the func type
    """
    fn = GoType(Kind.FUNC, in_types=tuple(params), out_types=tuple(returns))
    logger.trace(f"Built func descriptor: {fn}")
    return fn
