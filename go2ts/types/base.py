"""Go Type System - Core Definitions"""

from collections.abc import Sequence
from enum import Enum, auto
from typing import Protocol


class Kind(Enum):
    """Enumeration of Go type categories, one per reflect kind."""

    INVALID = auto()
    BOOL = auto()
    INT = auto()
    INT8 = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()
    UINT = auto()
    UINT8 = auto()
    UINT16 = auto()
    UINT32 = auto()
    UINT64 = auto()
    UINTPTR = auto()
    FLOAT32 = auto()
    FLOAT64 = auto()
    COMPLEX64 = auto()
    COMPLEX128 = auto()
    ARRAY = auto()
    CHAN = auto()
    FUNC = auto()
    INTERFACE = auto()
    MAP = auto()
    POINTER = auto()
    SLICE = auto()
    STRING = auto()
    STRUCT = auto()
    UNSAFE_POINTER = auto()

    def __str__(self) -> str:
        return self.name.lower()


class FieldDescriptor(Protocol):
    """A single struct field as seen by the converter."""

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> "TypeDescriptor": ...


class TypeDescriptor(Protocol):
    """Introspection capability the converter depends on.

    Implementations must be hashable and compare equal when they describe the
    same type, since they are used as keys of the override and param-name
    tables.
    """

    @property
    def kind(self) -> Kind: ...

    @property
    def name(self) -> str: ...

    def elem(self) -> "TypeDescriptor":
        """Element type of a pointer, slice, array, map or chan."""
        ...

    def fields(self) -> Sequence[FieldDescriptor]: ...

    def params(self) -> Sequence["TypeDescriptor"]: ...

    def returns(self) -> Sequence["TypeDescriptor"]: ...

    def implements_error(self) -> bool:
        """Whether the type satisfies the host language's error contract."""
        ...

    def __hash__(self) -> int: ...
