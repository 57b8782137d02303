"""Go type system descriptors."""

from .base import FieldDescriptor, Kind, TypeDescriptor
from .constructors import (
    array_of,
    chan_of,
    field,
    func_of,
    interface_of,
    map_of,
    named,
    pointer_to,
    slice_of,
    struct_of,
)
from .descriptor import GoType, StructMember
from .errors import DescriptorError
from .singletons import (
    ANY,
    BOOL,
    BYTE,
    COMPLEX64,
    COMPLEX128,
    CONTEXT,
    ERROR,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    RUNE,
    STRING,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINTPTR,
    UNSAFE_POINTER,
)

__all__ = [
    # Protocols and kinds
    "Kind",
    "TypeDescriptor",
    "FieldDescriptor",
    # Descriptors
    "GoType",
    "StructMember",
    # Errors
    "DescriptorError",
    # Builders
    "array_of",
    "chan_of",
    "field",
    "func_of",
    "interface_of",
    "map_of",
    "named",
    "pointer_to",
    "slice_of",
    "struct_of",
    # Singleton types
    "ANY",
    "BOOL",
    "BYTE",
    "COMPLEX64",
    "COMPLEX128",
    "CONTEXT",
    "ERROR",
    "FLOAT32",
    "FLOAT64",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "RUNE",
    "STRING",
    "UINT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINTPTR",
    "UNSAFE_POINTER",
]
