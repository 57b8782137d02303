"""Singleton Go type descriptors."""

from .base import Kind
from .descriptor import GoType

# Predeclared types
BOOL = GoType(Kind.BOOL, "bool")
INT = GoType(Kind.INT, "int")
INT8 = GoType(Kind.INT8, "int8")
INT16 = GoType(Kind.INT16, "int16")
INT32 = GoType(Kind.INT32, "int32")
INT64 = GoType(Kind.INT64, "int64")
UINT = GoType(Kind.UINT, "uint")
UINT8 = GoType(Kind.UINT8, "uint8")
UINT16 = GoType(Kind.UINT16, "uint16")
UINT32 = GoType(Kind.UINT32, "uint32")
UINT64 = GoType(Kind.UINT64, "uint64")
UINTPTR = GoType(Kind.UINTPTR, "uintptr")
FLOAT32 = GoType(Kind.FLOAT32, "float32")
FLOAT64 = GoType(Kind.FLOAT64, "float64")
COMPLEX64 = GoType(Kind.COMPLEX64, "complex64")
COMPLEX128 = GoType(Kind.COMPLEX128, "complex128")
STRING = GoType(Kind.STRING, "string")
UNSAFE_POINTER = GoType(Kind.UNSAFE_POINTER, "Pointer", pkg_path="unsafe")

# Aliases share the descriptor of the aliased type
BYTE = UINT8
RUNE = INT32

# Interfaces
ANY = GoType(Kind.INTERFACE)
ERROR = GoType(Kind.INTERFACE, "error", is_error=True)
CONTEXT = GoType(Kind.INTERFACE, "Context", pkg_path="context")
