"""
Constants and predefined mappings for the Go to TypeScript converter.

This module contains the built-in declaration and parameter-name tables every
converter is seeded with, plus the TypeScript templates used when rendering.
"""

from go2ts.types import (
    BOOL,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    STRING,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINTPTR,
    GoType,
)

# Declarations for predeclared types, also used to resolve defined types
# whose underlying kind is one of these
PRIMITIVES: dict[GoType, str] = {
    BOOL: "boolean",
    INT: "number",
    INT8: "number",
    INT16: "number",
    INT32: "number",
    INT64: "number",
    UINT: "number",
    UINT8: "number",
    UINT16: "number",
    UINT32: "number",
    UINT64: "number",
    FLOAT32: "number",
    FLOAT64: "number",
    UINTPTR: "number",
    STRING: "string",
}

# Short parameter names for predeclared types
PARAM_NAMES: dict[GoType, str] = {
    BOOL: "bool",
    INT: "int",
    INT8: "int",
    INT16: "int",
    INT32: "int",
    INT64: "int",
    UINT: "uint",
    UINT8: "uint",
    UINT16: "uint",
    UINT32: "uint",
    UINT64: "uint",
    FLOAT32: "num",
    FLOAT64: "num",
    STRING: "str",
}

# Name of the context type dropped from parameter lists
CONTEXT_TYPE_NAME = "Context"

# Placeholder name for parameters of unnamed types
UNNAMED_PARAM = "_"

# TypeScript templates
VOID = "void"
ANY = "any"
EMPTY_OBJECT = "{}"
ARRAY_TEMPLATE = "Array<{}>"
ASYNC_ITERABLE_TEMPLATE = "AsyncIterable<{}>"
PROMISE_TEMPLATE = "Promise<{}>"
STRING_INDEX_TEMPLATE = "{{ [k: string]: {} }}"
