"""Tests for Go type descriptors."""

import pytest

from go2ts.types import (
    ANY,
    BYTE,
    CONTEXT,
    ERROR,
    INT,
    INT32,
    RUNE,
    STRING,
    UINT8,
    DescriptorError,
    GoType,
    Kind,
    array_of,
    chan_of,
    field,
    func_of,
    map_of,
    named,
    pointer_to,
    slice_of,
    struct_of,
)


class TestEquality:
    """Descriptors of the same type must compare equal and hash alike."""

    def test_structural_equality(self):
        first = named("User", struct_of(field("Name", STRING)))
        second = named("User", struct_of(field("Name", STRING)))

        assert first == second
        assert hash(first) == hash(second)
        assert {first: "User"}[second] == "User"

    def test_packages_distinguish_types(self):
        a = named("User", struct_of(), pkg_path="example.com/a")
        b = named("User", struct_of(), pkg_path="example.com/b")
        assert a != b

    def test_defined_type_differs_from_underlying(self):
        assert named("Status", STRING) != STRING

    def test_aliases(self):
        assert BYTE == UINT8
        assert RUNE == INT32

    def test_composite_equality(self):
        assert slice_of(INT) == slice_of(INT)
        assert slice_of(INT) != array_of(3, INT)
        assert array_of(2, INT) != array_of(3, INT)
        assert func_of([INT], [ERROR]) == func_of([INT], [ERROR])


class TestAccessors:
    """Tests for the TypeDescriptor accessors."""

    def test_elem(self):
        assert pointer_to(STRING).elem() == STRING
        assert slice_of(STRING).elem() == STRING
        assert chan_of(STRING).elem() == STRING
        assert map_of(STRING, INT).elem() == INT
        assert map_of(STRING, INT).key() == STRING

    def test_elem_of_non_container(self):
        with pytest.raises(DescriptorError):
            STRING.elem()
        with pytest.raises(DescriptorError):
            slice_of(INT).key()

    def test_func_accessors(self):
        fn = func_of([CONTEXT, STRING], [INT, ERROR])

        assert fn.kind == Kind.FUNC
        assert fn.params() == (CONTEXT, STRING)
        assert fn.returns() == (INT, ERROR)

    def test_fields(self):
        s = struct_of(field("A", INT), field("b", STRING))
        assert [f.name for f in s.fields()] == ["A", "b"]
        assert s.fields()[1].type == STRING

    def test_implements_error(self):
        assert ERROR.implements_error()
        assert not ANY.implements_error()
        assert not CONTEXT.implements_error()


class TestStr:
    """Tests for Go-syntax rendering used in logs and errors."""

    def test_named(self, user):
        assert str(STRING) == "string"
        assert str(user) == "app.User"
        assert str(CONTEXT) == "context.Context"

    def test_composites(self, user):
        assert str(pointer_to(user)) == "*app.User"
        assert str(slice_of(INT)) == "[]int"
        assert str(array_of(4, INT)) == "[4]int"
        assert str(map_of(STRING, INT)) == "map[string]int"
        assert str(chan_of(INT)) == "chan int"
        assert str(ANY) == "interface {}"

    def test_funcs(self):
        assert str(func_of()) == "func()"
        assert str(func_of([INT], [ERROR])) == "func(int) error"
        assert str(func_of([INT, STRING], [INT, ERROR])) == (
            "func(int, string) (int, error)"
        )

    def test_structs(self):
        assert str(struct_of()) == "struct {}"
        assert str(struct_of(field("A", INT))) == "struct { A int }"

    def test_kind_str(self):
        assert str(Kind.UNSAFE_POINTER) == "unsafe_pointer"
        assert str(GoType(Kind.INVALID)) == "invalid"
