"""Tests for the struct expander."""

from go2ts.converter.structs import convert_struct, extract_struct
from go2ts.converter.models import StructField
from go2ts.types import INT, STRING, field, named, slice_of, struct_of


def test_extract_struct(converter, nested):
    """Test extracting fields through the converter."""
    sinfo = converter.extract_struct(nested)

    assert sinfo.name == "Nested"
    assert sinfo.fields == [StructField("Owner", "{ Name: string }")]


def test_extract_struct_with_callback():
    """Test the expander with a stand-in conversion callback."""
    account = named(
        "Account",
        struct_of(
            field("ID", INT),
            field("password", STRING),
            field("Tags", slice_of(STRING), tag='json:"tags"'),
        ),
    )

    sinfo = extract_struct(account, lambda t: f"<{t}>")

    assert [f.name for f in sinfo.fields] == ["ID", "Tags"]
    assert sinfo.fields[1].type == "<[]string>"


def test_convert_struct():
    s = struct_of(field("A", INT), field("b", INT), field("C", INT))
    assert convert_struct(s, lambda t: "number") == "{ A: number, C: number }"
