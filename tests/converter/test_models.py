"""Tests for the converter models module."""

from go2ts.converter.models import (
    ExtractedFunction,
    ExtractedStruct,
    FunctionConfig,
    Param,
    StructField,
)


class TestFunctionConfig:
    """Tests for the FunctionConfig dataclass."""

    def test_defaults(self):
        config = FunctionConfig()

        assert not config.is_sync
        assert not config.always_array
        assert not config.no_ignore_context
        assert not config.is_method
        assert config.method_name == ""
        assert config.param_names == []

    def test_param_names_not_shared(self):
        first = FunctionConfig()
        first.param_names.append("a")
        assert FunctionConfig().param_names == []


class TestExtractedFunction:
    """Tests for the ExtractedFunction dataclass."""

    def test_append_param_unique(self):
        # Arrange
        finfo = ExtractedFunction()

        # Act
        finfo.append_param(Param("str", "string"))
        finfo.append_param(Param("str", "string"))
        finfo.append_param(Param("str1", "number"))
        finfo.append_param(Param("str", "boolean"))

        # Assert
        assert [p.name for p in finfo.params] == ["str", "str1", "str11", "str2"]

    def test_render_function(self):
        finfo = ExtractedFunction(
            params=[Param("a", "string"), Param("b", "number")], returns="void"
        )
        assert finfo.render(FunctionConfig()) == "(a: string, b: number) => void"

    def test_render_method(self):
        finfo = ExtractedFunction(params=[Param("a", "string")], returns="string")
        config = FunctionConfig(is_method=True, method_name="Get")
        assert finfo.render(config) == "Get (a: string): string"

    def test_default_returns(self):
        assert ExtractedFunction().returns == "void"


class TestExtractedStruct:
    """Tests for the ExtractedStruct dataclass."""

    def test_render_empty(self):
        assert ExtractedStruct(name="Empty").render() == "{}"

    def test_render_fields(self):
        sinfo = ExtractedStruct(
            name="User",
            fields=[StructField("Name", "string"), StructField("Age", "number")],
        )
        assert sinfo.render() == "{ Name: string, Age: number }"
