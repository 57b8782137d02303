"""
Data models for the Go to TypeScript converter.

This module contains the dataclass definitions used by the converter to
describe per-function configuration and the intermediate results of expanding
structs and functions before they are rendered as TypeScript.
"""

from dataclasses import dataclass, field

from go2ts.converter.constants import EMPTY_OBJECT, VOID


@dataclass
class FunctionConfig:
    """Options controlling how a func type is rendered.

    Attributes:
        is_sync: The function returns values instead of a Promise
        always_array: Wrap the result in a tuple even for a single value
        no_ignore_context: Keep a leading context.Context parameter
        is_method: The first parameter is a receiver and is dropped, the
            declaration is rendered as a class method
        method_name: Name used when is_method is set
        param_names: Names by original parameter index, receiver included
    """

    is_sync: bool = False
    always_array: bool = False
    no_ignore_context: bool = False
    is_method: bool = False
    method_name: str = ""
    param_names: list[str] = field(default_factory=list)


@dataclass
class Param:
    """Function parameter.

    Attributes:
        name: Parameter name, unique within its function
        type: TypeScript declaration of the parameter type
    """

    name: str
    type: str

    def render(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class ExtractedFunction:
    """Type information extracted from a func type.

    Attributes:
        name: Declared name of the func type, empty for literal func types
        params: Parameters in declaration order
        returns: Folded TypeScript return declaration
    """

    name: str = ""
    params: list[Param] = field(default_factory=list)
    returns: str = VOID

    def append_param(self, param: Param) -> None:
        """Append a parameter, suffixing its name until it is unique.

        The first candidate not already taken wins: ``name``, ``name1``,
        ``name2`` and so on.
        """
        taken = {p.name for p in self.params}
        n = 0
        name = param.name
        while name in taken:
            n += 1
            name = f"{param.name}{n}"
        self.params.append(Param(name=name, type=param.type))

    def render(self, config: FunctionConfig) -> str:
        params = ", ".join(p.render() for p in self.params)
        if config.is_method:
            return f"{config.method_name} ({params}): {self.returns}"
        return f"({params}) => {self.returns}"


@dataclass
class StructField:
    """Exported field of a struct.

    Attributes:
        name: Field name
        type: TypeScript declaration of the field type
    """

    name: str
    type: str


@dataclass
class ExtractedStruct:
    """Type information extracted from a struct type.

    Attributes:
        name: Declared name of the struct, empty for anonymous structs
        fields: Exported fields in declaration order
    """

    name: str = ""
    fields: list[StructField] = field(default_factory=list)

    def render(self) -> str:
        if not self.fields:
            return EMPTY_OBJECT
        body = ", ".join(f"{f.name}: {f.type}" for f in self.fields)
        return f"{{ {body} }}"
