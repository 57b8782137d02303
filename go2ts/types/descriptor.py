"""Concrete Go type descriptors.

`GoType` is an immutable, hashable description of a Go type that satisfies the
`TypeDescriptor` protocol. It can be built by hand, by a source parser or from
exported reflection data; the converter only relies on the protocol.
"""

from dataclasses import dataclass, field

from go2ts.types.base import Kind
from go2ts.types.errors import DescriptorError

# Kinds that carry an element type
ELEM_KINDS = frozenset({Kind.ARRAY, Kind.CHAN, Kind.MAP, Kind.POINTER, Kind.SLICE})


@dataclass(frozen=True)
class StructMember:
    """Field of a struct type.

    Attributes:
        name: Field name as declared
        type: Descriptor of the field type
        tag: Raw struct tag, kept for callers that inspect it
    """

    name: str
    type: "GoType"
    tag: str = ""


@dataclass(frozen=True)
class GoType:
    """Immutable description of a Go type.

    Attributes:
        kind: Structural category of the type
        name: Declared name, empty for unnamed (literal) types
        pkg_path: Import path of the declaring package, empty for builtins
        elem_type: Element type for pointer, slice, array, chan and map kinds
        key_type: Key type for map kinds
        length: Length of array kinds
        members: Struct fields in declaration order
        in_types: Function parameter types, receiver first for methods
        out_types: Function return types
        is_error: Whether the type implements the error interface
    """

    kind: Kind
    name: str = ""
    pkg_path: str = ""
    elem_type: "GoType | None" = None
    key_type: "GoType | None" = None
    length: int | None = None
    members: tuple[StructMember, ...] = field(default_factory=tuple)
    in_types: tuple["GoType", ...] = field(default_factory=tuple)
    out_types: tuple["GoType", ...] = field(default_factory=tuple)
    is_error: bool = False

    def elem(self) -> "GoType":
        if self.kind not in ELEM_KINDS or self.elem_type is None:
            raise DescriptorError(f"elem of non-container type {self}", self.kind)
        return self.elem_type

    def key(self) -> "GoType":
        if self.kind != Kind.MAP or self.key_type is None:
            raise DescriptorError(f"key of non-map type {self}", self.kind)
        return self.key_type

    def fields(self) -> tuple[StructMember, ...]:
        return self.members

    def params(self) -> tuple["GoType", ...]:
        return self.in_types

    def returns(self) -> tuple["GoType", ...]:
        return self.out_types

    def implements_error(self) -> bool:
        return self.is_error

    def __str__(self) -> str:
        if self.name:
            if self.pkg_path:
                return f"{self.pkg_path.rsplit('/', 1)[-1]}.{self.name}"
            return self.name
        match self.kind:
            case Kind.POINTER:
                return f"*{self.elem()}"
            case Kind.SLICE:
                return f"[]{self.elem()}"
            case Kind.ARRAY:
                return f"[{self.length}]{self.elem()}"
            case Kind.CHAN:
                return f"chan {self.elem()}"
            case Kind.MAP:
                return f"map[{self.key()}]{self.elem()}"
            case Kind.FUNC:
                params = ", ".join(str(t) for t in self.in_types)
                outs = [str(t) for t in self.out_types]
                if not outs:
                    return f"func({params})"
                if len(outs) == 1:
                    return f"func({params}) {outs[0]}"
                return f"func({params}) ({', '.join(outs)})"
            case Kind.STRUCT:
                if not self.members:
                    return "struct {}"
                body = "; ".join(f"{m.name} {m.type}" for m in self.members)
                return f"struct {{ {body} }}"
            case Kind.INTERFACE:
                return "interface {}"
            case _:
                return str(self.kind)
