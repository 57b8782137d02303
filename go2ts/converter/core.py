"""
Converter from Go type descriptors to TypeScript declarations.

The converter looks every descriptor up in its override table before expanding
it structurally. Each freshly expanded declaration is reported through the
``on_convert`` hook, which may register it as an override; nested conversions
re-check the table afterwards so the enclosing declaration refers to the
override instead of repeating the expansion.

Example:
    >>> from go2ts.types import STRING, field, map_of, named, struct_of
    >>> user = named("User", struct_of(field("Name", STRING)))
    >>> c = Converter()
    >>> c.convert(user)
    '{ Name: string }'
    >>> c.add_overrides({user: "User"})
    >>> c.convert(map_of(STRING, user))
    '{ [k: string]: User }'
"""

from collections.abc import Callable, Mapping

from loguru import logger

from go2ts.converter.constants import (
    ANY,
    ARRAY_TEMPLATE,
    ASYNC_ITERABLE_TEMPLATE,
    PARAM_NAMES,
    PRIMITIVES,
    STRING_INDEX_TEMPLATE,
)
from go2ts.converter.errors import ConversionError
from go2ts.converter.functions import convert_function, extract_function
from go2ts.converter.models import ExtractedFunction, ExtractedStruct, FunctionConfig
from go2ts.converter.naming import param_name
from go2ts.converter.structs import convert_struct, extract_struct
from go2ts.types import Kind, TypeDescriptor

OnConvert = Callable[[TypeDescriptor, str], None]
ConfigureFunc = Callable[[TypeDescriptor], FunctionConfig]


def _ignore(descriptor: TypeDescriptor, declaration: str) -> None:
    pass


def _default_config(descriptor: TypeDescriptor) -> FunctionConfig:
    return FunctionConfig()


class Converter:
    """Converts Go type descriptors to TypeScript type declarations.

    Notes:
        - chan is converted to AsyncIterable.
        - Functions are assumed async, so results are Promise<T>, and errors
          are assumed thrown rather than returned.
        - Multiple return values are returned as a tuple.
        - A context.Context parameter is dropped.
        - Interfaces are converted to any.
        - Recursive types are NOT supported.
        - Struct methods are not converted, but ``configure_func`` can be used
          to render method declarations.

    Attributes:
        on_convert: Called with (descriptor, declaration) for every type that
            was expanded rather than found in the override table. It may call
            add_overrides so discovered types are referenced by name from
            enclosing declarations.
        configure_func: Called for every func type to obtain its
            FunctionConfig.
    """

    def __init__(self) -> None:
        self._types: dict[TypeDescriptor, str] = {}
        self._param_names: dict[TypeDescriptor, str] = {}
        self.on_convert: OnConvert = _ignore
        self.configure_func: ConfigureFunc = _default_config
        self.add_overrides(PRIMITIVES)
        self.add_param_names(PARAM_NAMES)

    @property
    def overrides(self) -> dict[TypeDescriptor, str]:
        """Copy of the override table."""
        return dict(self._types)

    @property
    def param_names(self) -> dict[TypeDescriptor, str]:
        """Copy of the parameter name table."""
        return dict(self._param_names)

    def add_overrides(self, overrides: Mapping[TypeDescriptor, str]) -> None:
        """Add custom declarations, replacing existing entries for the same type."""
        for descriptor, declaration in overrides.items():
            self._types[descriptor] = declaration

    # Name kept for callers of the original API
    add_types = add_overrides

    def add_param_names(self, names: Mapping[TypeDescriptor, str]) -> None:
        """Add custom function parameter names for types."""
        for descriptor, name in names.items():
            self._param_names[descriptor] = name

    def convert(self, descriptor: TypeDescriptor) -> str:
        """Convert a type descriptor to a TypeScript declaration.

        Args:
            descriptor: Type to convert

        Returns:
            TypeScript declaration string

        Raises:
            ConversionError: If the descriptor's kind cannot be represented
        """
        if descriptor in self._types:
            logger.trace(f"Override hit for {descriptor}")
            return self._types[descriptor]

        alias = self._primitive_alias(descriptor)
        if alias is not None:
            logger.trace(f"Primitive alias {descriptor} -> {alias}")
            return alias

        ts = self._dispatch(descriptor)
        logger.debug(f"Converted {descriptor} ({descriptor.kind}): {ts}")
        self.on_convert(descriptor, ts)
        return ts

    def extract_struct(self, descriptor: TypeDescriptor) -> ExtractedStruct:
        """Extract the exported fields of a struct without rendering it."""
        return extract_struct(descriptor, self._convert_nested)

    def extract_function(
        self, descriptor: TypeDescriptor, config: FunctionConfig | None = None
    ) -> ExtractedFunction:
        """Extract the parameters and result of a func type without rendering it.

        Args:
            descriptor: Func type to extract
            config: Function configuration, resolved with configure_func if None

        Returns:
            ExtractedFunction for the func type
        """
        if config is None:
            config = self.configure_func(descriptor)
        return extract_function(
            descriptor, config, self._convert_nested, self._param_name
        )

    def _primitive_alias(self, descriptor: TypeDescriptor) -> str | None:
        """Resolve defined types whose kind is a predeclared primitive kind."""
        for primitive, default in PRIMITIVES.items():
            if primitive.kind == descriptor.kind:
                return self._types.get(primitive, default)
        return None

    def _dispatch(self, descriptor: TypeDescriptor) -> str:
        match descriptor.kind:
            case Kind.POINTER:
                return self._convert_nested(descriptor.elem())
            case Kind.CHAN:
                elem = self._convert_nested(descriptor.elem())
                return ASYNC_ITERABLE_TEMPLATE.format(elem)
            case Kind.FUNC:
                config = self.configure_func(descriptor)
                return convert_function(
                    descriptor, config, self._convert_nested, self._param_name
                )
            case Kind.STRUCT:
                return convert_struct(descriptor, self._convert_nested)
            case Kind.SLICE | Kind.ARRAY:
                elem = self._convert_nested(descriptor.elem())
                return ARRAY_TEMPLATE.format(elem)
            case Kind.MAP:
                value = self._convert_nested(descriptor.elem())
                return STRING_INDEX_TEMPLATE.format(value)
            case Kind.INTERFACE:
                return ANY
            case _:
                error = ConversionError.unhandled(descriptor)
                logger.error(error.message)
                raise error

    def _convert_nested(self, descriptor: TypeDescriptor) -> str:
        ts = self.convert(descriptor)
        # on_convert may have registered an override for this type
        override = self._types.get(descriptor)
        if override is not None and override != ts:
            logger.debug(f"Using override discovered for {descriptor}: {override}")
            return override
        return ts

    def _param_name(self, descriptor: TypeDescriptor) -> str:
        return param_name(descriptor, self._param_names)
