from go2ts.converter import ConversionError, Converter, FunctionConfig
from go2ts.types import GoType, Kind, TypeDescriptor

__version__ = "0.1.0"


__all__ = [
    "ConversionError",
    "Converter",
    "FunctionConfig",
    "GoType",
    "Kind",
    "TypeDescriptor",
]
