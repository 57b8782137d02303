"""
Expansion of func types into TypeScript function declarations.

Return values are folded into a single declaration: a trailing error is
dropped (errors are thrown, not returned), no values become ``void``, one value
is used as is and several values become a tuple. Unless the function is
configured as synchronous the result is wrapped in a ``Promise``.
"""

from collections.abc import Callable

from loguru import logger

from go2ts.converter.constants import CONTEXT_TYPE_NAME, PROMISE_TEMPLATE, VOID
from go2ts.converter.models import ExtractedFunction, FunctionConfig, Param
from go2ts.types import TypeDescriptor

Convert = Callable[[TypeDescriptor], str]
ParamName = Callable[[TypeDescriptor], str]


def fold_returns(
    descriptor: TypeDescriptor, config: FunctionConfig, convert: Convert
) -> str:
    """Fold the return values of a func type into one declaration.

    Args:
        descriptor: Func type whose returns are folded
        config: Function configuration (always_array, is_sync)
        convert: Converts a nested type to its TypeScript declaration

    Returns:
        TypeScript declaration of the result, wrapped in Promise when async
    """
    outs = list(descriptor.returns())
    if outs and outs[-1].implements_error():
        outs.pop()
    rets = [convert(out) for out in outs]

    if len(rets) > 1 or (rets and config.always_array):
        returns = f"[{', '.join(rets)}]"
    elif len(rets) == 1:
        returns = rets[0]
    else:
        returns = VOID

    if not config.is_sync:
        returns = PROMISE_TEMPLATE.format(returns)
    return returns


def extract_function(
    descriptor: TypeDescriptor,
    config: FunctionConfig,
    convert: Convert,
    param_name: ParamName,
) -> ExtractedFunction:
    """Extract parameters and the folded result of a func type.

    Args:
        descriptor: Func type to extract
        config: Function configuration
        convert: Converts a nested type to its TypeScript declaration
        param_name: Derives a parameter name from a parameter type

    Returns:
        ExtractedFunction with uniquely named parameters
    """
    finfo = ExtractedFunction(name=descriptor.name)
    finfo.returns = fold_returns(descriptor, config, convert)

    params = list(descriptor.params())
    # The receiver has no TypeScript counterpart
    start = 1 if config.is_method else 0
    for i in range(start, len(params)):
        in_type = params[i]
        if in_type.name == CONTEXT_TYPE_NAME and not config.no_ignore_context:
            logger.trace(f"Dropping context parameter {i} of {descriptor}")
            continue
        if i < len(config.param_names):
            name = config.param_names[i]
        else:
            name = param_name(in_type)
        finfo.append_param(Param(name=name, type=convert(in_type)))
    return finfo


def convert_function(
    descriptor: TypeDescriptor,
    config: FunctionConfig,
    convert: Convert,
    param_name: ParamName,
) -> str:
    return extract_function(descriptor, config, convert, param_name).render(config)
