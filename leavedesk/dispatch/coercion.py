"""
Argument validation and coercion.

Turns the loosely-typed JSON arguments a client sends into the keyword
arguments a tool callable expects, raising ``InvalidArgumentError`` with a
message that names the offending field.
"""

import logging
from typing import Any, Dict, Mapping

from ..registry import InvalidArgumentError, ParameterDescriptor, ParamType, ToolDescriptor

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


def _invalid(param: ParameterDescriptor, value: Any) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"invalid argument '{param.name}': expected {param.type.value}, got {value!r}",
        field=param.name,
    )


def _to_integer(param: ParameterDescriptor, value: Any) -> int:
    # bool is a subclass of int; true/false is never a day count
    if isinstance(value, bool):
        raise _invalid(param, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise _invalid(param, value)


def _to_float(param: ParameterDescriptor, value: Any) -> float:
    if isinstance(value, bool):
        raise _invalid(param, value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise _invalid(param, value)


def _to_boolean(param: ParameterDescriptor, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise _invalid(param, value)


def _to_string(param: ParameterDescriptor, value: Any) -> str:
    if isinstance(value, str):
        text = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        text = str(value)
    else:
        raise _invalid(param, value)
    if not text and not param.allow_empty:
        raise InvalidArgumentError(
            f"argument '{param.name}' must not be empty", field=param.name
        )
    return text


_CONVERTERS = {
    ParamType.INTEGER: _to_integer,
    ParamType.FLOAT: _to_float,
    ParamType.BOOLEAN: _to_boolean,
    ParamType.STRING: _to_string,
}


def coerce_argument(param: ParameterDescriptor, value: Any) -> Any:
    """Convert a single value to ``param``'s declared type."""
    if value is None:
        raise InvalidArgumentError(
            f"missing required argument: {param.name}", field=param.name
        )
    return _CONVERTERS[param.type](param, value)


def coerce_arguments(descriptor: ToolDescriptor, arguments: Any) -> Dict[str, Any]:
    """
    Validate *arguments* against *descriptor* and return call kwargs.

    Every declared parameter is required. Keys that match no parameter are
    dropped.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentError(
            f"arguments must be an object, got {type(arguments).__name__}"
        )

    kwargs: Dict[str, Any] = {}
    for param in descriptor.parameters:
        if param.name not in arguments:
            raise InvalidArgumentError(
                f"missing required argument: {param.name}", field=param.name
            )
        kwargs[param.name] = coerce_argument(param, arguments[param.name])

    extra = set(arguments) - set(kwargs)
    if extra:
        logger.debug(
            "Ignoring unexpected argument(s) for %s: %s",
            descriptor.name,
            ", ".join(sorted(str(k) for k in extra)),
        )
    return kwargs
