"""
Tool registry: descriptors, the registry table and the error types.
"""
from .descriptors import ParameterDescriptor, ParamType, ToolDescriptor
from .errors import (
    DuplicateToolError,
    InvalidArgumentError,
    SignatureMismatchError,
    ToolError,
    ToolExecutionError,
    UnknownToolError,
)
from .registry import RegisteredTool, ToolRegistry, build_registry

__all__ = [
    'ParameterDescriptor',
    'ParamType',
    'ToolDescriptor',
    'ToolError',
    'DuplicateToolError',
    'SignatureMismatchError',
    'UnknownToolError',
    'InvalidArgumentError',
    'ToolExecutionError',
    'RegisteredTool',
    'ToolRegistry',
    'build_registry',
]
