"""
Tool error hierarchy.

Registration errors (duplicate names, signature mismatches) are raised while
the registry is built and abort startup. The rest are raised while handling a
call and are turned into a failure result by the dispatcher.
"""

from typing import Optional


class ToolError(Exception):
    """Base class for every registry and dispatch error."""


class DuplicateToolError(ToolError):
    """A tool with the same name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"duplicate tool: {name}")


class SignatureMismatchError(ToolError):
    """A descriptor's parameters do not match its callable's signature."""

    def __init__(self, name: str, declared: list, actual: list):
        self.name = name
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"tool '{name}' declares parameters {declared} "
            f"but its callable takes {actual}"
        )


class UnknownToolError(ToolError):
    """The requested tool name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown tool: {name}")


class InvalidArgumentError(ToolError):
    """An argument is missing, empty, or not convertible to its declared type."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class ToolExecutionError(ToolError):
    """The tool callable itself raised."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"tool '{name}' failed: {cause}")
