"""
Tool dispatcher.

Resolves a tool call against the registry, validates its arguments, runs the
callable and wraps the outcome. Every ``ToolError`` raised along the way is
converted to a ``Failure`` here; nothing a client sends can crash the server.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..registry import (
    InvalidArgumentError,
    ToolExecutionError,
    ToolRegistry,
    UnknownToolError,
)
from .coercion import coerce_arguments
from .results import Failure, InvocationRequest, InvocationResult, Success

logger = logging.getLogger(__name__)


class Dispatcher:
    """Implements the two protocol operations on top of a ``ToolRegistry``."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return every tool as a ``{name, description, parameters}`` dict."""
        return [descriptor.to_dict() for descriptor in self._registry.list_all()]

    def call_tool(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> InvocationResult:
        """
        Invoke tool *name* with *arguments*.

        Returns ``Success(value)`` with whatever the callable returned, or
        ``Failure(message)`` for unknown tools, bad arguments and tool faults.
        Business-rule rejections are the tool's own return value and so come
        back as ``Success``.
        """
        request = InvocationRequest(tool_name=name, arguments=arguments)
        try:
            value = self._invoke(request)
        except UnknownToolError as e:
            logger.warning("Call to unknown tool '%s'", name)
            return Failure(str(e))
        except InvalidArgumentError as e:
            logger.warning("Rejected call to '%s': %s", name, e)
            return Failure(str(e))
        except ToolExecutionError as e:
            logger.error("Tool '%s' raised", name, exc_info=e.cause)
            return Failure(str(e))

        logger.debug("Tool '%s' returned %r", name, value)
        return Success(value)

    def _invoke(self, request: InvocationRequest) -> Any:
        tool = self._registry.lookup(request.tool_name)
        kwargs = coerce_arguments(tool.descriptor, request.arguments)
        try:
            return tool.fn(**kwargs)
        except Exception as e:
            raise ToolExecutionError(request.tool_name, e) from e
