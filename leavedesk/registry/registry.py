"""
Tool registry.

A process-wide, insertion-ordered table of tool descriptors and the callables
behind them. It is populated once at startup by ``build_registry`` and only
read afterwards, so concurrent lookups need no locking.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Tuple

from .descriptors import ToolDescriptor
from .errors import DuplicateToolError, SignatureMismatchError, UnknownToolError

logger = logging.getLogger(__name__)

ToolFn = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class RegisteredTool:
    """A descriptor paired with the callable that implements it."""

    descriptor: ToolDescriptor
    fn: ToolFn


def _callable_parameters(fn: ToolFn) -> list[str]:
    return [
        p.name
        for p in inspect.signature(fn).parameters.values()
        if p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
    ]


class ToolRegistry:
    """In-memory tool registry preserving registration order."""

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def register(self, descriptor: ToolDescriptor, fn: ToolFn) -> None:
        """
        Register *fn* under ``descriptor.name``.

        Raises:
            DuplicateToolError: the name is already taken.
            SignatureMismatchError: the descriptor's parameter names do not
                match the callable's parameters exactly and in order.
        """
        if descriptor.name in self._tools:
            raise DuplicateToolError(descriptor.name)

        declared = descriptor.parameter_names
        actual = _callable_parameters(fn)
        if declared != actual:
            raise SignatureMismatchError(descriptor.name, declared, actual)

        self._tools[descriptor.name] = RegisteredTool(descriptor=descriptor, fn=fn)
        logger.info("Registered tool: %s", descriptor.name)

    def lookup(self, name: str) -> RegisteredTool:
        """Return the registered tool or raise ``UnknownToolError``."""
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_all(self) -> Tuple[ToolDescriptor, ...]:
        """Descriptors in registration order."""
        return tuple(t.descriptor for t in self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(
    definitions: Iterable[Tuple[ToolDescriptor, ToolFn]],
) -> ToolRegistry:
    """
    Build a registry from ``(descriptor, callable)`` pairs.

    All-or-nothing: the first registration error propagates and no registry
    is returned.
    """
    registry = ToolRegistry()
    for descriptor, fn in definitions:
        registry.register(descriptor, fn)
    logger.info("Tool registry ready: %d tool(s)", len(registry))
    return registry
