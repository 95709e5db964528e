"""Per-call request and result types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(slots=True)
class InvocationRequest:
    """A single inbound tool call."""

    tool_name: str
    # Raw client value: usually a mapping, but None or anything else may arrive
    arguments: Any = None


@dataclass(frozen=True, slots=True)
class Success:
    value: Any

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "success", "value": self.value}


@dataclass(frozen=True, slots=True)
class Failure:
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "error", "message": self.message}


InvocationResult = Union[Success, Failure]
