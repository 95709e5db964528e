"""Immutable metadata describing a tool and its parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class ParamType(str, Enum):
    """Wire types a tool parameter may declare."""

    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"

    @property
    def json_type(self) -> str:
        # JSON Schema calls floats "number"
        return "number" if self is ParamType.FLOAT else self.value


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """One named, typed tool parameter.

    ``name`` is the stable key callers send; ``description`` is display text.
    ``allow_empty`` only applies to string parameters and lets the tool itself
    decide what an empty value means.
    """

    name: str
    type: ParamType
    description: str = ""
    required: bool = True
    allow_empty: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "description": self.description,
            "required": self.required,
        }

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": self.type.json_type,
            "description": self.description,
        }
        if self.type is ParamType.STRING and not self.allow_empty:
            schema["minLength"] = 1
        return schema


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Name, description and ordered parameter list of a tool."""

    name: str
    description: str
    parameters: Tuple[ParameterDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the descriptor stays hashable
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]

    def to_dict(self) -> Dict[str, Any]:
        """Shape used by the REST mirror's tool listing."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
        }

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the MCP ``inputSchema`` field."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }
