"""Abstract tool interface."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from vsbridge.types import CallToolResult, InputSchema, TextContent, ToolDefinition


class ToolError(Exception):
    """Base error for tool lookup and invocation."""


class ToolNotFoundError(ToolError, KeyError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ToolArgumentError(ToolError, ValueError):
    """A tool argument is missing or has the wrong type."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


def require_str(arguments: dict[str, Any], field: str) -> str:
    value = arguments.get(field)
    if not isinstance(value, str):
        raise ToolArgumentError(field, f"Missing or invalid '{field}' argument")
    return value


def optional_str(arguments: dict[str, Any], field: str) -> str | None:
    value = arguments.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ToolArgumentError(field, f"Invalid '{field}' argument")
    return value


def require_int(arguments: dict[str, Any], field: str) -> int:
    value = arguments.get(field)
    # bool is an int subclass but never a valid line/column
    if isinstance(value, bool) or not isinstance(value, int):
        raise ToolArgumentError(field, f"Missing or invalid '{field}' argument")
    return value


@dataclass
class ToolResult:
    """Result from tool execution."""

    content: str
    is_error: bool = False

    @classmethod
    def success(cls, content: str) -> "ToolResult":
        return cls(content=content)

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolResult":
        """Create a successful result carrying indented JSON text."""
        return cls(content=json.dumps(payload, indent=2))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=message, is_error=True)

    def to_call_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(text=self.content)],
            is_error=True if self.is_error else None,
        )


class Tool(ABC):
    """Abstract base class for tools exposed through ``tools/call``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this tool."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description shown in ``tools/list``."""
        ...

    @property
    @abstractmethod
    def input_schema(self) -> InputSchema:
        """Schema for tool input arguments."""
        ...

    @abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """Execute the tool with the given arguments.

        Raises:
            ToolArgumentError: If required arguments are missing or invalid.
        """
        ...

    def to_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
        )
