"""Tool system for vsbridge."""

from vsbridge.tools.base import (
    Tool,
    ToolArgumentError,
    ToolError,
    ToolNotFoundError,
    ToolResult,
)
from vsbridge.tools.builtin import create_builtin_tools
from vsbridge.tools.registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolArgumentError",
    "ToolError",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolResult",
    "create_builtin_tools",
]
