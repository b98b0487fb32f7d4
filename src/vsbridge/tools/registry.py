"""Tool registry for managing available tools."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from vsbridge.tools.base import Tool, ToolNotFoundError, ToolResult
from vsbridge.types import ToolDefinition

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Immutable table of tools, built once at startup.

    Holds no per-request state and can be shared across concurrent requests.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        registered: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in registered:
                raise ValueError(f"Tool '{tool.name}' already registered")
            registered[tool.name] = tool
            logger.debug(f"Registered tool: {tool.name}")
        self._tools = registered
        self._definitions = tuple(tool.to_definition() for tool in registered.values())

    def get(self, name: str) -> Tool:
        if name not in self._tools:
            raise ToolNotFoundError(name)
        return self._tools[name]

    def has(self, name: str) -> bool:
        return name in self._tools

    @property
    def names(self) -> list[str]:
        return list(self._tools.keys())

    def get_definitions(self) -> tuple[ToolDefinition, ...]:
        return self._definitions

    async def call(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch a call to the named tool.

        Raises:
            ToolNotFoundError: If no tool has that name.
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Unknown tool: {name}")
            raise ToolNotFoundError(name)

        logger.debug(f"Executing tool: {name}")
        try:
            return await tool.execute(arguments)
        except Exception:
            logger.error(f"Tool execution failed for {name}")
            raise

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())
