"""JSON-RPC engine routing MCP methods to tools and resources."""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from vsbridge import __version__
from vsbridge.codemodel.resources import ResourceCatalog
from vsbridge.rpc.protocol import (
    JSONRPC_VERSION,
    ErrorCode,
    RPCResponse,
    extract_id,
)
from vsbridge.tools.registry import ToolRegistry
from vsbridge.types import InitializeResult, ServerInfo, ToolsListResult, WireModel

logger = logging.getLogger(__name__)

# Type for RPC method handlers
RPCHandler = Callable[[dict[str, Any]], Awaitable[WireModel]]


class InvalidParamsError(ValueError):
    """Method parameters are missing or have the wrong shape."""


def _require_param(params: dict[str, Any], name: str) -> str:
    value = params.get(name)
    if not isinstance(value, str):
        raise InvalidParamsError(f"Missing or invalid '{name}' parameter")
    return value


class JsonRpcEngine:
    """Parses, validates and dispatches JSON-RPC 2.0 requests.

    Stateless across requests: every call to :meth:`process` or
    :meth:`handle` goes Parsed -> Validated -> Dispatched -> Responded and
    always produces a response. Failures inside a method are logged with
    their traceback and reported to the client as a generic internal error.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        resources: ResourceCatalog,
        *,
        server_name: str = "vsbridge",
        server_version: str = __version__,
    ):
        self._registry = registry
        self._resources = resources
        self._server_info = ServerInfo(name=server_name, version=server_version)
        self._methods: dict[str, RPCHandler] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
            "resources/list": self._list_resources,
            "resources/read": self._read_resource,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    @property
    def server_info(self) -> ServerInfo:
        return self._server_info

    async def process(self, data: bytes | str) -> RPCResponse:
        """Process a raw request body."""
        try:
            payload = json.loads(data)
        except (ValueError, RecursionError) as e:
            logger.error(f"Failed to parse JSON request: {e}")
            return RPCResponse.error_response(None, ErrorCode.PARSE_ERROR)
        return await self.handle(payload)

    async def handle(self, payload: Any) -> RPCResponse:
        """Process an already-decoded request document."""
        request_id = extract_id(payload)

        if not isinstance(payload, dict) or payload.get("jsonrpc") != JSONRPC_VERSION:
            return RPCResponse.error_response(request_id, ErrorCode.INVALID_REQUEST)

        method = payload.get("method")
        if not isinstance(method, str):
            return RPCResponse.error_response(request_id, ErrorCode.INVALID_REQUEST)

        handler = self._methods.get(method)
        if handler is None:
            logger.debug(f"Method not found: {method}")
            return RPCResponse.error_response(request_id, ErrorCode.METHOD_NOT_FOUND)

        try:
            params = payload.get("params")
            if params is None:
                params = {}
            elif not isinstance(params, dict):
                raise InvalidParamsError("'params' must be an object")
            result = await handler(params)
        except Exception:
            logger.exception("rpc_method_failed", extra={"rpc.method": method})
            return RPCResponse.error_response(request_id, ErrorCode.INTERNAL_ERROR)

        return RPCResponse.success(request_id, result.to_wire())

    async def _initialize(self, params: dict[str, Any]) -> InitializeResult:
        client = params.get("clientInfo")
        logger.info("mcp_initialized", extra={"client": client})
        return InitializeResult(server_info=self._server_info)

    async def _list_tools(self, params: dict[str, Any]) -> ToolsListResult:
        return ToolsListResult(tools=list(self._registry.get_definitions()))

    async def _call_tool(self, params: dict[str, Any]) -> WireModel:
        name = _require_param(params, "name")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParamsError("'arguments' must be an object")

        result = await self._registry.call(name, arguments)
        return result.to_call_result()

    async def _list_resources(self, params: dict[str, Any]) -> WireModel:
        return await self._resources.list_resources()

    async def _read_resource(self, params: dict[str, Any]) -> WireModel:
        uri = _require_param(params, "uri")
        return await self._resources.read_resource(uri)
