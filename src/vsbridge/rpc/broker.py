"""In-process channel exposing the engine without a network hop.

Hosts embedding the bridge (and tests) talk to the same dispatcher as HTTP
clients, with identical envelopes and error codes.
"""

import itertools
from typing import Any

from vsbridge.rpc.engine import JsonRpcEngine
from vsbridge.rpc.protocol import RPCRequest


class RPCCallError(Exception):
    """RPC call returned an error response."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data


class InProcessChannel:
    """Broker-style client bound directly to a :class:`JsonRpcEngine`."""

    def __init__(self, engine: JsonRpcEngine):
        self._engine = engine
        self._ids = itertools.count(1)

    async def request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send a raw request document and return the raw response document."""
        response = await self._engine.handle(payload)
        return response.to_dict()

    async def call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Call a method and return its result.

        Raises:
            RPCCallError: If the engine answers with an error.
        """
        request = RPCRequest(method=method, params=params or {}, id=next(self._ids))
        response = await self._engine.handle(request.to_dict())
        if response.error:
            raise RPCCallError(
                code=response.error.code,
                message=response.error.message,
                data=response.error.data,
            )
        return response.result

    async def initialize(self, client_name: str = "in-process") -> Any:
        return await self.call("initialize", {"clientInfo": {"name": client_name}})

    async def list_tools(self) -> list[dict[str, Any]]:
        result = await self.call("tools/list")
        return result["tools"]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        return await self.call("tools/call", {"name": name, "arguments": arguments or {}})

    async def list_resources(self) -> list[dict[str, Any]]:
        result = await self.call("resources/list")
        return result["resources"]

    async def read_resource(self, uri: str) -> Any:
        return await self.call("resources/read", {"uri": uri})
