"""HTTP client for a running bridge."""

import itertools
import json
from typing import Any

import httpx

from vsbridge.rpc.broker import RPCCallError
from vsbridge.rpc.protocol import RPCRequest, RPCResponse

DEFAULT_URL = "http://localhost:3000/jsonrpc"
DEFAULT_TIMEOUT = 10.0  # seconds


class BridgeClient:
    """Async JSON-RPC client over ``POST /jsonrpc``.

    Usable as an async context manager; the underlying ``httpx.AsyncClient``
    is closed on exit.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> "BridgeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Post a raw request document and return the raw response document.

        Raises:
            ConnectionError: If the endpoint cannot be reached or does not
                answer with a JSON-RPC document.
        """
        try:
            response = await self._client.post(
                self.url,
                content=json.dumps(payload),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TransportError as e:
            raise ConnectionError(f"Cannot reach {self.url}: {e}") from e

        if response.status_code != 200:
            raise ConnectionError(
                f"Unexpected HTTP {response.status_code} from {self.url}"
            )
        try:
            return response.json()
        except ValueError as e:
            raise ConnectionError(f"Invalid JSON from {self.url}") from e

    async def call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Call a method and return its result.

        Raises:
            RPCCallError: If the server answers with an error.
            ConnectionError: If the endpoint cannot be reached.
        """
        request = RPCRequest(method=method, params=params or {}, id=next(self._ids))
        response = RPCResponse.from_dict(await self.request(request.to_dict()))
        if response.error:
            raise RPCCallError(
                code=response.error.code,
                message=response.error.message,
                data=response.error.data,
            )
        return response.result
