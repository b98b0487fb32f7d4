"""JSON-RPC layer shared by the HTTP transport and the in-process channel.

Public API:
- JsonRpcEngine: envelope validation and MCP method dispatch
- InProcessChannel: call the engine directly, without HTTP

Protocol:
- RPCRequest, RPCResponse, RPCError: JSON-RPC 2.0 message types
- ErrorCode: standard JSON-RPC error codes
"""

from vsbridge.rpc.broker import InProcessChannel, RPCCallError
from vsbridge.rpc.engine import JsonRpcEngine
from vsbridge.rpc.protocol import ErrorCode, RPCError, RPCRequest, RPCResponse

__all__ = [
    # Engine
    "JsonRpcEngine",
    # Channel
    "InProcessChannel",
    "RPCCallError",
    # Protocol
    "ErrorCode",
    "RPCError",
    "RPCRequest",
    "RPCResponse",
]
