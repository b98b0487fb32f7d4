"""Tests for the in-process channel."""

import pytest

from vsbridge.rpc import ErrorCode, RPCCallError


class TestInProcessChannel:
    @pytest.mark.asyncio
    async def test_request_returns_raw_envelope(self, channel):
        response = await channel.request(
            {"jsonrpc": "2.0", "method": "tools/list", "params": {}, "id": "abc"}
        )
        assert response["jsonrpc"] == "2.0"
        assert response["id"] == "abc"
        assert "error" not in response

    @pytest.mark.asyncio
    async def test_request_reports_protocol_errors(self, channel):
        response = await channel.request({"jsonrpc": "2.0", "method": "nope", "id": 1})
        assert response["error"]["code"] == ErrorCode.METHOD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_initialize(self, channel):
        result = await channel.initialize()
        assert result["serverInfo"]["name"] == "vsbridge"

    @pytest.mark.asyncio
    async def test_list_tools(self, channel):
        tools = await channel.list_tools()
        assert "translate_path" in {t["name"] for t in tools}

    @pytest.mark.asyncio
    async def test_call_tool(self, channel):
        result = await channel.call_tool(
            "translate_path",
            {"path": "/mnt/c/a", "sourceFormat": "Mounted", "targetFormat": "Native"},
        )
        assert result["content"][0]["text"] == "C:\\a"

    @pytest.mark.asyncio
    async def test_call_raises_on_error(self, channel):
        with pytest.raises(RPCCallError) as exc_info:
            await channel.call_tool("no_such_tool")
        assert exc_info.value.code == ErrorCode.INTERNAL_ERROR
        assert str(exc_info.value) == "Internal error"

    @pytest.mark.asyncio
    async def test_resources(self, channel):
        resources = await channel.list_resources()
        assert resources[0]["uri"] == "vs://solution"
        result = await channel.read_resource("vs://solution")
        assert result["contents"][0]["mimeType"] == "application/json"
