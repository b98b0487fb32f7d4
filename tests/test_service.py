"""Tests for bridge assembly."""

import pytest

from vsbridge.codemodel import CodeModelError, SnapshotCodeModel
from vsbridge.config import BridgeConfig
from vsbridge.service import create_bridge


class TestCreateBridge:
    def test_defaults_without_workspace(self):
        bridge = create_bridge(BridgeConfig())
        assert bridge.code_model is None
        assert len(bridge.tool_registry) == 5
        assert bridge.runner.port == 3000
        assert bridge.runner.host == "localhost"
        assert bridge.app.state.engine is bridge.engine

    def test_loads_configured_snapshot(self, snapshot_file):
        config = BridgeConfig.model_validate({"workspace": {"snapshot": str(snapshot_file)}})
        bridge = create_bridge(config)
        assert isinstance(bridge.code_model, SnapshotCodeModel)

    def test_explicit_code_model_wins(self, code_model, tmp_path):
        config = BridgeConfig.model_validate(
            {"workspace": {"snapshot": str(tmp_path / "ignored.json")}}
        )
        bridge = create_bridge(config, code_model=code_model)
        assert bridge.code_model is code_model

    def test_missing_snapshot(self, tmp_path):
        config = BridgeConfig.model_validate(
            {"workspace": {"snapshot": str(tmp_path / "missing.json")}}
        )
        with pytest.raises(FileNotFoundError):
            create_bridge(config)

    def test_invalid_snapshot(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]")
        config = BridgeConfig.model_validate({"workspace": {"snapshot": str(path)}})
        with pytest.raises(CodeModelError):
            create_bridge(config)

    def test_server_settings_flow_through(self):
        config = BridgeConfig.model_validate(
            {
                "server_name": "contoso",
                "server": {"host": "127.0.0.1", "port": 0, "max_concurrent_requests": 3},
            }
        )
        bridge = create_bridge(config)
        assert bridge.engine.server_info.name == "contoso"
        assert bridge.app.state.limiter is not None
        assert bridge.runner.base_url == "http://127.0.0.1:0/"

    @pytest.mark.asyncio
    async def test_output_format_flows_to_tools(self, code_model):
        config = BridgeConfig.model_validate({"paths": {"output_format": "uri"}})
        bridge = create_bridge(config, code_model=code_model)
        result = await bridge.channel().call_tool("find_symbols", {"name": "Main"})
        assert '"file:///C:/src/Contoso/App/Program.cs"' in result["content"][0]["text"]
