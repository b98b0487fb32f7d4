"""Bridge assembly: wires the components together once, at construction."""

import logging
from dataclasses import dataclass

from fastapi import FastAPI

from vsbridge.codemodel import CodeModel, ResourceCatalog, SnapshotCodeModel
from vsbridge.config import BridgeConfig
from vsbridge.path_translation import PathTranslator, parse_path_format
from vsbridge.rpc.broker import InProcessChannel
from vsbridge.rpc.engine import JsonRpcEngine
from vsbridge.server import ServerRunner, create_app
from vsbridge.tools import ToolRegistry
from vsbridge.tools.builtin import create_builtin_tools

logger = logging.getLogger(__name__)


@dataclass
class BridgeComponents:
    """All components of a running bridge.

    Gives direct access to each piece for hosts and tests that need more
    than the HTTP endpoint.
    """

    config: BridgeConfig
    translator: PathTranslator
    code_model: CodeModel | None
    resources: ResourceCatalog
    tool_registry: ToolRegistry
    engine: JsonRpcEngine
    app: FastAPI
    runner: ServerRunner

    def channel(self) -> InProcessChannel:
        """Create an in-process channel to the engine."""
        return InProcessChannel(self.engine)


def create_bridge(
    config: BridgeConfig,
    code_model: CodeModel | None = None,
) -> BridgeComponents:
    """Build the bridge from configuration.

    Args:
        config: Bridge configuration.
        code_model: Code model to serve. When None, the configured workspace
            snapshot is loaded if there is one; otherwise the tools answer
            "Workspace not available".

    Raises:
        FileNotFoundError: If the configured snapshot does not exist.
        CodeModelError: If the configured snapshot is invalid.
    """
    translator = PathTranslator()
    output_format = parse_path_format(config.paths.output_format)

    if code_model is None and config.workspace.snapshot is not None:
        logger.info(
            "workspace_snapshot_loading",
            extra={"snapshot.path": str(config.workspace.snapshot)},
        )
        code_model = SnapshotCodeModel.from_file(config.workspace.snapshot, translator)

    resources = ResourceCatalog(code_model, translator, output_format)
    tool_registry = ToolRegistry(
        create_builtin_tools(code_model, translator, output_format)
    )
    logger.info(f"Registered {len(tool_registry)} tools")

    engine = JsonRpcEngine(
        tool_registry,
        resources,
        server_name=config.server_name,
    )
    app = create_app(
        engine, max_concurrent_requests=config.server.max_concurrent_requests
    )
    runner = ServerRunner(
        app,
        host=config.server.host,
        port=config.server.port,
        shutdown_timeout=config.server.shutdown_timeout,
    )

    return BridgeComponents(
        config=config,
        translator=translator,
        code_model=code_model,
        resources=resources,
        tool_registry=tool_registry,
        engine=engine,
        app=app,
        runner=runner,
    )
