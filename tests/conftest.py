"""Shared test fixtures and factories."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from vsbridge.codemodel import ResourceCatalog, SnapshotCodeModel, WorkspaceSnapshot
from vsbridge.config.paths import get_vsbridge_home
from vsbridge.path_translation import PathFormat, PathTranslator
from vsbridge.rpc import InProcessChannel, JsonRpcEngine
from vsbridge.tools import ToolRegistry, create_builtin_tools

# =============================================================================
# Environment isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point VSBRIDGE_HOME at a temp dir and keep config discovery local."""
    home = tmp_path / "home"
    monkeypatch.setenv("VSBRIDGE_HOME", str(home))
    for name in (
        "VSBRIDGE_HOST",
        "VSBRIDGE_PORT",
        "VSBRIDGE_SNAPSHOT",
        "VSBRIDGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # ./vsbridge.toml is a default config location
    monkeypatch.chdir(tmp_path)
    get_vsbridge_home.cache_clear()
    yield home
    get_vsbridge_home.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects on the root and uvicorn loggers."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    for name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True


# =============================================================================
# Workspace snapshot
# =============================================================================

SOLUTION_PATH = "C:\\src\\Contoso\\Contoso.sln"
WIDGET_PATH = "C:\\src\\Contoso\\Core\\Widget.cs"
PROGRAM_PATH = "C:\\src\\Contoso\\App\\Program.cs"

WIDGET_SOURCE = """namespace Contoso.Core
{
    public class Widget
    {
        private int _speed = 3;

        /// <summary>Spin the widget.</summary>
        public void Spin()
        {
            _speed++;
        }
    }
}
"""


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    """A two-project solution exported from the IDE."""
    return {
        "solution": {"name": "Contoso", "filePath": SOLUTION_PATH},
        "projects": [
            {
                "name": "Contoso.Core",
                "language": "C#",
                "filePath": "C:\\src\\Contoso\\Core\\Contoso.Core.csproj",
                "assemblyName": "Contoso.Core",
                "outputFilePath": "C:\\src\\Contoso\\Core\\bin\\Debug\\Contoso.Core.dll",
                "metadataReferences": 12,
                "compilationOptions": "DynamicallyLinkedLibrary",
                "documents": [
                    {
                        "name": "Widget.cs",
                        "filePath": WIDGET_PATH,
                        "text": WIDGET_SOURCE,
                        "symbols": [
                            {
                                "name": "Widget",
                                "kind": "Class",
                                "line": 3,
                                "column": 5,
                                "endLine": 12,
                                "endColumn": 6,
                                "accessibility": "Public",
                                "containingNamespace": "Contoso.Core",
                                "documentation": "A widget.",
                            },
                            {
                                "name": "Spin",
                                "kind": "Method",
                                "line": 8,
                                "column": 9,
                                "endLine": 11,
                                "endColumn": 10,
                                "accessibility": "Public",
                                "containingType": "Widget",
                                "containingNamespace": "Contoso.Core",
                                "signature": "void Widget.Spin()",
                                "documentation": "Spin the widget.",
                            },
                            {
                                "name": "_speed",
                                "kind": "Field",
                                "line": 5,
                                "column": 9,
                                "endLine": 5,
                                "endColumn": 32,
                                "accessibility": "Private",
                                "containingType": "Widget",
                            },
                        ],
                    }
                ],
            },
            {
                "id": "Contoso.App",
                "name": "Contoso.App",
                "filePath": "C:\\src\\Contoso\\App\\Contoso.App.csproj",
                "assemblyName": "Contoso.App",
                "outputFilePath": "C:\\src\\Contoso\\App\\bin\\Debug\\Contoso.App.exe",
                "projectReferences": 1,
                "documents": [
                    {
                        "name": "Program.cs",
                        "filePath": PROGRAM_PATH,
                        "text": "class Program\n{\n    static void Main() { }\n}\n",
                        "symbols": [
                            {
                                "name": "Program",
                                "kind": "Class",
                                "line": 1,
                                "column": 1,
                                "endLine": 4,
                                "endColumn": 2,
                                "accessibility": "Internal",
                            },
                            {
                                "name": "Main",
                                "kind": "Method",
                                "line": 3,
                                "column": 5,
                                "endLine": 3,
                                "endColumn": 27,
                                "accessibility": "Private",
                                "containingType": "Program",
                            },
                        ],
                    }
                ],
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_data: dict[str, Any]) -> Path:
    """Write the sample snapshot to disk."""
    path = tmp_path / "workspace.json"
    path.write_text(json.dumps(snapshot_data))
    return path


# =============================================================================
# Components
# =============================================================================


@pytest.fixture
def translator() -> PathTranslator:
    return PathTranslator()


@pytest.fixture
def code_model(
    snapshot_data: dict[str, Any], translator: PathTranslator
) -> SnapshotCodeModel:
    return SnapshotCodeModel(WorkspaceSnapshot.model_validate(snapshot_data), translator)


@pytest.fixture
def registry(code_model: SnapshotCodeModel, translator: PathTranslator) -> ToolRegistry:
    return ToolRegistry(create_builtin_tools(code_model, translator, PathFormat.MOUNTED))


@pytest.fixture
def resources(
    code_model: SnapshotCodeModel, translator: PathTranslator
) -> ResourceCatalog:
    return ResourceCatalog(code_model, translator, PathFormat.MOUNTED)


@pytest.fixture
def engine(registry: ToolRegistry, resources: ResourceCatalog) -> JsonRpcEngine:
    return JsonRpcEngine(registry, resources, server_version="9.9.9")


@pytest.fixture
def empty_engine(translator: PathTranslator) -> JsonRpcEngine:
    """Engine with no workspace loaded."""
    return JsonRpcEngine(
        ToolRegistry(create_builtin_tools(None, translator)),
        ResourceCatalog(None, translator),
    )


@pytest.fixture
def channel(engine: JsonRpcEngine) -> InProcessChannel:
    return InProcessChannel(engine)


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})


@pytest.fixture
def config_toml_content() -> str:
    """Valid TOML config content."""
    return """
server_name = "contoso-bridge"

[server]
host = "127.0.0.1"
port = 4100
max_concurrent_requests = 8

[paths]
output_format = "uri"
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str) -> Path:
    """Create a temporary config file."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_toml_content)
    return config_path
