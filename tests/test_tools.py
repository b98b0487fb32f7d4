"""Tests for the tool registry and built-in tools."""

import json

import pytest

from vsbridge.path_translation import InvalidPathFormatError, PathFormat
from vsbridge.tools import (
    Tool,
    ToolArgumentError,
    ToolNotFoundError,
    ToolRegistry,
    ToolResult,
    create_builtin_tools,
)
from vsbridge.tools.builtin import TranslatePathTool
from vsbridge.tools.builtin.code_model import NO_SYMBOL_FOUND, WORKSPACE_UNAVAILABLE
from vsbridge.types import InputSchema


class EchoTool(Tool):
    def __init__(self, name: str = "echo"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return "Echo the message back"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema()

    async def execute(self, arguments):
        return ToolResult.success(arguments.get("message", ""))


class FailingTool(EchoTool):
    async def execute(self, arguments):
        raise RuntimeError("boom")


class TestToolResult:
    def test_success_factory(self):
        result = ToolResult.success("output")
        assert result.content == "output"
        assert result.is_error is False

    def test_error_factory(self):
        result = ToolResult.error("something went wrong")
        assert result.is_error is True

    def test_from_payload_indents_json(self):
        result = ToolResult.from_payload({"a": 1})
        assert result.content == '{\n  "a": 1\n}'

    def test_call_result_omits_is_error_on_success(self):
        wire = ToolResult.success("ok").to_call_result().to_wire()
        assert wire == {"content": [{"type": "text", "text": "ok"}]}

    def test_call_result_marks_errors(self):
        wire = ToolResult.error("bad").to_call_result().to_wire()
        assert wire["isError"] is True


class TestToolRegistry:
    def test_lookup(self):
        tool = EchoTool()
        registry = ToolRegistry([tool])
        assert registry.get("echo") is tool
        assert registry.has("echo")
        assert "echo" in registry
        assert len(registry) == 1
        assert registry.names == ["echo"]
        assert list(registry) == [tool]

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            ToolRegistry([EchoTool(), EchoTool()])

    def test_get_unknown_tool(self):
        registry = ToolRegistry([EchoTool()])
        with pytest.raises(ToolNotFoundError, match="Unknown tool: nope"):
            registry.get("nope")

    def test_definitions_are_built_once(self):
        registry = ToolRegistry([EchoTool(), EchoTool("other")])
        definitions = registry.get_definitions()
        assert [d.name for d in definitions] == ["echo", "other"]
        assert registry.get_definitions() is definitions

    @pytest.mark.asyncio
    async def test_call_dispatches(self):
        registry = ToolRegistry([EchoTool()])
        result = await registry.call("echo", {"message": "hi"})
        assert result.content == "hi"

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self):
        registry = ToolRegistry([])
        with pytest.raises(ToolNotFoundError):
            await registry.call("missing", {})

    @pytest.mark.asyncio
    async def test_call_propagates_tool_errors(self):
        registry = ToolRegistry([FailingTool()])
        with pytest.raises(RuntimeError, match="boom"):
            await registry.call("echo", {})


class TestBuiltinCatalog:
    def test_catalog_order(self, registry):
        assert registry.names == [
            "find_symbols",
            "get_symbol_at_location",
            "get_solution_projects",
            "get_document_outline",
            "translate_path",
        ]

    def test_translate_path_schema(self, registry):
        definition = registry.get("translate_path").to_definition().to_wire()
        assert definition["inputSchema"]["type"] == "object"
        assert definition["inputSchema"]["required"] == [
            "path",
            "sourceFormat",
            "targetFormat",
        ]
        assert set(definition["inputSchema"]["properties"]) == {
            "path",
            "sourceFormat",
            "targetFormat",
        }

    def test_symbol_location_uses_integer_positions(self, registry):
        schema = registry.get("get_symbol_at_location").input_schema
        assert schema.properties["line"].type == "integer"
        assert schema.properties["column"].type == "integer"
        assert schema.properties["filePath"].type == "string"

    def test_solution_projects_takes_no_arguments(self, registry):
        schema = registry.get("get_solution_projects").input_schema.to_wire()
        assert schema == {"type": "object", "properties": {}, "required": []}


class TestTranslatePathTool:
    @pytest.mark.asyncio
    async def test_translates(self, translator):
        tool = TranslatePathTool(translator)
        result = await tool.execute(
            {"path": "C:\\a\\b", "sourceFormat": "Native", "targetFormat": "Mounted"}
        )
        assert result.content == "/mnt/c/a/b"
        assert not result.is_error

    @pytest.mark.asyncio
    async def test_auto_source_and_legacy_names(self, translator):
        tool = TranslatePathTool(translator)
        result = await tool.execute(
            {"path": "/mnt/d/x", "sourceFormat": "Auto", "targetFormat": "Windows"}
        )
        assert result.content == "D:\\x"

    @pytest.mark.asyncio
    async def test_empty_path(self, translator):
        tool = TranslatePathTool(translator)
        with pytest.raises(ToolArgumentError, match="empty"):
            await tool.execute(
                {"path": "", "sourceFormat": "Native", "targetFormat": "Uri"}
            )

    @pytest.mark.asyncio
    async def test_missing_argument(self, translator):
        tool = TranslatePathTool(translator)
        with pytest.raises(ToolArgumentError) as exc_info:
            await tool.execute({"path": "C:\\a", "sourceFormat": "Native"})
        assert exc_info.value.field == "targetFormat"

    @pytest.mark.asyncio
    async def test_invalid_format_name(self, translator):
        tool = TranslatePathTool(translator)
        with pytest.raises(ToolArgumentError, match="Invalid source format"):
            await tool.execute(
                {"path": "C:\\a", "sourceFormat": "posix", "targetFormat": "Uri"}
            )

    @pytest.mark.asyncio
    async def test_auto_target_rejected(self, translator):
        tool = TranslatePathTool(translator)
        with pytest.raises(InvalidPathFormatError):
            await tool.execute(
                {"path": "C:\\a", "sourceFormat": "Native", "targetFormat": "Auto"}
            )


class TestCodeModelTools:
    @pytest.mark.asyncio
    async def test_find_symbols_translates_paths(self, registry):
        result = await registry.call("find_symbols", {"name": "Widget"})
        symbols = json.loads(result.content)
        assert symbols == [
            {
                "name": "Widget",
                "kind": "Class",
                "filePath": "/mnt/c/src/Contoso/Core/Widget.cs",
                "line": 3,
                "column": 5,
                "containingType": None,
                "accessibility": "Public",
            }
        ]

    @pytest.mark.asyncio
    async def test_find_symbols_kind_filter(self, registry):
        result = await registry.call("find_symbols", {"name": "Spin", "kind": "method"})
        assert len(json.loads(result.content)) == 1

        result = await registry.call("find_symbols", {"name": "Spin", "kind": "Class"})
        assert json.loads(result.content) == []

    @pytest.mark.asyncio
    async def test_find_symbols_requires_name(self, registry):
        with pytest.raises(ToolArgumentError):
            await registry.call("find_symbols", {})

    @pytest.mark.asyncio
    async def test_symbol_at_location_accepts_any_path_format(self, registry):
        for path in (
            "C:\\src\\Contoso\\Core\\Widget.cs",
            "/mnt/c/src/Contoso/Core/Widget.cs",
            "file:///C:/src/Contoso/Core/Widget.cs",
        ):
            result = await registry.call(
                "get_symbol_at_location", {"filePath": path, "line": 10, "column": 13}
            )
            detail = json.loads(result.content)
            assert detail["name"] == "Spin"
            assert detail["signature"] == "void Widget.Spin()"
            assert detail["containingType"] == "Widget"

    @pytest.mark.asyncio
    async def test_symbol_at_location_nothing_there(self, registry):
        result = await registry.call(
            "get_symbol_at_location",
            {"filePath": "C:\\src\\Contoso\\Core\\Widget.cs", "line": 1, "column": 1},
        )
        assert result.content == NO_SYMBOL_FOUND

    @pytest.mark.asyncio
    async def test_symbol_at_location_rejects_non_integer_line(self, registry):
        with pytest.raises(ToolArgumentError):
            await registry.call(
                "get_symbol_at_location",
                {"filePath": "C:\\src\\Contoso\\Core\\Widget.cs", "line": "10", "column": 1},
            )

    @pytest.mark.asyncio
    async def test_solution_projects(self, registry):
        result = await registry.call("get_solution_projects", {})
        projects = json.loads(result.content)
        assert [p["name"] for p in projects] == ["Contoso.Core", "Contoso.App"]
        core = projects[0]
        assert core["id"] == "Contoso.Core__Core_Contoso_Core_csproj"
        assert core["filePath"] == "/mnt/c/src/Contoso/Core/Contoso.Core.csproj"
        assert core["outputFilePath"] == (
            "/mnt/c/src/Contoso/Core/bin/Debug/Contoso.Core.dll"
        )
        assert core["documentsCount"] == 1
        assert core["metadataReferences"] == 12

    @pytest.mark.asyncio
    async def test_document_outline_sorted_by_position(self, registry):
        result = await registry.call(
            "get_document_outline", {"filePath": "/mnt/c/src/Contoso/Core/Widget.cs"}
        )
        outline = json.loads(result.content)
        assert [entry["name"] for entry in outline] == ["Widget", "_speed", "Spin"]
        assert outline[2]["endLine"] == 11
        assert outline[2]["endColumn"] == 10

    @pytest.mark.asyncio
    async def test_output_format_is_configurable(self, code_model, translator):
        registry = ToolRegistry(
            create_builtin_tools(code_model, translator, PathFormat.NATIVE)
        )
        result = await registry.call("find_symbols", {"name": "Main"})
        assert json.loads(result.content)[0]["filePath"] == (
            "C:\\src\\Contoso\\App\\Program.cs"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "arguments"),
        [
            ("find_symbols", {"name": "Widget"}),
            ("get_symbol_at_location", {"filePath": "C:\\a.cs", "line": 1, "column": 1}),
            ("get_solution_projects", {}),
            ("get_document_outline", {"filePath": "C:\\a.cs"}),
        ],
    )
    async def test_without_workspace(self, translator, name, arguments):
        registry = ToolRegistry(create_builtin_tools(None, translator))
        result = await registry.call(name, arguments)
        assert result.content == WORKSPACE_UNAVAILABLE
