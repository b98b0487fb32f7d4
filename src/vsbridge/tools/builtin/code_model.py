"""Tools answering symbol, project and outline queries from the code model."""

import logging
from abc import abstractmethod
from typing import Any

from vsbridge.codemodel.base import CodeModel
from vsbridge.path_translation import PathFormat, PathTranslator
from vsbridge.tools.base import Tool, ToolResult, optional_str, require_int, require_str
from vsbridge.types import InputSchema, SchemaProperty

logger = logging.getLogger(__name__)

WORKSPACE_UNAVAILABLE = "Workspace not available"
NO_SYMBOL_FOUND = "No symbol found at the specified location"


class CodeModelTool(Tool):
    """Base for tools backed by the code model.

    Incoming file paths may be in any format and are normalized to native
    before lookup; outgoing paths are rendered in ``output_format``.
    """

    def __init__(
        self,
        code_model: CodeModel | None,
        translator: PathTranslator,
        output_format: PathFormat = PathFormat.MOUNTED,
    ):
        self._code_model = code_model
        self._translator = translator
        self._output_format = output_format

    def _to_native(self, path: str) -> str:
        return self._translator.translate(path, PathFormat.AUTO, PathFormat.NATIVE) or path

    def _to_output(self, path: str | None) -> str | None:
        return self._translator.translate(path, PathFormat.NATIVE, self._output_format)

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        if self._code_model is None:
            logger.warning("missing workspace")
            return ToolResult.success(WORKSPACE_UNAVAILABLE)
        return await self._run(self._code_model, arguments)

    @abstractmethod
    async def _run(
        self, code_model: CodeModel, arguments: dict[str, Any]
    ) -> ToolResult: ...


class FindSymbolsTool(CodeModelTool):
    @property
    def name(self) -> str:
        return "find_symbols"

    @property
    def description(self) -> str:
        return "Find symbols in the current solution"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema(
            properties={
                "name": SchemaProperty(description="Symbol name to search for"),
                "kind": SchemaProperty(description="Symbol kind (optional)"),
            },
            required=("name",),
        )

    async def _run(self, code_model: CodeModel, arguments: dict[str, Any]) -> ToolResult:
        symbol_name = require_str(arguments, "name")
        symbol_kind = optional_str(arguments, "kind")
        logger.debug(f"Finding symbols: {symbol_name} (kind: {symbol_kind})")

        symbols = await code_model.find_symbols(symbol_name, symbol_kind or None)
        results = []
        for symbol in symbols:
            entry = symbol.to_wire()
            entry["filePath"] = self._to_output(symbol.file_path)
            results.append(entry)

        logger.debug(f"Found {len(results)} symbols matching {symbol_name}")
        return ToolResult.from_payload(results)


class SymbolAtLocationTool(CodeModelTool):
    @property
    def name(self) -> str:
        return "get_symbol_at_location"

    @property
    def description(self) -> str:
        return "Get symbol information at a specific location"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema(
            properties={
                "filePath": SchemaProperty(description="File path"),
                "line": SchemaProperty(type="integer", description="Line number (1-based)"),
                "column": SchemaProperty(
                    type="integer", description="Column number (1-based)"
                ),
            },
            required=("filePath", "line", "column"),
        )

    async def _run(self, code_model: CodeModel, arguments: dict[str, Any]) -> ToolResult:
        file_path = self._to_native(require_str(arguments, "filePath"))
        line = require_int(arguments, "line")
        column = require_int(arguments, "column")
        logger.debug(f"Getting symbol at {file_path}:{line}:{column}")

        symbol = await code_model.symbol_at(file_path, line, column)
        if symbol is None:
            logger.debug(f"No symbol found at {file_path}:{line}:{column}")
            return ToolResult.success(NO_SYMBOL_FOUND)

        return ToolResult.from_payload(symbol.to_wire())


class SolutionProjectsTool(CodeModelTool):
    @property
    def name(self) -> str:
        return "get_solution_projects"

    @property
    def description(self) -> str:
        return "Get all projects in the current solution"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema()

    async def _run(self, code_model: CodeModel, arguments: dict[str, Any]) -> ToolResult:
        projects = []
        for project in await code_model.list_projects():
            entry = project.to_wire()
            entry["filePath"] = self._to_output(project.file_path)
            entry["outputFilePath"] = self._to_output(project.output_file_path)
            projects.append(entry)

        logger.info(f"Solution has {len(projects)} projects")
        return ToolResult.from_payload(projects)


class DocumentOutlineTool(CodeModelTool):
    @property
    def name(self) -> str:
        return "get_document_outline"

    @property
    def description(self) -> str:
        return "Get outline/symbols of a document"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema(
            properties={"filePath": SchemaProperty(description="File path")},
            required=("filePath",),
        )

    async def _run(self, code_model: CodeModel, arguments: dict[str, Any]) -> ToolResult:
        file_path = self._to_native(require_str(arguments, "filePath"))
        logger.debug(f"Getting document outline for {file_path}")

        entries = await code_model.document_outline(file_path)
        logger.debug(f"Found {len(entries)} symbols in document {file_path}")
        return ToolResult.from_payload([entry.to_wire() for entry in entries])
