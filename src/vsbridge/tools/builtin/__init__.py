"""Built-in tools."""

from vsbridge.codemodel.base import CodeModel
from vsbridge.path_translation import PathFormat, PathTranslator
from vsbridge.tools.base import Tool
from vsbridge.tools.builtin.code_model import (
    CodeModelTool,
    DocumentOutlineTool,
    FindSymbolsTool,
    SolutionProjectsTool,
    SymbolAtLocationTool,
)
from vsbridge.tools.builtin.paths import TranslatePathTool


def create_builtin_tools(
    code_model: CodeModel | None,
    translator: PathTranslator,
    output_format: PathFormat = PathFormat.MOUNTED,
) -> list[Tool]:
    """Create the tool catalog in ``tools/list`` order."""
    return [
        FindSymbolsTool(code_model, translator, output_format),
        SymbolAtLocationTool(code_model, translator, output_format),
        SolutionProjectsTool(code_model, translator, output_format),
        DocumentOutlineTool(code_model, translator, output_format),
        TranslatePathTool(translator),
    ]


__all__ = [
    "CodeModelTool",
    "DocumentOutlineTool",
    "FindSymbolsTool",
    "SolutionProjectsTool",
    "SymbolAtLocationTool",
    "TranslatePathTool",
    "create_builtin_tools",
]
