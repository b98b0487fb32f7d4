"""Path translation tool."""

import logging
from typing import Any

from vsbridge.path_translation import (
    InvalidPathFormatError,
    PathTranslationError,
    PathTranslator,
    parse_path_format,
)
from vsbridge.tools.base import Tool, ToolArgumentError, ToolResult, require_str
from vsbridge.types import InputSchema, SchemaProperty

logger = logging.getLogger(__name__)


class TranslatePathTool(Tool):
    """Translate a path between native, mounted and URI formats."""

    def __init__(self, translator: PathTranslator):
        self._translator = translator

    @property
    def name(self) -> str:
        return "translate_path"

    @property
    def description(self) -> str:
        return "Translate a path between native, mounted and URI formats"

    @property
    def input_schema(self) -> InputSchema:
        return InputSchema(
            properties={
                "path": SchemaProperty(description="The path to translate"),
                "sourceFormat": SchemaProperty(
                    description="Source format: 'Native', 'Mounted', 'Uri' or 'Auto'"
                ),
                "targetFormat": SchemaProperty(
                    description="Target format: 'Native', 'Mounted' or 'Uri'"
                ),
            },
            required=("path", "sourceFormat", "targetFormat"),
        )

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        path = require_str(arguments, "path")
        source_text = require_str(arguments, "sourceFormat")
        target_text = require_str(arguments, "targetFormat")

        if not path:
            raise ToolArgumentError("path", "Path cannot be null or empty")

        try:
            source = parse_path_format(source_text)
        except InvalidPathFormatError as e:
            raise ToolArgumentError("sourceFormat", f"Invalid source format: {e}") from e
        try:
            target = parse_path_format(target_text)
        except InvalidPathFormatError as e:
            raise ToolArgumentError("targetFormat", f"Invalid target format: {e}") from e

        logger.debug(
            f"Translating path {path} from {source.value} to {target.value}"
        )
        result = self._translator.try_translate(path, source, target)
        if not result.ok:
            logger.error(f"Path translation failed: {result.error}")
        translated = result.unwrap()

        if not translated:
            raise PathTranslationError(f"Failed to translate path: {path}")

        return ToolResult.success(translated)
