"""Typed records returned by a code model.

All paths in these records are native-format; callers translate them before
handing them to clients. Serialized with camelCase aliases.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CodeModelRecord(BaseModel):
    """Base for code-model records: camelCase on the wire, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SolutionInfo(CodeModelRecord):
    name: str
    file_path: str | None = None


class ProjectInfo(CodeModelRecord):
    id: str
    name: str
    language: str = "C#"
    file_path: str | None = None
    assembly_name: str | None = None
    output_file_path: str | None = None
    documents_count: int = 0
    analyzer_references: int = 0
    project_references: int = 0
    metadata_references: int = 0
    compilation_options: str | None = None


class DocumentInfo(CodeModelRecord):
    id: str
    name: str
    file_path: str | None = None
    project_id: str


class SymbolInfo(CodeModelRecord):
    """A symbol declaration found by name."""

    name: str
    kind: str
    file_path: str | None = None
    line: int
    column: int
    containing_type: str | None = None
    accessibility: str = "NotApplicable"


class SymbolDetail(CodeModelRecord):
    """Full description of the symbol at a source position."""

    name: str
    kind: str
    containing_type: str | None = None
    containing_namespace: str | None = None
    documentation: str | None = None
    signature: str | None = None
    accessibility: str = "NotApplicable"


class OutlineEntry(CodeModelRecord):
    """A declared symbol with its full source span (1-based)."""

    name: str
    kind: str
    line: int
    column: int
    end_line: int
    end_column: int
    accessibility: str = "NotApplicable"
    containing_type: str | None = None
