"""Code model interface consumed by the tools and resource catalog."""

from typing import Protocol, runtime_checkable

from vsbridge.codemodel.models import (
    DocumentInfo,
    OutlineEntry,
    ProjectInfo,
    SolutionInfo,
    SymbolDetail,
    SymbolInfo,
)


class CodeModelError(Exception):
    """Base error for code model lookups."""


class ProjectNotFoundError(CodeModelError):
    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class DocumentNotFoundError(CodeModelError):
    def __init__(self, document: str) -> None:
        self.document = document
        super().__init__(f"Document not found: {document}")


@runtime_checkable
class CodeModel(Protocol):
    """Source-analysis workspace: projects, documents and symbols.

    Implementations may be slow (the IDE computes semantic models on
    demand), so every operation is async. Paths given to and returned from
    a code model are native-format.
    """

    async def get_solution(self) -> SolutionInfo: ...

    async def list_projects(self) -> list[ProjectInfo]: ...

    async def get_project(self, project_id: str) -> ProjectInfo: ...

    async def list_documents(self, project_id: str) -> list[DocumentInfo]: ...

    async def get_document(self, document_id: str) -> DocumentInfo: ...

    async def read_document(self, document_id: str) -> str: ...

    async def find_symbols(
        self, name: str, kind: str | None = None
    ) -> list[SymbolInfo]: ...

    async def symbol_at(
        self, file_path: str, line: int, column: int
    ) -> SymbolDetail | None: ...

    async def document_outline(self, file_path: str) -> list[OutlineEntry]: ...
