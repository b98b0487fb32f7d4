"""Code model backed by a JSON workspace snapshot.

The IDE exports its solution (projects, documents, declared symbols with
spans) to a JSON file; this module serves code-model queries from it so the
bridge can run without a live IDE attached.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from vsbridge.codemodel.base import (
    CodeModelError,
    DocumentNotFoundError,
    ProjectNotFoundError,
)
from vsbridge.codemodel.models import (
    DocumentInfo,
    OutlineEntry,
    ProjectInfo,
    SolutionInfo,
    SymbolDetail,
    SymbolInfo,
)
from vsbridge.path_translation import PathTranslator

logger = logging.getLogger(__name__)


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SnapshotSymbol(_SnapshotModel):
    name: str
    kind: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    end_line: int | None = None
    end_column: int | None = None
    accessibility: str = "NotApplicable"
    containing_type: str | None = None
    containing_namespace: str | None = None
    signature: str | None = None
    documentation: str | None = None

    @property
    def start(self) -> tuple[int, int]:
        return (self.line, self.column)

    @property
    def end(self) -> tuple[int, int]:
        return (self.end_line or self.line, self.end_column or self.column)


class SnapshotDocument(_SnapshotModel):
    id: str | None = None
    name: str
    file_path: str | None = None
    text: str = ""
    symbols: list[SnapshotSymbol] = []


class SnapshotProject(_SnapshotModel):
    id: str | None = None
    name: str
    language: str = "C#"
    file_path: str | None = None
    assembly_name: str | None = None
    output_file_path: str | None = None
    analyzer_references: int = 0
    project_references: int = 0
    metadata_references: int = 0
    compilation_options: str | None = None
    documents: list[SnapshotDocument] = []


class SnapshotSolution(_SnapshotModel):
    name: str
    file_path: str | None = None


class WorkspaceSnapshot(_SnapshotModel):
    solution: SnapshotSolution
    projects: list[SnapshotProject] = []


class SnapshotCodeModel:
    """In-memory code model over a :class:`WorkspaceSnapshot`.

    Projects and documents without an explicit id get a composite id
    (``name__relative_path``) derived from their path relative to the
    solution file.
    """

    def __init__(self, snapshot: WorkspaceSnapshot, translator: PathTranslator):
        self._snapshot = snapshot
        self._translator = translator

        self._projects: dict[str, ProjectInfo] = {}
        self._project_docs: dict[str, list[str]] = {}
        self._documents: dict[str, tuple[DocumentInfo, SnapshotDocument]] = {}
        self._documents_by_path: dict[str, str] = {}

        solution_path = snapshot.solution.file_path
        for project in snapshot.projects:
            project_id = project.id or self._derive_id(
                project.name, project.file_path, solution_path
            )
            if project_id in self._projects:
                raise CodeModelError(f"Duplicate project id in snapshot: {project_id}")
            self._projects[project_id] = ProjectInfo(
                id=project_id,
                name=project.name,
                language=project.language,
                file_path=project.file_path,
                assembly_name=project.assembly_name,
                output_file_path=project.output_file_path,
                documents_count=len(project.documents),
                analyzer_references=project.analyzer_references,
                project_references=project.project_references,
                metadata_references=project.metadata_references,
                compilation_options=project.compilation_options,
            )
            doc_ids: list[str] = []
            for document in project.documents:
                document_id = document.id or self._derive_id(
                    document.name, document.file_path, solution_path
                )
                if document_id in self._documents:
                    raise CodeModelError(
                        f"Duplicate document id in snapshot: {document_id}"
                    )
                info = DocumentInfo(
                    id=document_id,
                    name=document.name,
                    file_path=document.file_path,
                    project_id=project_id,
                )
                self._documents[document_id] = (info, document)
                if document.file_path:
                    self._documents_by_path[document.file_path.lower()] = document_id
                doc_ids.append(document_id)
            self._project_docs[project_id] = doc_ids

        logger.debug(
            f"Loaded snapshot with {len(self._projects)} projects, "
            f"{len(self._documents)} documents"
        )

    @classmethod
    def from_file(cls, path: Path, translator: PathTranslator) -> "SnapshotCodeModel":
        """Load a snapshot from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            CodeModelError: If the file is not a valid snapshot.
        """
        raw = Path(path).expanduser().read_text(encoding="utf-8")
        try:
            snapshot = WorkspaceSnapshot.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise CodeModelError(f"Invalid workspace snapshot {path}: {e}") from e
        return cls(snapshot, translator)

    def _derive_id(
        self, name: str, file_path: str | None, solution_path: str | None
    ) -> str:
        if file_path and solution_path:
            return self._translator.create_composite_id(name, file_path, solution_path)
        return name

    def _document_for_path(self, file_path: str) -> tuple[DocumentInfo, SnapshotDocument]:
        document_id = self._documents_by_path.get(file_path.lower())
        if document_id is None:
            logger.warning(f"Document not found: {file_path}")
            raise DocumentNotFoundError(file_path)
        return self._documents[document_id]

    async def get_solution(self) -> SolutionInfo:
        solution = self._snapshot.solution
        return SolutionInfo(name=solution.name, file_path=solution.file_path)

    async def list_projects(self) -> list[ProjectInfo]:
        return list(self._projects.values())

    async def get_project(self, project_id: str) -> ProjectInfo:
        try:
            return self._projects[project_id]
        except KeyError:
            raise ProjectNotFoundError(project_id) from None

    async def list_documents(self, project_id: str) -> list[DocumentInfo]:
        if project_id not in self._project_docs:
            raise ProjectNotFoundError(project_id)
        return [self._documents[doc_id][0] for doc_id in self._project_docs[project_id]]

    async def get_document(self, document_id: str) -> DocumentInfo:
        try:
            return self._documents[document_id][0]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    async def read_document(self, document_id: str) -> str:
        try:
            return self._documents[document_id][1].text
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    async def find_symbols(self, name: str, kind: str | None = None) -> list[SymbolInfo]:
        results: list[SymbolInfo] = []
        for info, document in self._documents.values():
            for symbol in document.symbols:
                if symbol.name != name:
                    continue
                if kind and symbol.kind.lower() != kind.lower():
                    continue
                results.append(
                    SymbolInfo(
                        name=symbol.name,
                        kind=symbol.kind,
                        file_path=info.file_path,
                        line=symbol.line,
                        column=symbol.column,
                        containing_type=symbol.containing_type,
                        accessibility=symbol.accessibility,
                    )
                )
        return results

    async def symbol_at(
        self, file_path: str, line: int, column: int
    ) -> SymbolDetail | None:
        _, document = self._document_for_path(file_path)
        position = (line, column)
        containing = [s for s in document.symbols if s.start <= position <= s.end]
        if not containing:
            return None

        # Nested spans: the innermost declaration starts last
        symbol = max(containing, key=lambda s: s.start)
        return SymbolDetail(
            name=symbol.name,
            kind=symbol.kind,
            containing_type=symbol.containing_type,
            containing_namespace=symbol.containing_namespace,
            documentation=symbol.documentation,
            signature=symbol.signature or symbol.name,
            accessibility=symbol.accessibility,
        )

    async def document_outline(self, file_path: str) -> list[OutlineEntry]:
        _, document = self._document_for_path(file_path)
        entries = [
            OutlineEntry(
                name=symbol.name,
                kind=symbol.kind,
                line=symbol.line,
                column=symbol.column,
                end_line=symbol.end[0],
                end_column=symbol.end[1],
                accessibility=symbol.accessibility,
                containing_type=symbol.containing_type,
            )
            for symbol in document.symbols
        ]
        return sorted(entries, key=lambda e: (e.line, e.column))
