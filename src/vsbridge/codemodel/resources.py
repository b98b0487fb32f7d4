"""Resource catalog exposing the code model under ``vs://`` URIs.

URIs:
- ``vs://solution``: solution summary (JSON)
- ``vs://project/<id>``: project details and documents (JSON)
- ``vs://document/<id>``: document source text
"""

import json
import logging
from pathlib import PureWindowsPath

from vsbridge.codemodel.base import CodeModel, CodeModelError
from vsbridge.path_translation import PathFormat, PathTranslator
from vsbridge.types import (
    ReadResourceResult,
    ResourceContents,
    ResourceDescriptor,
    ResourcesListResult,
)

logger = logging.getLogger(__name__)

SOLUTION_URI = "vs://solution"
PROJECT_URI_PREFIX = "vs://project/"
DOCUMENT_URI_PREFIX = "vs://document/"

# Documents listed per project in resources/list
MAX_DOCUMENTS_PER_PROJECT = 10


class ResourceNotFoundError(CodeModelError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Resource not found: {uri}")


def _file_name(path: str | None) -> str:
    return PureWindowsPath(path).name if path else ""


class ResourceCatalog:
    """Lists and reads code-model resources, translating paths for clients."""

    def __init__(
        self,
        code_model: CodeModel | None,
        translator: PathTranslator,
        output_format: PathFormat = PathFormat.MOUNTED,
    ):
        self._code_model = code_model
        self._translator = translator
        self._output_format = output_format

    def _out(self, path: str | None) -> str | None:
        return self._translator.translate(path, PathFormat.NATIVE, self._output_format)

    async def list_resources(self) -> ResourcesListResult:
        logger.debug("Listing available resources")
        if self._code_model is None:
            return ResourcesListResult(resources=[])

        resources = [
            ResourceDescriptor(
                uri=SOLUTION_URI,
                mime_type="application/json",
                description="Solution information",
            )
        ]
        for project in await self._code_model.list_projects():
            resources.append(
                ResourceDescriptor(
                    uri=f"{PROJECT_URI_PREFIX}{project.id}",
                    mime_type="application/json",
                    description=f"Project: {project.name}",
                )
            )
            documents = await self._code_model.list_documents(project.id)
            for document in documents[:MAX_DOCUMENTS_PER_PROJECT]:
                resources.append(
                    ResourceDescriptor(
                        uri=f"{DOCUMENT_URI_PREFIX}{document.id}",
                        mime_type="text/plain",
                        description=f"File: {_file_name(document.file_path)}",
                    )
                )

        logger.debug(f"Found {len(resources)} resources")
        return ResourcesListResult(resources=resources)

    async def read_resource(self, uri: str) -> ReadResourceResult:
        """Read one resource.

        Raises:
            ResourceNotFoundError: If the URI names nothing in the code model.
        """
        logger.debug(f"Reading resource: {uri}")
        if self._code_model is None:
            raise ResourceNotFoundError(uri)

        try:
            if uri == SOLUTION_URI:
                contents = await self._read_solution(uri)
            elif uri.startswith(PROJECT_URI_PREFIX):
                contents = await self._read_project(uri, uri[len(PROJECT_URI_PREFIX) :])
            elif uri.startswith(DOCUMENT_URI_PREFIX):
                contents = await self._read_document(
                    uri, uri[len(DOCUMENT_URI_PREFIX) :]
                )
            else:
                raise ResourceNotFoundError(uri)
        except ResourceNotFoundError:
            logger.warning(f"Resource not found: {uri}")
            raise
        except CodeModelError as e:
            logger.warning(f"Resource not found: {uri}")
            raise ResourceNotFoundError(uri) from e

        return ReadResourceResult(contents=[contents])

    async def _read_solution(self, uri: str) -> ResourceContents:
        assert self._code_model is not None
        solution = await self._code_model.get_solution()
        projects = []
        for project in await self._code_model.list_projects():
            projects.append(
                {
                    "name": project.name,
                    "id": project.id,
                    "language": project.language,
                    "documentsCount": project.documents_count,
                }
            )
        info = {
            "name": PureWindowsPath(solution.file_path).stem
            if solution.file_path
            else solution.name,
            "path": self._out(solution.file_path),
            "projects": projects,
        }
        return ResourceContents(
            uri=uri, mime_type="application/json", text=json.dumps(info, indent=2)
        )

    async def _read_project(self, uri: str, project_id: str) -> ResourceContents:
        assert self._code_model is not None
        project = await self._code_model.get_project(project_id)
        documents = await self._code_model.list_documents(project_id)
        info = {
            "name": project.name,
            "language": project.language,
            "path": self._out(project.file_path),
            "assemblyName": project.assembly_name,
            "documents": [
                {"name": d.name, "path": self._out(d.file_path), "id": d.id}
                for d in documents
            ],
        }
        return ResourceContents(
            uri=uri, mime_type="application/json", text=json.dumps(info, indent=2)
        )

    async def _read_document(self, uri: str, document_id: str) -> ResourceContents:
        assert self._code_model is not None
        text = await self._code_model.read_document(document_id)
        return ResourceContents(uri=uri, mime_type="text/plain", text=text)
