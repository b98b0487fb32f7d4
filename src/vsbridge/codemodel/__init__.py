"""Code model: the source-analysis workspace the tools query.

Public API:
- CodeModel: async protocol implemented by workspace backends
- SnapshotCodeModel: code model served from a JSON workspace snapshot
- ResourceCatalog: ``vs://`` resources over a code model
"""

from vsbridge.codemodel.base import (
    CodeModel,
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
from vsbridge.codemodel.resources import ResourceCatalog, ResourceNotFoundError
from vsbridge.codemodel.snapshot import SnapshotCodeModel, WorkspaceSnapshot

__all__ = [
    # Interface
    "CodeModel",
    "CodeModelError",
    "DocumentNotFoundError",
    "ProjectNotFoundError",
    # Records
    "DocumentInfo",
    "OutlineEntry",
    "ProjectInfo",
    "SolutionInfo",
    "SymbolDetail",
    "SymbolInfo",
    # Implementations
    "ResourceCatalog",
    "ResourceNotFoundError",
    "SnapshotCodeModel",
    "WorkspaceSnapshot",
]
