"""MCP result payloads carried in JSON-RPC ``result`` members.

Each built-in method returns one of these models; the engine serializes
them with camelCase aliases.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PROTOCOL_VERSION = "2025-03-26"


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Tool definitions
# ---------------------------------------------------------------------------


class SchemaProperty(WireModel):
    type: str = "string"
    description: str = ""


class InputSchema(WireModel):
    type: Literal["object"] = "object"
    properties: dict[str, SchemaProperty] = Field(default_factory=dict)
    required: tuple[str, ...] = ()


class ToolDefinition(WireModel):
    name: str
    description: str
    input_schema: InputSchema = Field(default_factory=InputSchema)


# ---------------------------------------------------------------------------
# Method results
# ---------------------------------------------------------------------------


class ToolCapabilities(WireModel):
    list_tools: bool = True
    call_tool: bool = True


class ResourceCapabilities(WireModel):
    list_resources: bool = True
    read_resource: bool = True


class ServerCapabilities(WireModel):
    tools: ToolCapabilities = Field(default_factory=ToolCapabilities)
    resources: ResourceCapabilities = Field(default_factory=ResourceCapabilities)


class ServerInfo(WireModel):
    name: str
    version: str


class InitializeResult(WireModel):
    protocol_version: str = PROTOCOL_VERSION
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo


class ToolsListResult(WireModel):
    tools: list[ToolDefinition]


class TextContent(WireModel):
    type: Literal["text"] = "text"
    text: str


class CallToolResult(WireModel):
    content: list[TextContent]
    # Omitted from the wire unless set
    is_error: bool | None = None


class ResourceDescriptor(WireModel):
    uri: str
    mime_type: str
    description: str


class ResourcesListResult(WireModel):
    resources: list[ResourceDescriptor]


class ResourceContents(WireModel):
    uri: str
    mime_type: str
    text: str


class ReadResourceResult(WireModel):
    contents: list[ResourceContents]
