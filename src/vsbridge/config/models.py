"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """Configuration for the HTTP transport."""

    enabled: bool = True
    host: str = "localhost"
    port: int = Field(default=3000, ge=0, le=65535)
    # Seconds to wait for in-flight requests when stopping
    shutdown_timeout: float = Field(default=5.0, gt=0)
    # None = unbounded, matching the original accept-and-spawn behavior
    max_concurrent_requests: int | None = Field(default=None, ge=1)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}jsonrpc"


class PathsConfig(BaseModel):
    """Configuration for paths placed into responses."""

    # Format for paths returned to clients; code-model paths are native
    output_format: Literal["native", "mounted", "uri"] = "mounted"


class WorkspaceConfig(BaseModel):
    """Configuration for the code model backing the tools."""

    # JSON workspace snapshot exported from the IDE; None = no workspace
    snapshot: Path | None = None


class ConfigError(Exception):
    """Configuration error."""

    pass


class BridgeConfig(BaseModel):
    """Root configuration model."""

    server_name: str = "vsbridge"
    server: ServerConfig = Field(default_factory=ServerConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
