"""Pydantic models for server configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerSettings(BaseSettings):
    """Server settings loaded from environment variables."""

    app_name: str = "MCP Sequential Thinking Server"
    service_name: str = "mcp-sequential-thinking"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    # "sse" keeps the long-lived event stream layout; "http" is streamable HTTP
    transport: Literal["sse", "http"] = "sse"
    sse_path: str = "/sse"
    http_path: str = "/mcp"
    log_level: str = "INFO"
    environment: str = "production"
    debug_mode: bool = False
    app_log_dir: str = Field(default="", description="Directory for app.jsonl; defaults to ./logs")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "env_prefix": "",
    }

    @property
    def is_development(self) -> bool:
        return self.debug_mode or self.environment.lower() in {"dev", "development"}


__all__ = ["ServerSettings"]
