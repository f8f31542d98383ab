"""Server configuration using pydantic-settings."""

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefix MCP_TOOLBOX_)."""

    model_config = SettingsConfigDict(
        env_prefix="MCP_TOOLBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server identity reported during MCP initialization
    server_name: str = "example-mcp-server"
    server_version: str = "1.0.0"

    # Transport
    transport: Literal["stdio", "http"] = "stdio"
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    # Filesystem tool sandbox (empty = temp dir + working directory)
    allowed_directories: list[Path] = []

    # Replace raw exception text in internal error responses
    redact_internal_errors: bool = True

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def resolved_allowed_directories(self) -> list[Path]:
        """Allow-list for the file tool, falling back to the defaults."""
        directories = self.allowed_directories or [
            Path(tempfile.gettempdir()),
            Path.cwd(),
        ]
        return [Path(d).expanduser().resolve() for d in directories]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
