"""
Application configuration management.

Handles loading configuration from environment variables and config files.
"""

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from crud_mcp import __version__


class ApplicationSettings(BaseSettings):
    """Application configuration."""

    app_name: str = Field(default="CRUD MCP", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("app_env")
    @classmethod
    def validate_environment(cls, v: Any) -> str:
        allowed = {"development", "testing", "staging", "production"}
        v_str = str(v)
        if v_str not in allowed:
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return v_str

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = str(v).upper()
        if v not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return str(v)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class ServerSettings(BaseSettings):
    """MCP server configuration for src/crud_mcp/servers/crud/."""

    server_name: str = Field(default="crud-mcp", alias="MCP_SERVER_NAME")
    server_version: str = Field(default=__version__, alias="MCP_SERVER_VERSION")

    # Transport settings (stdio is what desktop clients spawn)
    transport: str = Field(default="stdio", alias="MCP_TRANSPORT")
    host: str = Field(default="127.0.0.1", alias="MCP_HOST")
    port: int = Field(default=3000, alias="MCP_PORT")
    path: str = Field(default="/mcp", alias="MCP_PATH")

    # Collection types exposed as URI-addressable resources (comma-separated in env)
    collections: Annotated[list[str], NoDecode] = Field(
        default=["users", "products", "orders"], alias="MCP_COLLECTIONS"
    )
    log_operations: bool = Field(default=False, alias="MCP_LOG_OPERATIONS")
    seed_file: str | None = Field(None, alias="MCP_SEED_FILE")

    # Host/Origin header allow-lists for the HTTP transport (comma-separated in env)
    allowed_hosts: Annotated[list[str] | None, NoDecode] = Field(
        None, alias="MCP_ALLOWED_HOSTS"
    )
    allowed_origins: Annotated[list[str] | None, NoDecode] = Field(
        None, alias="MCP_ALLOWED_ORIGINS"
    )

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: Any) -> str:
        allowed = {"http", "stdio", "sse"}
        if str(v) not in allowed:
            raise ValueError(f"MCP_TRANSPORT must be one of {allowed}")
        return str(v)

    @field_validator("collections", mode="before")
    @classmethod
    def parse_collections(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return list(v) if v else []

    @field_validator("allowed_hosts", "allowed_origins", mode="before")
    @classmethod
    def parse_allow_list(cls, v: Any) -> list[str] | None:
        if v is None:
            return None
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()] or None
        return list(v) or None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    application: ApplicationSettings = Field(default_factory=ApplicationSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)  # type: ignore[arg-type]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


def load_settings() -> Settings:
    """
    Load settings from environment variables and .env file.

    Returns:
        Settings: Configured settings instance
    """
    return Settings()


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get cached settings instance (singleton pattern).

    Returns:
        Settings: Cached settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
