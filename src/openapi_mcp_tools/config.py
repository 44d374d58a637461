"""Configuration management for OpenAPI MCP Tools."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")
    file: Optional[Path] = Field(default=None, description="Log file path")

class ExtractionConfig(BaseModel):
    """Configuration for tool extraction from OpenAPI documents."""

    merge_path_parameters: bool = Field(default=True, description="Include path-item level parameters in every operation of that path. Operation parameters with the same name and location win.")
    log_diagnostics: bool = Field(default=True, description="Log schema mapping diagnostics (unresolved $ref, cycles) as warnings.")
    fail_on_empty: bool = Field(default=False, description="Treat a document that yields no tools as a CLI failure.")


class Config(BaseSettings):
    """Main configuration. Loads from environment variables prefixed with OPENAPI_MCP_TOOLS_."""

    model_config = SettingsConfigDict(
        env_prefix='OPENAPI_MCP_TOOLS_',
        env_nested_delimiter='__', # e.g., OPENAPI_MCP_TOOLS_LOGGING__LEVEL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    tool_version: str = Field(default="0.1.0", description="Version reported by the CLI and in logs.")

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        This does not layer with environment variables.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
