"""Tests for configuration module."""

import json

from openapi_mcp_tools.config import Config


def test_config_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("OPENAPI_MCP_TOOLS_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("OPENAPI_MCP_TOOLS_EXTRACTION__MERGE_PATH_PARAMETERS", "false")
    monkeypatch.setenv("OPENAPI_MCP_TOOLS_EXTRACTION__FAIL_ON_EMPTY", "true")
    monkeypatch.setenv("OPENAPI_MCP_TOOLS_TOOL_VERSION", "9.9.9")

    config = Config()

    assert config.logging.level == "DEBUG"
    assert config.extraction.merge_path_parameters is False
    assert config.extraction.fail_on_empty is True
    assert config.tool_version == "9.9.9"

def test_config_defaults():
    """Test default configuration values."""
    config = Config()

    assert config.logging.level == "INFO"
    assert config.logging.format == "json"
    assert config.logging.file is None

    assert config.extraction.merge_path_parameters is True
    assert config.extraction.log_diagnostics is True
    assert config.extraction.fail_on_empty is False

    assert config.tool_version == "0.1.0"


def test_config_from_file(tmp_path):
    """Test loading configuration from a JSON file."""
    config_content = {
        "logging": {
            "level": "WARNING",
            "format": "console",
            "file": "/tmp/openapi-mcp-tools.log"
        },
        "extraction": {
            "log_diagnostics": False
        }
    }
    config_file = tmp_path / "test_config.json"
    with open(config_file, "w") as f:
        json.dump(config_content, f)

    config = Config.from_file(config_file)

    assert config.logging.level == "WARNING"
    assert config.logging.format == "console"
    # Pydantic converts string path to Path object if field type is Path
    assert str(config.logging.file) == "/tmp/openapi-mcp-tools.log"
    assert config.extraction.log_diagnostics is False

    # Check that unspecified fields retain defaults
    assert config.extraction.merge_path_parameters is True


def test_partial_config_from_file(tmp_path):
    """Test loading partial configuration from a file, defaults should apply."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, "w") as f:
        json.dump({"extraction": {"fail_on_empty": True}}, f)

    config = Config.from_file(config_file)

    assert config.extraction.fail_on_empty is True
    assert config.logging.level == "INFO" # Default
