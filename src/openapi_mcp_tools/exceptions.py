"""
Custom exceptions for OpenAPI MCP Tools.
"""
from pathlib import Path
from typing import Optional, Union


class OpenAPIToolsError(Exception):
    """Base class for all OpenAPI MCP Tools errors."""
    pass

class DocumentLoadError(OpenAPIToolsError):
    """Raised when an OpenAPI document cannot be read or decoded."""
    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"Failed to load OpenAPI document '{path}': {message}")
        self.path = str(path)
        self.original_message = message

class InvalidDocumentError(DocumentLoadError):
    """Raised when a decoded document is not an OpenAPI object (e.g. a JSON list)."""
    def __init__(self, path: Union[str, Path], found_type: Optional[str] = None):
        message = "Top-level value must be a JSON object"
        if found_type:
            message += f", got {found_type}"
        super().__init__(path, message)
        self.found_type = found_type
