"""
OpenAPI parsing module: document loading and tool extraction.
"""

from .document import load_openapi_document
from .extract_tools import ToolExtractorService, extract_tools_from_api

__all__ = [
    "ToolExtractorService",
    "extract_tools_from_api",
    "load_openapi_document",
]
