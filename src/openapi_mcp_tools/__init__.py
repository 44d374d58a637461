"""OpenAPI MCP Tools - turns OpenAPI 3 documents into MCP tool definitions.

Walks every operation of an OpenAPI document, maps its parameter and request
body schemas to JSON Schema and emits one uniquely named tool definition per
operation, ready to be served or executed by an MCP host.
"""

__version__ = "0.1.0"

from .config import Config
from .models import McpToolDefinition
from .parser.extract_tools import ToolExtractorService, extract_tools_from_api
from .schema_gen import generate_input_schema_and_details, map_openapi_schema_to_json_schema

__all__ = [
    "Config",
    "McpToolDefinition",
    "ToolExtractorService",
    "extract_tools_from_api",
    "generate_input_schema_and_details",
    "map_openapi_schema_to_json_schema",
]
