"""
Schema generation module for OpenAPI MCP Tools.

Maps OpenAPI 3 schema objects to JSON Schema and assembles the input schema
of a tool from an operation's parameters and request body.
"""

from .input_schema import InputSchemaDetails, generate_input_schema_and_details
from .schema_mapper import map_openapi_schema_to_json_schema

__all__ = [
    "InputSchemaDetails",
    "generate_input_schema_and_details",
    "map_openapi_schema_to_json_schema",
]
