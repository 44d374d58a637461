"""
Pydantic models for OpenAPI MCP Tools.
"""
from .common import (
    BasePydanticModel,
    DiagnosticKind,
    HttpMethod,
    ParameterLocation,
)
from .tools import (
    ExecutionParameter,
    ExtractionResult,
    McpToolDefinition,
    SchemaDiagnostic,
)

__all__ = [
    "BasePydanticModel",
    "DiagnosticKind",
    "ExecutionParameter",
    "ExtractionResult",
    "HttpMethod",
    "McpToolDefinition",
    "ParameterLocation",
    "SchemaDiagnostic",
]
