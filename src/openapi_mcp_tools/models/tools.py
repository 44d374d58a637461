"""Models for extracted tool definitions and mapping diagnostics."""
from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import BasePydanticModel, DiagnosticKind, ParameterLocation


class SchemaDiagnostic(BasePydanticModel):
    """A non-fatal problem found while mapping a schema. The affected node was replaced by {"type": "object"}."""
    kind: DiagnosticKind
    message: str
    ref: Optional[str] = None
    title: Optional[str] = None

class ExecutionParameter(BasePydanticModel):
    """Where the executor places a resolved argument value in the outgoing request."""
    name: str
    in_: ParameterLocation = Field(..., alias="in")

class McpToolDefinition(BasePydanticModel):
    name: str = Field(..., pattern=r"^[A-Za-z0-9_-]+$", description="Unique tool name within one extraction run.")
    description: str
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema", description="JSON Schema for the combined parameters and request body.")
    method: str = Field(..., description="Lowercase HTTP method.")
    path_template: str = Field(..., alias="pathTemplate")
    parameters: List[Dict[str, Any]] = Field(default_factory=list, description="Raw OpenAPI parameter objects.")
    execution_parameters: List[ExecutionParameter] = Field(default_factory=list, alias="executionParameters")
    request_body_content_type: Optional[str] = Field(None, alias="requestBodyContentType")
    security_requirements: List[Dict[str, Any]] = Field(default_factory=list, alias="securityRequirements")
    operation_id: str = Field(..., alias="operationId", description="Sanitized base name before collision suffixing.")

    def to_dict(self) -> Dict[str, Any]:
        """Wire form with camelCase keys; an absent request body content type is omitted."""
        data = self.model_dump(by_alias=True)
        if data.get("requestBodyContentType") is None:
            data.pop("requestBodyContentType", None)
        return data

class ExtractionResult(BasePydanticModel):
    tools: List[McpToolDefinition] = Field(default_factory=list)
    diagnostics: List[SchemaDiagnostic] = Field(default_factory=list)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)
