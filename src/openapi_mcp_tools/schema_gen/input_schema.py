"""
Builds the input schema of one tool from an OpenAPI operation: declared
parameters plus the request body, merged into a single JSON Schema object.
"""
from typing import Any, Dict, List, Optional, Tuple

import structlog
from pydantic import BaseModel, Field

from ..models.common import ParameterLocation
from ..models.tools import SchemaDiagnostic
from .schema_mapper import JsonSchema, map_openapi_schema_to_json_schema

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPES = ("multipart/form-data", "multipart/mixed") # Checked in this order
FILE_FORMATS = ("binary", "base64")
FILE_OR_URL_FORMAT = "file-or-url"
FILE_FIELD_NOTE = "(Can be a file path or URL - content will be downloaded automatically)"
DEFAULT_JSON_BODY_DESCRIPTION = "The JSON request body."
REQUEST_BODY_PROPERTY = "requestBody"

_LOCATIONS = {location.value for location in ParameterLocation}


class InputSchemaDetails(BaseModel):
    input_schema: Dict[str, Any]
    parameters: List[Dict[str, Any]] = Field(default_factory=list)
    request_body_content_type: Optional[str] = None


def _parameter_key(param: Dict[str, Any]) -> Tuple[Any, Any]:
    name, location = param.get("name"), param.get("in")
    if not isinstance(name, str) or not isinstance(location, str):
        # Malformed entries never override each other.
        return id(param), None
    return name, location

def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []

def _collect_parameters(
    operation: Dict[str, Any],
    path_parameters: Optional[List[Any]],
) -> List[Dict[str, Any]]:
    """Path-item parameters first, each replaced in place by an operation parameter with the same name and location."""
    op_params = [p for p in _as_list(operation.get("parameters")) if isinstance(p, dict) and "$ref" not in p]
    inherited = [p for p in _as_list(path_parameters) if isinstance(p, dict) and "$ref" not in p]
    if not inherited:
        return op_params

    overrides = {_parameter_key(p): p for p in op_params}
    merged: List[Dict[str, Any]] = []
    for param in inherited:
        merged.append(overrides.pop(_parameter_key(param), param))
    merged.extend(p for p in op_params if _parameter_key(p) in overrides)
    return merged

def _content_schema(content: Dict[str, Any], content_type: str) -> Optional[JsonSchema]:
    media_type = content.get(content_type)
    if not isinstance(media_type, dict):
        return None
    schema = media_type.get("schema")
    return schema if isinstance(schema, (dict, bool)) else None

def _is_file_field(field_schema: Dict[str, Any]) -> bool:
    return field_schema.get("type") == "string" and field_schema.get("format") in FILE_FORMATS

def _as_file_or_url(field_schema: Dict[str, Any]) -> Dict[str, Any]:
    processed = dict(field_schema)
    processed["description"] = f"{processed.get('description') or ''} {FILE_FIELD_NOTE}".strip()
    processed["type"] = "string"
    processed["format"] = FILE_OR_URL_FORMAT
    return processed


def generate_input_schema_and_details(
    operation: Dict[str, Any],
    security_requirements: List[Dict[str, Any]],
    security_schemes: Dict[str, Any],
    *,
    diagnostics: Optional[List[SchemaDiagnostic]] = None,
    path_parameters: Optional[List[Any]] = None,
) -> InputSchemaDetails:
    """
    Generates the input schema and parameter details for one operation.

    Request bodies are resolved in priority order: application/json (nested
    under `requestBody`), multipart (fields flattened to top-level
    properties), then any other content type as an opaque string.
    """
    properties: Dict[str, JsonSchema] = {}
    required: List[str] = []

    all_parameters = _collect_parameters(operation, path_parameters)
    parameters: List[Dict[str, Any]] = []
    for param in all_parameters:
        name = param.get("name")
        if isinstance(name, str) and name and isinstance(param.get("in"), str) and param["in"] in _LOCATIONS:
            parameters.append(param)

        schema = param.get("schema")
        if not isinstance(name, str) or not name or not isinstance(schema, (dict, bool)):
            logger.debug("Skipping parameter without name or schema.", parameter_name=name, location=param.get("in"))
            continue

        param_schema = map_openapi_schema_to_json_schema(schema, diagnostics=diagnostics)
        if isinstance(param_schema, dict) and not param_schema.get("description") and param.get("description"):
            param_schema["description"] = param["description"]

        properties[name] = param_schema
        if param.get("required"):
            required.append(name)

    request_body_content_type: Optional[str] = None
    request_body = operation.get("requestBody")

    if isinstance(request_body, dict) and "$ref" not in request_body:
        content = request_body.get("content") if isinstance(request_body.get("content"), dict) else {}
        json_schema = _content_schema(content, JSON_CONTENT_TYPE)
        multipart_type = next(
            (ct for ct in MULTIPART_CONTENT_TYPES if _content_schema(content, ct) is not None),
            None,
        )

        if json_schema is not None:
            request_body_content_type = JSON_CONTENT_TYPE
            body_schema = map_openapi_schema_to_json_schema(json_schema, diagnostics=diagnostics)
            if isinstance(body_schema, dict):
                body_schema["description"] = (
                    request_body.get("description")
                    or body_schema.get("description")
                    or DEFAULT_JSON_BODY_DESCRIPTION
                )
            properties[REQUEST_BODY_PROPERTY] = body_schema
            if request_body.get("required"):
                required.append(REQUEST_BODY_PROPERTY)

        elif multipart_type is not None:
            request_body_content_type = multipart_type
            multipart_schema = map_openapi_schema_to_json_schema(_content_schema(content, multipart_type), diagnostics=diagnostics)

            if isinstance(multipart_schema, dict) and isinstance(multipart_schema.get("properties"), dict):
                for field_name, field_schema in multipart_schema["properties"].items():
                    if isinstance(field_schema, dict) and _is_file_field(field_schema):
                        properties[field_name] = _as_file_or_url(field_schema)
                    else:
                        properties[field_name] = field_schema

                if isinstance(multipart_schema.get("required"), list):
                    required.extend(multipart_schema["required"])

        elif content:
            content_type = next(iter(content))
            request_body_content_type = content_type
            properties[REQUEST_BODY_PROPERTY] = {
                "type": "string",
                "description": request_body.get("description") or f"Request body (content type: {content_type})",
            }
            if request_body.get("required"):
                required.append(REQUEST_BODY_PROPERTY)
    elif request_body is not None:
        logger.debug("Skipping request body that is a reference or not an object.", operation_id=operation.get("operationId"))

    scheme_names = {name for req in security_requirements if isinstance(req, dict) for name in req}
    unknown_schemes = scheme_names - set(security_schemes)
    if unknown_schemes:
        # Executor will not be able to attach credentials for these.
        logger.debug(
            "Security requirement references undeclared schemes.",
            operation_id=operation.get("operationId"),
            unknown_schemes=sorted(unknown_schemes),
        )

    input_schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        input_schema["required"] = required

    return InputSchemaDetails(
        input_schema=input_schema,
        parameters=parameters,
        request_body_content_type=request_body_content_type,
    )
