"""
Maps OpenAPI 3 schema objects to JSON Schema.

The mapping is pure: the input document is never mutated and problems are
reported through an optional diagnostics list instead of being logged here.
"""
from typing import Any, Dict, List, Optional, Set, Union

from ..models.common import DiagnosticKind
from ..models.tools import SchemaDiagnostic

JsonSchema = Union[Dict[str, Any], bool]

# OpenAPI-only keywords with no JSON Schema meaning.
OPENAPI_ONLY_KEYWORDS = (
    "nullable",
    "example",
    "xml",
    "externalDocs",
    "deprecated",
    "readOnly",
    "writeOnly",
)

def _generic_object() -> Dict[str, Any]:
    return {"type": "object"}

def _report(diagnostics: Optional[List[SchemaDiagnostic]], diagnostic: SchemaDiagnostic) -> None:
    if diagnostics is not None:
        diagnostics.append(diagnostic)

def _has_type(json_schema: Dict[str, Any], type_name: str) -> bool:
    # Nullable nodes carry a type list such as ["object", "null"].
    schema_type = json_schema.get("type")
    if isinstance(schema_type, list):
        return type_name in schema_type
    return schema_type == type_name

def _apply_nullable(json_schema: Dict[str, Any]) -> None:
    schema_type = json_schema.get("type")
    if isinstance(schema_type, list):
        if "null" not in schema_type:
            json_schema["type"] = [*schema_type, "null"]
    elif isinstance(schema_type, str):
        json_schema["type"] = [schema_type, "null"]
    elif not schema_type:
        json_schema["type"] = "null"


def map_openapi_schema_to_json_schema(
    schema: JsonSchema,
    seen: Optional[Set[int]] = None,
    diagnostics: Optional[List[SchemaDiagnostic]] = None,
) -> JsonSchema:
    """
    Maps an OpenAPI schema (or reference, or boolean schema) to JSON Schema.

    - `$ref` objects are never followed; they degrade to {"type": "object"}.
    - A node that is its own ancestor degrades to {"type": "object"}. `seen`
      holds the ids of the nodes on the current recursion path only, so a node
      shared by two sibling paths is mapped twice, normally.
    - `integer` becomes `number`, `nullable` is folded into the type, and
      OpenAPI-only keywords are dropped. Everything else passes through.
    """
    if isinstance(schema, bool):
        return schema

    if "$ref" in schema:
        ref = schema["$ref"]
        _report(diagnostics, SchemaDiagnostic(
            kind=DiagnosticKind.UNRESOLVED_REF,
            message=f"Unresolved $ref '{ref}'.",
            ref=str(ref),
        ))
        return _generic_object()

    if seen is None:
        seen = set()

    node_id = id(schema)
    if node_id in seen:
        title = schema.get("title") if isinstance(schema.get("title"), str) else None
        label = f' "{title}"' if title else ""
        _report(diagnostics, SchemaDiagnostic(
            kind=DiagnosticKind.CYCLE,
            message=f"Cycle detected in schema{label}, returning generic object to break recursion.",
            title=title,
        ))
        return _generic_object()
    seen.add(node_id)

    try:
        json_schema: Dict[str, Any] = dict(schema)

        if schema.get("type") == "integer":
            json_schema["type"] = "number"

        for keyword in OPENAPI_ONLY_KEYWORDS:
            json_schema.pop(keyword, None)

        if schema.get("nullable"):
            _apply_nullable(json_schema)

        properties = json_schema.get("properties")
        if _has_type(json_schema, "object") and isinstance(properties, dict):
            mapped_props: Dict[str, Any] = {}
            for key, prop_schema in properties.items():
                if isinstance(prop_schema, (dict, bool)):
                    mapped_props[key] = map_openapi_schema_to_json_schema(prop_schema, seen, diagnostics)
                else:
                    mapped_props[key] = prop_schema
            json_schema["properties"] = mapped_props

        items = json_schema.get("items")
        if _has_type(json_schema, "array") and isinstance(items, dict):
            json_schema["items"] = map_openapi_schema_to_json_schema(items, seen, diagnostics)

        return json_schema
    finally:
        seen.discard(node_id)
