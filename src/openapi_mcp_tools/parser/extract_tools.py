"""
Extracts MCP tool definitions from an OpenAPI 3 document.
"""
from typing import Any, Callable, Dict, List, Optional, Set

import structlog

from ..config import Config
from ..models.common import DiagnosticKind, HttpMethod
from ..models.tools import ExecutionParameter, ExtractionResult, McpToolDefinition, SchemaDiagnostic
from ..schema_gen.input_schema import generate_input_schema_and_details
from ..utils.code_gen import generate_operation_id, sanitize_tool_name

logger = structlog.get_logger(__name__)

NameGenerator = Callable[[str, str], Optional[str]]


def _unique_name(base_name: str, used_names: Set[str], counters: Dict[str, int]) -> str:
    final_name = base_name
    while final_name in used_names:
        counters[base_name] = counters.get(base_name, 0) + 1
        final_name = f"{base_name}_{counters[base_name]}"
    used_names.add(final_name)
    return final_name

def _effective_security(operation: Dict[str, Any], global_security: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # An explicit empty list or null on the operation opts out of the global requirement.
    if "security" not in operation:
        return global_security
    security = operation["security"]
    return [req for req in security if isinstance(req, dict)] if isinstance(security, list) else []


def extract_tools_from_api(
    api: Dict[str, Any],
    *,
    name_generator: NameGenerator = generate_operation_id,
    diagnostics: Optional[List[SchemaDiagnostic]] = None,
    merge_path_parameters: bool = True,
) -> List[McpToolDefinition]:
    """
    Extracts one tool definition per (path, method) operation of `api`.

    Tool names come from `operationId`, or from `name_generator(method, path)`
    when it is missing; operations for which neither yields a name are skipped.
    Names are sanitized and made unique within this call by appending `_1`,
    `_2`, ... to repeated base names.
    """
    tools: List[McpToolDefinition] = []
    used_names: Set[str] = set()
    counters: Dict[str, int] = {}

    global_security = [req for req in api["security"] if isinstance(req, dict)] if isinstance(api.get("security"), list) else []
    components = api.get("components") if isinstance(api.get("components"), dict) else {}
    security_schemes = components.get("securitySchemes") if isinstance(components.get("securitySchemes"), dict) else {}

    paths = api.get("paths")
    if not isinstance(paths, dict):
        return tools

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        for method in HttpMethod:
            operation = path_item.get(method.value)
            if not isinstance(operation, dict):
                continue

            base_name = operation.get("operationId") or name_generator(method.value, path)
            if not base_name:
                logger.debug("Skipping operation without a derivable name.", method=method.value, path=path)
                continue

            base_name = sanitize_tool_name(str(base_name))
            final_tool_name = _unique_name(base_name, used_names, counters)

            description = str(
                operation.get("description")
                or operation.get("summary")
                or f"Executes {method.value.upper()} {path}"
            )
            security_requirements = _effective_security(operation, global_security)

            details = generate_input_schema_and_details(
                operation,
                security_requirements,
                security_schemes,
                diagnostics=diagnostics,
                path_parameters=path_item.get("parameters") if merge_path_parameters else None,
            )

            execution_parameters = [
                ExecutionParameter(name=p["name"], in_=p["in"]) for p in details.parameters
            ]

            tools.append(McpToolDefinition(
                name=final_tool_name,
                description=description,
                input_schema=details.input_schema,
                method=method.value,
                path_template=path,
                parameters=details.parameters,
                execution_parameters=execution_parameters,
                request_body_content_type=details.request_body_content_type,
                security_requirements=security_requirements,
                operation_id=base_name,
            ))

    return tools


class ToolExtractorService:
    """
    Runs tool extraction with application configuration and logs the
    schema mapping diagnostics each run produces.
    """

    def __init__(self, app_config: Config, name_generator: NameGenerator = generate_operation_id):
        self.app_config = app_config
        self.name_generator = name_generator
        self.logger = structlog.get_logger(__name__).bind(service="ToolExtractorService")

    def extract(self, api: Dict[str, Any]) -> ExtractionResult:
        """Extracts tools from `api`. Each call uses its own name and diagnostics state."""
        info = api.get("info") if isinstance(api.get("info"), dict) else {}
        log = self.logger.bind(api_title=info.get("title"), api_version=info.get("version"))
        log.debug("Starting tool extraction.")

        diagnostics: List[SchemaDiagnostic] = []
        tools = extract_tools_from_api(
            api,
            name_generator=self.name_generator,
            diagnostics=diagnostics,
            merge_path_parameters=self.app_config.extraction.merge_path_parameters,
        )

        if self.app_config.extraction.log_diagnostics:
            for diagnostic in diagnostics:
                if diagnostic.kind == DiagnosticKind.UNRESOLVED_REF:
                    log.warning(diagnostic.message, kind=diagnostic.kind, ref=diagnostic.ref)
                else:
                    log.warning(diagnostic.message, kind=diagnostic.kind, schema_title=diagnostic.title)

        log.info("Tool extraction finished.", tool_count=len(tools), diagnostic_count=len(diagnostics))
        return ExtractionResult(tools=tools, diagnostics=diagnostics)
