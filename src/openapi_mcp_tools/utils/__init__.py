from .code_gen import generate_operation_id, sanitize_tool_name
from .log_setup import configure_logging

__all__ = ["configure_logging", "generate_operation_id", "sanitize_tool_name"]
