"""Loading of OpenAPI documents from disk."""
import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog

from ..exceptions import DocumentLoadError, InvalidDocumentError

logger = structlog.get_logger(__name__)


def load_openapi_document(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Reads a JSON OpenAPI document. Raises DocumentLoadError if it cannot be read or decoded."""
    path = Path(file_path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise DocumentLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise DocumentLoadError(path, f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e

    if not isinstance(document, dict):
        raise InvalidDocumentError(path, type(document).__name__)

    logger.debug("Loaded OpenAPI document.", path=str(path), openapi_version=document.get("openapi"))
    return document
