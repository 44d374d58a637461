"""Tests for OpenAPI document loading."""
import json

import pytest  # type: ignore[import-not-found]

from openapi_mcp_tools.exceptions import DocumentLoadError, InvalidDocumentError
from openapi_mcp_tools.parser.document import load_openapi_document


def test_load_valid_document(tmp_path):
    spec_file = tmp_path / "openapi.json"
    spec_file.write_text(json.dumps({"openapi": "3.0.0", "paths": {}}), encoding="utf-8")
    assert load_openapi_document(spec_file) == {"openapi": "3.0.0", "paths": {}}


def test_missing_file_raises(tmp_path):
    with pytest.raises(DocumentLoadError) as exc_info:
        load_openapi_document(tmp_path / "missing.json")
    assert exc_info.value.path.endswith("missing.json")


def test_invalid_json_raises(tmp_path):
    spec_file = tmp_path / "broken.json"
    spec_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentLoadError, match="Invalid JSON at line 1"):
        load_openapi_document(str(spec_file))


def test_non_object_document_raises(tmp_path):
    spec_file = tmp_path / "list.json"
    spec_file.write_text("[]", encoding="utf-8")
    with pytest.raises(InvalidDocumentError) as exc_info:
        load_openapi_document(spec_file)
    assert exc_info.value.found_type == "list"
    assert isinstance(exc_info.value, DocumentLoadError)
