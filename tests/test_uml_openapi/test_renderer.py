"""Tests for JSON and YAML rendering."""
from __future__ import annotations

import json

import pytest
import yaml

from src.shared.errors import ValidationError
from src.uml_openapi.services.document_assembler import transform_plantuml_to_openapi
from src.uml_openapi.services.renderer import render_document


@pytest.fixture
def document(order_model):
    return transform_plantuml_to_openapi(order_model)


class TestRenderDocument:

    def test_json(self, document):
        rendered = render_document(document, "json")
        assert json.loads(rendered) == document.to_dict()
        assert rendered.startswith('{\n  "openapi": "3.1.0"')

    def test_json_is_default(self, document):
        assert render_document(document) == render_document(document, "json")

    def test_yaml_keeps_key_order(self, document):
        rendered = render_document(document, "yaml")
        assert rendered.startswith("openapi: 3.1.0\n")
        assert yaml.safe_load(rendered) == document.to_dict()

    def test_format_is_case_insensitive(self, document):
        assert render_document(document, " YML ") == render_document(document, "yaml")

    def test_plain_dict(self):
        assert json.loads(render_document({"a": "ü"})) == {"a": "ü"}
        assert "ü" in render_document({"a": "ü"})

    def test_unsupported_format(self, document):
        with pytest.raises(ValidationError) as exc_info:
            render_document(document, "xml")
        assert exc_info.value.status_code == 422
