"""Tests for the configured transform entry point."""
from __future__ import annotations

import pytest
import yaml

from src.shared.config import TransformerConfig
from src.shared.errors import ValidationError
from src.uml_openapi.services.transform_runner import check_size, info_from_config, run_transform


@pytest.fixture
def config() -> TransformerConfig:
    return TransformerConfig(
        api_title="Shop API",
        api_version="0.1.0",
        api_description="Generated for tests",
        max_diagram_bytes=4096,
    )


class TestInfoFromConfig:

    def test_copies_metadata(self, config):
        info = info_from_config(config)
        assert (info.title, info.version, info.description) == (
            "Shop API",
            "0.1.0",
            "Generated for tests",
        )


class TestCheckSize:

    def test_within_limit(self, config):
        check_size("class A {}", config)

    def test_limit_counts_utf8_bytes(self):
        config = TransformerConfig(max_diagram_bytes=3)
        check_size("abc", config)
        with pytest.raises(ValidationError) as exc_info:
            check_size("abü", config)
        assert "limit is 3 bytes" in exc_info.value.detail


class TestRunTransform:

    def test_document_only(self, config, order_model):
        result = run_transform(order_model, config)
        assert result.document["info"]["title"] == "Shop API"
        assert result.rendered is None
        assert result.validation is None

    def test_rendered_yaml(self, config, order_model):
        result = run_transform(order_model, config, "yaml")
        assert yaml.safe_load(result.rendered) == result.document

    def test_with_validation(self, config, person_model):
        result = run_transform(person_model, config, validate_output=True)
        assert result.validation is not None
        assert result.validation.valid is True
