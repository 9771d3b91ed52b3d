"""JSON and YAML rendering of generated documents."""
from __future__ import annotations

import json
from typing import Any

import yaml

from src.shared.constants import SUPPORTED_OUTPUT_FORMATS
from src.shared.errors import ValidationError
from src.shared.models.openapi import OpenAPIDocument


def render_document(document: OpenAPIDocument | dict[str, Any], fmt: str = "json") -> str:
    """Render *document* as JSON (indent 2) or YAML, keeping key order."""
    data = document.to_dict() if isinstance(document, OpenAPIDocument) else document
    normalized = fmt.strip().lower()

    if normalized == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if normalized in ("yaml", "yml"):
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)

    raise ValidationError(
        f"Unsupported output format: {fmt!r} (expected one of {', '.join(SUPPORTED_OUTPUT_FORMATS)})"
    )
