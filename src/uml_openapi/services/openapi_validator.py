"""Validation of generated OpenAPI documents.

Two checks are run: every ``$ref`` must point at an existing component
schema, and the document must pass openapi-spec-validator's 3.1
structural validation.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator

from openapi_spec_validator import OpenAPIV31SpecValidator

from src.shared.constants import COMPONENT_REF_PREFIX
from src.shared.models.openapi import OpenAPIDocument, ValidationResult

logger = logging.getLogger(__name__)


def validate_document(document: OpenAPIDocument | dict[str, Any]) -> ValidationResult:
    """Validate a generated document.

    Args:
        document: The assembled document, or its plain-dict form.

    Returns:
        ValidationResult with valid=True/False, errors list, and warnings list.
    """
    spec = document.to_dict() if isinstance(document, OpenAPIDocument) else document
    errors: list[str] = []
    warnings: list[str] = []

    _check_references(spec, errors, warnings)
    # The structural validator resolves references itself; only run it
    # once every reference is known to be local and resolvable.
    if not errors and not warnings:
        _run_spec_validator(spec, errors)
    else:
        warnings.append("Structural validation skipped because of reference problems")

    if errors:
        logger.info("Generated document failed validation: %d error(s)", len(errors))

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def collect_refs(node: Any, path: str = "#") -> Iterator[tuple[str, str]]:
    """Yield ``(location, ref)`` for every ``$ref`` in *node*."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield path, value
            else:
                yield from collect_refs(value, f"{path}/{key}")
    elif isinstance(node, list):
        for index, item in enumerate(node):
            yield from collect_refs(item, f"{path}/{index}")


# ======================================================================
# Internal helpers
# ======================================================================


def _check_references(spec: dict[str, Any], errors: list[str], warnings: list[str]) -> None:
    schemas = (spec.get("components") or {}).get("schemas") or {}
    for location, ref in collect_refs(spec):
        if not ref.startswith(COMPONENT_REF_PREFIX):
            warnings.append(f"Non-component reference {ref!r} (at {location})")
            continue
        name = ref[len(COMPONENT_REF_PREFIX):]
        if name not in schemas:
            errors.append(f"Unresolved reference {ref!r} (at {location})")


def _run_spec_validator(spec: dict[str, Any], errors: list[str]) -> None:
    """Append openapi-spec-validator errors to *errors*."""
    try:
        validator = OpenAPIV31SpecValidator(spec)
        for error in validator.iter_errors():
            path_str = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
            if path_str:
                errors.append(f"{error.message} (at {path_str})")
            else:
                errors.append(str(error.message))
    except (ValueError, KeyError, TypeError) as exc:
        errors.append(f"Unexpected error during spec validation: {exc}")
