"""CRUD path generation for class entities.

Every class with a component schema gets a collection path
(``/<resources>``: list + create) and an item path
(``/<resources>/{id}``: read + update + delete).  Interfaces never get
paths.  Error responses point at the shared error schema.
"""
from __future__ import annotations

import re
from typing import Any

from src.shared.constants import ERROR_SCHEMA_NAME
from src.shared.models.diagram import ClassLike
from src.uml_openapi.services.schema_builder import to_component_ref

_JSON = "application/json"


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def to_kebab_case(name: str) -> str:
    """Convert a PascalCase name to kebab-case.

    Examples:
        "User"      -> "user"
        "OrderItem" -> "order-item"
        "Sha256Key" -> "sha256-key"
    """
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name)
    s = re.sub(r"\s+", "-", s)
    return s.lower()


def pluralize(word: str) -> str:
    """Heuristic English pluralization; irregular plurals are not handled.

    Rules, first match wins: already ends in ``s`` -> unchanged;
    ends in ``x``/``z``/``ch``/``sh`` -> ``+es``; consonant + ``y`` ->
    ``ies``; otherwise ``+s``.
    """
    if word.endswith("s"):
        return word
    if re.search(r"(x|z|ch|sh)$", word):
        return f"{word}es"
    if len(word) > 1 and word.endswith("y") and word[-2] not in "aeiou":
        return f"{word[:-1]}ies"
    return f"{word}s"


def resource_segment(entity_name: str) -> str:
    """Derive the URL path segment for an entity name.

    "Person" -> "persons", "OrderItem" -> "order-items", "Category" -> "categories"
    """
    return pluralize(to_kebab_case(entity_name))


# ---------------------------------------------------------------------------
# Shared error schema
# ---------------------------------------------------------------------------


def ensure_error_schema(schemas: dict[str, Any]) -> str:
    """Create the shared error schema once and return its ``$ref``."""
    if ERROR_SCHEMA_NAME not in schemas:
        schemas[ERROR_SCHEMA_NAME] = {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "code": {"type": "string"},
            },
            "required": ["message"],
            "description": "Standard error payload.",
        }
    return to_component_ref(ERROR_SCHEMA_NAME)


# ---------------------------------------------------------------------------
# Operation builders
# ---------------------------------------------------------------------------


def _ref(ref: str) -> dict[str, str]:
    return {"$ref": ref}


def _json_content(schema: dict[str, Any]) -> dict[str, Any]:
    return {_JSON: {"schema": schema}}


def _error_response(description: str, error_ref: str) -> dict[str, Any]:
    return {"description": description, "content": _json_content(_ref(error_ref))}


def _id_parameter(tag: str) -> dict[str, Any]:
    return {
        "name": "id",
        "in": "path",
        "required": True,
        "schema": {"type": "string"},
        "description": f"{tag} identifier",
    }


def _operation_id(action: str, segment: str, suffix: str = "") -> str:
    return f"{action}_{segment.replace('-', '_')}{suffix}"


def build_crud_paths(
    entity_name: str,
    segment: str,
    error_ref: str,
) -> dict[str, Any]:
    """Generate the collection and item path items for one entity."""
    tag = entity_name
    resource_ref = to_component_ref(entity_name)
    collection_path = f"/{segment}"
    item_path = f"{collection_path}/{{id}}"

    paths: dict[str, Any] = {}

    # -- Collection endpoints -----------------------------------------------
    paths[collection_path] = {
        "summary": f"{tag} collection",
        "get": {
            "summary": f"List {tag}s",
            "operationId": _operation_id("list", segment),
            "tags": [tag],
            "responses": {
                "200": {
                    "description": f"List of {tag}s",
                    "content": _json_content({"type": "array", "items": _ref(resource_ref)}),
                },
            },
        },
        "post": {
            "summary": f"Create {tag}",
            "operationId": _operation_id("create", segment),
            "tags": [tag],
            "requestBody": {
                "required": True,
                "content": _json_content(_ref(resource_ref)),
            },
            "responses": {
                "201": {
                    "description": f"{tag} created",
                    "content": _json_content(_ref(resource_ref)),
                },
                "400": _error_response("Invalid payload", error_ref),
            },
        },
    }

    # -- Item endpoints -----------------------------------------------------
    paths[item_path] = {
        "summary": f"{tag} item",
        "get": {
            "summary": f"Get {tag}",
            "operationId": _operation_id("get", segment, "_by_id"),
            "tags": [tag],
            "parameters": [_id_parameter(tag)],
            "responses": {
                "200": {
                    "description": f"{tag} details",
                    "content": _json_content(_ref(resource_ref)),
                },
                "404": _error_response(f"{tag} not found", error_ref),
            },
        },
        "put": {
            "summary": f"Update {tag}",
            "operationId": _operation_id("update", segment),
            "tags": [tag],
            "parameters": [_id_parameter(tag)],
            "requestBody": {
                "required": True,
                "content": _json_content(_ref(resource_ref)),
            },
            "responses": {
                "200": {
                    "description": f"{tag} updated",
                    "content": _json_content(_ref(resource_ref)),
                },
                "404": _error_response(f"{tag} not found", error_ref),
            },
        },
        "delete": {
            "summary": f"Delete {tag}",
            "operationId": _operation_id("delete", segment),
            "tags": [tag],
            "parameters": [_id_parameter(tag)],
            "responses": {
                "204": {"description": f"{tag} deleted"},
                "404": _error_response(f"{tag} not found", error_ref),
            },
        },
    }

    return paths


def build_paths(
    classes: list[ClassLike],
    schemas: dict[str, Any],
) -> dict[str, Any]:
    """Build CRUD paths for every class that has a component schema.

    The error schema is added to *schemas* on the first class that needs
    it, so a diagram without classes yields no error schema at all.
    """
    paths: dict[str, Any] = {}
    error_ref: str | None = None
    for entity in classes:
        if entity.name not in schemas:
            continue
        if error_ref is None:
            error_ref = ensure_error_schema(schemas)
        paths.update(build_crud_paths(entity.name, resource_segment(entity.name), error_ref))
    return paths
