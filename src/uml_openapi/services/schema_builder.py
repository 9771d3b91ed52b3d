"""Component schema builder.

A :class:`SchemaBuilder` is created for one diagram and owns every draft
it produces; nothing is shared between builders.  Drafts are filled from
class and interface members first, then relations are applied, and
:meth:`SchemaBuilder.finalize` turns the drafts into plain JSON Schema
dicts keyed by component name.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from src.shared.constants import COMPONENT_REF_PREFIX
from src.shared.models.diagram import (
    AccessModifier,
    Attribute,
    ClassLike,
    Diagram,
    Method,
    Relation,
    RelationKind,
)
from src.uml_openapi.services.cardinality import interpret_cardinality

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Type mapping: attribute type token -> JSON Schema fragment
# ---------------------------------------------------------------------------

PRIMITIVE_TYPE_MAP: dict[str, dict[str, str]] = {
    "string": {"type": "string"},
    "text": {"type": "string"},
    "uuid": {"type": "string", "format": "uuid"},
    "date": {"type": "string", "format": "date"},
    "datetime": {"type": "string", "format": "date-time"},
    "date-time": {"type": "string", "format": "date-time"},
    "boolean": {"type": "boolean"},
    "bool": {"type": "boolean"},
    "int": {"type": "integer", "format": "int32"},
    "integer": {"type": "integer"},
    "long": {"type": "integer", "format": "int64"},
    "float": {"type": "number", "format": "float"},
    "double": {"type": "number", "format": "double"},
    "number": {"type": "number"},
    "decimal": {"type": "number", "format": "double"},
    "email": {"type": "string", "format": "email"},
}

STRUCTURAL_RELATIONS = frozenset({
    RelationKind.COMPOSITION,
    RelationKind.AGGREGATION,
    RelationKind.ASSOCIATION,
})

_COLLECTION_RE = re.compile(r"^(?:List|Set|Collection|Array)<(\w+)>$|^(\w+)\[\]$")


def to_component_ref(name: str) -> str:
    """Return the ``$ref`` pointer for a component schema."""
    return f"{COMPONENT_REF_PREFIX}{name}"


def to_property_name(name: str) -> str:
    """Lower-camel-case an entity name: ``LineItem`` -> ``lineItem``."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def describe_methods(methods: list[Method]) -> str:
    """Summarise methods as ``access name(): returnType`` joined by commas."""
    parts = []
    for method in methods:
        suffix = f": {method.return_type}" if method.return_type else ""
        parts.append(f"{method.access.value} {method.name}(){suffix}")
    return ", ".join(parts)


@dataclass
class SchemaDraft:
    """Mutable working state for one entity schema."""
    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    description: str | None = None

    def set_property(self, name: str, schema: dict[str, Any], required: bool) -> None:
        self.properties[name] = schema
        if required and name not in self.required:
            self.required.append(name)
        elif not required and name in self.required:
            self.required.remove(name)

    def append_description(self, line: str) -> None:
        self.description = f"{self.description}\n{line}" if self.description else line

    def to_schema(self) -> dict[str, Any]:
        """Object schema; empty ``properties``/``required`` are omitted."""
        schema: dict[str, Any] = {"type": "object"}
        if self.properties:
            schema["properties"] = dict(self.properties)
        if self.required:
            schema["required"] = list(self.required)
        if self.description:
            schema["description"] = self.description
        return schema


class SchemaBuilder:
    """Accumulates schema drafts for a single diagram."""

    def __init__(self, diagram: Diagram) -> None:
        self._diagram = diagram
        self._component_names = diagram.component_names()
        self._class_like_names = {entity.name for entity in diagram.class_likes()}
        self._drafts: dict[str, SchemaDraft] = {}
        self._parents: dict[str, list[str]] = {}
        self._finalized = False

    # -- drafting ------------------------------------------------------------

    def draft_for(self, name: str) -> SchemaDraft:
        """Return the draft for *name*, creating it on first use."""
        if name not in self._drafts:
            self._drafts[name] = SchemaDraft()
        return self._drafts[name]

    def add_entity(self, entity: ClassLike) -> None:
        """Merge an entity's attributes and method summary into its draft."""
        draft = self.draft_for(entity.name)
        for attribute in entity.attributes:
            draft.set_property(
                attribute.name,
                self.resolve_type(attribute.type),
                required=_is_required(attribute),
            )

        summary = describe_methods(entity.methods)
        if summary:
            draft.append_description(f"Methods: {summary}")

    def resolve_type(self, raw_type: str | None) -> dict[str, Any]:
        """Map an attribute type token to a schema fragment."""
        if not raw_type:
            return {"type": "string"}

        token = raw_type.strip()
        primitive = PRIMITIVE_TYPE_MAP.get(token.lower())
        if primitive is not None:
            return dict(primitive)

        if token in self._component_names:
            return {"$ref": to_component_ref(token)}

        collection = _COLLECTION_RE.match(token)
        if collection:
            item_type = collection.group(1) or collection.group(2)
            return {"type": "array", "items": self.resolve_type(item_type)}

        return {"type": "string"}

    # -- relations -----------------------------------------------------------

    def apply_relation(self, relation: Relation) -> None:
        """Record inheritance or add a reference property for *relation*."""
        if relation.kind is RelationKind.INHERITANCE:
            self._record_parent(child=relation.target, parent=relation.source)
            return

        if relation.kind not in STRUCTURAL_RELATIONS:
            return

        if relation.source not in self._class_like_names or relation.target not in self._component_names:
            logger.debug(
                "Skipping %s relation with unknown endpoint: %s -> %s",
                relation.kind.value, relation.source, relation.target,
            )
            return

        decision = interpret_cardinality(relation.to_cardinality)
        ref: dict[str, Any] = {"$ref": to_component_ref(relation.target)}
        schema: dict[str, Any] = ref
        if decision.is_array:
            schema = {"type": "array", "items": ref}
            if decision.min_items is not None:
                schema["minItems"] = decision.min_items
            if decision.max_items is not None:
                schema["maxItems"] = decision.max_items

        self.draft_for(relation.source).set_property(
            to_property_name(relation.target), schema, required=decision.required
        )

    def _record_parent(self, child: str, parent: str) -> None:
        if child == parent:
            return
        if child not in self._class_like_names or parent not in self._class_like_names:
            logger.debug("Skipping inheritance with unknown endpoint: %s <- %s", parent, child)
            return
        parents = self._parents.setdefault(child, [])
        if parent not in parents:
            parents.append(parent)

    # -- output --------------------------------------------------------------

    def build(self) -> dict[str, Any]:
        """Draft every entity, apply every relation and finalize."""
        for entity in self._diagram.class_likes():
            self.add_entity(entity)
        for relation in self._diagram.relations:
            self.apply_relation(relation)
        return self.finalize()

    def finalize(self) -> dict[str, Any]:
        """Produce the component schemas; the builder cannot be reused."""
        if self._finalized:
            raise RuntimeError("SchemaBuilder.finalize() called twice")
        self._finalized = True

        schemas: dict[str, Any] = {}
        for enum_type in self._diagram.enums:
            schemas[enum_type.name] = {"type": "string", "enum": list(enum_type.values)}

        for name, draft in self._drafts.items():
            object_schema = draft.to_schema()
            parents = self._parents.get(name)
            if parents:
                all_of: list[dict[str, Any]] = [
                    {"$ref": to_component_ref(parent)} for parent in parents
                ]
                all_of.append(object_schema)
                schemas[name] = {"allOf": all_of}
            else:
                schemas[name] = object_schema

        return schemas


def _is_required(attribute: Attribute) -> bool:
    return attribute.access is AccessModifier.PUBLIC


def build_component_schemas(diagram: Diagram) -> dict[str, Any]:
    """Build all component schemas for *diagram* with a fresh builder."""
    return SchemaBuilder(diagram).build()
