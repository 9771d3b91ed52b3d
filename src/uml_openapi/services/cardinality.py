"""Cardinality parsing and interpretation.

Turns the raw multiplicity token found next to a relation endpoint
(``1``, ``0..1``, ``1..*``, ``*``, ``"many"``) into a typed
:class:`Cardinality`, and a cardinality into the structural decision used
by the schema builder: scalar or array, required or optional, and array
bounds.
"""
from __future__ import annotations

import re

from src.shared.models.diagram import Cardinality, CardinalityDecision, CardinalityKind

_EXACT_RE = re.compile(r"^\d+$")
_RANGE_RE = re.compile(r"^(\d+|\*)\.\.(\d+|\*)$")

_SINGULAR_HINTS = ("one", "single", "singular")
_PLURAL_HINTS = ("many", "multiple", "list", "collection")

# Relation with no multiplicity at all: plain optional reference.
_DEFAULT_DECISION = CardinalityDecision(is_array=False, required=False)


def parse_cardinality(raw: str | None) -> Cardinality | None:
    """Parse a raw multiplicity token; blank or missing tokens yield ``None``."""
    if raw is None:
        return None

    value = raw.strip()
    if not value:
        return None

    if value == "*":
        return Cardinality(kind=CardinalityKind.MANY, raw=value)

    if _EXACT_RE.match(value):
        return Cardinality(kind=CardinalityKind.EXACT, raw=value, value=int(value))

    range_match = _RANGE_RE.match(value)
    if range_match:
        lower_raw, upper_raw = range_match.groups()
        return Cardinality(
            kind=CardinalityKind.RANGE,
            raw=value,
            lower=None if lower_raw == "*" else int(lower_raw),
            upper=None if upper_raw == "*" else int(upper_raw),
        )

    return Cardinality(kind=CardinalityKind.CUSTOM, raw=value, label=value)


def interpret_cardinality(cardinality: Cardinality | None) -> CardinalityDecision:
    """Decide the property shape for the given target-side cardinality."""
    if cardinality is None:
        return _DEFAULT_DECISION

    if cardinality.kind is CardinalityKind.MANY:
        return CardinalityDecision(is_array=True, required=False)

    if cardinality.kind is CardinalityKind.EXACT:
        count = cardinality.value or 0
        if count == 1:
            return CardinalityDecision(is_array=False, required=True)
        return CardinalityDecision(
            is_array=True,
            required=count > 0,
            min_items=count,
            max_items=count,
        )

    if cardinality.kind is CardinalityKind.RANGE:
        lower = cardinality.lower or 0
        upper = cardinality.upper
        if upper == 1:
            return CardinalityDecision(is_array=False, required=lower > 0)
        return CardinalityDecision(
            is_array=True,
            required=lower > 0,
            min_items=lower if lower > 0 else None,
            max_items=upper,
        )

    label = (cardinality.label or cardinality.raw).lower()
    if any(hint in label for hint in _SINGULAR_HINTS):
        return CardinalityDecision(is_array=False, required=True)
    if any(hint in label for hint in _PLURAL_HINTS):
        return CardinalityDecision(is_array=True, required=False)
    return _DEFAULT_DECISION
