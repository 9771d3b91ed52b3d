"""Relation scanner for PlantUML relationship lines.

Every line of the input is inspected independently.  The line is scanned
left to right for the first relation arrow, skipping quoted spans; the
text on each side of the arrow is an endpoint made of an entity name and
an optional multiplicity token.  A ``: label`` after the right endpoint is
discarded.

Arrows are matched longest first, so ``<|--`` wins over ``--`` at the same
position.  A bare ``..`` sitting between two multiplicity characters
(``1..*``) is a range separator, not a dependency arrow, and is skipped.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from src.shared.models.diagram import Relation, RelationKind
from src.uml_openapi.services.cardinality import parse_cardinality

logger = logging.getLogger(__name__)

RELATION_SYMBOLS: tuple[str, ...] = (
    "<|--",
    "--|>",
    "<|..",
    "..|>",
    "*--",
    "--*",
    "o--",
    "--o",
    "<..",
    "..>",
    "<--",
    "-->",
    "--",
    "..",
)

_CANDIDATE_CHARS = frozenset("<>|o*.-")
_CARDINALITY_CHARS = frozenset("0123456789*")
_ENDPOINT_TOKEN_RE = re.compile(r'"[^"]*"|\S+')
_NUMERIC_CARDINALITY_RE = re.compile(r"^[0-9.*]+$")


@dataclass(frozen=True)
class _Endpoint:
    name: str
    cardinality_raw: str | None


def map_relation(symbol: str) -> RelationKind:
    """Classify an arrow symbol; the first matching family wins."""
    if "<|--" in symbol or "--|>" in symbol:
        return RelationKind.INHERITANCE
    if "*--" in symbol or "--*" in symbol:
        return RelationKind.COMPOSITION
    if "o--" in symbol or "--o" in symbol:
        return RelationKind.AGGREGATION
    if any(token in symbol for token in ("<..", "..>", "..|>", "<|..")):
        return RelationKind.DEPENDENCY
    if "--" in symbol or ".." in symbol:
        return RelationKind.ASSOCIATION
    return RelationKind.UNKNOWN


def scan_relations(text: str) -> list[Relation]:
    """Return every relation found in *text*, in line order."""
    relations: list[Relation] = []
    for line in text.split("\n"):
        relation = parse_relation_line(line)
        if relation is not None:
            relations.append(relation)
    return relations


def parse_relation_line(line: str) -> Relation | None:
    """Parse one line; ``None`` when it does not encode a relation."""
    trimmed = line.strip()
    # PlantUML comments start with a single quote.
    if not trimmed or trimmed.startswith("'"):
        return None
    if not _CANDIDATE_CHARS.intersection(trimmed):
        return None

    found = find_relation_symbol(trimmed)
    if found is None:
        return None

    symbol, index = found
    left_raw = trimmed[:index].strip()
    right_raw = _strip_label(trimmed[index + len(symbol):]).strip()
    if not left_raw or not right_raw:
        return None

    source = _parse_endpoint(left_raw)
    target = _parse_endpoint(right_raw)
    if source is None or target is None:
        logger.debug("Dropping relation without endpoint names: %r", trimmed)
        return None

    return Relation(
        source=source.name,
        target=target.name,
        kind=map_relation(symbol),
        symbol=symbol,
        from_cardinality=parse_cardinality(source.cardinality_raw),
        to_cardinality=parse_cardinality(target.cardinality_raw),
    )


def find_relation_symbol(line: str) -> tuple[str, int] | None:
    """Locate the first relation arrow outside quoted spans.

    Returns ``(symbol, index)`` or ``None``.
    """
    in_quotes = False
    for index, char in enumerate(line):
        if char == '"':
            in_quotes = not in_quotes
            continue
        if in_quotes:
            continue

        for symbol in RELATION_SYMBOLS:
            if not line.startswith(symbol, index):
                continue
            if symbol == ".." and _is_cardinality_dot(line, index):
                continue
            if not _is_detached_marker(line, symbol, index):
                continue
            return symbol, index

    return None


def _is_cardinality_dot(line: str, index: int) -> bool:
    before = line[index - 1] if index > 0 else ""
    after = line[index + 2] if index + 2 < len(line) else ""
    return before in _CARDINALITY_CHARS and after in _CARDINALITY_CHARS


def _is_detached_marker(line: str, symbol: str, index: int) -> bool:
    """Reject an ``o`` arrow head that is really part of an identifier."""
    if symbol.startswith("o") and index > 0:
        before = line[index - 1]
        if before.isalnum() or before == "_":
            return False
    if symbol.endswith("o"):
        end = index + len(symbol)
        if end < len(line) and (line[end].isalnum() or line[end] == "_"):
            return False
    return True


def _strip_label(segment: str) -> str:
    """Drop a trailing ``: label`` from the right-hand side."""
    in_quotes = False
    for index, char in enumerate(segment):
        if char == '"':
            in_quotes = not in_quotes
        elif char == ":" and not in_quotes:
            return segment[:index]
    return segment


def _parse_endpoint(segment: str) -> _Endpoint | None:
    name: str | None = None
    cardinality: str | None = None

    for token in _ENDPOINT_TOKEN_RE.findall(segment):
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            cardinality = token[1:-1].strip()
        elif token == "*":
            cardinality = token
        elif _NUMERIC_CARDINALITY_RE.match(token) and any(c.isdigit() for c in token):
            cardinality = token
        else:
            name = token

    if not name:
        return None
    return _Endpoint(name=name, cardinality_raw=cardinality)
