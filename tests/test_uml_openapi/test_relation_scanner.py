"""Tests for relation line scanning."""
from __future__ import annotations

import pytest

from src.shared.models.diagram import CardinalityKind, RelationKind
from src.uml_openapi.services.relation_scanner import (
    find_relation_symbol,
    map_relation,
    parse_relation_line,
    scan_relations,
)


class TestMapRelation:

    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("<|--", RelationKind.INHERITANCE),
            ("--|>", RelationKind.INHERITANCE),
            ("*--", RelationKind.COMPOSITION),
            ("--*", RelationKind.COMPOSITION),
            ("o--", RelationKind.AGGREGATION),
            ("--o", RelationKind.AGGREGATION),
            ("..>", RelationKind.DEPENDENCY),
            ("<..", RelationKind.DEPENDENCY),
            ("..|>", RelationKind.DEPENDENCY),
            ("<|..", RelationKind.DEPENDENCY),
            ("-->", RelationKind.ASSOCIATION),
            ("<--", RelationKind.ASSOCIATION),
            ("--", RelationKind.ASSOCIATION),
            ("..", RelationKind.ASSOCIATION),
            ("==>", RelationKind.UNKNOWN),
        ],
    )
    def test_symbol_families(self, symbol, expected):
        assert map_relation(symbol) is expected


class TestFindRelationSymbol:

    def test_longest_symbol_wins(self):
        assert find_relation_symbol("A <|-- B") == ("<|--", 2)

    def test_quoted_text_is_skipped(self):
        assert find_relation_symbol('A "x--y" --> B') == ("-->", 9)

    def test_range_dots_are_not_an_arrow(self):
        assert find_relation_symbol("A 1..* -- B") == ("--", 7)

    def test_o_inside_identifier_is_not_a_marker(self):
        assert find_relation_symbol("Zoo--Bar") == ("--", 3)

    def test_no_symbol(self):
        assert find_relation_symbol("class Person {") is None


class TestParseRelationLine:

    def test_inheritance(self):
        relation = parse_relation_line("Person <|-- Employee")
        assert relation.source == "Person"
        assert relation.target == "Employee"
        assert relation.kind is RelationKind.INHERITANCE
        assert relation.symbol == "<|--"

    def test_quoted_cardinalities(self):
        relation = parse_relation_line('Person "1" *-- "1..*" Address')
        assert relation.kind is RelationKind.COMPOSITION
        assert relation.from_cardinality.kind is CardinalityKind.EXACT
        assert relation.to_cardinality.kind is CardinalityKind.RANGE
        assert relation.to_cardinality.raw == "1..*"
        assert relation.cardinality == relation.to_cardinality

    def test_bare_cardinalities(self):
        relation = parse_relation_line("Order * -- 1..* LineItem")
        assert relation.source == "Order"
        assert relation.target == "LineItem"
        assert relation.from_cardinality.kind is CardinalityKind.MANY
        assert relation.to_cardinality.lower == 1

    def test_custom_cardinality_label(self):
        relation = parse_relation_line('Order "*" -- "many" Tag')
        assert relation.to_cardinality.kind is CardinalityKind.CUSTOM
        assert relation.to_cardinality.label == "many"

    def test_missing_cardinality(self):
        relation = parse_relation_line("A --> B")
        assert relation.from_cardinality is None
        assert relation.to_cardinality is None

    def test_trailing_label_is_discarded(self):
        relation = parse_relation_line('Branch o-- "0..*" Book : stocks')
        assert relation.kind is RelationKind.AGGREGATION
        assert relation.target == "Book"

    def test_no_spaces_around_symbol(self):
        relation = parse_relation_line("A-->B")
        assert (relation.source, relation.target) == ("A", "B")

    def test_realization_maps_to_dependency(self):
        relation = parse_relation_line("Person ..|> Speakable")
        assert relation.kind is RelationKind.DEPENDENCY

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "' Person --> Address",
            "class Person {",
            "A -->",
            "--> B",
            '"1" -- "2"',
            "@startuml",
        ],
    )
    def test_non_relation_lines(self, line):
        assert parse_relation_line(line) is None


class TestScanRelations:

    def test_line_order_is_preserved(self):
        text = "A --> B\nclass C {\n}\nC <|-- D\n"
        relations = scan_relations(text)
        assert [(r.source, r.target) for r in relations] == [("A", "B"), ("C", "D")]

    def test_relations_may_reference_unknown_names(self):
        relations = scan_relations("Ghost --> Phantom")
        assert relations[0].source == "Ghost"
