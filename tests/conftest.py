"""Shared test fixtures for the uml-openapi test suite."""
from __future__ import annotations

from pathlib import Path

import pytest


PERSON_MODEL = "\n".join([
    "class Person {",
    "  +id: UUID",
    "  +name: String",
    "  +birthDate: date",
    "  +isActive: boolean",
    "  -internalNote: String",
    "  +greet(): void",
    "}",
    "",
    "class Address {",
    "  +street: String",
    "}",
    "",
    "class Employee {",
    "  +salary: number",
    "}",
    "",
    "interface Speakable {",
    "  +speak(): void",
    "}",
    "",
    "enum Gender {",
    "  MALE",
    "  FEMALE",
    "}",
    "",
    'Person "1" *-- "1..*" Address',
    'Person "1..1" --> "1..1" Gender',
    "Person ..|> Speakable",
    "Person <|-- Employee",
])

ORDER_MODEL = "\n".join([
    "class Order {}",
    "class LineItem {}",
    "class Comment {}",
    "class Tag {}",
    "",
    'Order "*" -- "1..*" LineItem',
    'Order "0..1" --> Comment',
    'Order "*" -- "many" Tag',
])


@pytest.fixture
def person_model() -> str:
    """Classes, an interface, an enum and one relation of each family."""
    return PERSON_MODEL


@pytest.fixture
def order_model() -> str:
    """Empty classes linked by relations with assorted cardinalities."""
    return ORDER_MODEL


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """A temporary fixture directory with two diagrams and one stray file."""
    directory = tmp_path / "fixtures"
    directory.mkdir()
    (directory / "uc02-order-cardinality.plant").write_text(ORDER_MODEL, encoding="utf-8")
    (directory / "uc01-person-model.plant").write_text(PERSON_MODEL, encoding="utf-8")
    (directory / "notes.txt").write_text("not a diagram", encoding="utf-8")
    return directory
