"""PlantUML class-diagram parser.

Builds the intermediate :class:`Diagram` from raw text: block structure
first, then member lines of every class and interface, then an
independent pass over all lines for relations.  Nothing here raises for
malformed input; fragments that cannot be read are left out.
"""
from __future__ import annotations

import logging

from src.shared.models.diagram import ClassKind, ClassLike, Diagram, EnumType
from src.uml_openapi.services.member_parser import parse_members
from src.uml_openapi.services.relation_scanner import scan_relations
from src.uml_openapi.services.structural_parser import find_blocks, parse_enum_values

logger = logging.getLogger(__name__)


def normalize_text(text: str) -> str:
    """Normalise line endings to ``\\n`` and drop a leading BOM."""
    return text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def parse_plantuml(text: str) -> Diagram:
    """Parse PlantUML class-diagram text into a :class:`Diagram`."""
    text = normalize_text(text)

    classes: list[ClassLike] = []
    interfaces: list[ClassLike] = []
    enums: list[EnumType] = []

    for block in find_blocks(text):
        if block.keyword == "enum":
            enums.append(EnumType(name=block.name, values=parse_enum_values(block.body)))
            continue

        attributes, methods = parse_members(block.body)
        entity = ClassLike(
            name=block.name,
            kind=ClassKind(block.keyword),
            attributes=attributes,
            methods=methods,
        )
        if entity.kind is ClassKind.INTERFACE:
            interfaces.append(entity)
        else:
            classes.append(entity)

    relations = scan_relations(text)

    logger.debug(
        "Parsed diagram: classes=%d interfaces=%d enums=%d relations=%d",
        len(classes), len(interfaces), len(enums), len(relations),
    )
    return Diagram(
        classes=classes,
        interfaces=interfaces,
        enums=enums,
        relations=relations,
    )
