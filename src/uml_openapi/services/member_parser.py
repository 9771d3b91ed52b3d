"""Member parser for class and interface bodies.

Each body line is one member.  A leading visibility symbol is stripped
and mapped to an :class:`AccessModifier`; a line that contains ``(`` is a
method, anything else an attribute.  Lines that do not start with an
identifier once the symbol and ``{static}``-style modifiers are removed
are dropped.
"""
from __future__ import annotations

import logging
import re

from src.shared.models.diagram import AccessModifier, Attribute, Method
from src.uml_openapi.services.structural_parser import body_lines

logger = logging.getLogger(__name__)

ACCESS_SYMBOLS: dict[str, AccessModifier] = {
    "+": AccessModifier.PUBLIC,
    "-": AccessModifier.PRIVATE,
    "#": AccessModifier.PROTECTED,
    "~": AccessModifier.PACKAGE,
}

_MODIFIER_PREFIX_RE = re.compile(r"^(?:\{\w+\}\s*)+")
_TYPE_TOKEN = r"[\w\[\]<>]+"
_METHOD_NAME_RE = re.compile(r"^(\w+)\s*\(")
_RETURN_TYPE_RE = re.compile(rf"^\)\s*:\s*({_TYPE_TOKEN})")
_ATTRIBUTE_RE = re.compile(rf"^(\w+)\s*(?::\s*({_TYPE_TOKEN})?)?")


def parse_access_modifier(symbol: str) -> AccessModifier:
    """Map a visibility symbol to an access modifier, defaulting to public."""
    return ACCESS_SYMBOLS.get(symbol, AccessModifier.PUBLIC)


def parse_members(body: str) -> tuple[list[Attribute], list[Method]]:
    """Split a block body into its attributes and methods."""
    attributes: list[Attribute] = []
    methods: list[Method] = []

    for line in body_lines(body):
        # "{static} +x" and "+{static} x" are both accepted.
        clean = _MODIFIER_PREFIX_RE.sub("", line)
        access = parse_access_modifier(clean[:1])
        if clean[:1] in ACCESS_SYMBOLS:
            clean = clean[1:].strip()
        clean = _MODIFIER_PREFIX_RE.sub("", clean)

        if "(" in clean:
            method = _parse_method(clean, access)
            if method is not None:
                methods.append(method)
                continue
        else:
            attribute = _parse_attribute(clean, access)
            if attribute is not None:
                attributes.append(attribute)
                continue

        logger.debug("Dropping unrecognised member line: %r", line)

    return attributes, methods


def _parse_method(text: str, access: AccessModifier) -> Method | None:
    match = _METHOD_NAME_RE.match(text)
    if not match:
        return None

    return_type = None
    close = text.rfind(")")
    if close != -1:
        return_match = _RETURN_TYPE_RE.match(text[close:])
        if return_match:
            return_type = return_match.group(1)

    return Method(name=match.group(1), return_type=return_type, access=access)


def _parse_attribute(text: str, access: AccessModifier) -> Attribute | None:
    match = _ATTRIBUTE_RE.match(text)
    if not match:
        return None
    return Attribute(name=match.group(1), type=match.group(2), access=access)
