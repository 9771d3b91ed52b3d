"""Structural parser: locates ``class``/``interface``/``enum`` blocks.

The text is walked once, character by character, by a small state
machine.  Outside a block the parser waits for an opening brace; the text
between the previous block (or the start of input) and that brace is the
block header.  Inside a block everything up to the matching closing brace
is the body.  Double-quoted spans are tracked in both states so braces
inside labels or stereotypes never open or close a block; a quoted span
never extends past the end of its line.  Lines starting with ``'`` are
PlantUML comments and are skipped entirely.

Blocks are flat: a brace inside a body does not nest, and ``{static}``
style member modifiers inside a body are not braces at all.  A brace
block whose header is not ``<keyword> <identifier>`` (``skinparam x {``,
``package foo {``) is dropped, but a ``<keyword> <identifier> {`` line
met inside it starts a real block there.  A block left open at the end
of the input is dropped.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

BLOCK_KEYWORDS = ("class", "interface", "enum")

# "<keyword> <identifier>" optionally followed by generics or a stereotype,
# anchored to the end of the header text.
_HEADER_RE = re.compile(
    r"\b(class|interface|enum)\s+(\w+)\s*(?:<[^<>{}]*>\s*)?(?:<<[^{}]*>>\s*)?$"
)
_MODIFIER_RE = re.compile(r"\{\w+\}")


class _State(Enum):
    OUTSIDE = "outside"
    IN_BODY = "in_body"


@dataclass(frozen=True)
class RawBlock:
    """A matched block before its body lines are interpreted."""
    keyword: str
    name: str
    body: str


def find_blocks(text: str) -> list[RawBlock]:
    """Return every well-formed block in *text*, in source order."""
    blocks: list[RawBlock] = []
    state = _State.OUTSIDE
    in_quotes = False
    header_start = 0
    body_start = 0
    line_start = 0
    header: tuple[str, str] | None = None

    index = 0
    while index < len(text):
        if index == line_start and _is_comment_line(text, index):
            index = _line_end(text, index)
            if state is _State.OUTSIDE:
                header_start = index
            continue

        char = text[index]
        if char == "\n":
            in_quotes = False
            line_start = index + 1
        elif char == '"':
            in_quotes = not in_quotes
        elif in_quotes:
            pass
        elif state is _State.OUTSIDE and char == "{":
            header = _match_header(text[header_start:index])
            state = _State.IN_BODY
            body_start = index + 1
        elif char == "{":
            modifier = _MODIFIER_RE.match(text, index)
            if modifier:
                index = modifier.end()
                continue
            if header is None:
                restart = _match_header(text[max(line_start, body_start):index])
                if restart is not None:
                    logger.debug("Block header found inside unrecognised block at offset %d", index)
                    header = restart
                    body_start = index + 1
        elif state is _State.IN_BODY and char == "}":
            if header is not None:
                keyword, name = header
                blocks.append(RawBlock(keyword, name, text[body_start:index]))
            else:
                logger.debug("Skipping unrecognised brace block at offset %d", body_start)
            state = _State.OUTSIDE
            header = None
            header_start = index + 1
        index += 1

    if state is _State.IN_BODY:
        logger.debug("Dropping unterminated block starting at offset %d", body_start)

    return blocks


def _line_end(text: str, index: int) -> int:
    end = text.find("\n", index)
    return len(text) if end == -1 else end


def _is_comment_line(text: str, index: int) -> bool:
    return text[index:_line_end(text, index)].lstrip().startswith("'")


def _match_header(segment: str) -> tuple[str, str] | None:
    """Extract ``(keyword, name)`` from the text preceding an opening brace."""
    match = _HEADER_RE.search(segment)
    if not match:
        return None
    return match.group(1), match.group(2)


def body_lines(body: str) -> list[str]:
    """Split a block body into trimmed, non-empty lines."""
    return [line.strip() for line in body.split("\n") if line.strip()]


def parse_enum_values(body: str) -> list[str]:
    """Return enum constants in declaration order.

    One constant per line is the common form; comma separated constants on a
    line and trailing ``;`` are accepted as well.
    """
    values: list[str] = []
    for line in body_lines(body):
        if line.startswith("'"):
            continue
        for token in line.rstrip(";").split(","):
            token = token.strip()
            if token:
                values.append(token)
    return values
