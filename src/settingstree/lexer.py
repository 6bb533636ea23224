"""Line tokenizer producing the flat, indentation-annotated node sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

LOG = logging.getLogger(__name__)

INDENT_WIDTH = 4
COMMENT_PREFIX = "#"
ASSIGNMENT = "="


@dataclass(frozen=True)
class Line:
    """One raw input line with its 1-based position."""

    number: int
    text: str


@dataclass(frozen=True)
class FlatNode:
    """A single ``key = value`` entry annotated with its indentation level."""

    level: int
    key: str
    value: str | None
    line: int = 0


class MalformedIndentationError(ValueError):
    """Raised when a line is not indented by a multiple of four spaces."""

    def __init__(self, line_number: int, reason: str = "bad indentation") -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Settings file: {reason} on line {line_number}.")


def number_lines(lines: Iterable[str]) -> Iterator[Line]:
    for number, text in enumerate(lines, start=1):
        yield Line(number=number, text=text)


def split_assignment(text: str) -> tuple[str, str | None]:
    """Split ``text`` on its first ``=`` into a trimmed key and optional value."""
    key, separator, value = text.partition(ASSIGNMENT)
    if not separator:
        return key.strip(), None
    return key.strip(), value.strip()


def tokenize(lines: Iterable[Line | str], strict_levels: bool = False) -> list[FlatNode]:
    """
    Build the flat node sequence for ``lines``.

    Blank lines and comments are skipped. Indentation is validated before the
    comment check, so a mis-indented comment still fails. Tabs are not treated
    as indentation. With ``strict_levels`` a node may only be one level deeper
    than the node before it.
    """
    nodes: list[FlatNode] = []
    previous_level = -1
    for number, raw in enumerate(lines, start=1):
        line = raw if isinstance(raw, Line) else Line(number=number, text=raw)
        text = line.text.rstrip("\r\n")
        if not text.strip():
            continue

        spaces = len(text) - len(text.lstrip(" "))
        if spaces % INDENT_WIDTH != 0:
            raise MalformedIndentationError(line.number)

        content = text[spaces:]
        if content.startswith(COMMENT_PREFIX):
            continue

        level = spaces // INDENT_WIDTH
        if strict_levels and level > previous_level + 1:
            raise MalformedIndentationError(line.number, reason="indentation jumps more than one level")
        previous_level = level

        key, value = split_assignment(content)
        nodes.append(FlatNode(level=level, key=key, value=value, line=line.number))

    LOG.debug("Tokenized %d settings node(s)", len(nodes))
    return nodes
