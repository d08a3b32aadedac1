"""Block-level markup parsing.

Hidden design decisions:
- Lines are classified one at a time after trimming
- Contiguous list lines are grouped by a small accumulator state machine
- Blank lines only separate blocks and never produce nodes
"""

import re
from enum import Enum

from .inline import parse_inline
from .models import BlockKind, BlockNode, InlineSpan

UNORDERED_ITEM = re.compile(r"^[-*]\s+")
ORDERED_ITEM = re.compile(r"^\d+\.\s+")
HEADING3 = re.compile(r"^###\s+")
HEADING2 = re.compile(r"^##\s+")


class ListKind(str, Enum):
    """Kind of list currently being accumulated."""

    NONE = "none"
    UNORDERED = "unordered"
    ORDERED = "ordered"


_LIST_BLOCK_KINDS = {
    ListKind.UNORDERED: BlockKind.UNORDERED_LIST,
    ListKind.ORDERED: BlockKind.ORDERED_LIST,
}


class ListAccumulator:
    """Buffers list items until the list ends.

    Flushed whenever a non-list line, a blank line or a list line of the
    other kind arrives.
    """

    def __init__(self, output: list[BlockNode]) -> None:
        self._output = output
        self.kind = ListKind.NONE
        self._items: list[tuple[InlineSpan, ...]] = []

    def add(self, kind: ListKind, text: str) -> None:
        if kind != self.kind:
            self.flush()
        self.kind = kind
        self._items.append(tuple(parse_inline(text)))

    def flush(self) -> None:
        if self._items and self.kind != ListKind.NONE:
            self._output.append(
                BlockNode(kind=_LIST_BLOCK_KINDS[self.kind], items=tuple(self._items))
            )
        self._items = []
        self.kind = ListKind.NONE


def _classify_list_line(line: str) -> tuple[ListKind, str] | None:
    """Return the list kind and item text for a list line, else None."""
    for kind, pattern in ((ListKind.UNORDERED, UNORDERED_ITEM), (ListKind.ORDERED, ORDERED_ITEM)):
        match = pattern.match(line)
        if match:
            return kind, line[match.end():]
    return None


def _classify_text_line(line: str) -> BlockNode:
    """Build a heading or paragraph node from a non-empty, non-list line."""
    if HEADING3.match(line):
        return BlockNode(kind=BlockKind.HEADING3, spans=parse_inline(HEADING3.sub("", line, count=1)))
    if HEADING2.match(line):
        return BlockNode(kind=BlockKind.HEADING2, spans=parse_inline(HEADING2.sub("", line, count=1)))
    return BlockNode(kind=BlockKind.PARAGRAPH, spans=parse_inline(line))


def parse_blocks(text: str) -> list[BlockNode]:
    """Parse a message body into ordered block nodes.

    Args:
        text: Message body, newline separated

    Returns:
        Block nodes in source order
    """
    nodes: list[BlockNode] = []
    lists = ListAccumulator(nodes)

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        list_line = _classify_list_line(line)
        if list_line is not None:
            lists.add(*list_line)
            continue

        lists.flush()
        if not line:
            continue
        nodes.append(_classify_text_line(line))

    lists.flush()
    return nodes
