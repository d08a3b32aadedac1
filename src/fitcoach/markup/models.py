"""Data models for rendered markup.

Hides the representation of block nodes and inline spans produced by the
parsers. Nodes are rendering-only and never persisted.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SpanKind(str, Enum):
    """Style of an inline span."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"


class BlockKind(str, Enum):
    """Structural kind of a block node."""

    HEADING2 = "heading2"
    HEADING3 = "heading3"
    PARAGRAPH = "paragraph"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"

    @property
    def is_list(self) -> bool:
        return self in (BlockKind.UNORDERED_LIST, BlockKind.ORDERED_LIST)


class InlineSpan(BaseModel):
    """One styled run of text within a block."""

    model_config = ConfigDict(frozen=True)

    kind: SpanKind = Field(description="Span style")
    text: str = Field(description="Text payload without markers")

    @classmethod
    def plain(cls, text: str) -> "InlineSpan":
        return cls(kind=SpanKind.PLAIN, text=text)

    @classmethod
    def bold(cls, text: str) -> "InlineSpan":
        return cls(kind=SpanKind.BOLD, text=text)

    @classmethod
    def italic(cls, text: str) -> "InlineSpan":
        return cls(kind=SpanKind.ITALIC, text=text)


class BlockNode(BaseModel):
    """One structurally distinct unit of rendered text.

    Headings and paragraphs carry ``spans``; list nodes carry ``items``,
    one span sequence per list item.
    """

    model_config = ConfigDict(frozen=True)

    kind: BlockKind = Field(description="Block kind")
    spans: tuple[InlineSpan, ...] = Field(
        default=(),
        description="Inline spans for heading and paragraph nodes"
    )
    items: tuple[tuple[InlineSpan, ...], ...] = Field(
        default=(),
        description="Per-item inline spans for list nodes"
    )

    @property
    def plain_text(self) -> str:
        """Text of the node with all styling dropped (items joined by newlines)."""
        if self.kind.is_list:
            return "\n".join("".join(span.text for span in item) for item in self.items)
        return "".join(span.text for span in self.spans)
