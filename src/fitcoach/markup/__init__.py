"""Lightweight markup parsing for coach replies.

Turns reply text into block nodes (headings, paragraphs, lists) that carry
inline spans (plain, bold, italic).
"""

from .blocks import ListAccumulator, ListKind, parse_blocks
from .inline import parse_inline, select_earliest_match
from .models import BlockKind, BlockNode, InlineSpan, SpanKind

__all__ = [
    "BlockKind",
    "BlockNode",
    "InlineSpan",
    "ListAccumulator",
    "ListKind",
    "SpanKind",
    "parse_blocks",
    "parse_inline",
    "select_earliest_match",
]
