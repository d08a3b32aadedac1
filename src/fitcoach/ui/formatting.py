"""Text formatting utilities for the TUI.

Hides the details of turning parsed block nodes into Rich text.
"""

from collections.abc import Iterable

from rich.text import Text

from ..markup import BlockKind, BlockNode, InlineSpan, SpanKind, parse_blocks
from .config import BULLET, XP_BAR_EMPTY, XP_BAR_FILLED, XP_BAR_WIDTH

SPAN_STYLES = {
    SpanKind.PLAIN: "",
    SpanKind.BOLD: "bold",
    SpanKind.ITALIC: "italic",
}

HEADING_STYLES = {
    BlockKind.HEADING2: "bold underline",
    BlockKind.HEADING3: "bold",
}


def render_spans(spans: Iterable[InlineSpan], base_style: str = "") -> Text:
    """Render inline spans as one line of styled text."""
    text = Text(style=base_style)
    for span in spans:
        text.append(span.text, style=SPAN_STYLES[span.kind])
    return text


def render_block(node: BlockNode) -> Text:
    """Render one block node.

    Unordered items get a bullet; ordered items are renumbered from 1, as the
    source numbers are only list markers.
    """
    if node.kind in HEADING_STYLES:
        return render_spans(node.spans, HEADING_STYLES[node.kind])
    if node.kind == BlockKind.PARAGRAPH:
        return render_spans(node.spans)

    lines = []
    for number, item in enumerate(node.items, 1):
        marker = f"{BULLET} " if node.kind == BlockKind.UNORDERED_LIST else f"{number}. "
        line = Text("  " + marker, style="dim")
        line.append_text(render_spans(item))
        lines.append(line)
    return Text("\n").join(lines)


def render_blocks(nodes: Iterable[BlockNode]) -> Text:
    """Render block nodes in order, with a blank line before each heading."""
    parts: list[Text] = []
    for node in nodes:
        if parts and node.kind in HEADING_STYLES:
            parts.append(Text(""))
        parts.append(render_block(node))
    return Text("\n").join(parts)


def render_message_body(content: str) -> Text:
    """Parse a coach reply and render it as Rich text."""
    return render_blocks(parse_blocks(content))


def format_xp_bar(xp: int, xp_per_level: int, width: int = XP_BAR_WIDTH) -> str:
    """Fixed-width text progress bar for experience within a level."""
    filled = round(width * xp / xp_per_level) if xp_per_level else 0
    filled = max(0, min(width, filled))
    return XP_BAR_FILLED * filled + XP_BAR_EMPTY * (width - filled)
