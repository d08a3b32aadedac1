"""Inline emphasis parsing.

Hidden design decisions:
- Bold and italic are matched by two independent patterns
- The earliest match wins, chosen by an explicit selection routine
- Ties at the same offset go to the pattern listed first (bold)
"""

import re
from collections.abc import Sequence

from .models import InlineSpan, SpanKind

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")

# Not touching another asterisk on either side, so it never eats half of a bold pair
ITALIC_PATTERN = re.compile(r"(?<!\*)\*([^*]+?)\*(?!\*)")

# Priority order for equal start offsets
INLINE_PATTERNS: tuple[tuple[SpanKind, re.Pattern[str]], ...] = (
    (SpanKind.BOLD, BOLD_PATTERN),
    (SpanKind.ITALIC, ITALIC_PATTERN),
)


def select_earliest_match(
    candidates: Sequence[tuple[SpanKind, re.Match[str] | None]],
) -> tuple[SpanKind, re.Match[str]] | None:
    """Pick the candidate match with the smallest start offset.

    Args:
        candidates: (kind, match) pairs in priority order; None matches are skipped

    Returns:
        The winning (kind, match) pair, or None if nothing matched
    """
    winner: tuple[SpanKind, re.Match[str]] | None = None
    for kind, match in candidates:
        if match is None:
            continue
        if winner is None or match.start() < winner[1].start():
            winner = (kind, match)
    return winner


def parse_inline(line: str) -> list[InlineSpan]:
    """Split a line into plain, bold and italic spans.

    Args:
        line: A single line of text

    Returns:
        Ordered spans; empty for empty input
    """
    spans: list[InlineSpan] = []
    rest = line

    while rest:
        selected = select_earliest_match(
            [(kind, pattern.search(rest)) for kind, pattern in INLINE_PATTERNS]
        )
        if selected is None:
            spans.append(InlineSpan.plain(rest))
            break

        kind, match = selected
        if match.start() > 0:
            spans.append(InlineSpan.plain(rest[:match.start()]))
        spans.append(InlineSpan(kind=kind, text=match.group(1)))
        rest = rest[match.end():]

    return spans
