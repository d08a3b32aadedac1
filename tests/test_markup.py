"""Unit and property-based tests for the markup module."""
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fitcoach.markup import (
    BlockKind,
    BlockNode,
    InlineSpan,
    ListAccumulator,
    ListKind,
    SpanKind,
    parse_blocks,
    parse_inline,
    select_earliest_match,
)

no_asterisks = st.text(alphabet=st.characters(blacklist_characters="*"), min_size=1)
words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", min_size=1).filter(str.strip)


class TestParseInline:
    """Tests for inline span parsing."""

    def test_mixed_bold_and_italic(self):
        """Test the reference sentence with both emphasis kinds."""
        spans = parse_inline("Do **10 reps** of *squats*")

        assert spans == [
            InlineSpan.plain("Do "),
            InlineSpan.bold("10 reps"),
            InlineSpan.plain(" of "),
            InlineSpan.italic("squats"),
        ]

    def test_empty_input(self):
        """Test that empty input yields no spans."""
        assert parse_inline("") == []

    def test_plain_only(self):
        """Test that text without markers is one plain span."""
        assert parse_inline("Rest 90 seconds") == [InlineSpan.plain("Rest 90 seconds")]

    def test_leading_match_has_no_empty_plain_span(self):
        """Test that no empty plain span precedes a match at offset 0."""
        spans = parse_inline("**Tip:** breathe out on effort")

        assert spans[0] == InlineSpan.bold("Tip:")
        assert all(span.text for span in spans)

    def test_trailing_text_after_last_match(self):
        """Test that text after the last marker becomes a trailing plain span."""
        assert parse_inline("*slowly* and controlled") == [
            InlineSpan.italic("slowly"),
            InlineSpan.plain(" and controlled"),
        ]

    def test_italic_before_bold(self):
        """Test that an italic match starting earlier wins over a later bold."""
        assert parse_inline("*light* then **heavy**") == [
            InlineSpan.italic("light"),
            InlineSpan.plain(" then "),
            InlineSpan.bold("heavy"),
        ]

    def test_bold_is_non_greedy(self):
        """Test that bold stops at the first closing marker."""
        assert parse_inline("**a** and **b**") == [
            InlineSpan.bold("a"),
            InlineSpan.plain(" and "),
            InlineSpan.bold("b"),
        ]

    def test_unmatched_marker_stays_plain(self):
        """Test that a lone asterisk is left as literal text."""
        assert parse_inline("3 * 10 reps") == [InlineSpan.plain("3 * 10 reps")]

    def test_italic_does_not_split_bold_markers(self):
        """Test that italic never matches inside a bold pair's asterisks."""
        spans = parse_inline("**Deadlift**")
        assert spans == [InlineSpan.bold("Deadlift")]

    @given(no_asterisks)
    def test_text_without_markers_round_trips(self, text: str):
        """Property test: marker-free text is returned as a single plain span."""
        assert parse_inline(text) == [InlineSpan.plain(text)]

    @given(words)
    def test_wrapped_text_becomes_single_styled_span(self, text: str):
        """Property test: marker-wrapped text yields exactly one styled span."""
        assert parse_inline(f"**{text}**") == [InlineSpan.bold(text)]
        assert parse_inline(f"*{text}*") == [InlineSpan.italic(text)]


class TestSelectEarliestMatch:
    """Tests for the match selection routine."""

    def test_smallest_offset_wins(self):
        """Test that the candidate with the smaller start offset is selected."""
        late = re.search("b", "ab")
        early = re.search("a", "ab")

        kind, match = select_earliest_match([(SpanKind.BOLD, late), (SpanKind.ITALIC, early)])

        assert kind == SpanKind.ITALIC
        assert match is early

    def test_tie_goes_to_first_candidate(self):
        """Test that equal offsets keep priority order."""
        first = re.search("a", "a")
        second = re.search("a", "a")

        kind, _ = select_earliest_match([(SpanKind.BOLD, first), (SpanKind.ITALIC, second)])

        assert kind == SpanKind.BOLD

    def test_no_candidates(self):
        """Test that missing matches are skipped."""
        assert select_earliest_match([(SpanKind.BOLD, None), (SpanKind.ITALIC, None)]) is None


class TestParseBlocks:
    """Tests for block parsing."""

    def test_heading_list_paragraph(self):
        """Test the reference document with heading, list and paragraph."""
        nodes = parse_blocks("## Warmup\n- Jog\n- Stretch\n\nGo hard.")

        assert nodes == [
            BlockNode(kind=BlockKind.HEADING2, spans=[InlineSpan.plain("Warmup")]),
            BlockNode(
                kind=BlockKind.UNORDERED_LIST,
                items=[[InlineSpan.plain("Jog")], [InlineSpan.plain("Stretch")]],
            ),
            BlockNode(kind=BlockKind.PARAGRAPH, spans=[InlineSpan.plain("Go hard.")]),
        ]

    def test_heading_levels(self):
        """Test that ### and ## map to level 3 and level 2 headings."""
        nodes = parse_blocks("### Cooldown\n## Plan")

        assert [node.kind for node in nodes] == [BlockKind.HEADING3, BlockKind.HEADING2]
        assert [node.plain_text for node in nodes] == ["Cooldown", "Plan"]

    def test_deeper_heading_is_paragraph(self):
        """Test that four hashes are not a heading."""
        nodes = parse_blocks("#### Notes")
        assert nodes[0].kind == BlockKind.PARAGRAPH
        assert nodes[0].plain_text == "#### Notes"

    def test_ordered_list(self):
        """Test that numbered lines form an ordered list."""
        nodes = parse_blocks("1. Squat\n2. Bench\n10. Row")

        assert len(nodes) == 1
        assert nodes[0].kind == BlockKind.ORDERED_LIST
        assert nodes[0].plain_text == "Squat\nBench\nRow"

    def test_both_bullet_markers_share_a_list(self):
        """Test that - and * items accumulate into one unordered list."""
        nodes = parse_blocks("- Jog\n* Skip")
        assert len(nodes) == 1
        assert len(nodes[0].items) == 2

    def test_list_kind_change_starts_new_block(self):
        """Test that switching list kinds flushes the previous list."""
        nodes = parse_blocks("- Jog\n1. Squat\n- Walk")

        assert [node.kind for node in nodes] == [
            BlockKind.UNORDERED_LIST,
            BlockKind.ORDERED_LIST,
            BlockKind.UNORDERED_LIST,
        ]

    def test_blank_line_splits_list(self):
        """Test that a blank line inside a list ends it."""
        nodes = parse_blocks("- Jog\n\n- Stretch")

        assert len(nodes) == 2
        assert all(node.kind == BlockKind.UNORDERED_LIST for node in nodes)

    def test_paragraph_ends_list(self):
        """Test that a paragraph line flushes the list before it."""
        nodes = parse_blocks("- Jog\nThen lift.\n- Stretch")
        assert [node.kind for node in nodes] == [
            BlockKind.UNORDERED_LIST,
            BlockKind.PARAGRAPH,
            BlockKind.UNORDERED_LIST,
        ]

    def test_lines_are_trimmed(self):
        """Test that surrounding whitespace is ignored for classification."""
        nodes = parse_blocks("   ## Plan  \n    - Jog   ")

        assert nodes[0].kind == BlockKind.HEADING2
        assert nodes[0].plain_text == "Plan"
        assert nodes[1].items == ((InlineSpan.plain("Jog"),),)

    def test_list_items_parse_inline(self):
        """Test that each list item gets its own inline spans."""
        nodes = parse_blocks("- **3 sets** of *10*")

        assert nodes[0].items[0] == (
            InlineSpan.bold("3 sets"),
            InlineSpan.plain(" of "),
            InlineSpan.italic("10"),
        )

    def test_bold_line_is_not_a_bullet(self):
        """Test that a line starting with ** is a paragraph, not a list item."""
        nodes = parse_blocks("**Rest** between sets")
        assert nodes[0].kind == BlockKind.PARAGRAPH

    def test_marker_without_space_is_paragraph(self):
        """Test that list markers need trailing whitespace."""
        nodes = parse_blocks("-5kg\n1.5 km")
        assert [node.kind for node in nodes] == [BlockKind.PARAGRAPH, BlockKind.PARAGRAPH]

    @pytest.mark.parametrize("text", ["", "\n", "   \n\n  \t"])
    def test_blank_input(self, text: str):
        """Test that blank lines never produce nodes."""
        assert parse_blocks(text) == []

    @given(st.lists(words.map(str.strip), max_size=8))
    def test_plain_lines_keep_source_order(self, lines):
        """Property test: paragraph nodes appear in source order."""
        nodes = parse_blocks("\n".join(lines))
        assert [node.plain_text for node in nodes] == lines


class TestListAccumulator:
    """Tests for the list accumulator state machine."""

    def test_flush_emits_and_resets(self):
        """Test that flush emits one node and returns to NONE."""
        out: list[BlockNode] = []
        acc = ListAccumulator(out)
        acc.add(ListKind.ORDERED, "Squat")
        acc.add(ListKind.ORDERED, "Bench")

        acc.flush()

        assert acc.kind == ListKind.NONE
        assert len(out) == 1
        assert out[0].kind == BlockKind.ORDERED_LIST

    def test_flush_when_empty_is_noop(self):
        """Test that flushing with no items emits nothing."""
        out: list[BlockNode] = []
        ListAccumulator(out).flush()
        assert out == []
