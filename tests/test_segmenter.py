"""Tests for the line-oriented documentation segmenter."""

import pytest

from docqa.indexing.segmenter import SegmenterState, segment, transition


# ---------------------------------------------------------------------------
# End-to-end examples
# ---------------------------------------------------------------------------

class TestSegmentExamples:
    def test_heading_and_two_paragraphs(self):
        assert segment("# Title\n\nHello world.\n\nMore text.\n") == ["Hello world.\n", "More text.\n"]

    def test_code_block_then_text(self):
        assert segment("```\ncode line\n```\n\ntext\n") == ["```\ncode line\n```\n", "text\n"]

    def test_front_matter_is_dropped(self):
        assert segment("---\nkey: val\n---\nBody\n") == ["Body\n"]

    def test_empty_input(self):
        assert segment("") == []

    def test_only_headings_and_blank_lines(self):
        assert segment("# One\n\n## Two\n\n\n") == []


# ---------------------------------------------------------------------------
# Code blocks
# ---------------------------------------------------------------------------

class TestCodeBlocks:
    def test_fences_and_interior_preserved_verbatim(self):
        text = "Intro\n\n```python\ndef f():\n\n    return 1  # not a heading\n---\n```\n"
        chunks = segment(text)
        assert chunks[1] == "```python\ndef f():\n\n    return 1  # not a heading\n---\n```\n"

    def test_code_block_directly_after_prose_line_joins_prose(self):
        # Fences are only recognised while idle.
        assert segment("Prose\n```\nx\n```\n") == ["Prose\n```\nx\n```\n"]

    def test_unterminated_fence_is_flushed_at_end(self):
        assert segment("```\nstill open\n") == ["```\nstill open\n"]

    def test_crlf_line_endings(self):
        assert segment("```\r\ncode\r\n```\r\n\r\ntext\r\n") == ["```\ncode\n```\n", "text\n"]


# ---------------------------------------------------------------------------
# Front matter and headings
# ---------------------------------------------------------------------------

class TestFrontMatterAndHeadings:
    def test_no_front_matter_line_leaks(self):
        text = "---\ntitle: Secret\nsidebar: 2\n---\n\nVisible.\n"
        chunks = segment(text)
        assert chunks == ["Visible.\n"]
        assert not any("title" in c or "sidebar" in c for c in chunks)

    def test_unterminated_front_matter_produces_nothing(self):
        assert segment("---\ntitle: x\nBody\n") == []

    def test_heading_inside_prose_is_kept(self):
        # Headings are only skipped while idle.
        assert segment("Line one\n# not skipped\n\n") == ["Line one\n# not skipped\n"]

    def test_heading_never_starts_a_chunk(self):
        chunks = segment("## Setup\nText after heading\n")
        assert chunks == ["Text after heading\n"]


# ---------------------------------------------------------------------------
# Prose and invariants
# ---------------------------------------------------------------------------

class TestProse:
    def test_multi_line_paragraph(self):
        assert segment("a\nb\nc\n\nd\n") == ["a\nb\nc\n", "d\n"]

    def test_prose_without_trailing_newline_is_flushed(self):
        assert segment("last paragraph") == ["last paragraph\n"]

    def test_whitespace_only_line_ends_paragraph(self):
        assert segment("a\n   \nb\n") == ["a\n", "b\n"]

    @pytest.mark.parametrize(
        "text",
        [
            "\n\n\n",
            "```\n```\n",
            "---\n---\n---\n",
            "# h\n\n\n```\n\n```\n\n\nx\n\n\n",
            "text\n\n\n\n",
        ],
    )
    def test_never_emits_empty_chunk(self, text):
        assert all(chunk for chunk in segment(text))


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------

class TestTransition:
    def test_idle_fence_opens_code_block(self):
        step = transition(SegmenterState.IDLE, "", "```js")
        assert step.state is SegmenterState.CODE_BLOCK
        assert step.buffer == "```js\n"
        assert step.chunk is None

    def test_closing_fence_emits_chunk(self):
        step = transition(SegmenterState.CODE_BLOCK, "```\nx\n", "```")
        assert step.state is SegmenterState.IDLE
        assert step.chunk == "```\nx\n```\n"
        assert step.buffer == ""

    def test_blank_line_flushes_prose(self):
        step = transition(SegmenterState.PROSE, "hello\n", "")
        assert step.state is SegmenterState.IDLE
        assert step.chunk == "hello\n"

    def test_front_matter_discards_lines(self):
        step = transition(SegmenterState.FRONT_MATTER, "", "key: value")
        assert step.state is SegmenterState.FRONT_MATTER
        assert step.buffer == ""
        assert step.chunk is None

    def test_front_matter_marker_returns_to_idle(self):
        assert transition(SegmenterState.FRONT_MATTER, "", "---").state is SegmenterState.IDLE
