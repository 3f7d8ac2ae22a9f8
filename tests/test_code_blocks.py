"""Tests for splitting markdown into code and non-code segments."""

from hypothesis import given, settings
from hypothesis import strategies as st

from markplus.markdown.preprocessors.code_blocks import (
    CODE_BLOCK_PATTERN,
    Segment,
    join_segments,
    split_code_blocks,
)


class TestSplitCodeBlocks:
    def test_plain_text_is_one_segment(self) -> None:
        assert split_code_blocks("just text") == [Segment("just text")]

    def test_empty_text_has_no_segments(self) -> None:
        assert split_code_blocks("") == []

    def test_fenced_block_keeps_delimiters(self) -> None:
        text = "before\n```python\nx = 1\n```\nafter"
        segments = split_code_blocks(text)

        assert segments == [
            Segment("before\n"),
            Segment("```python\nx = 1\n```", is_code=True),
            Segment("\nafter"),
        ]

    def test_pre_block_is_code(self) -> None:
        text = "a<pre>[rtl]x[/rtl]</pre>b"
        segments = split_code_blocks(text)

        assert [s.is_code for s in segments] == [False, True, False]
        assert segments[1].text == "<pre>[rtl]x[/rtl]</pre>"

    def test_pre_match_is_case_sensitive(self) -> None:
        segments = split_code_blocks("<PRE>x</PRE>")
        assert segments == [Segment("<PRE>x</PRE>")]

    def test_fence_is_non_greedy(self) -> None:
        text = "```a``` mid ```b```"
        segments = split_code_blocks(text)

        assert [s.text for s in segments] == ["```a```", " mid ", "```b```"]
        assert [s.is_code for s in segments] == [True, False, True]

    def test_unterminated_fence_is_plain_text(self) -> None:
        text = "intro\n```\n[color=red]x[/color]\nno closing fence"
        assert split_code_blocks(text) == [Segment(text)]

    def test_unterminated_pre_is_plain_text(self) -> None:
        text = "<pre>open forever [mono]x[/mono]"
        assert split_code_blocks(text) == [Segment(text)]

    def test_fence_inside_pre_not_counted_twice(self) -> None:
        text = "<pre>```x```</pre>"
        assert split_code_blocks(text) == [Segment(text, is_code=True)]

    def test_adjacent_code_blocks(self) -> None:
        segments = split_code_blocks("```a```<pre>b</pre>")
        assert [s.is_code for s in segments] == [True, True]


class TestSplitInvariants:
    """Property-based checks that hold for any input."""

    @given(st.text(alphabet="`<>/pre[]abc\n ", max_size=300))
    @settings(max_examples=200)
    def test_split_is_lossless(self, text: str) -> None:
        assert join_segments(split_code_blocks(text)) == text

    @given(st.text(alphabet="`<>/pre[]abc\n ", max_size=300))
    @settings(max_examples=200)
    def test_code_segments_are_whole_matches(self, text: str) -> None:
        for segment in split_code_blocks(text):
            assert segment.text
            if segment.is_code:
                assert CODE_BLOCK_PATTERN.fullmatch(segment.text)
            else:
                assert not CODE_BLOCK_PATTERN.search(segment.text)
