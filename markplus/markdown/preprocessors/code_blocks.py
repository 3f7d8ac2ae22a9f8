"""
Splits raw markdown into code and non-code segments.

Custom tags must never be expanded inside fenced code blocks or <pre>
regions, so the tag preprocessors only ever see the non-code segments.

    text ```[color=red]x[/color]``` more
    → Segment("text "), Segment("```[color=red]x[/color]```", is_code=True), Segment(" more")
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# One alternation so a fence inside <pre> (or the reverse) is never counted twice.
# An unterminated fence or <pre> does not match and stays ordinary text.
CODE_BLOCK_PATTERN = re.compile(r"```.*?```|<pre>.*?</pre>", re.DOTALL)


@dataclass(frozen=True)
class Segment:
    text: str
    is_code: bool = False


def split_code_blocks(text: str) -> list[Segment]:
    """
    Partition text into alternating non-code and code segments.

    Code segments keep their delimiters verbatim. Joining every segment in
    order gives back the original text.
    """
    segments = []
    position = 0

    for match in CODE_BLOCK_PATTERN.finditer(text):
        if match.start() > position:
            segments.append(Segment(text[position : match.start()]))
        segments.append(Segment(match.group(0), is_code=True))
        position = match.end()

    if position < len(text):
        segments.append(Segment(text[position:]))

    return segments


def join_segments(segments: Iterable[Segment]) -> str:
    return "".join(segment.text for segment in segments)
