"""
Holds rendered HTML out of the markdown pass.

Container tags are rendered to HTML before the converter runs on the
surrounding text. Handing that HTML to the converter again would let it
re-read the markup as markdown (escaped asterisks turning into emphasis,
code spans picking up <em>). Instead each rendered block is stored here and
a plain-word placeholder goes through the converter; the block is put back
afterwards.

Placeholders carry the render depth, so a nested render never restores (or
clobbers) the placeholders of the render that called it.
"""

from __future__ import annotations

import re

PLACEHOLDER = "zmarkplus{depth}s{index}z"


class HtmlStash:
    def __init__(self, depth: int = 0) -> None:
        self.depth = depth
        self.blocks: list[str] = []

        base = PLACEHOLDER.format(depth=depth, index="([0-9]+)")
        # A placeholder alone on a line comes back wrapped in a paragraph
        self._pattern = re.compile(rf"<p>{base}</p>|{base}")

    def store(self, html: str) -> str:
        """Keep html and return the placeholder that stands in for it."""
        self.blocks.append(html)
        return PLACEHOLDER.format(depth=self.depth, index=len(self.blocks) - 1)

    def restore(self, text: str) -> str:
        """Put every stashed block back in place of its placeholder."""
        if not self.blocks:
            return text

        def substitute_match(match):
            index = int(match.group(1) or match.group(2))
            if index >= len(self.blocks):
                return match.group(0)
            return self.blocks[index]

        # Blocks may hold placeholders stored before them, so at most one
        # pass per block is needed; the bound also stops on user text that
        # happens to spell a placeholder inside its own block.
        for _ in range(len(self.blocks)):
            processed_text = self._pattern.sub(substitute_match, text)
            if processed_text == text:
                break
            text = processed_text
        return text
