"""Exception classes for the tag-aware markdown pipeline."""

from __future__ import annotations


class MarkdownTagError(Exception):
    """Base exception for all markplus rendering errors."""

    pass


class NestingTooDeepError(MarkdownTagError):
    """Raised when [rtl]/[ltr]/[mono] blocks nest deeper than allowed.

    Container tags re-enter the renderer for their content, so the nesting
    depth of the input becomes call depth.
    """

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Container tags nested too deep: depth {depth} exceeds limit {limit}"
        )
