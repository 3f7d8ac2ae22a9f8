"""
Preprocessor that converts color tags into styled spans.

Converts:
    [color=red]warning[/color]    → <span style="color:red;">warning</span>
    [color=brand]logo[/color]     → <span style="color:#ff0000;">logo</span>  (brand configured)

Content is left as markdown source; the markdown pass renders it later.
"""

from __future__ import annotations

import html
import re
from types import MappingProxyType

COLOR_TAG_PATTERN = re.compile(r"\[color=([^\]]+)\](.*?)\[/color\]", re.DOTALL)


class ColorResolver:
    """Maps a color token to a CSS color value."""

    def __init__(self, colors=None):
        self._colors = MappingProxyType(dict(colors or {}))

    @property
    def colors(self):
        return self._colors

    def resolve(self, token: str) -> str:
        """
        Return the configured value for ``token``, or the token itself escaped.

        Configured values are trusted and returned verbatim (they may hold
        gradients or quotes). Unknown tokens come from user input and are
        HTML-escaped so they cannot break out of the style attribute.
        """
        if token in self._colors:
            return self._colors[token]
        return html.escape(token)


def process_color_tags(text: str, context: dict) -> str:
    """
    Replace [color=...]...[/color] with a colored span.

    Args:
        text: Non-code markdown segment
        context: Must contain 'renderer' with a color_resolver

    Returns:
        Markdown with color tags converted to inline HTML
    """
    resolver = context["renderer"].color_resolver

    def replace_color_tag(match):
        color = resolver.resolve(match.group(1))
        content = match.group(2)
        return f'<span style="color:{color};">{content}</span>'

    return COLOR_TAG_PATTERN.sub(replace_color_tag, text)
