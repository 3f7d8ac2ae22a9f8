"""
Preprocessors for the block container tags: [rtl], [ltr] and [mono].

The content of each block is rendered by the full renderer (custom tags and
markdown), then wrapped:

    [rtl]**שלום**[/rtl]   → <div class="rtl"><p><strong>שלום</strong></p></div>
    [mono]a  b[/mono]     → <div class="mono"><p>a b</p></div>

The rendered div is stashed so the surrounding markdown pass leaves it
alone. The closing tag is matched non-greedily; an unterminated block is
left as plain text.
"""

from __future__ import annotations

import re

CONTAINER_TAGS = ("rtl", "ltr", "mono")

CONTAINER_TAG_PATTERNS = {
    name: re.compile(rf"\[{name}\](.*?)\[/{name}\]", re.DOTALL)
    for name in CONTAINER_TAGS
}


def render_container_tags(text: str, context: dict, name: str) -> str:
    """
    Render every [name]...[/name] block in text one level deeper.

    Args:
        text: Non-code markdown segment
        context: Must contain 'renderer' and 'stash'; 'depth' is the current nesting depth
        name: One of CONTAINER_TAGS, also used as the wrapper div class

    Returns:
        Text with each block replaced by a stash placeholder standing in for
        <div class="name">rendered html</div>
    """
    renderer = context["renderer"]
    depth = context.get("depth", 0)
    stash = context["stash"]

    def replace_container_tag(match):
        content = renderer.render(match.group(1), depth=depth + 1)
        return stash.store(f'<div class="{name}">{content}</div>')

    return CONTAINER_TAG_PATTERNS[name].sub(replace_container_tag, text)


def process_rtl_tags(text: str, context: dict) -> str:
    return render_container_tags(text, context, "rtl")


def process_ltr_tags(text: str, context: dict) -> str:
    return render_container_tags(text, context, "ltr")


def process_mono_tags(text: str, context: dict) -> str:
    return render_container_tags(text, context, "mono")
