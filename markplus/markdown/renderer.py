# markplus/markdown/renderer.py

import logging
import threading
from functools import lru_cache

import pypandoc

from .config import get_pandoc_config, load_tag_config
from .errors import NestingTooDeepError
from .preprocessors import apply_outside_code
from .preprocessors.color_tags import ColorResolver
from .stash import HtmlStash
from .styles import build_style_block

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32


def pandoc_to_html(text):
    """Markdown conversion using pypandoc"""
    pandoc_config = get_pandoc_config()

    return pypandoc.convert_text(
        text,
        to=pandoc_config["to"],
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )


class TagMarkdownRenderer:
    """
    Markdown renderer with custom tag support.

    Custom tags ([video], [color=...], [rtl], [ltr], [mono]) are expanded
    outside code blocks, then the text is handed to the markdown converter.
    The first render on an instance also emits the supporting <style> block.

    Args:
        config: Tag configuration source, see load_tag_config()
        converter: Callable turning markdown into HTML (default: Pandoc)
        max_depth: Deepest allowed container tag nesting
    """

    def __init__(self, config=None, converter=None, max_depth=DEFAULT_MAX_DEPTH):
        self.config = load_tag_config(config)
        self.color_resolver = ColorResolver(self.config.colors)
        self.converter = converter or pandoc_to_html
        self.max_depth = max_depth

        self._css_added = False
        self._css_lock = threading.Lock()

    def render(self, text: str, depth: int = 0) -> str:
        """
        Main rendering function with the tag preprocessing pipeline.

        Args:
            text: Raw markdown text
            depth: Container nesting depth, non-zero only for re-entrant calls

        Raises:
            NestingTooDeepError: container tags nest deeper than max_depth
        """
        if depth > self.max_depth:
            raise NestingTooDeepError(depth, self.max_depth)

        text = self._add_css_once(text)

        # Pre-processing: custom tags, never inside code blocks
        stash = HtmlStash(depth)
        context = {"renderer": self, "depth": depth, "stash": stash}
        text = apply_outside_code(text, context)

        # Rendered container blocks skip the markdown pass
        return stash.restore(self.converter(text))

    def _add_css_once(self, text: str) -> str:
        with self._css_lock:
            if self._css_added:
                return text
            self._css_added = True

        logger.debug("Injecting markplus style block")
        return build_style_block(self.config.monospace_font) + text


@lru_cache(maxsize=1)
def get_default_renderer():
    """Shared renderer configured from Django settings."""
    return TagMarkdownRenderer()


def render_markdown(text):
    """Render text with the process-wide default renderer"""
    return get_default_renderer().render(text)
