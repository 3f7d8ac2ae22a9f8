from .markdown.renderer import TagMarkdownRenderer, render_markdown

__all__ = ("TagMarkdownRenderer", "render_markdown")
