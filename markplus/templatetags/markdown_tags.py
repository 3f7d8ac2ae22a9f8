"""
Template filter rendering markplus markdown.

    {% load markdown_tags %}
    {{ post.body|markdown }}

Uses the shared renderer, so tag colors and fonts come from
``settings.MARKDOWN_TAGS`` and the style block appears once per process.
"""

from django import template
from django.utils.safestring import mark_safe

from markplus.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    if not value:
        return ""
    return mark_safe(render_markdown(str(value)))
