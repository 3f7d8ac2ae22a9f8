"""
Preprocessor that turns video tags into responsive iframe embeds.

Converts:
    [video src="https://www.youtube.com/watch?v=abc123"]
        → <div class="video-responsive"><iframe src="https://www.youtube.com/embed/abc123" ...></iframe></div>
    [video src="https://vimeo.com/76979871"]
        → <div class="video-responsive"><iframe src="https://player.vimeo.com/video/76979871" ...></iframe></div>

Tags pointing at any other host are left exactly as written.
"""

from __future__ import annotations

import html
import logging
import re

logger = logging.getLogger(__name__)

# Single line; other attributes around src="..." are ignored
VIDEO_TAG_PATTERN = re.compile(r'\[video\b[^\]\n]*?src="([^"\n]*)"[^\]\n]*\]')

# Checked in order, a later match overwrites an earlier one
VIDEO_HOSTS = ("youtube", "vimeo")

YOUTUBE_ID_PATTERN = re.compile(r"[?&]v=([^&\]]*)")
VIMEO_ID_PATTERN = re.compile(
    r"https?://(?:\w{3}\.|player\.)*vimeo\.com(?:[/\w:]*(?:/videos)?)?/([0-9]+)"
)

YOUTUBE_EMBED = (
    '<div class="video-responsive"><iframe src="{src}" title="YouTube video player" '
    'frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media; '
    'gyroscope; picture-in-picture; web-share" allowfullscreen '
    'referrerpolicy="strict-origin-when-cross-origin"></iframe></div>'
)
VIMEO_EMBED = (
    '<div class="video-responsive"><iframe src="{src}" title="Vimeo video player" '
    'frameborder="0" allow="autoplay; fullscreen; picture-in-picture" allowfullscreen '
    'sandbox="allow-same-origin allow-scripts allow-forms"></iframe></div>'
)


def detect_video_host(url: str) -> str | None:
    """Return 'youtube', 'vimeo' or None; when both appear the last needle wins."""
    host = None
    for needle in VIDEO_HOSTS:
        if needle in url:
            host = needle
    return host


def youtube_embed_url(url: str) -> str:
    match = YOUTUBE_ID_PATTERN.search(url)
    if not match:
        return url
    return f"https://www.youtube.com/embed/{match.group(1)}"


def vimeo_embed_url(url: str) -> str:
    match = VIMEO_ID_PATTERN.search(url)
    if not match:
        return url
    return f"https://player.vimeo.com/video/{match.group(1)}"


def process_video_tags(text: str, context: dict) -> str:
    """
    Replace [video src="..."] tags with embedded players.

    Args:
        text: Non-code markdown segment
        context: Context dictionary (unused but required for preprocessor signature)

    Returns:
        Markdown with recognized video tags converted to iframe markup
    """

    def replace_video_tag(match):
        url = match.group(1)
        host = detect_video_host(url)

        if host == "youtube":
            return YOUTUBE_EMBED.format(src=html.escape(youtube_embed_url(url)))
        if host == "vimeo":
            return VIMEO_EMBED.format(src=html.escape(vimeo_embed_url(url)))

        logger.debug(f"Unrecognized video host, leaving tag as-is: {url}")
        return match.group(0)

    return VIDEO_TAG_PATTERN.sub(replace_video_tag, text)
