"""
Configuration for the tag-aware markdown renderer.

Two concerns live here:

- Pandoc options used by the default markdown converter.
- The tag configuration (color aliases and the monospace font) read once
  when a renderer is constructed.

Tag configuration structure, from a dict, a YAML file or the Django
``MARKDOWN_TAGS`` setting:

    colors:
      brand: "#ff0000"
      sunset: "linear-gradient(90deg, #f80, #f08)"
    fonts:
      monospace: "'Fira Code', monospace"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MONOSPACE_FONT = "monospace"
SETTINGS_NAME = "MARKDOWN_TAGS"

PANDOC_EXTENSIONS = [
    "autolink_bare_uris",
    "strikeout",
    "superscript",
    "subscript",
    "task_lists",
    "pipe_tables",
    "definition_lists",
    "footnotes",
    "fenced_code_blocks",
    "fenced_code_attributes",
    "raw_html",
    "native_divs",
    "native_spans",
]


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Raw HTML must pass through untouched: the tag preprocessors emit
    <span>, <div> and <iframe> markup before Pandoc sees the text.
    """
    return {
        "format": "markdown+" + "+".join(PANDOC_EXTENSIONS),
        "to": "html5",
        "extra_args": [
            # Keep long attribute values (iframe allow lists) on one line
            "--wrap=none",
        ],
    }


def _empty_colors():
    return MappingProxyType({})


@dataclass(frozen=True)
class TagConfig:
    """Color aliases and font settings, immutable once loaded."""

    colors: Mapping[str, str] = field(default_factory=_empty_colors)
    monospace_font: str = DEFAULT_MONOSPACE_FONT

    @classmethod
    def from_dict(cls, data) -> TagConfig:
        """
        Build a config from the ``colors`` / ``fonts.monospace`` structure.

        Anything structurally wrong degrades to the defaults for that field.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            logger.warning(
                f"Tag configuration must be a mapping, got {type(data).__name__}; using defaults"
            )
            return cls()

        colors = {}
        raw_colors = data.get("colors")
        if isinstance(raw_colors, Mapping):
            colors = {str(name): str(value) for name, value in raw_colors.items()}
        elif raw_colors is not None:
            logger.warning("Ignoring 'colors' tag configuration: not a mapping")

        monospace_font = DEFAULT_MONOSPACE_FONT
        fonts = data.get("fonts")
        if isinstance(fonts, Mapping):
            font = fonts.get("monospace")
            if isinstance(font, str) and font.strip():
                monospace_font = font
            elif not isinstance(font, (str, type(None))):
                logger.warning("Ignoring 'fonts.monospace' tag configuration: not a string")
        elif fonts is not None:
            logger.warning("Ignoring 'fonts' tag configuration: not a mapping")

        return cls(colors=MappingProxyType(colors), monospace_font=monospace_font)


def _load_yaml_file(path: Path):
    if not path.exists():
        logger.debug(f"No tag configuration file at {path}, using defaults")
        return None

    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML in tag configuration {path}: {e}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read tag configuration {path}: {e}")
        return None


def _load_django_settings():
    from django.conf import settings

    if not settings.configured:
        return None
    return getattr(settings, SETTINGS_NAME, None)


def load_tag_config(source=None) -> TagConfig:
    """
    Load the tag configuration from whatever source is given.

    Args:
        source: None (Django ``MARKDOWN_TAGS`` setting, if settings are
            configured), a mapping, a path to a YAML/JSON file, or a
            ready TagConfig.

    Returns:
        TagConfig, falling back to defaults for anything missing or invalid
    """
    if isinstance(source, TagConfig):
        return source

    if source is None:
        logger.debug(f"Reading tag configuration from Django setting {SETTINGS_NAME}")
        data = _load_django_settings()
    elif isinstance(source, (str, Path)):
        logger.debug(f"Reading tag configuration from {source}")
        data = _load_yaml_file(Path(source))
    else:
        data = source

    return TagConfig.from_dict(data)
