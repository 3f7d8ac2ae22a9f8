"""Shared fixtures for markplus tests."""

import django
import pypandoc
import pytest
from django.conf import settings

from markplus.markdown.renderer import TagMarkdownRenderer


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["markplus"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


def identity_converter(text: str) -> str:
    return text


def marking_converter(text: str) -> str:
    """Stands in for a markdown pass and shows where it ran."""
    return f"<md>{text}</md>"


@pytest.fixture
def make_renderer():
    """Build a renderer that skips Pandoc; CSS already injected unless asked."""

    def factory(config=None, converter=identity_converter, with_css=False, **kwargs):
        renderer = TagMarkdownRenderer(config=config or {}, converter=converter, **kwargs)
        if not with_css:
            renderer.render("")
        return renderer

    return factory


@pytest.fixture
def renderer(make_renderer):
    return make_renderer()


@pytest.fixture
def marking_renderer(make_renderer):
    return make_renderer(converter=marking_converter)


@pytest.fixture(scope="session")
def pandoc_available():
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        pytest.skip("pandoc binary not available")
    return True
