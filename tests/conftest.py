"""Shared fixtures for the makedeck test suite."""

from __future__ import annotations

import pytest

from makedeck.config import ENV_PREFIX
from makedeck.exporters import create_presentation
from makedeck.models import PresentationDescriptor

ENV_VARS = ("DEFAULT_AUTHOR", "FONT_FACE", "LOGLEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Hide any MAKEDECK_* variables and undo whatever a .env file loads during a test."""
    for name in ENV_VARS:
        # setenv first so monkeypatch restores the original state even if load_dotenv adds it
        monkeypatch.setenv(ENV_PREFIX + name, "unset")
        monkeypatch.delenv(ENV_PREFIX + name)


@pytest.fixture
def render():
    """Render a list of slide dicts and return the python-pptx presentation."""

    def _render(*slides, title="Deck", **extra):
        descriptor = PresentationDescriptor.model_validate({"title": title, "slides": list(slides), **extra})
        return create_presentation(descriptor)

    return _render


def shapes_named(slide, name):
    return [shape for shape in slide.shapes if shape.name == name]


def shape_named(slide, name):
    found = shapes_named(slide, name)
    assert len(found) == 1, f"expected one shape named {name!r}, found {len(found)}"
    return found[0]
