"""
Tests for makedeck.models

Covers:
  - Parsing each slide variant from its camelCase wire form
  - Rejection of malformed JSON, missing fields and unknown slide types
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from makedeck.errors import InputShapeError
from makedeck.models import (
    ComparisonSlide,
    DiagramSlide,
    ThreeBoxSlide,
    TitleSlide,
    TwoColumnSlide,
    load_descriptor,
)


def _payload(*slides, **extra):
    return json.dumps({"title": "Demo", "slides": list(slides), **extra})


class TestLoadDescriptor:

    def test_title_slide(self):
        descriptor = load_descriptor(_payload({"type": "title", "title": "Hello", "subtitle": "World"}))
        assert descriptor.title == "Demo"
        assert descriptor.author is None
        slide = descriptor.slides[0]
        assert isinstance(slide, TitleSlide)
        assert slide.subtitle == "World"

    def test_author_is_kept(self):
        descriptor = load_descriptor(_payload(author="Ada"))
        assert descriptor.author == "Ada"
        assert descriptor.slides == []

    def test_two_column_aliases(self):
        descriptor = load_descriptor(_payload({
            "type": "two-column",
            "title": "Cols",
            "leftContent": ["a"],
            "rightContent": ["b", "c"],
            "rightHeader": "Right",
        }))
        slide = descriptor.slides[0]
        assert isinstance(slide, TwoColumnSlide)
        assert slide.left_content == ["a"]
        assert slide.right_content == ["b", "c"]
        assert slide.left_header is None
        assert slide.right_header == "Right"

    def test_three_box_count_not_enforced(self):
        boxes = [{"header": f"H{i}", "content": []} for i in range(5)]
        slide = load_descriptor(_payload({"type": "three-box", "title": "T", "boxes": boxes})).slides[0]
        assert isinstance(slide, ThreeBoxSlide)
        assert [b.header for b in slide.boxes] == ["H0", "H1", "H2", "H3", "H4"]

    def test_comparison_and_diagram(self):
        descriptor = load_descriptor(_payload(
            {"type": "comparison", "title": "X",
             "before": {"header": "Old", "content": ["a"]},
             "after": {"header": "New", "content": ["b"]}},
            {"type": "diagram", "title": "D", "centerBox": "Hub", "surroundingBoxes": []},
        ))
        comparison, diagram = descriptor.slides
        assert isinstance(comparison, ComparisonSlide)
        assert comparison.before.header == "Old"
        assert comparison.after.content == ["b"]
        assert isinstance(diagram, DiagramSlide)
        assert diagram.center_box == "Hub"
        assert diagram.surrounding_boxes == []

    def test_slide_order_preserved(self):
        kinds = ["section", "title", "section", "title"]
        descriptor = load_descriptor(_payload(*({"type": k, "title": str(i)} for i, k in enumerate(kinds))))
        assert [s.type for s in descriptor.slides] == kinds
        assert [s.title for s in descriptor.slides] == ["0", "1", "2", "3"]

    def test_descriptor_is_frozen(self):
        descriptor = load_descriptor(_payload())
        with pytest.raises(ValidationError):
            descriptor.title = "changed"


class TestLoadDescriptorErrors:

    def test_invalid_json(self):
        with pytest.raises(InputShapeError, match="Invalid JSON"):
            load_descriptor("{not json")

    def test_unknown_slide_type(self):
        with pytest.raises(InputShapeError, match="slides.0"):
            load_descriptor(_payload({"type": "timeline", "title": "T"}))

    def test_missing_title(self):
        with pytest.raises(InputShapeError, match="title"):
            load_descriptor(json.dumps({"slides": []}))

    def test_missing_slides(self):
        with pytest.raises(InputShapeError):
            load_descriptor(json.dumps({"title": "Demo"}))

    def test_missing_variant_field(self):
        with pytest.raises(InputShapeError, match="content"):
            load_descriptor(_payload({"type": "content", "title": "T"}))

    def test_top_level_not_an_object(self):
        with pytest.raises(InputShapeError):
            load_descriptor("[1, 2, 3]")
