"""
Presentation descriptor models.

A descriptor is the JSON document handed to ``makedeck create``: a deck title,
an optional author and an ordered list of slide records. Each slide record is
tagged by its ``type`` field, which selects the layout used to render it.
JSON keys keep their camelCase wire names (``leftContent``, ``centerBox``...)
while the Python attributes are snake_case.
"""
import json
import logging
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InputShapeError

logger = logging.getLogger(__name__)


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TitleSlide(_Model):
    type: Literal["title"]
    title: str
    subtitle: Optional[str] = None


class ContentSlide(_Model):
    type: Literal["content"]
    title: str
    content: List[str]


class SectionSlide(_Model):
    type: Literal["section"]
    title: str


class TwoColumnSlide(_Model):
    type: Literal["two-column"]
    title: str
    left_content: List[str] = Field(alias="leftContent")
    right_content: List[str] = Field(alias="rightContent")
    left_header: Optional[str] = Field(default=None, alias="leftHeader")
    right_header: Optional[str] = Field(default=None, alias="rightHeader")


class Box(_Model):
    """A headed list of bullets, used by three-box and comparison slides."""
    header: str
    content: List[str]


class ThreeBoxSlide(_Model):
    type: Literal["three-box"]
    title: str
    boxes: List[Box]


class ComparisonSlide(_Model):
    type: Literal["comparison"]
    title: str
    before: Box
    after: Box


class DiagramSlide(_Model):
    type: Literal["diagram"]
    title: str
    center_box: str = Field(alias="centerBox")
    surrounding_boxes: List[str] = Field(alias="surroundingBoxes")


SlideRecord = Annotated[
    Union[
        TitleSlide,
        ContentSlide,
        SectionSlide,
        TwoColumnSlide,
        ThreeBoxSlide,
        ComparisonSlide,
        DiagramSlide,
    ],
    Field(discriminator="type"),
]


class PresentationDescriptor(_Model):
    title: str
    author: Optional[str] = None
    slides: List[SlideRecord]


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        where = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{where}: {err['msg']}")
    return "; ".join(problems)


def load_descriptor(payload: str) -> PresentationDescriptor:
    """
    Parse a JSON payload into a ``PresentationDescriptor``.

    Args:
        payload: JSON text describing the presentation

    Returns:
        The validated descriptor

    Raises:
        InputShapeError: If the payload is not JSON or does not match the descriptor shape,
            including slide records with an unknown ``type``.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise InputShapeError(f"Invalid JSON: {exc}") from exc

    try:
        descriptor = PresentationDescriptor.model_validate(data)
    except ValidationError as exc:
        raise InputShapeError(f"Invalid presentation descriptor: {_describe(exc)}") from exc

    logger.debug("Loaded descriptor %r with %d slides", descriptor.title, len(descriptor.slides))
    return descriptor
