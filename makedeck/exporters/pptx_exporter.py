#!/usr/bin/env python3
"""
PowerPoint (PPTX) exporter using python-pptx.

Every slide starts from the blank layout and is drawn with absolute,
canvas-relative coordinates on a 13.33 x 7.5 inch widescreen canvas, so no
slide's layout depends on any other.
"""
import logging
from pathlib import Path
from typing import List, Optional

from pptx import Presentation
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Emu, Inches, Pt

from ..config import Settings
from ..errors import WriteError
from ..models import (
    Box,
    ComparisonSlide,
    ContentSlide,
    DiagramSlide,
    PresentationDescriptor,
    SectionSlide,
    TitleSlide,
    ThreeBoxSlide,
    TwoColumnSlide,
)
from .. import palette
from ..palette import HEADER_BAR_HEIGHT, PALETTE
from .base import BaseExporter

logger = logging.getLogger(__name__)

BLANK_LAYOUT = 6

BULLET = "•"
CROSS_MARK = "✗"
CHECK_MARK = "✓"

# Two-column bullets start lower when the column carries a header
COLUMN_TOP_WITH_HEADER = 2.1
COLUMN_TOP_NO_HEADER = 1.6

# Three-box grid
BOX_WIDTH = 3.8
BOX_HEIGHT = 5.2
BOX_START_X = 0.6
BOX_GAP = 0.4

# Diagram geometry
CENTER_X = 5.16
CENTER_Y = 2.2
CENTER_W = 3
CENTER_H = 1.2
NODE_W = 2.2
NODE_H = 1
NODE_Y = 5
NODE_GAP = 0.3


def _clear_list_props(paragraph) -> None:
    """Remove any existing bullet/numbering from a paragraph."""
    pPr = paragraph._element.get_or_add_pPr()
    for child in list(pPr):
        if child.tag in {qn('a:buFont'), qn('a:buChar'), qn('a:buAutoNum'), qn('a:buBlip'), qn('a:buNone')}:
            pPr.remove(child)


def _set_bullet(paragraph, char: str = BULLET) -> None:
    """Give a paragraph a hanging bullet using ``char``."""
    pPr = paragraph._element.get_or_add_pPr()
    _clear_list_props(paragraph)
    pPr.set('marL', '342900')
    pPr.set('indent', '-342900')
    bu_font = OxmlElement('a:buFont')
    bu_font.set('typeface', 'Arial')
    pPr.append(bu_font)
    bu = OxmlElement('a:buChar')
    bu.set('char', char)
    pPr.append(bu)


class PPTXExporter(BaseExporter):
    """Export presentations to PowerPoint (PPTX) format."""

    SLIDE_WIDTH = Inches(palette.SLIDE_WIDTH)
    SLIDE_HEIGHT = Inches(palette.SLIDE_HEIGHT)

    def __init__(self, descriptor: PresentationDescriptor, output_path: Optional[Path] = None,
                 settings: Optional[Settings] = None):
        super().__init__(descriptor, output_path, settings)
        self.font_face = self.settings.font_face
        self.prs = None

    def render(self) -> Presentation:
        """
        Build the presentation in memory, one slide per slide record, in order.

        Returns:
            The populated ``pptx`` presentation
        """
        prs = Presentation()
        prs.slide_width = self.SLIDE_WIDTH
        prs.slide_height = self.SLIDE_HEIGHT

        props = prs.core_properties
        props.title = self.metadata['title']
        props.subject = self.metadata['subject']
        props.author = self.metadata['author']

        self.prs = prs
        total = len(self.descriptor.slides)
        for i, slide_data in enumerate(self.descriptor.slides, 1):
            logger.info(f"Creating slide {i}/{total} ({slide_data.type}): {slide_data.title}")
            self._create_slide(slide_data)

        return prs

    def save(self, document: Presentation, output_path: Path) -> None:
        try:
            document.save(str(output_path))
        except OSError as e:
            logger.error(f"Failed to write {output_path}: {e}")
            raise WriteError(f"Cannot write presentation to {output_path}: {e}") from e

    def _create_slide(self, slide_data):
        """Create a slide based on its layout type."""
        slide = self.prs.slides.add_slide(self.prs.slide_layouts[BLANK_LAYOUT])

        # Map layout types to creation methods
        layout_methods = {
            'title': self._create_title_slide,
            'content': self._create_content_slide,
            'section': self._create_section_slide,
            'two-column': self._create_two_column_slide,
            'three-box': self._create_three_box_slide,
            'comparison': self._create_comparison_slide,
            'diagram': self._create_diagram_slide,
        }

        method = layout_methods[slide_data.type]
        method(slide, slide_data)
        return slide

    # ------------------------------------------------------------------ #
    # Drawing primitives
    # ------------------------------------------------------------------ #
    def _set_background(self, slide, color: str):
        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = PALETTE.rgb(color)

    def _add_rect(self, slide, name: str, left, top, width, height, fill: str,
                  line: Optional[str] = None, line_width: float = 1):
        """Add a filled rectangle; positions are EMU lengths."""
        shape = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, left, top, width, height)
        shape.name = name
        shape.fill.solid()
        shape.fill.fore_color.rgb = PALETTE.rgb(fill)
        if line:
            shape.line.color.rgb = PALETTE.rgb(line)
            shape.line.width = Pt(line_width)
        else:
            shape.line.fill.background()
        shape.shadow.inherit = False
        return shape

    def _add_text(self, slide, name: str, text: str, left, top, width, height, size: int,
                  color: str, bold: bool = False, align=None):
        """Add a single-paragraph text box."""
        box = slide.shapes.add_textbox(left, top, width, height)
        box.name = name
        frame = box.text_frame
        frame.word_wrap = True

        p = frame.paragraphs[0]
        if align is not None:
            p.alignment = align
        run = p.add_run()
        run.text = text
        run.font.name = self.font_face
        run.font.size = Pt(size)
        run.font.bold = bold
        run.font.color.rgb = PALETTE.rgb(color)
        return box

    def _add_bullets(self, slide, name: str, items: List[str], left, top, width, height,
                     size: int, spacing: float, char: str = BULLET):
        """Add a top-anchored text box with one bulleted paragraph per item."""
        box = slide.shapes.add_textbox(left, top, width, height)
        box.name = name
        frame = box.text_frame
        frame.word_wrap = True
        frame.vertical_anchor = MSO_ANCHOR.TOP

        for i, item in enumerate(items):
            p = frame.paragraphs[0] if i == 0 else frame.add_paragraph()
            p.line_spacing = spacing
            _set_bullet(p, char)
            run = p.add_run()
            run.text = item
            run.font.name = self.font_face
            run.font.size = Pt(size)
            run.font.color.rgb = PALETTE.rgb('dark')
        return box

    def _add_header_bar(self, slide, title: str):
        """Primary-colour bar across the top holding the slide title."""
        self._add_rect(slide, 'Header Bar', 0, 0, self.SLIDE_WIDTH, Inches(HEADER_BAR_HEIGHT), 'primary')
        self._add_text(slide, 'Title', title, Inches(0.5), Inches(0.3), Inches(12.33), Inches(0.7),
                       28, 'white', bold=True)

    # ------------------------------------------------------------------ #
    # Layouts
    # ------------------------------------------------------------------ #
    def _create_title_slide(self, slide, slide_data: TitleSlide):
        """Create a title slide."""
        self._set_background(slide, 'primary')

        self._add_text(slide, 'Title', slide_data.title, Inches(0.5), Inches(2.5), Inches(12.33), Inches(1.5),
                       44, 'white', bold=True, align=PP_ALIGN.CENTER)

        if slide_data.subtitle:
            self._add_text(slide, 'Subtitle', slide_data.subtitle, Inches(0.5), Inches(4.2), Inches(12.33),
                           Inches(0.8), 24, 'white', align=PP_ALIGN.CENTER)

    def _create_content_slide(self, slide, slide_data: ContentSlide):
        """Create a standard content slide with bullet points."""
        self._add_header_bar(slide, slide_data.title)
        self._add_bullets(slide, 'Content', slide_data.content, Inches(0.7), Inches(1.6), Inches(12), Inches(5.5),
                          20, 1.5)

    def _create_section_slide(self, slide, slide_data: SectionSlide):
        """Create a section divider slide."""
        self._set_background(slide, 'dark')
        self._add_text(slide, 'Title', slide_data.title, Inches(0.5), Inches(3), Inches(12.33), Inches(1.5),
                       40, 'white', bold=True, align=PP_ALIGN.CENTER)

    def _create_two_column_slide(self, slide, slide_data: TwoColumnSlide):
        """Create a two-column layout slide."""
        self._add_header_bar(slide, slide_data.title)

        columns = (
            ('Left', 0.5, slide_data.left_header, slide_data.left_content),
            ('Right', 7, slide_data.right_header, slide_data.right_content),
        )
        for side, x, header, content in columns:
            if header:
                self._add_text(slide, f'{side} Header', header, Inches(x), Inches(1.5), Inches(5.8), Inches(0.5),
                               20, 'primary', bold=True)

            top = COLUMN_TOP_WITH_HEADER if header else COLUMN_TOP_NO_HEADER
            self._add_bullets(slide, f'{side} Content', content, Inches(x), Inches(top), Inches(5.8), Inches(5),
                              18, 1.4)

    def _create_three_box_slide(self, slide, slide_data: ThreeBoxSlide):
        """Create a row of equal-width bordered boxes, one per entry."""
        self._add_header_bar(slide, slide_data.title)

        box_w = Inches(BOX_WIDTH)
        step = box_w + Inches(BOX_GAP)
        inset = Inches(0.2)

        for index, box in enumerate(slide_data.boxes):
            n = index + 1
            x = Emu(Inches(BOX_START_X) + step * index)

            self._add_rect(slide, f'Box {n}', x, Inches(1.6), box_w, Inches(BOX_HEIGHT), 'light',
                           line='primary', line_width=2)
            self._add_text(slide, f'Box {n} Header', box.header, x, Inches(1.8), box_w, Inches(0.6),
                           18, 'primary', bold=True, align=PP_ALIGN.CENTER)
            self._add_bullets(slide, f'Box {n} Content', box.content, Emu(x + inset), Inches(2.5),
                              Emu(box_w - 2 * inset), Inches(4), 14, 1.3)

    def _create_comparison_slide(self, slide, slide_data: ComparisonSlide):
        """Create a before/after comparison slide."""
        self._add_header_bar(slide, slide_data.title)

        self._add_comparison_box(slide, 'Before', slide_data.before, 0.5, 'red_tint', 'red', CROSS_MARK)
        self._add_comparison_box(slide, 'After', slide_data.after, 6.9, 'green_tint', 'green', CHECK_MARK)

    def _add_comparison_box(self, slide, name: str, box: Box, x: float, fill: str, accent: str, mark: str):
        self._add_rect(slide, f'{name} Box', Inches(x), Inches(1.5), Inches(5.9), Inches(5.5), fill,
                       line=accent, line_width=2)
        self._add_text(slide, f'{name} Header', box.header, Inches(x), Inches(1.7), Inches(5.9), Inches(0.6),
                       20, accent, bold=True, align=PP_ALIGN.CENTER)
        self._add_bullets(slide, f'{name} Content', box.content, Inches(x + 0.2), Inches(2.4), Inches(5.5),
                          Inches(4.3), 16, 1.4, char=mark)

    def _create_diagram_slide(self, slide, slide_data: DiagramSlide):
        """Create a hub diagram: a center box wired to a centred row of boxes below it."""
        self._add_header_bar(slide, slide_data.title)

        center_x, center_y = Inches(CENTER_X), Inches(CENTER_Y)
        center_w, center_h = Inches(CENTER_W), Inches(CENTER_H)

        self._add_rect(slide, 'Center Box', center_x, center_y, center_w, center_h, 'primary',
                       line='dark', line_width=1)
        self._add_text(slide, 'Center Label', slide_data.center_box, center_x, Inches(CENTER_Y + 0.3), center_w,
                       Inches(0.6), 16, 'white', bold=True, align=PP_ALIGN.CENTER)

        labels = slide_data.surrounding_boxes
        if not labels:
            return

        node_w, node_h, node_y = Inches(NODE_W), Inches(NODE_H), Inches(NODE_Y)
        gap = Inches(NODE_GAP)
        total_width = len(labels) * node_w + (len(labels) - 1) * gap
        start_x = (self.SLIDE_WIDTH - total_width) // 2

        hub_x = center_x + center_w // 2
        hub_y = center_y + center_h

        for index, label in enumerate(labels):
            n = index + 1
            x = Emu(start_x + index * (node_w + gap))

            connector = slide.shapes.add_connector(MSO_CONNECTOR.STRAIGHT, Emu(hub_x), Emu(hub_y),
                                                   Emu(x + node_w // 2), node_y)
            connector.name = f'Connector {n}'
            connector.line.color.rgb = PALETTE.rgb('dark')
            connector.line.width = Pt(1)

            self._add_rect(slide, f'Node {n}', x, node_y, node_w, node_h, 'secondary', line='dark', line_width=1)
            self._add_text(slide, f'Node {n} Label', label, x, Inches(NODE_Y + 0.25), node_w, Inches(0.5),
                           12, 'white', bold=True, align=PP_ALIGN.CENTER)


def create_presentation(descriptor: PresentationDescriptor, settings: Optional[Settings] = None) -> Presentation:
    """Render ``descriptor`` into an unsaved ``pptx`` presentation."""
    return PPTXExporter(descriptor, settings=settings).render()


def export_to_pptx(descriptor: PresentationDescriptor, output_path: Path,
                   settings: Optional[Settings] = None) -> Path:
    """
    Convenience function to export a descriptor to PPTX.

    Args:
        descriptor: Validated presentation descriptor
        output_path: Output file path
        settings: Runtime settings

    Returns:
        Path to generated PPTX file
    """
    exporter = PPTXExporter(descriptor, output_path, settings)
    return exporter.export()
