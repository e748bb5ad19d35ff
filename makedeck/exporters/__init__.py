"""Export presentation descriptors to PowerPoint."""

from .base import BaseExporter
from .pptx_exporter import PPTXExporter, create_presentation, export_to_pptx

__all__ = ['BaseExporter', 'PPTXExporter', 'create_presentation', 'export_to_pptx']
