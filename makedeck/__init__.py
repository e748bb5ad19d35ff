"""makedeck: JSON slide descriptors to PowerPoint decks."""

from .errors import InputShapeError, MakeDeckError, UsageError, WriteError
from .exporters import PPTXExporter, create_presentation, export_to_pptx
from .models import PresentationDescriptor, load_descriptor
from .palette import PALETTE

__version__ = "0.1.0"

__all__ = [
    "InputShapeError",
    "MakeDeckError",
    "UsageError",
    "WriteError",
    "PPTXExporter",
    "create_presentation",
    "export_to_pptx",
    "PresentationDescriptor",
    "load_descriptor",
    "PALETTE",
]
