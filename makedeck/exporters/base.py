#!/usr/bin/env python3
"""
Base class for presentation exporters.

All exporters should inherit from BaseExporter and implement render() and save().
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from ..config import Settings
from ..models import PresentationDescriptor

logger = logging.getLogger(__name__)


class BaseExporter(ABC):
    """Abstract base class for presentation exporters."""

    def __init__(self, descriptor: PresentationDescriptor, output_path: Optional[Path] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize the exporter.

        Args:
            descriptor: Validated presentation descriptor
            output_path: Path for the output file
            settings: Runtime settings (default author, font face)
        """
        self.descriptor = descriptor
        self.output_path = Path(output_path) if output_path is not None else None
        self.settings = settings or Settings()
        self.metadata = self._extract_metadata()

    def _extract_metadata(self) -> Dict[str, Any]:
        """Extract presentation metadata from the descriptor."""
        return {
            'title': self.descriptor.title,
            'subject': self.descriptor.title,
            'author': self.descriptor.author or self.settings.default_author,
            'total_slides': len(self.descriptor.slides)
        }

    @abstractmethod
    def render(self) -> Any:
        """
        Build the in-memory presentation.

        Returns:
            The populated document object
        """
        raise NotImplementedError("Subclasses must implement render()")

    @abstractmethod
    def save(self, document: Any, output_path: Path) -> None:
        """Write a rendered document to ``output_path``."""
        raise NotImplementedError("Subclasses must implement save()")

    def export(self) -> Path:
        """
        Render the presentation and write it to the output path.

        Returns:
            Path to the generated file

        Raises:
            ValueError: If no output path was given
            WriteError: If the file cannot be written
        """
        if self.output_path is None:
            raise ValueError("output_path is required to export")

        logger.info(f"Exporting {self.metadata['total_slides']} slides to {self.output_path}...")
        document = self.render()
        self.save(document, self.output_path)
        logger.info(f"Presentation saved to: {self.output_path}")
        return self.output_path

    def __str__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(slides={len(self.descriptor.slides)})"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"{self.__class__.__name__}(slides={len(self.descriptor.slides)}, output={self.output_path})"
