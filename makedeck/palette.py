"""Brand colours and canvas geometry shared by every layout."""
from dataclasses import dataclass

from pptx.dml.color import RGBColor


@dataclass(frozen=True)
class Palette:
    primary: str = "2563EB"     # Blue
    secondary: str = "10B981"   # Green
    accent: str = "F59E0B"      # Amber
    dark: str = "1F2937"        # Dark gray
    light: str = "F3F4F6"       # Light gray
    white: str = "FFFFFF"
    red: str = "EF4444"
    green: str = "10B981"
    # Comparison box fills
    red_tint: str = "FEE2E2"
    green_tint: str = "D1FAE5"

    def rgb(self, name: str) -> RGBColor:
        """Return the named colour as an ``RGBColor``."""
        return RGBColor.from_string(getattr(self, name))


PALETTE = Palette()

# Widescreen 16:9, in inches
SLIDE_WIDTH = 13.33
SLIDE_HEIGHT = 7.5

HEADER_BAR_HEIGHT = 1.2
