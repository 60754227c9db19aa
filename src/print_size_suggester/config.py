# config.py
"""
Configuration constants for the print size suggester.

This module provides the DPI tiers, matching tolerances and output formatting
constants. The standard size catalog itself lives in core/catalog.py.
"""

from .i18n import _
from enum import Enum
from pathlib import Path
from typing import Final

SUPPORTED_EXTENSIONS: Final = frozenset({'.jpg', '.jpeg', '.png', '.webp'})
CSV_SEPARATOR: Final = ';'

ROOT_DIR = Path(__file__).parent.parent.parent

LOGS_DIR = ROOT_DIR / "logs"

# === Matching ===
# Relative deviation allowed between a catalog size ratio and the image ratio
ASPECT_RATIO_TOLERANCE: Final = 0.02
# Images within this distance of 1:1 are treated as square
SQUARE_TOLERANCE: Final = 0.05

ASPECT_RATIO_DISPLAY_PRECISION: Final = 2

SIZE_SEPARATOR: Final = "×"


# === Orientation ===
class Orientation(str, Enum):
    """
    Shape of an image derived from its aspect ratio.
    """
    LANDSCAPE = 'landscape'
    PORTRAIT = 'portrait'
    SQUARE = 'square'

ORIENTATION_DESCRIPTIONS = {
    Orientation.LANDSCAPE: _("Landscape"),
    Orientation.PORTRAIT: _("Portrait"),
    Orientation.SQUARE: _("Square"),
}


# === Print quality tiers ===
class PrintQuality(str, Enum):
    """
    Print quality tier associated with each DPI level.
    """
    EXCELLENT = 'excellent'
    GOOD = 'good'
    ACCEPTABLE = 'acceptable'

# Descending quality, the order in which results are reported
DPI_LEVELS: Final = (300, 150, 100)

DPI_QUALITY = {
    300: PrintQuality.EXCELLENT,
    150: PrintQuality.GOOD,
    100: PrintQuality.ACCEPTABLE,
}

PRINT_QUALITY_DESCRIPTIONS = {
    PrintQuality.EXCELLENT: _("Excellent"),
    PrintQuality.GOOD: _("Good"),
    PrintQuality.ACCEPTABLE: _("Acceptable"),
}

PRINT_QUALITY_INFO = {
    PrintQuality.EXCELLENT: _("Professional quality, suitable for close viewing"),
    PrintQuality.GOOD: _("Good quality, suitable for wall art viewed from a few feet away"),
    PrintQuality.ACCEPTABLE: _("Acceptable for large formats viewed from a distance"),
}

# === Styling for console output ===
RICH_STYLES = {
    'header': "bold bright_cyan",
    'filename': "bold white",
    'label': "dim",
    PrintQuality.EXCELLENT: "green",
    PrintQuality.GOOD: "yellow",
    PrintQuality.ACCEPTABLE: "dark_orange",
    'empty': "italic bright_black",
}


def get_output_csv_header() -> list[str]:
    """
    Forms the CSV header.

    Returns:
        List of column names for the CSV output.
    """
    return [
        _("File"),
        _("Dimensions"),
        _("Orientation"),
        _("Aspect ratio"),
        "DPI",
        _("Quality"),
        _("Recommended sizes (inches)"),
    ]
