# src/print_size_suggester/__init__.py
"""Print Size Suggester"""

from print_size_suggester.core import (
    classify,
    recommend,
    suggest_print_sizes,
    load_image_size,
    InvalidDimensions,
    PrintSizeReport,
)
from print_size_suggester.config import Orientation, PrintQuality, DPI_LEVELS

__version__ = "0.1.0"
__all__ = [
    "classify",
    "recommend",
    "suggest_print_sizes",
    "load_image_size",
    "InvalidDimensions",
    "PrintSizeReport",
    "Orientation",
    "PrintQuality",
    "DPI_LEVELS",
]
