# core/__init__.py
"""Core functionality for Print Size Suggester."""

from print_size_suggester.core.orientation import (
    Classification,
    ImageMetrics,
    InvalidDimensions,
    classify,
)
from print_size_suggester.core.catalog import STANDARD_SIZES, StandardSize
from print_size_suggester.core.recommender import recommend, select_sizes
from print_size_suggester.core.advisor import PrintSizeReport, suggest_print_sizes
from print_size_suggester.core.image_loader import load_image_size, ImageLoadResult

__all__ = [
    "Classification",
    "ImageMetrics",
    "InvalidDimensions",
    "classify",
    "STANDARD_SIZES",
    "StandardSize",
    "recommend",
    "select_sizes",
    "PrintSizeReport",
    "suggest_print_sizes",
    "load_image_size",
    "ImageLoadResult",
]
