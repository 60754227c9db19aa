# core/advisor.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ..config import DPI_QUALITY, Orientation
from .orientation import Classification, ImageMetrics, classify
from .recommender import recommend


@dataclass(frozen=True)
class PrintSizeReport:
    """
    Everything the presentation layer needs for one image:
    pixel dimensions, classification and the per-DPI recommendations.
    """
    metrics: ImageMetrics
    classification: Classification
    recommendations: Mapping[int, tuple[str, ...]]

    @property
    def orientation(self) -> Orientation:
        return self.classification.orientation

    @property
    def aspect_ratio(self) -> float:
        return self.classification.aspect_ratio

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.metrics.width_px,
            "height": self.metrics.height_px,
            "orientation": self.orientation.value,
            "aspect_ratio": self.classification.display_aspect_ratio,
            "recommendations": [
                {
                    "dpi": dpi,
                    "quality": DPI_QUALITY[dpi].value,
                    "sizes": list(sizes),
                }
                for dpi, sizes in self.recommendations.items()
            ],
        }


def suggest_print_sizes(width_px: int, height_px: int) -> PrintSizeReport:
    """
    Classifies an image and recommends standard print sizes for it.

    Raises:
        InvalidDimensions: before any recommendation work if the dimensions are invalid.
    """
    metrics = ImageMetrics(width_px, height_px)
    classification = classify(metrics.width_px, metrics.height_px)
    recommendations = recommend(
        metrics.width_px,
        metrics.height_px,
        classification.aspect_ratio,
        classification.orientation
    )
    return PrintSizeReport(metrics, classification, MappingProxyType(recommendations))
