# core/orientation.py
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from numbers import Integral

from ..i18n import _
from ..config import ASPECT_RATIO_DISPLAY_PRECISION, SQUARE_TOLERANCE, Orientation


class InvalidDimensions(ValueError):
    """Raised when pixel width or height is missing, non-integer or not positive."""


@dataclass(frozen=True)
class ImageMetrics:
    width_px: int
    height_px: int

    def __post_init__(self):
        validate_dimensions(self.width_px, self.height_px)


@dataclass(frozen=True)
class Classification:
    aspect_ratio: float
    orientation: Orientation

    @property
    def display_aspect_ratio(self) -> float:
        """
        Aspect ratio rounded for display only, never used for matching.
        Ties round up, so 0.625 is shown as 0.63.
        """
        step = Decimal(10) ** -ASPECT_RATIO_DISPLAY_PRECISION
        # Decimal(float) is exact, so only true binary ties are rounded up
        return float(Decimal(self.aspect_ratio).quantize(step, rounding=ROUND_HALF_UP))


def _check_pixel_count(value, name: str) -> None:
    # bool is an Integral subclass but never a pixel count
    if value is None or isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimensions(f"{_('Pixel dimension must be a positive integer')}: {name}={value!r}")
    if value <= 0:
        raise InvalidDimensions(f"{_('Pixel dimension must be a positive integer')}: {name}={value}")


def validate_dimensions(width_px, height_px) -> None:
    """
    Checks that both pixel dimensions are positive integers.

    Raises:
        InvalidDimensions: if either value is missing, non-integer or <= 0.
    """
    _check_pixel_count(width_px, 'width')
    _check_pixel_count(height_px, 'height')


def classify(width_px: int, height_px: int) -> Classification:
    """
    Derives the aspect ratio and orientation of an image.

    An image whose ratio lies strictly within SQUARE_TOLERANCE of 1:1 is square,
    otherwise the longer side decides between landscape and portrait.

    Args:
        width_px: Image width in pixels.
        height_px: Image height in pixels.

    Returns:
        Classification with the full-precision aspect ratio and the orientation.

    Raises:
        InvalidDimensions: if the dimensions are not positive integers.
    """
    validate_dimensions(width_px, height_px)

    aspect_ratio = width_px / height_px

    if abs(aspect_ratio - 1) < SQUARE_TOLERANCE:
        orientation = Orientation.SQUARE
    elif width_px > height_px:
        orientation = Orientation.LANDSCAPE
    else:
        orientation = Orientation.PORTRAIT

    return Classification(aspect_ratio, orientation)
