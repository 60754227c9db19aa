# core/recommender.py
from ..config import ASPECT_RATIO_TOLERANCE, DPI_LEVELS, Orientation
from .catalog import StandardSize, get_standard_sizes
from .orientation import validate_dimensions


def max_print_dimensions(width_px: int, height_px: int, dpi: int) -> tuple[float, float]:
    """
    Largest print (in inches) the image covers at the given DPI without upscaling.
    """
    return width_px / dpi, height_px / dpi


def matches_aspect_ratio(size: StandardSize, aspect_ratio: float) -> bool:
    """Relative deviation of the size ratio from the image ratio is within tolerance."""
    return abs(size.aspect_ratio - aspect_ratio) / aspect_ratio <= ASPECT_RATIO_TOLERANCE


def select_sizes(
        width_px: int,
        height_px: int,
        aspect_ratio: float,
        orientation: Orientation | str,
        dpi: int
) -> list[StandardSize]:
    """
    Selects the catalog sizes printable at one DPI level.

    A size qualifies when it fits inside the maximum printable dimensions and,
    for landscape and portrait images, its ratio matches the image ratio.
    Every square catalog size matches a square image.

    Returns:
        Matching sizes, largest area first. Equal areas keep catalog order.
    """
    orientation = Orientation(orientation)
    max_width_in, max_height_in = max_print_dimensions(width_px, height_px, dpi)

    selected = []
    for size in get_standard_sizes(orientation):
        if size.width_in > max_width_in or size.height_in > max_height_in:
            continue
        if orientation != Orientation.SQUARE and not matches_aspect_ratio(size, aspect_ratio):
            continue
        selected.append(size)

    # sorted() is stable, so ties stay in declaration order
    return sorted(selected, key=lambda size: size.area, reverse=True)


def format_size(size: StandardSize) -> str:
    """Renders a size as 'W×H'."""
    return str(size)


def recommend(
        width_px: int,
        height_px: int,
        aspect_ratio: float,
        orientation: Orientation | str
) -> dict[int, tuple[str, ...]]:
    """
    Recommends standard print sizes for every DPI level.

    Args:
        width_px: Image width in pixels.
        height_px: Image height in pixels.
        aspect_ratio: Full-precision width / height.
        orientation: Orientation from classify().

    Returns:
        Mapping DPI -> display strings ordered by area. Every DPI level is present,
        with an empty tuple when no standard size matches.

    Raises:
        InvalidDimensions: if the pixel dimensions are not positive integers.
    """
    validate_dimensions(width_px, height_px)

    return {
        dpi: tuple(
            format_size(size)
            for size in select_sizes(width_px, height_px, aspect_ratio, orientation, dpi)
        )
        for dpi in DPI_LEVELS
    }
