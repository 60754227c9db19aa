# tests/core/test_orientation.py
import pytest

from print_size_suggester.config import Orientation
from print_size_suggester.core.orientation import (
    ImageMetrics,
    InvalidDimensions,
    classify,
)


@pytest.mark.parametrize("side", [1, 2, 100, 800, 4096, 10000])
def test_equal_sides_are_square(side):
    result = classify(side, side)
    assert result.orientation == Orientation.SQUARE
    assert result.aspect_ratio == 1.0


@pytest.mark.parametrize("width, height", [
    (1040, 1000),
    (1000, 1040),
    (1049, 1000),
    (960, 1000),
    (1000, 980),
    (980, 1000),
])
def test_near_square_within_tolerance(width, height):
    assert classify(width, height).orientation == Orientation.SQUARE


@pytest.mark.parametrize("width, height, expected", [
    # Ровно 5% отклонения - не квадрат
    (105, 100, Orientation.LANDSCAPE),
    (95, 100, Orientation.PORTRAIT),
    (1051, 1000, Orientation.LANDSCAPE),
    (3000, 2000, Orientation.LANDSCAPE),
    (1920, 1080, Orientation.LANDSCAPE),
    (2000, 3000, Orientation.PORTRAIT),
    (1080, 1920, Orientation.PORTRAIT),
    (1000, 1060, Orientation.PORTRAIT),
])
def test_landscape_and_portrait(width, height, expected):
    assert classify(width, height).orientation == expected


def test_ratio_is_measured_as_width_over_height():
    # height / width == 1.05, but width / height is still within 5% of 1
    assert classify(1000, 1050).orientation == Orientation.SQUARE


def test_aspect_ratio_full_precision_and_display_value():
    result = classify(1920, 1080)
    assert result.aspect_ratio == 1920 / 1080
    assert result.display_aspect_ratio == 1.78

    assert classify(3000, 2000).display_aspect_ratio == 1.5


@pytest.mark.parametrize("width, height, expected", [
    # Точные половины округляются вверх
    (1000, 1600, 0.63),
    (1125, 1000, 1.13),
    (1375, 1000, 1.38),
    (1875, 1000, 1.88),
    (1000, 1250, 0.8),
    (1080, 1920, 0.56),
])
def test_display_aspect_ratio_rounds_half_up(width, height, expected):
    assert classify(width, height).display_aspect_ratio == expected


@pytest.mark.parametrize("width, height", [
    (0, 100),
    (100, 0),
    (-1, 100),
    (100, -50),
    (None, 100),
    (100, None),
    (10.5, 100),
    (100.0, 100),
    ("100", 100),
    (True, 100),
])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        classify(width, height)


def test_invalid_dimensions_is_value_error():
    with pytest.raises(ValueError):
        classify(0, 0)


def test_image_metrics_validates_on_creation():
    metrics = ImageMetrics(3000, 2000)
    assert (metrics.width_px, metrics.height_px) == (3000, 2000)

    with pytest.raises(InvalidDimensions):
        ImageMetrics(0, 2000)
