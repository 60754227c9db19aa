# tests/core/test_catalog.py
import pytest

from print_size_suggester.config import Orientation
from print_size_suggester.core.catalog import STANDARD_SIZES, StandardSize, get_standard_sizes


def test_catalog_partition_sizes():
    assert len(STANDARD_SIZES[Orientation.LANDSCAPE]) == 12
    assert len(STANDARD_SIZES[Orientation.PORTRAIT]) == 12
    assert len(STANDARD_SIZES[Orientation.SQUARE]) == 5


def test_catalog_entries_match_their_orientation():
    assert all(s.width_in > s.height_in for s in STANDARD_SIZES[Orientation.LANDSCAPE])
    assert all(s.height_in > s.width_in for s in STANDARD_SIZES[Orientation.PORTRAIT])
    assert all(s.width_in == s.height_in for s in STANDARD_SIZES[Orientation.SQUARE])


def test_portrait_mirrors_landscape():
    landscape = [(s.width_in, s.height_in) for s in STANDARD_SIZES[Orientation.LANDSCAPE]]
    portrait = [(s.height_in, s.width_in) for s in STANDARD_SIZES[Orientation.PORTRAIT]]
    assert landscape == portrait


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        STANDARD_SIZES[Orientation.SQUARE] = ()

    with pytest.raises(AttributeError):
        STANDARD_SIZES[Orientation.SQUARE][0].width_in = 100


def test_get_standard_sizes_accepts_string():
    assert get_standard_sizes("square") is STANDARD_SIZES[Orientation.SQUARE]

    with pytest.raises(ValueError):
        get_standard_sizes("panorama")


@pytest.mark.parametrize("size, expected", [
    (StandardSize(8.5, 11), "8.5×11"),
    (StandardSize(11, 8.5), "11×8.5"),
    (StandardSize(20, 16), "20×16"),
    (StandardSize(8, 8), "8×8"),
])
def test_size_label(size, expected):
    assert str(size) == expected


def test_area_and_ratio():
    size = StandardSize(11, 8.5)
    assert size.area == 93.5
    assert size.aspect_ratio == pytest.approx(1.2941, abs=1e-4)
