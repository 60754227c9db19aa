# core/catalog.py
"""Standard US print sizes grouped by orientation."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from ..config import SIZE_SEPARATOR, Orientation

Inches = Union[int, float]


@dataclass(frozen=True)
class StandardSize:
    width_in: Inches
    height_in: Inches

    @property
    def area(self) -> float:
        return self.width_in * self.height_in

    @property
    def aspect_ratio(self) -> float:
        return self.width_in / self.height_in

    def __str__(self) -> str:
        # Declared precision is kept: 8.5 stays "8.5", 10 stays "10"
        return f"{self.width_in}{SIZE_SEPARATOR}{self.height_in}"


def _sizes(*pairs: tuple[Inches, Inches]) -> tuple[StandardSize, ...]:
    return tuple(StandardSize(w, h) for w, h in pairs)


STANDARD_SIZES: Mapping[Orientation, tuple[StandardSize, ...]] = MappingProxyType({
    Orientation.LANDSCAPE: _sizes(
        (7, 5), (10, 8), (11, 8.5), (14, 11), (18, 12), (20, 16),
        (24, 16), (24, 18), (24, 20), (30, 20), (36, 24), (40, 30),
    ),
    Orientation.PORTRAIT: _sizes(
        (5, 7), (8, 10), (8.5, 11), (11, 14), (12, 18), (16, 20),
        (16, 24), (18, 24), (20, 24), (20, 30), (24, 36), (30, 40),
    ),
    Orientation.SQUARE: _sizes(
        (8, 8), (10, 10), (12, 12), (16, 16), (20, 20),
    ),
})


def get_standard_sizes(orientation: Orientation | str) -> tuple[StandardSize, ...]:
    """Returns the catalog partition for an orientation, in declaration order."""
    return STANDARD_SIZES[Orientation(orientation)]
