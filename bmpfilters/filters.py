"""Image filters that transform an Image in place."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .bmp import Image, Pixel

CHANNEL_MAX_VALUE = 255

_R_COEFF = 0.299
_G_COEFF = 0.587
_B_COEFF = 0.114

_SHARP_CENTER = 5
_EDGE_CENTER = 4
_NEIGHBOUR_COEFF = -1

_WHITE = Pixel(CHANNEL_MAX_VALUE, CHANNEL_MAX_VALUE, CHANNEL_MAX_VALUE)
_BLACK = Pixel(0, 0, 0)


class EmptyImageError(ValueError):
    """Raised when a filter is applied to an image that holds no pixels."""


def _ensure_not_empty(image: Image) -> None:
    if image.is_empty():
        raise EmptyImageError("cannot apply a filter to an empty image")


def _clamp_channel(value: int) -> int:
    return min(CHANNEL_MAX_VALUE, max(0, value))


def _convolve_cross(image: Image, center_coeff: int) -> list[Pixel]:
    """Apply a cross-shaped kernel with -1 neighbours; edges repeat border pixels."""
    result: list[Pixel] = []
    for y in range(image.height):
        for x in range(image.width):
            target = image.pixel(y, x)
            neighbours = (
                image.pixel(y - 1, x),
                image.pixel(y + 1, x),
                image.pixel(y, x - 1),
                image.pixel(y, x + 1),
            )
            channels = (
                _clamp_channel(
                    center_coeff * target[i]
                    + sum(_NEIGHBOUR_COEFF * pixel[i] for pixel in neighbours)
                )
                for i in range(3)
            )
            result.append(Pixel(*channels))
    return result


class Filter(ABC):
    """An operation that modifies an image in place."""

    @abstractmethod
    def apply(self, image: Image) -> None:
        """Transform the image; raise EmptyImageError if it holds no pixels."""


@dataclass(frozen=True)
class CropFilter(Filter):
    """Keep the top-left region of at most the given width and height."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("crop dimensions must not be negative")

    def apply(self, image: Image) -> None:
        _ensure_not_empty(image)
        new_width = min(image.width, self.width)
        new_height = min(image.height, self.height)
        image.pixels = [
            image.pixel(y, x) for y in range(new_height) for x in range(new_width)
        ]
        image.resize(new_width, new_height)


@dataclass(frozen=True)
class GrayscaleFilter(Filter):
    """Replace every colour with its luma."""

    def apply(self, image: Image) -> None:
        _ensure_not_empty(image)
        image.pixels = [
            Pixel(*(int(p.r * _R_COEFF + p.b * _B_COEFF + p.g * _G_COEFF),) * 3)
            for p in image.pixels
        ]


@dataclass(frozen=True)
class NegativeFilter(Filter):
    """Invert every channel."""

    def apply(self, image: Image) -> None:
        _ensure_not_empty(image)
        image.pixels = [
            Pixel(CHANNEL_MAX_VALUE - p.r, CHANNEL_MAX_VALUE - p.g, CHANNEL_MAX_VALUE - p.b)
            for p in image.pixels
        ]


@dataclass(frozen=True)
class SharpFilter(Filter):
    """Sharpen the image with a cross-shaped kernel."""

    def apply(self, image: Image) -> None:
        _ensure_not_empty(image)
        image.pixels = _convolve_cross(image, _SHARP_CENTER)


@dataclass(frozen=True)
class EdgeFilter(Filter):
    """Turn the image into black and white edges above a threshold."""

    threshold: float

    def apply(self, image: Image) -> None:
        _ensure_not_empty(image)
        GrayscaleFilter().apply(image)
        image.pixels = [
            _WHITE if max(pixel) > self.threshold else _BLACK
            for pixel in _convolve_cross(image, _EDGE_CENTER)
        ]