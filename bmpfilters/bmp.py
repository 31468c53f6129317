"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass, field
from os import PathLike
from typing import BinaryIO, Iterable, NamedTuple, Union

SIGNATURE = 0x4D42
HEADERS_SIZE = 54
PIXEL_BYTE_SIZE = 3
ROW_ALIGNMENT = 4

_BMP_HEADER = struct.Struct("<HIHHI")
_DIB_HEADER = struct.Struct("<IIIHHIIIIII")

PathType = Union[str, "PathLike[str]"]


class BmpFormatError(ValueError):
    """Raised when a file is not a readable BMP image."""


def _row_padding(width: int) -> int:
    return (ROW_ALIGNMENT - (width * PIXEL_BYTE_SIZE) % ROW_ALIGNMENT) % ROW_ALIGNMENT


@dataclass
class BmpHeader:
    """The 14-byte BMP file header."""

    signature: int = SIGNATURE
    size: int = 0
    reserved_a: int = 0
    reserved_b: int = 0
    pixel_offset: int = HEADERS_SIZE


@dataclass
class DibHeader:
    """The 40-byte BITMAPINFOHEADER."""

    header_size: int = _DIB_HEADER.size
    width: int = 0
    height: int = 0
    color_planes: int = 1
    bits_per_pixel: int = 24
    compression: int = 0
    image_size: int = 0
    horizontal_resolution: int = 0
    vertical_resolution: int = 0
    palette_size: int = 0
    important_colors: int = 0


@dataclass
class BmpHeaders:
    """Both headers that precede the pixel data of a BMP file."""

    bmp: BmpHeader = field(default_factory=BmpHeader)
    dib: DibHeader = field(default_factory=DibHeader)

    @classmethod
    def read(cls, stream: BinaryIO) -> "BmpHeaders":
        """Read and validate the headers from a binary stream."""
        raw = stream.read(_BMP_HEADER.size)
        if len(raw) < _BMP_HEADER.size:
            raise BmpFormatError("truncated BMP file header")
        bmp = BmpHeader(*_BMP_HEADER.unpack(raw))
        if bmp.signature != SIGNATURE:
            raise BmpFormatError("not a BMP file: bad signature")
        raw = stream.read(_DIB_HEADER.size)
        if len(raw) < _DIB_HEADER.size:
            raise BmpFormatError("truncated DIB header")
        return cls(bmp, DibHeader(*_DIB_HEADER.unpack(raw)))

    def pack(self) -> bytes:
        """Return the headers in their on-disk form."""
        return _BMP_HEADER.pack(*astuple(self.bmp)) + _DIB_HEADER.pack(*astuple(self.dib))


class Pixel(NamedTuple):
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int


@dataclass
class Image:
    """A raster image stored row by row from the top, with its BMP headers."""

    width: int = 0
    height: int = 0
    pixels: list[Pixel] = field(default_factory=list)
    headers: BmpHeaders = field(default_factory=BmpHeaders)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Pixel]) -> "Image":
        """Build an image from pixels listed row by row, top row first."""
        pixel_list = list(pixels)
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(pixel_list) != width * height:
            raise ValueError(
                f"expected {width * height} pixels for {width}x{height}, got {len(pixel_list)}"
            )
        image = cls(pixels=pixel_list)
        image.resize(width, height)
        return image

    @classmethod
    def read(cls, path: PathType) -> "Image":
        """Load an image from a BMP file."""
        with open(path, "rb") as stream:
            headers = BmpHeaders.read(stream)
            width, height = headers.dib.width, headers.dib.height
            row_size = width * PIXEL_BYTE_SIZE
            padding = _row_padding(width)
            rows: list[list[Pixel]] = []
            for _ in range(height):
                data = stream.read(row_size)
                if len(data) < row_size:
                    raise BmpFormatError("truncated pixel data")
                stream.read(padding)
                channels = iter(data)
                rows.append([Pixel(r=r, g=g, b=b) for b, g, r in zip(channels, channels, channels)])
        rows.reverse()
        pixels = [pixel for row in rows for pixel in row]
        return cls(width, height, pixels, headers)

    def save(self, path: PathType) -> None:
        """Write the image to a BMP file."""
        if self.is_empty():
            raise ValueError("cannot save an empty image")
        padding = bytes(_row_padding(self.width))
        rows = [self.pixels[start:start + self.width] for start in range(0, len(self.pixels), self.width)]
        with open(path, "wb") as stream:
            stream.write(self.headers.pack())
            for row in reversed(rows):
                stream.write(bytes(channel for pixel in row for channel in (pixel.b, pixel.g, pixel.r)))
                stream.write(padding)

    def pixel(self, row: int, col: int) -> Pixel:
        """Return the pixel at a position, clamping coordinates to the image edges."""
        if self.is_empty():
            raise IndexError("image has no pixels")
        row = min(max(row, 0), self.height - 1)
        col = min(max(col, 0), self.width - 1)
        return self.pixels[row * self.width + col]

    def set_pixel(self, row: int, col: int, pixel: Pixel) -> None:
        """Replace the pixel at a position inside the image."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) is outside a {self.width}x{self.height} image")
        self.pixels[row * self.width + col] = pixel

    def resize(self, width: int, height: int) -> None:
        """Set new dimensions and update the size fields of the headers."""
        image_size = (width * PIXEL_BYTE_SIZE + _row_padding(width)) * height
        self.width = width
        self.height = height
        self.headers.bmp.size = HEADERS_SIZE + image_size
        self.headers.dib.width = width
        self.headers.dib.height = height
        self.headers.dib.image_size = image_size

    def is_empty(self) -> bool:
        """Tell whether the image holds no pixels."""
        return not self.pixels