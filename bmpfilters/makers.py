"""Builders that turn command-line filter descriptors into filters."""

from __future__ import annotations

import re

from .cli_args import FilterDescriptor
from .filters import CropFilter, EdgeFilter, Filter, GrayscaleFilter, NegativeFilter, SharpFilter

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class DescriptorError(ValueError):
    """Raised when a descriptor does not describe the requested filter."""


def _check_name(descriptor: FilterDescriptor, expected: str) -> None:
    if descriptor.name != expected:
        raise DescriptorError(
            f"descriptor {descriptor.name!r} does not describe filter {expected!r}"
        )


def _to_int(text: str) -> int:
    """Read the leading integer of text."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise DescriptorError(f"parameter {text!r} is not an integer")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise DescriptorError(f"parameter {text!r} is out of range")
    return value


def _to_float(text: str) -> float:
    """Read the leading floating-point number of text."""
    try:
        return float(text.strip())
    except ValueError:
        pass
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise DescriptorError(f"parameter {text!r} is not a number")
    return float(match.group(1))


def make_crop_filter(descriptor: FilterDescriptor) -> Filter:
    """Build a crop filter from '-crop width height'."""
    _check_name(descriptor, "-crop")
    if len(descriptor.params) < 2:
        raise DescriptorError("crop filter needs width and height")
    width, height = (_to_int(param) for param in descriptor.params[:2])
    return CropFilter(width, height)


def make_grayscale_filter(descriptor: FilterDescriptor) -> Filter:
    """Build a grayscale filter from '-gs'."""
    _check_name(descriptor, "-gs")
    return GrayscaleFilter()


def make_negative_filter(descriptor: FilterDescriptor) -> Filter:
    """Build a negative filter from '-neg'."""
    _check_name(descriptor, "-neg")
    return NegativeFilter()


def make_sharp_filter(descriptor: FilterDescriptor) -> Filter:
    """Build a sharpening filter from '-sharp'."""
    _check_name(descriptor, "-sharp")
    return SharpFilter()


def make_edge_filter(descriptor: FilterDescriptor) -> Filter:
    """Build an edge detection filter from '-edge threshold'."""
    _check_name(descriptor, "-edge")
    if not descriptor.params:
        raise DescriptorError("edge filter needs a threshold")
    return EdgeFilter(_to_float(descriptor.params[0]))