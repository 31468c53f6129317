"""Parsing of the command line: input file, output file and filter list."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Sequence

MIN_ARG_COUNT = 2

_NUMBER_PREFIX = re.compile(
    r"""
    \s*
    (?P<number>
        [+-]?
        (?:
            (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
          | (?P<dec>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
          | (?P<special>inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)
        )
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


class ArgsError(ValueError):
    """Raised when the command line cannot be parsed."""


class NotEnoughArgsError(ArgsError):
    """Raised when the input and output file names are not both given."""


class InvalidFilterParameterError(ArgsError):
    """Raised when a filter parameter is not a number."""


@dataclass
class FilterDescriptor:
    """A filter name as given on the command line, with its raw parameters."""

    name: str
    params: list[str] = field(default_factory=list)


@dataclass
class ParsedArgs:
    """The result of parsing the command line."""

    input_path: str
    output_path: str
    filters: list[FilterDescriptor] = field(default_factory=list)


def _is_number(text: str) -> bool:
    """Tell whether text starts with a floating-point number in range."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return False
    if match.group("special"):
        return True
    number = match.group("number")
    try:
        value = float.fromhex(number) if match.group("hex") else float(number)
    except OverflowError:
        return False
    return math.isfinite(value)


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Parse the arguments that follow the program name."""
    if len(argv) < MIN_ARG_COUNT:
        raise NotEnoughArgsError("input and output file names are required")
    input_path, output_path, *rest = argv
    filters: list[FilterDescriptor] = []
    for arg in rest:
        if arg.startswith("-"):
            filters.append(FilterDescriptor(arg))
        elif not filters:
            raise ArgsError(f"unexpected argument {arg!r}: a filter name must start with '-'")
        elif not _is_number(arg):
            raise InvalidFilterParameterError(
                f"parameter {arg!r} of filter {filters[-1].name} is not a number"
            )
        else:
            filters[-1].params.append(arg)
    return ParsedArgs(input_path, output_path, filters)