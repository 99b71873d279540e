"""Strict text-to-number and text-to-bool conversion for typed property reads."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "IntegralKind",
    "INT",
    "UINT",
    "LONG",
    "ULONG",
    "parse_integral",
    "parse_bool",
]

_INTEGRAL_RE = re.compile(r"\s*([+-]?[0-9]+)\s*")


@dataclass(frozen=True)
class IntegralKind:
    """Width and signedness of an integral target type."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


INT = IntegralKind("int", 32, signed=True)
UINT = IntegralKind("uint", 32, signed=False)
LONG = IntegralKind("long", 64, signed=True)
ULONG = IntegralKind("ulong", 64, signed=False)


def parse_integral(text: str, kind: IntegralKind) -> int | None:
    """Parse *text* as a whole decimal number of the given kind.

    Surrounding whitespace is allowed; any other trailing character
    (``"42x"``) rejects the value, as does a value outside the kind's range.

    Returns:
        The parsed integer, or None if *text* is not exactly one number.
    """
    match = _INTEGRAL_RE.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(1))
    if value < kind.min_value or value > kind.max_value:
        return None
    return value


def parse_bool(text: str) -> bool | None:
    """Parse a single boolean token.

    Accepts ``true`` and ``false`` in any case, or a signed 64-bit decimal
    number where non-zero means true. The token may be surrounded by
    whitespace but nothing else.

    Returns:
        The parsed value, or None if *text* is not a boolean token.
    """
    words = text.split()
    if len(words) != 1:
        return None
    word = words[0].lower()
    if word == "true":
        return True
    if word == "false":
        return False
    number = parse_integral(word, LONG)
    if number is None:
        return None
    return number != 0
