#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Static digit tables: hex digit <-> 4-bit group, octal digit <-> 3-bit group,
and digit value <-> hex character.

The tables are built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .exceptions import InvalidArgumentError, InvalidCharacterError

HEX_GROUP_WIDTH = 4
OCTAL_GROUP_WIDTH = 3

_UPPER_HEX_DIGITS = "0123456789ABCDEF"
_LOWER_HEX_DIGITS = "0123456789abcdef"

BINARY_TO_HEXADECIMAL: Mapping[str, str] = MappingProxyType(
    {
        "0000": "0",
        "0001": "1",
        "0010": "2",
        "0011": "3",
        "0100": "4",
        "0101": "5",
        "0110": "6",
        "0111": "7",
        "1000": "8",
        "1001": "9",
        "1010": "A",
        "1011": "B",
        "1100": "C",
        "1101": "D",
        "1110": "E",
        "1111": "F",
    }
)

BINARY_TO_OCTAL: Mapping[str, str] = MappingProxyType(
    {
        "000": "0",
        "001": "1",
        "010": "2",
        "011": "3",
        "100": "4",
        "101": "5",
        "110": "6",
        "111": "7",
    }
)

# Both letter cases map to the same group.
HEXADECIMAL_TO_BINARY: Mapping[str, str] = MappingProxyType(
    {
        **{digit: bits for bits, digit in BINARY_TO_HEXADECIMAL.items()},
        **{digit.lower(): bits for bits, digit in BINARY_TO_HEXADECIMAL.items()},
    }
)

OCTAL_TO_BINARY: Mapping[str, str] = MappingProxyType(
    {digit: bits for bits, digit in BINARY_TO_OCTAL.items()}
)

HEXADECIMAL_DIGIT_VALUES: Mapping[str, int] = MappingProxyType(
    {
        **{digit: value for value, digit in enumerate(_UPPER_HEX_DIGITS)},
        **{digit: value for value, digit in enumerate(_LOWER_HEX_DIGITS)},
    }
)


def hexadecimal_digit_to_bits(digit: str) -> str:
    """Return the 4-bit group for a hex digit of either case."""
    try:
        return HEXADECIMAL_TO_BINARY[digit]
    except KeyError:
        raise InvalidCharacterError(digit, base="hexadecimal") from None


def octal_digit_to_bits(digit: str) -> str:
    """Return the 3-bit group for an octal digit."""
    try:
        return OCTAL_TO_BINARY[digit]
    except KeyError:
        raise InvalidCharacterError(digit, base="octal") from None


def bits_to_hexadecimal_digit(group: str, uppercase: bool = True) -> str:
    try:
        digit = BINARY_TO_HEXADECIMAL[group]
    except KeyError:
        raise InvalidArgumentError(
            f"'{group}' is not a {HEX_GROUP_WIDTH}-bit group", group=group
        ) from None
    return digit if uppercase else digit.lower()


def bits_to_octal_digit(group: str) -> str:
    try:
        return BINARY_TO_OCTAL[group]
    except KeyError:
        raise InvalidArgumentError(
            f"'{group}' is not a {OCTAL_GROUP_WIDTH}-bit group", group=group
        ) from None


def digit_value(digit: str) -> int:
    """
    Numeric value of a single digit in any supported base (0-15).

    The caller is responsible for checking the digit against the alphabet
    of its base; this lookup only knows the hexadecimal superset.
    """
    try:
        return HEXADECIMAL_DIGIT_VALUES[digit]
    except KeyError:
        raise InvalidCharacterError(digit) from None


def value_to_digit(value: int, uppercase: bool = True) -> str:
    """Character for a digit value in 0-15, with selectable letter case."""
    if not 0 <= value < len(_UPPER_HEX_DIGITS):
        raise InvalidArgumentError(
            f"digit value {value} out of range", value=value
        )
    return (_UPPER_HEX_DIGITS if uppercase else _LOWER_HEX_DIGITS)[value]
