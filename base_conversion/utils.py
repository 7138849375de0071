#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: utils.py
Version: 1.0

Description:
------------
Type definitions and constants shared by the base_conversion package.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional, Union

from .exceptions import InvalidArgumentError

# Largest value the accumulator may hold (unsigned 64-bit).
MAX_U64 = (1 << 64) - 1

# Format of the package's stderr log sink.
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


class Base(Enum):
    """Supported numeral bases with their radix and radix prefix."""

    BINARY = (2, "0b")
    OCTAL = (8, "0o")
    DECIMAL = (10, None)
    HEXADECIMAL = (16, "0x")

    def __init__(self, radix: int, prefix: Optional[str]) -> None:
        self.radix = radix
        self.prefix = prefix

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def alphabet(self) -> FrozenSet[str]:
        return _ALPHABETS[self]

    @classmethod
    def parse(cls, value: "BaseLike") -> "Base":
        """
        Resolve a Base member from a member, a radix or a textual alias.

        Raises:
            InvalidArgumentError: If the value names no supported base.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            key = str(value)
        elif isinstance(value, str):
            key = value.strip().lower()
        else:
            raise InvalidArgumentError(
                f"unsupported base {value!r}", base=repr(value)
            )

        try:
            return _BASE_ALIASES[key]
        except KeyError:
            raise InvalidArgumentError(
                f"unsupported base {value!r}", base=str(value)
            ) from None


BaseLike = Union[Base, str, int]
PathLike = Union[str, Path]

_DECIMAL_DIGITS = "0123456789"

_ALPHABETS = {
    Base.BINARY: frozenset("01"),
    Base.OCTAL: frozenset("01234567"),
    Base.DECIMAL: frozenset(_DECIMAL_DIGITS),
    Base.HEXADECIMAL: frozenset(_DECIMAL_DIGITS + "ABCDEFabcdef"),
}

_BASE_ALIASES = {
    "2": Base.BINARY,
    "b": Base.BINARY,
    "bin": Base.BINARY,
    "binary": Base.BINARY,
    "8": Base.OCTAL,
    "o": Base.OCTAL,
    "oct": Base.OCTAL,
    "octal": Base.OCTAL,
    "10": Base.DECIMAL,
    "d": Base.DECIMAL,
    "dec": Base.DECIMAL,
    "decimal": Base.DECIMAL,
    "16": Base.HEXADECIMAL,
    "h": Base.HEXADECIMAL,
    "x": Base.HEXADECIMAL,
    "hex": Base.HEXADECIMAL,
    "hexadecimal": Base.HEXADECIMAL,
}
