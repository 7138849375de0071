#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: converters.py
Version: 1.0

Description:
------------
Pairwise digit-string converters between binary, octal, decimal and
hexadecimal.

Binary <-> octal and binary <-> hexadecimal remap fixed-width bit groups.
Conversions into decimal fold the digits into an overflow-checked unsigned
64-bit accumulator, conversions out of decimal parse the value strictly and
emit digits by repeated division. Octal <-> hexadecimal goes through binary.

Every converter registers itself in CONVERTERS under its (source, target)
pair so callers can dispatch on Base members.
"""

from __future__ import annotations

import functools
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple, TypeVar

from loguru import logger

from .digit_maps import (
    HEX_GROUP_WIDTH,
    OCTAL_GROUP_WIDTH,
    bits_to_hexadecimal_digit,
    bits_to_octal_digit,
    digit_value,
    hexadecimal_digit_to_bits,
    octal_digit_to_bits,
    value_to_digit,
)
from .exceptions import BaseConversionError, InvalidCharacterError, ValueOverflowError
from .utils import MAX_U64, Base
from .validation import check_empty_string, trim_leading_zeros, validate, zero_padding

F = TypeVar("F", bound=Callable[..., str])

_REGISTRY: Dict[Tuple[Base, Base], Callable[..., str]] = {}

# Read-only view of the registered pairwise converters.
CONVERTERS: Mapping[Tuple[Base, Base], Callable[..., str]] = MappingProxyType(_REGISTRY)


def _conversion(source: Base, target: Base) -> Callable[[F], F]:
    """Register a converter for (source, target) and log its calls."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(text, *args, **kwargs):
            logger.debug(f"Converting {text!r} from {source.label} to {target.label}")
            try:
                return func(text, *args, **kwargs)
            except BaseConversionError as e:
                logger.debug(f"{func.__name__} failed [{e.error_code}]: {e}")
                raise

        _REGISTRY[(source, target)] = wrapper
        return wrapper  # type: ignore[return-value]

    return decorator


def _regroup(bits: str, width: int, lookup: Callable[[str], str]) -> str:
    padded = zero_padding(trim_leading_zeros(bits), width)
    digits = [lookup(padded[i : i + width]) for i in range(0, len(padded), width)]
    return trim_leading_zeros("".join(digits))


def _accumulate(digits: str, base: Base) -> int:
    """
    Fold validated digits into an unsigned 64-bit value.

    The bound is checked before the multiply-add so the accumulator never
    exceeds MAX_U64.
    """
    radix = base.radix
    accumulator = 0
    for char in digits:
        digit = digit_value(char)
        if accumulator > (MAX_U64 - digit) // radix:
            raise ValueOverflowError(base=base.label, digits=len(digits))
        accumulator = accumulator * radix + digit
    return accumulator


def _parse_decimal(text: str, offset: int = 0) -> int:
    """
    Strict decimal parser into the 64-bit accumulator.

    ``offset`` shifts reported positions back onto the untrimmed input.
    """
    accumulator = 0
    for position, char in enumerate(text, start=offset):
        if not "0" <= char <= "9":
            raise InvalidCharacterError(char, base=Base.DECIMAL.label, position=position)
        digit = ord(char) - ord("0")
        if accumulator > (MAX_U64 - digit) // Base.DECIMAL.radix:
            raise ValueOverflowError(base=Base.DECIMAL.label, digits=len(text))
        accumulator = accumulator * Base.DECIMAL.radix + digit
    return accumulator


def _render(value: int, base: Base, uppercase: bool = True) -> str:
    # The loop body runs at least once so that zero renders as "0".
    digits = []
    while True:
        value, remainder = divmod(value, base.radix)
        digits.append(value_to_digit(remainder, uppercase))
        if value == 0:
            break
    return "".join(reversed(digits))


def _to_decimal(text: str, base: Base) -> str:
    validate(text, base)
    return str(_accumulate(trim_leading_zeros(text), base))


def _from_decimal(text: str, base: Base, uppercase: bool = True) -> str:
    check_empty_string(text)
    digits = trim_leading_zeros(text)
    value = _parse_decimal(digits, offset=len(text) - len(digits))
    return _render(value, base, uppercase)


# --- Binary source ---


@_conversion(Base.BINARY, Base.OCTAL)
def binary_to_octal(text: str) -> str:
    validate(text, Base.BINARY)
    return _regroup(text, OCTAL_GROUP_WIDTH, bits_to_octal_digit)


@_conversion(Base.BINARY, Base.DECIMAL)
def binary_to_decimal(text: str) -> str:
    return _to_decimal(text, Base.BINARY)


@_conversion(Base.BINARY, Base.HEXADECIMAL)
def binary_to_hexadecimal(text: str, uppercase: bool = True) -> str:
    validate(text, Base.BINARY)
    return _regroup(
        text,
        HEX_GROUP_WIDTH,
        functools.partial(bits_to_hexadecimal_digit, uppercase=uppercase),
    )


# --- Octal source ---


@_conversion(Base.OCTAL, Base.BINARY)
def octal_to_binary(text: str) -> str:
    validate(text, Base.OCTAL)
    bits = "".join(octal_digit_to_bits(char) for char in trim_leading_zeros(text))
    return trim_leading_zeros(bits)


@_conversion(Base.OCTAL, Base.DECIMAL)
def octal_to_decimal(text: str) -> str:
    return _to_decimal(text, Base.OCTAL)


@_conversion(Base.OCTAL, Base.HEXADECIMAL)
def octal_to_hexadecimal(text: str, uppercase: bool = True) -> str:
    return binary_to_hexadecimal(octal_to_binary(text), uppercase=uppercase)


# --- Decimal source ---


@_conversion(Base.DECIMAL, Base.BINARY)
def decimal_to_binary(text: str) -> str:
    return _from_decimal(text, Base.BINARY)


@_conversion(Base.DECIMAL, Base.OCTAL)
def decimal_to_octal(text: str) -> str:
    return _from_decimal(text, Base.OCTAL)


@_conversion(Base.DECIMAL, Base.HEXADECIMAL)
def decimal_to_hexadecimal(text: str, uppercase: bool = True) -> str:
    return _from_decimal(text, Base.HEXADECIMAL, uppercase)


# --- Hexadecimal source ---


@_conversion(Base.HEXADECIMAL, Base.BINARY)
def hexadecimal_to_binary(text: str) -> str:
    validate(text, Base.HEXADECIMAL)
    bits = "".join(hexadecimal_digit_to_bits(char) for char in trim_leading_zeros(text))
    return trim_leading_zeros(bits)


@_conversion(Base.HEXADECIMAL, Base.OCTAL)
def hexadecimal_to_octal(text: str) -> str:
    return binary_to_octal(hexadecimal_to_binary(text))


@_conversion(Base.HEXADECIMAL, Base.DECIMAL)
def hexadecimal_to_decimal(text: str) -> str:
    return _to_decimal(text, Base.HEXADECIMAL)
