#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: validation.py
Version: 1.0

Description:
------------
Input validation and normalization of digit strings: empty-string rejection,
per-base alphabet checks, leading-zero trimming and zero padding to a group
width.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from .exceptions import EmptyInputError, InvalidArgumentError, InvalidCharacterError
from .utils import Base, BaseLike


def check_empty_string(text: Any) -> None:
    """
    Reject non-string and empty input.

    Raises:
        InvalidArgumentError: If text is not a str.
        EmptyInputError: If text is empty.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"expected a digit string, got {type(text).__name__}",
            input_type=type(text).__name__,
        )
    if not text:
        raise EmptyInputError()


def validate(text: Any, base: BaseLike) -> None:
    """
    Check that text is a non-empty digit string in the given base.

    Validation stops at the first character outside the alphabet of the
    base; hexadecimal accepts both letter cases within the same string.

    Args:
        text: Candidate digit string.
        base: Base member, radix or alias ("bin", "oct", "dec", "hex").

    Raises:
        EmptyInputError: If text is empty.
        InvalidCharacterError: On the first character outside the alphabet.
        InvalidArgumentError: If text is not a str or base is unsupported.
    """
    resolved = Base.parse(base)
    check_empty_string(text)

    alphabet = resolved.alphabet
    for position, char in enumerate(text):
        if char not in alphabet:
            logger.debug(
                f"Rejected {resolved.label} input: invalid character {char!r} at position {position}"
            )
            raise InvalidCharacterError(char, base=resolved.label, position=position)


def trim_leading_zeros(text: str) -> str:
    """Strip leading '0' characters; an all-zero string becomes "0"."""
    return text.lstrip("0") or "0"


def zero_padding(text: str, multiple: int) -> str:
    """
    Left-pad text with '0' until its length is a multiple of ``multiple``.

    A string whose length is already a multiple is returned unchanged.

    Raises:
        EmptyInputError: If text is empty.
        InvalidArgumentError: If multiple is zero, negative or not an int.
    """
    check_empty_string(text)

    if isinstance(multiple, bool) or not isinstance(multiple, int):
        raise InvalidArgumentError(
            f"multiple must be an int, got {type(multiple).__name__}",
            multiple=repr(multiple),
        )
    if multiple == 0:
        raise InvalidArgumentError("multiple is zero", multiple=multiple)
    if multiple < 0:
        raise InvalidArgumentError("multiple is negative", multiple=multiple)

    remainder = len(text) % multiple
    if remainder == 0:
        return text
    return "0" * (multiple - remainder) + text
