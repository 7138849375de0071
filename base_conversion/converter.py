#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: converter.py
Version: 1.0

Description:
------------
Dispatch over the pairwise converters and the option-aware Converter class.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from loguru import logger

from .converters import CONVERTERS
from .exceptions import InvalidArgumentError
from .options import ConversionOptions
from .utils import Base, BaseLike
from .validation import trim_leading_zeros, validate

# Converters that take the hex case option
_CASE_AWARE_TARGETS = frozenset({Base.HEXADECIMAL})


def get_converter(from_base: BaseLike, to_base: BaseLike) -> Callable[..., str]:
    """
    Look up the pairwise converter for two bases.

    Raises:
        InvalidArgumentError: If either base is unsupported or both are the same.
    """
    source = Base.parse(from_base)
    target = Base.parse(to_base)
    if source is target:
        raise InvalidArgumentError(
            f"no converter from {source.label} to itself",
            from_base=source.label,
            to_base=target.label,
        )
    return CONVERTERS[(source, target)]


def convert(
    text: str, from_base: BaseLike, to_base: BaseLike, *, uppercase: bool = True
) -> str:
    """
    Convert a digit string between any two supported bases.

    Converting to the same base validates the input and trims its leading
    zeros; for hexadecimal the letter case follows ``uppercase``.

    Args:
        text: Digit string in ``from_base``.
        from_base: Base member, radix or alias of the input.
        to_base: Base member, radix or alias of the output.
        uppercase: Letter case of hexadecimal output.

    Returns:
        The digit string in ``to_base``.
    """
    source = Base.parse(from_base)
    target = Base.parse(to_base)

    if source is target:
        validate(text, source)
        result = trim_leading_zeros(text)
        if source is Base.HEXADECIMAL:
            result = result.upper() if uppercase else result.lower()
        return result

    func = CONVERTERS[(source, target)]
    if target in _CASE_AWARE_TARGETS:
        return func(text, uppercase=uppercase)
    return func(text)


def convert_all(
    text: str, from_base: BaseLike, *, uppercase: bool = True
) -> Dict[str, str]:
    """Return the value of ``text`` in every supported base, keyed by base label."""
    source = Base.parse(from_base)
    return {
        target.label: convert(text, source, target, uppercase=uppercase)
        for target in Base
    }


class Converter:
    """
    Digit-string converter configured by ConversionOptions.

    Wraps convert() and convert_all() with input preparation (whitespace and
    radix prefix stripping in lenient mode) and output formatting (letter
    case, digit grouping).
    """

    def __init__(self, options: Optional[ConversionOptions] = None):
        self.options = options or ConversionOptions()

    def _prepare(self, text: str, base: Base) -> str:
        if self.options.strict or not isinstance(text, str):
            return text

        prepared = text.strip()
        if base.prefix and prepared.lower().startswith(base.prefix):
            prepared = prepared[len(base.prefix) :]
        if prepared != text:
            logger.debug(f"Lenient input {text!r} prepared as {prepared!r}")
        return prepared

    def _format(self, digits: str) -> str:
        size = self.options.group_output
        if size <= 0 or len(digits) <= size:
            return digits

        head = len(digits) % size
        groups = [digits[:head]] if head else []
        groups.extend(digits[i : i + size] for i in range(head, len(digits), size))
        return self.options.separator.join(groups)

    def convert(self, text: str, from_base: BaseLike, to_base: BaseLike) -> str:
        source = Base.parse(from_base)
        result = convert(
            self._prepare(text, source),
            source,
            to_base,
            uppercase=self.options.uppercase,
        )
        return self._format(result)

    def convert_all(self, text: str, from_base: BaseLike) -> Dict[str, str]:
        source = Base.parse(from_base)
        results = convert_all(
            self._prepare(text, source), source, uppercase=self.options.uppercase
        )
        return {label: self._format(value) for label, value in results.items()}
