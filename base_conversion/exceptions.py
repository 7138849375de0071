#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: exceptions.py
Version: 1.0

Description:
------------
Exception hierarchy for the base_conversion package.

Every failure raised by a converter derives from BaseConversionError and
carries a stable error code plus a context dictionary, so callers can build
their own diagnostics or serialize the failure with to_dict().
"""

from __future__ import annotations

from typing import Any, Dict, Optional

_MESSAGE_PREFIX = "base conversion error"


class BaseConversionError(Exception):
    """
    Base exception for digit-string conversion failures.

    Args:
        message: Human-readable description of the failure.
        error_code: Stable identifier for the failure kind. Defaults to the
            class-level ``default_error_code``.
        **context: Extra details (offending character, base, position...).
    """

    default_error_code = "CONVERSION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code or self.default_error_code
        self.context: Dict[str, Any] = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "error_code": self.error_code,
            "context": dict(self.context),
        }


class EmptyInputError(BaseConversionError, ValueError):
    """Raised when the input digit string has zero length."""

    default_error_code = "EMPTY_INPUT"

    def __init__(self, **context: Any) -> None:
        super().__init__(f"{_MESSAGE_PREFIX}: string is empty", **context)


class InvalidCharacterError(BaseConversionError, ValueError):
    """Raised on the first character outside the alphabet of the stated base."""

    default_error_code = "INVALID_CHARACTER"

    def __init__(self, character: str, **context: Any) -> None:
        self.character = character
        super().__init__(
            f"{_MESSAGE_PREFIX}: invalid character '{character}' in string",
            character=character,
            **context,
        )


class ValueOverflowError(BaseConversionError, OverflowError):
    """Raised when the represented value exceeds the unsigned 64-bit range."""

    default_error_code = "OVERFLOW"

    def __init__(self, **context: Any) -> None:
        super().__init__(
            f"{_MESSAGE_PREFIX}: the value represented by string exceeds uint64_t limit",
            **context,
        )


class InvalidArgumentError(BaseConversionError, ValueError):
    """Raised when a structural precondition is violated (bad multiple, unknown base...)."""

    default_error_code = "INVALID_ARGUMENT"

    def __init__(self, detail: str, **context: Any) -> None:
        super().__init__(f"{_MESSAGE_PREFIX}: {detail}", **context)
