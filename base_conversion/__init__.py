#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: __init__.py
Version: 1.0

Description:
------------
This Python package converts unsigned integers written as digit strings
between binary, octal, decimal and hexadecimal, bounded by the unsigned
64-bit range.

The package provides:
    1. Pairwise converters for all twelve ordered base pairs
    2. Validation and normalization helpers (alphabet checks, leading-zero
       trimming, zero padding)
    3. A generic dispatcher, an option-aware Converter and a command-line tool

License:
--------
This package is released under the GPL-3.0-or-later License.
"""

from .utils import Base, MAX_U64, LOG_FORMAT
from .exceptions import (
    BaseConversionError,
    EmptyInputError,
    InvalidCharacterError,
    ValueOverflowError,
    InvalidArgumentError,
)
from .validation import validate, trim_leading_zeros, zero_padding
from .converters import (
    CONVERTERS,
    binary_to_octal,
    binary_to_decimal,
    binary_to_hexadecimal,
    octal_to_binary,
    octal_to_decimal,
    octal_to_hexadecimal,
    decimal_to_binary,
    decimal_to_octal,
    decimal_to_hexadecimal,
    hexadecimal_to_binary,
    hexadecimal_to_octal,
    hexadecimal_to_decimal,
)
from .options import ConversionOptions
from .converter import Converter, convert, convert_all, get_converter
from .pybind_adapter import BaseConversionPyBindAdapter

# Module metadata
__version__ = "1.0.0"
__license__ = "GPL-3.0-or-later"

# Configure loguru logger
from loguru import logger
import sys

# Remove default handler and add custom one
logger.remove()
logger.add(
    sys.stderr,
    format=LOG_FORMAT,
    level="INFO",
)


def get_tool_info() -> dict:
    """
    Return metadata about this tool for discovery by a hosting application.

    Returns:
        Dict containing tool metadata including name, version, description,
        available functions, requirements, and platform compatibility.
    """
    return {
        "name": "base_conversion",
        "version": __version__,
        "description": "Convert digit strings between binary, octal, decimal and hexadecimal",
        "license": __license__,
        "supported": True,
        "platform": ["windows", "linux", "macos"],
        "functions": [
            "zero_padding",
            *(func.__name__ for func in CONVERTERS.values()),
            "convert",
            "convert_all",
        ],
        "requirements": ["loguru", "typer", "rich"],
        "capabilities": [
            "direct_bit_group_conversion",
            "overflow_checked_decimal_conversion",
            "composed_octal_hexadecimal_conversion",
            "input_validation",
        ],
        "classes": {
            "Converter": "Option-aware conversion interface",
            "ConversionOptions": "Configuration options for conversions",
            "BaseConversionPyBindAdapter": "Simplified pybind11 interface",
        },
    }


# Public API
__all__ = [
    "Base",
    "MAX_U64",
    "BaseConversionError",
    "EmptyInputError",
    "InvalidCharacterError",
    "ValueOverflowError",
    "InvalidArgumentError",
    "validate",
    "trim_leading_zeros",
    "zero_padding",
    "CONVERTERS",
    "binary_to_octal",
    "binary_to_decimal",
    "binary_to_hexadecimal",
    "octal_to_binary",
    "octal_to_decimal",
    "octal_to_hexadecimal",
    "decimal_to_binary",
    "decimal_to_octal",
    "decimal_to_hexadecimal",
    "hexadecimal_to_binary",
    "hexadecimal_to_octal",
    "hexadecimal_to_decimal",
    "ConversionOptions",
    "Converter",
    "convert",
    "convert_all",
    "get_converter",
    "BaseConversionPyBindAdapter",
    "get_tool_info",
    "logger",
]
