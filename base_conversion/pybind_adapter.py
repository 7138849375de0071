#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Host adapter for digit-string base conversion.

This module wraps the conversion functions for an embedding host
application. Every method returns a plain dictionary instead of raising, so
the host can report success output or the error message directly.
"""

import asyncio
from typing import Any, Dict, List

from loguru import logger

from .converter import convert
from .exceptions import BaseConversionError


class BaseConversionPyBindAdapter:
    """
    Dict-returning interface to base_conversion for a hosting application.

    Errors are reported in the returned dictionary rather than raised.
    It provides both synchronous and asynchronous versions of key operations.
    """

    @staticmethod
    def convert_sync(
        value: str,
        from_base: str,
        to_base: str,
        uppercase: bool = True,
    ) -> Dict[str, Any]:
        """
        Synchronous conversion of a digit string.

        Args:
            value: Digit string to convert
            from_base: Base of the input (bin, oct, dec, hex or radix)
            to_base: Base of the output (bin, oct, dec, hex or radix)
            uppercase: Letter case of hexadecimal output

        Returns:
            Dict with structure:
            {
                "success": bool,
                "result": str or None,
                "error": str or None,
                "error_code": str or None,
                "message": str
            }
        """
        try:
            result = convert(value, from_base, to_base, uppercase=uppercase)
            return {
                "success": True,
                "result": result,
                "error": None,
                "error_code": None,
                "message": f"Converted {value} from {from_base} to {to_base}",
            }
        except BaseConversionError as e:
            logger.info(f"Adapter: conversion of {value!r} rejected: {e}")
            return {
                "success": False,
                "result": None,
                "error": str(e),
                "error_code": e.error_code,
                "message": f"Conversion failed: {str(e)}",
            }
        except Exception as e:
            logger.exception(f"Error in convert_sync: {e}")
            return {
                "success": False,
                "result": None,
                "error": str(e),
                "error_code": "UNEXPECTED_ERROR",
                "message": f"Conversion failed: {str(e)}",
            }

    @staticmethod
    async def convert_async(
        value: str,
        from_base: str,
        to_base: str,
        uppercase: bool = True,
    ) -> Dict[str, Any]:
        """
        Asynchronous conversion of a digit string.

        Returns:
            Same structure as convert_sync.
        """
        return await asyncio.to_thread(
            BaseConversionPyBindAdapter.convert_sync,
            value, from_base, to_base, uppercase,
        )

    @staticmethod
    def batch_convert_sync(
        values: List[str],
        from_base: str,
        to_base: str,
        uppercase: bool = True,
    ) -> Dict[str, Any]:
        """
        Convert several digit strings between the same pair of bases.

        Returns:
            Dict with structure:
            {
                "success": bool,
                "total": int,
                "converted": int,
                "failed": int,
                "results": [{"value": str, "success": bool, "result": str or None, "error": str or None}],
                "message": str
            }
        """
        logger.info(
            f"Adapter: batch converting {len(values)} value(s) from {from_base} to {to_base}")

        results = []
        converted_count = 0
        for value in values:
            outcome = BaseConversionPyBindAdapter.convert_sync(
                value, from_base, to_base, uppercase)
            results.append({
                "value": value,
                "success": outcome["success"],
                "result": outcome["result"],
                "error": outcome["error"],
            })
            if outcome["success"]:
                converted_count += 1

        failed_count = len(values) - converted_count
        return {
            "success": failed_count == 0,
            "total": len(values),
            "converted": converted_count,
            "failed": failed_count,
            "results": results,
            "message": f"Batch conversion complete: {converted_count}/{len(values)} succeeded",
        }
