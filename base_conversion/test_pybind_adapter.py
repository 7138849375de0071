import asyncio
from unittest.mock import patch

import pytest

from .pybind_adapter import BaseConversionPyBindAdapter


def test_convert_sync_success():
    result = BaseConversionPyBindAdapter.convert_sync("255", "dec", "hex")
    assert result["success"] is True
    assert result["result"] == "FF"
    assert result["error"] is None
    assert result["error_code"] is None


def test_convert_sync_lowercase():
    result = BaseConversionPyBindAdapter.convert_sync("255", "dec", "hex", uppercase=False)
    assert result["result"] == "ff"


@pytest.mark.parametrize(
    "value, from_base, error_code",
    [
        ("", "dec", "EMPTY_INPUT"),
        ("812", "oct", "INVALID_CHARACTER"),
        ("18446744073709551616", "dec", "OVERFLOW"),
        ("12", "base3", "INVALID_ARGUMENT"),
    ],
)
def test_convert_sync_reports_errors(value, from_base, error_code):
    result = BaseConversionPyBindAdapter.convert_sync(value, from_base, "bin")
    assert result["success"] is False
    assert result["result"] is None
    assert result["error_code"] == error_code
    assert result["error"].startswith("base conversion error:")


@patch("base_conversion.pybind_adapter.convert")
def test_convert_sync_unexpected_error(mock_convert):
    mock_convert.side_effect = RuntimeError("boom")
    result = BaseConversionPyBindAdapter.convert_sync("1", "bin", "dec")
    assert result["success"] is False
    assert result["error_code"] == "UNEXPECTED_ERROR"
    assert result["error"] == "boom"


def test_convert_async():
    result = asyncio.run(BaseConversionPyBindAdapter.convert_async("1A", "hex", "bin"))
    assert result["success"] is True
    assert result["result"] == "11010"


def test_batch_convert_sync():
    result = BaseConversionPyBindAdapter.batch_convert_sync(["7", "8", "17"], "oct", "dec")
    assert result["success"] is False
    assert result["total"] == 3
    assert result["converted"] == 2
    assert result["failed"] == 1
    assert [r["result"] for r in result["results"]] == ["7", None, "15"]
    assert "invalid character '8'" in result["results"][1]["error"]


def test_batch_convert_sync_empty_batch():
    result = BaseConversionPyBindAdapter.batch_convert_sync([], "oct", "dec")
    assert result["success"] is True
    assert result["total"] == 0
