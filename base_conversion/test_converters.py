import pytest

# Use relative imports as the directory is a package
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
from .exceptions import EmptyInputError, InvalidCharacterError, ValueOverflowError
from .utils import MAX_U64, Base

MAX_DECIMAL = "18446744073709551615"
OVER_MAX_DECIMAL = "18446744073709551616"

# Values spread across the 64-bit range
SAMPLE_VALUES = [0, 1, 7, 8, 10, 15, 16, 255, 256, 4095, 65535, 2**32, 2**63 + 12345, MAX_U64]

_PYTHON_FORMATS = {
    Base.BINARY: "b",
    Base.OCTAL: "o",
    Base.DECIMAL: "d",
    Base.HEXADECIMAL: "X",
}


def _render(value: int, base: Base) -> str:
    return format(value, _PYTHON_FORMATS[base])


# --- Literal scenarios ---

def test_binary_to_decimal_literal():
    assert binary_to_decimal("1010") == "10"


def test_decimal_to_hexadecimal_case_option():
    assert decimal_to_hexadecimal("255") == "FF"
    assert decimal_to_hexadecimal("255", uppercase=False) == "ff"


def test_hexadecimal_to_binary_literal():
    assert hexadecimal_to_binary("1A") == "11010"


def test_octal_to_hexadecimal_literal():
    assert octal_to_hexadecimal("17") == "F"


def test_decimal_to_octal_literal():
    assert decimal_to_octal("8") == "10"


def test_hexadecimal_to_decimal_is_case_insensitive():
    assert hexadecimal_to_decimal("ff") == hexadecimal_to_decimal("FF") == "255"
    assert hexadecimal_to_decimal("aBcD") == "43981"


def test_binary_to_octal_pads_to_whole_groups():
    assert binary_to_octal("1") == "1"
    assert binary_to_octal("1000") == "10"
    assert binary_to_octal("111111") == "77"


def test_binary_to_hexadecimal_pads_to_whole_groups():
    assert binary_to_hexadecimal("11010") == "1A"
    assert binary_to_hexadecimal("11010", uppercase=False) == "1a"


def test_hexadecimal_to_octal_through_binary():
    assert hexadecimal_to_octal("FF") == "377"
    assert hexadecimal_to_octal("1a") == "32"


# --- Agreement with Python's own formatting ---

@pytest.mark.parametrize("value", SAMPLE_VALUES)
@pytest.mark.parametrize(
    "pair", sorted(CONVERTERS, key=lambda p: (p[0].radix, p[1].radix)),
    ids=lambda p: f"{p[0].label}-{p[1].label}",
)
def test_converter_matches_python_formatting(pair, value):
    source, target = pair
    assert CONVERTERS[pair](_render(value, source)) == _render(value, target)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
@pytest.mark.parametrize("pair", sorted(CONVERTERS, key=lambda p: (p[0].radix, p[1].radix)),
                         ids=lambda p: f"{p[0].label}-{p[1].label}")
def test_round_trip_returns_canonical_input(pair, value):
    source, target = pair
    text = _render(value, source)
    assert CONVERTERS[(target, source)](CONVERTERS[pair](text)) == text


def test_registry_covers_every_ordered_pair():
    expected = {(a, b) for a in Base for b in Base if a is not b}
    assert set(CONVERTERS) == expected


# --- Zero and leading zeros ---

@pytest.mark.parametrize("func", list(CONVERTERS.values()), ids=lambda f: f.__name__)
@pytest.mark.parametrize("text", ["0", "0000"])
def test_zero_converts_to_zero(func, text):
    assert func(text) == "0"


def test_leading_zeros_are_trimmed():
    assert binary_to_decimal("0001010") == "10"
    assert decimal_to_binary("007") == "111"
    assert octal_to_binary("0017") == "1111"
    assert hexadecimal_to_octal("000F") == "17"
    assert binary_to_hexadecimal("0000") == "0"


# --- Empty input ---

@pytest.mark.parametrize("func", list(CONVERTERS.values()), ids=lambda f: f.__name__)
def test_empty_input_is_rejected(func):
    with pytest.raises(EmptyInputError) as excinfo:
        func("")
    assert excinfo.value.error_code == "EMPTY_INPUT"
    assert str(excinfo.value) == "base conversion error: string is empty"


# --- Invalid characters ---

def test_octal_to_decimal_rejects_eight():
    with pytest.raises(InvalidCharacterError) as excinfo:
        octal_to_decimal("812")
    assert excinfo.value.character == "8"
    assert str(excinfo.value) == "base conversion error: invalid character '8' in string"


def test_binary_to_decimal_rejects_two():
    with pytest.raises(InvalidCharacterError) as excinfo:
        binary_to_decimal("102")
    assert excinfo.value.character == "2"
    assert excinfo.value.context["position"] == 2


@pytest.mark.parametrize(
    "func, text, bad",
    [
        (binary_to_octal, "10a1", "a"),
        (binary_to_hexadecimal, "0b101", "b"),
        (octal_to_binary, "19", "9"),
        (decimal_to_binary, "12a", "a"),
        (decimal_to_octal, "-5", "-"),
        (decimal_to_hexadecimal, "1 0", " "),
        (hexadecimal_to_binary, "FG", "G"),
        (hexadecimal_to_decimal, "0x10", "x"),
    ],
)
def test_first_invalid_character_is_reported(func, text, bad):
    with pytest.raises(InvalidCharacterError) as excinfo:
        func(text)
    assert excinfo.value.character == bad


def test_validation_stops_at_first_offender():
    with pytest.raises(InvalidCharacterError) as excinfo:
        hexadecimal_to_decimal("1XYZ")
    assert excinfo.value.character == "X"


def test_composed_converter_propagates_first_stage_error():
    with pytest.raises(InvalidCharacterError) as excinfo:
        octal_to_hexadecimal("19")
    assert excinfo.value.character == "9"
    assert excinfo.value.context["base"] == "octal"

    with pytest.raises(InvalidCharacterError) as excinfo:
        hexadecimal_to_octal("fz")
    assert excinfo.value.context["base"] == "hexadecimal"


def test_unicode_digits_are_rejected():
    with pytest.raises(InvalidCharacterError):
        decimal_to_binary("١٢")


# --- Overflow boundary ---

@pytest.mark.parametrize("func", [decimal_to_binary, decimal_to_octal, decimal_to_hexadecimal])
def test_max_decimal_converts(func):
    assert func(MAX_DECIMAL)


def test_max_decimal_values():
    assert decimal_to_binary(MAX_DECIMAL) == "1" * 64
    assert decimal_to_octal(MAX_DECIMAL) == "1" + "7" * 21
    assert decimal_to_hexadecimal(MAX_DECIMAL) == "F" * 16


@pytest.mark.parametrize("func", [decimal_to_binary, decimal_to_octal, decimal_to_hexadecimal])
def test_decimal_above_max_overflows(func):
    with pytest.raises(ValueOverflowError) as excinfo:
        func(OVER_MAX_DECIMAL)
    assert excinfo.value.error_code == "OVERFLOW"
    assert isinstance(excinfo.value, OverflowError)


def test_leading_zeros_do_not_count_towards_overflow():
    assert decimal_to_hexadecimal("000" + MAX_DECIMAL) == "F" * 16
    assert binary_to_decimal("0" * 10 + "1" * 64) == MAX_DECIMAL


@pytest.mark.parametrize(
    "func, largest, too_large",
    [
        (binary_to_decimal, "1" * 64, "1" + "0" * 64),
        (octal_to_decimal, "1" + "7" * 21, "2" + "0" * 21),
        (hexadecimal_to_decimal, "ffffffffffffffff", "10000000000000000"),
    ],
)
def test_accumulator_bound(func, largest, too_large):
    assert func(largest) == MAX_DECIMAL
    with pytest.raises(ValueOverflowError):
        func(too_large)


def test_direct_group_conversion_has_no_bound():
    wide = "1" * 66
    assert binary_to_octal(wide) == "7" * 22
    assert binary_to_hexadecimal("1" * 68) == "F" * 17


def test_decimal_error_position_refers_to_untrimmed_input():
    with pytest.raises(InvalidCharacterError) as excinfo:
        decimal_to_binary("00a")
    assert excinfo.value.context["position"] == 2
