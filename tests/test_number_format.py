import math

from core.number_format import (
    format_number,
    number_to_text,
    operator_symbol,
    parse_number,
    round_result,
)


def test_integral_values_have_no_fraction():
    assert format_number(8.0) == "8"
    assert format_number(-42.0) == "-42"
    assert format_number(0.0) == "0"


def test_plain_decimals():
    assert format_number(0.25) == "0.25"
    assert format_number(-2.5) == "-2.5"
    assert format_number(123456.789) == "123456.789"


def test_long_text_collapses_to_twelve_significant_digits():
    assert format_number(1 / 3) == "0.333333333333"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(2 / 3) == "0.666666666667"


def test_largest_plain_value():
    assert format_number(999999999999.0) == "999999999999"


def test_large_values_use_scientific_notation():
    assert format_number(1e12) == "1.000000e+12"
    assert format_number(-1234567890123.0) == "-1.234568e+12"
    assert format_number(1e100) == "1.000000e+100"


def test_tiny_values_use_scientific_notation():
    assert format_number(1e-7) == "1.000000e-7"
    assert format_number(-2.5e-12) == "-2.500000e-12"
    assert format_number(0.000001) == "0.000001"


def test_infinity():
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


def test_number_to_text():
    assert number_to_text(8.0) == "8"
    assert number_to_text(-0.0) == "0"
    assert number_to_text(0.00001) == "0.00001"
    assert number_to_text(1e20) == "100000000000000000000"
    assert number_to_text(1e21) == "1e+21"
    assert number_to_text(1e-7) == "1e-07"


def test_number_to_text_round_trips():
    for value in (1 / 3, 0.1 + 0.2, -123.456, 1e-7, 1e25, 5e-324):
        assert float(number_to_text(value)) == value


def test_round_result_removes_binary_noise():
    assert round_result(0.1 + 0.2) == 0.3
    assert round_result(-(0.1 + 0.2)) == -0.3
    assert round_result(1 / 3) == 0.3333333333
    assert round_result(8.0) == 8.0


def test_round_result_leaves_huge_values_alone():
    assert round_result(1e300) == 1e300
    assert math.isinf(round_result(math.inf))


def test_operator_symbols():
    assert operator_symbol("+") == "+"
    assert operator_symbol("-") == "−"
    assert operator_symbol("*") == "×"
    assert operator_symbol("/") == "÷"


def test_parse_number():
    assert parse_number("12.") == 12.0
    assert parse_number("-0.5") == -0.5
    assert parse_number("1e+21") == 1e21
    assert parse_number("") == 0.0
