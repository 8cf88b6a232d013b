import math

from utils.formatting import format_result, format_line


def test_format_result_like_cpp_stream():
    assert format_result(14.0) == "14"
    assert format_result(0.1 + 0.2) == "0.3"
    assert format_result(1234567.0) == "1.23457e+06"
    assert format_result(-2.5) == "-2.5"


def test_format_special_values():
    assert format_result(math.inf) == "inf"
    assert format_result(-math.inf) == "-inf"
    assert format_result(math.nan) == "nan"


def test_format_line():
    assert format_line("2+3*4", 14.0) == "Result: 2+3*4 = 14"
