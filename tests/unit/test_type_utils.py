"""
타입 판별/변환 유틸리티 단위 테스트

src/ptkit/utils/type_utils.py 테스트
"""

import math

import pytest

from ptkit.utils.type_utils import (
    is_array,
    is_boolean,
    is_function,
    is_int,
    is_nan,
    is_number,
    is_object,
    is_string,
    number_to_str,
    to_bool,
    to_float,
    to_int,
    to_list,
    to_str,
)


@pytest.mark.unit
class TestPredicates:
    """타입 판별 함수 테스트"""

    def test_is_boolean(self):
        assert is_boolean(False)
        assert not is_boolean(0)

    def test_is_number_excludes_bool(self):
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")

    def test_is_string(self):
        assert is_string("")
        assert not is_string(b"")

    def test_is_array(self):
        assert is_array([])
        assert not is_array((1, 2))

    def test_is_object(self):
        assert is_object({})
        assert is_object([])
        assert is_object(object())
        assert not is_object(None)
        assert not is_object("text")
        assert not is_object(3)
        assert not is_object(len)

    def test_is_function(self):
        assert is_function(len)
        assert is_function(lambda: None)
        assert not is_function("len")

    @pytest.mark.parametrize("value", [3, -7, 2.0, "12", " 8 ", "-4"])
    def test_is_int_true(self, value):
        assert is_int(value)

    @pytest.mark.parametrize("value", [2.5, "12.5", "12abc", "", "abc", True, None, float("inf")])
    def test_is_int_false(self, value):
        assert not is_int(value)


@pytest.mark.unit
class TestConversions:
    """변환 함수 테스트"""

    def test_to_bool(self):
        assert to_bool("x") is True
        assert to_bool("") is False

    def test_to_int_prefix_parse(self):
        assert to_int("42px") == 42
        assert to_int("  -17.9") == -17
        assert to_int("+5") == 5

    def test_to_int_numbers(self):
        assert to_int(12.7) == 12
        assert to_int(-12.7) == -12
        assert to_int(9) == 9

    def test_to_int_nan(self):
        assert is_nan(to_int("abc"))
        assert is_nan(to_int(None))
        assert is_nan(to_int(""))
        assert is_nan(to_int(float("nan")))

    def test_to_int_radix(self):
        assert to_int("ff", 16) == 255
        assert to_int("0x1A", 16) == 26
        assert to_int("101", 2) == 5
        assert to_int(15, 16) == 21
        assert is_nan(to_int("9", 8))
        assert is_nan(to_int("1", 37))

    def test_to_float(self):
        assert to_float("12.3%") == 12.3
        assert to_float(".5") == 0.5
        assert to_float("1e3x") == 1000.0
        assert to_float(4) == 4.0
        assert to_float("-Infinity") == float("-inf")

    def test_to_float_nan(self):
        assert math.isnan(to_float("abc"))
        assert math.isnan(to_float(None))
        assert math.isnan(to_float("."))

    def test_to_str(self):
        assert to_str(None) == "None"
        assert to_str(1.5) == "1.5"

    def test_to_list(self):
        items = [1, 2]
        assert to_list(items) is items
        assert to_list(None) == []
        assert to_list(0) == [0]
        assert to_list((1, 2)) == [(1, 2)]


@pytest.mark.unit
class TestNumberToStr:
    """number_to_str() 테스트"""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (12.3, "12.3"),
            (12.0, "12"),
            (-0.5, "-0.5"),
            (7, "7"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_number_to_str(self, number, expected):
        assert number_to_str(number) == expected

    @pytest.mark.parametrize(
        "number,expected",
        [
            (1e-07, "1e-7"),
            (-1.5e-07, "-1.5e-7"),
            (0.000001, "0.000001"),
            (0.00012, "0.00012"),
            (1e16, "10000000000000000"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.5e21, "1.5e+21"),
            (-0.0, "0"),
        ],
    )
    def test_exponent_notation(self, number, expected):
        """지수 표기는 1e-6 미만, 1e21 이상에서만 사용하며 지수에 0을 채우지 않음"""
        assert number_to_str(number) == expected
