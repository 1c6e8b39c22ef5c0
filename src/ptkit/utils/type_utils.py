"""
타입 판별 및 변환 유틸리티

값의 타입을 판별하는 함수와, 숫자/문자열/리스트로 느슨하게 변환하는 함수를 제공합니다.
숫자 변환은 예외를 던지지 않고 숫자가 아닌 입력에 대해 NaN을 반환합니다.
"""

import math
import re
from decimal import Decimal
from typing import Any, List, Union

Number = Union[int, float]

NAN = float("nan")

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_FLOAT_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)


def is_boolean(value: Any) -> bool:
    """bool 값인지 확인"""
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    """int 또는 float 값인지 확인 (bool 제외)"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_object(value: Any) -> bool:
    """
    객체(컨테이너 또는 인스턴스)인지 확인

    None, 기본 타입(bool, int, float, str), 호출 가능한 값은 객체로 보지 않습니다.

    Examples:
        >>> is_object({"a": 1})
        True
        >>> is_object([1, 2])
        True
        >>> is_object("text")
        False
        >>> is_object(None)
        False
    """
    if value is None or isinstance(value, (bool, int, float, str, bytes)):
        return False
    return not callable(value)


def is_function(value: Any) -> bool:
    return callable(value)


def is_nan(value: Any) -> bool:
    """float NaN인지 확인"""
    return isinstance(value, float) and math.isnan(value)


def is_int(value: Any) -> bool:
    """
    정수로 해석되는 값인지 확인

    숫자 문자열도 허용하며, 정수 부분만 파싱한 값이 전체 값과 같아야 합니다.

    Examples:
        >>> is_int(3)
        True
        >>> is_int("12")
        True
        >>> is_int("12.5")
        False
        >>> is_int("12abc")
        False
        >>> is_int(True)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return False
        parsed = to_int(value)
        return not is_nan(parsed) and parsed == number
    return False


def to_bool(value: Any) -> bool:
    return bool(value)


def to_int(value: Any, radix: int = 10) -> Number:
    """
    값을 정수로 변환합니다.

    문자열 앞부분의 부호와 숫자만 읽고 나머지는 무시합니다.
    숫자로 시작하지 않으면 NaN(float)을 반환합니다.

    Args:
        value: 변환할 값
        radix: 진법 (2-36, 기본 10)

    Returns:
        변환된 정수 또는 NaN

    Examples:
        >>> to_int("42px")
        42
        >>> to_int(12.7)
        12
        >>> to_int("ff", 16)
        255
        >>> to_int("abc")
        nan
    """
    if not radix:
        radix = 10
    if not 2 <= radix <= 36:
        return NAN

    if is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return NAN
        if radix == 10:
            return int(value)
        value = int(value)

    text = to_str(value).strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if radix == 16 and text[:2].lower() == "0x":
        text = text[2:]

    valid = _DIGITS[:radix]
    end = 0
    while end < len(text) and text[end].lower() in valid:
        end += 1
    if end == 0:
        return NAN
    return sign * int(text[:end], radix)


def to_float(value: Any) -> float:
    """
    값을 실수로 변환합니다.

    문자열 앞부분의 실수 표기만 읽고 나머지는 무시합니다.
    실수로 시작하지 않으면 NaN을 반환합니다.

    Examples:
        >>> to_float("12.3%")
        12.3
        >>> to_float(".5")
        0.5
        >>> to_float("Infinity")
        inf
        >>> to_float(None)
        nan
    """
    if is_number(value):
        return float(value)

    match = _FLOAT_PREFIX_RE.match(to_str(value).strip())
    if match is None:
        return NAN
    text = match.group(0)
    if text.lstrip("+-") == "Infinity":
        return float("-inf") if text.startswith("-") else float("inf")
    return float(text)


def to_str(value: Any) -> str:
    return str(value)


def to_list(value: Any) -> List[Any]:
    """
    값을 리스트로 감쌉니다.

    Examples:
        >>> to_list(None)
        []
        >>> to_list([1, 2])
        [1, 2]
        >>> to_list("a")
        ['a']
    """
    if value is None:
        return []
    return value if is_array(value) else [value]


def _float_to_str(number: float) -> str:
    # repr()의 최단 자릿수를 유지하고, 지수 표기는 1e-6 미만 / 1e21 이상에서만 사용
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0") or "0"
    exponent += len(digit_tuple) - len(digits)
    point = exponent + len(digits)

    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text


def number_to_str(number: Number) -> str:
    """
    숫자를 표시용 문자열로 변환합니다.

    정수값인 실수는 소수점 없이 표시하고, NaN/무한대는 'NaN', 'Infinity'로 표시합니다.
    아주 작거나 큰 값은 '1e-7', '1.5e+21' 형태의 지수 표기를 사용합니다.

    Examples:
        >>> number_to_str(12.3)
        '12.3'
        >>> number_to_str(12.0)
        '12'
        >>> number_to_str(float("nan"))
        'NaN'
        >>> number_to_str(float("-inf"))
        '-Infinity'
    """
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "-Infinity" if number < 0 else "Infinity"
        return _float_to_str(number)
    return str(number)
