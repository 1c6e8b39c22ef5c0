"""숫자 표시 형식 유틸리티 모듈.

소수 자릿수, 백분율, 천 단위 구분 기호를 적용하여 숫자를 문자열로 포맷팅합니다.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from .type_utils import is_nan, to_float, to_int


def _to_fixed(number: float, fixed: int) -> str:
    """소수점 이하 fixed 자리로 반올림한 문자열 (정확한 이진값 기준 half-up)"""
    quantum = Decimal(1).scaleb(-fixed)
    return str(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


def _group_thousands(text: str) -> str:
    pos = text.find(".")
    if pos < 0:
        pos = len(text)
    pos -= 3
    while pos > 0:
        text = text[:pos] + "," + text[pos:]
        pos -= 3
    return text


def format_number(
    number: Any = None,
    fixed: Any = None,
    is_percentage: bool = False,
    grouping: bool = True,
    nan_result: Any = "-",
) -> Any:
    """숫자를 표시용 문자열로 포맷팅합니다.

    fixed를 지정하지 않으면 정수부 기준 유효숫자 3자리를 보장하도록
    100 이상은 소수 0자리, 10 이상은 1자리, 그 미만은 2자리를 사용합니다.

    Args:
        number: 포맷팅할 숫자 (숫자 문자열도 허용)
        fixed: 소수 자릿수 (정수로 해석되지 않으면 자동 결정)
        is_percentage: 백분율로 표시할지 여부 (100을 곱하고 '%'를 붙임)
        grouping: 천 단위 쉼표 추가 여부
        nan_result: number가 숫자가 아닐 때 반환할 값

    Returns:
        포맷팅된 문자열 또는 nan_result

    Examples:
        >>> format_number()
        '-'
        >>> format_number(123123.456)
        '123,123'
        >>> format_number(123.456, 2)
        '123.46'
        >>> format_number(123.456, 5)
        '123.45600'
        >>> format_number(0.4567, 1, True)
        '45.7%'
        >>> format_number(0.5, 2, True)
        '50.00%'
        >>> format_number(123123.456, 1, False, False)
        '123123.5'
        >>> format_number("invalid_number", nan_result=None) is None
        True
    """
    value = to_float(number)
    if is_nan(value):
        return nan_result

    sign = ""
    if value < 0:
        sign = "-"
        value = -value

    if is_percentage:
        value = value * 100

    digits = to_int(fixed) if fixed is not None else None
    if digits is None or is_nan(digits):
        # 자동으로 0~2자리 소수 유지
        if value >= 100:
            digits = 0
        elif value >= 10:
            digits = 1
        else:
            digits = 2
    digits = max(int(digits), 0)

    if value == float("inf"):
        text = "Infinity"
    else:
        text = _to_fixed(value, digits)
        if grouping:
            text = _group_thousands(text)

    return sign + (text + "%" if is_percentage else text)
