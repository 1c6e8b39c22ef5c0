"""
printf 스타일 문자열 치환

지원하는 포맷 변환 타입:
    %d  정수 (10진수 앞부분 파싱, 숫자가 아니면 NaN)
    %f  실수
    %s  문자열 (str())
    %%  '%' 문자
    %\\  '\\' 문자

포맷 표시는 왼쪽부터 차례로 인자를 하나씩 소비합니다.
남는 인자는 무시합니다.
"""

import re
from typing import Any, Sequence

from ptkit.errors import MalformedMarkerError, MissingArgumentError, UnknownMarkerError
from ptkit.utils.type_utils import number_to_str, to_float, to_int, to_str

# '.'은 줄바꿈과 매치되지 않으므로 '%' 바로 뒤의 줄바꿈은 불완전한 표시로 처리됨
MARKER_RE = re.compile(r"%(.)?")

LITERAL_MARKERS = {
    "%": "%",
    "\\": "\\",
}

CONVERTERS = {
    "d": lambda value: number_to_str(to_int(value)),
    "f": lambda value: number_to_str(to_float(value)),
    "s": to_str,
}


def substitute(template: str, args: Sequence[Any]) -> str:
    """
    템플릿의 포맷 표시를 인자로 치환합니다.

    Args:
        template: 포맷 문자열
        args: 치환할 값 목록 (앞에서부터 차례로 소비)

    Returns:
        치환된 문자열

    Raises:
        MalformedMarkerError: '%' 뒤에 문자가 없는 경우
        MissingArgumentError: 포맷 표시에 대응하는 인자가 없는 경우
        UnknownMarkerError: 지원하지 않는 변환 타입인 경우

    Examples:
        >>> substitute("%f%%", [12.3])
        '12.3%'
        >>> substitute('<div id="%s"></div>', ["hello"])
        '<div id="hello"></div>'
    """
    pos = 0

    def _replace(match):
        nonlocal pos
        marker = match.group(1)

        if marker in LITERAL_MARKERS:
            return LITERAL_MARKERS[marker]
        if marker is None:
            raise MalformedMarkerError(position=match.start())
        converter = CONVERTERS.get(marker)
        if converter is None:
            raise UnknownMarkerError(marker=marker, position=match.start())
        if pos >= len(args):
            raise MissingArgumentError(marker=marker, position=match.start())

        value = args[pos]
        pos += 1
        return converter(value)

    return MARKER_RE.sub(_replace, template)


def format_template(template: str, *args: Any) -> str:
    """
    템플릿 문자열을 포맷팅합니다.

    Examples:
        >>> format_template("%s%s", "a", "b")
        'ab'
        >>> format_template("%%test")
        '%test'
    """
    return substitute(to_str(template), args)
