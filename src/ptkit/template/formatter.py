"""
문자열 포맷팅 진입점

format()은 첫 번째 인자의 종류에 따라 동작을 선택합니다.
    - 인자 없음: 빈 문자열
    - Snippet 또는 호출 가능한 객체: 여러 줄 스니펫 추출 (format_snippet)
    - str: printf 스타일 치환 (format_template)
    - 그 외: 'FORMAT_ERROR'

에러 형태는 세 가지이며 호출자가 구분할 수 있도록 그대로 유지합니다.
    - 치환 오류: TemplateFormatError 예외
    - 스니펫 구조 오류: 'FORMAT_ERROR:<사유>' 반환
    - 지원하지 않는 첫 인자: 'FORMAT_ERROR' 반환
"""

from typing import Any

from ptkit.errors import ErrorCode, ToolkitError
from ptkit.logging import get_logger
from .snippet import FORMAT_ERROR, format_snippet, is_snippet_source
from .substitution import format_template

logger = get_logger(__name__, component="TemplateFormatter")


def format(*args: Any) -> str:
    """
    문자열을 포맷팅합니다.

    Examples:
        >>> format()
        ''
        >>> format("string without format")
        'string without format'
        >>> format("%f%%", 12.3)
        '12.3%'
        >>> format('<div id="%s"></div>', "hello")
        '<div id="hello"></div>'
        >>> format(42)
        'FORMAT_ERROR'

    Raises:
        TemplateFormatError: 문자열 템플릿의 포맷 표시가 잘못되었거나 인자가 부족한 경우
    """
    if not args:
        return ""

    first = args[0]
    if isinstance(first, str):
        return format_template(*args)
    if is_snippet_source(first):
        return format_snippet(*args)

    logger.debug("Unsupported format argument", argument_type=type(first).__name__)
    return FORMAT_ERROR


def raise_error(*args: Any) -> None:
    """
    format()으로 만든 메시지로 예외를 발생시킵니다.

    Examples:
        >>> raise_error("invalid value: %s", "abc")
        Traceback (most recent call last):
        ...
        ptkit.errors.error_handler.ToolkitError: [USER_ERROR (9002)] invalid value: abc

    Raises:
        ToolkitError: 항상 발생 (ErrorCode.USER_ERROR)
    """
    raise ToolkitError(ErrorCode.USER_ERROR, message=format(*args))
