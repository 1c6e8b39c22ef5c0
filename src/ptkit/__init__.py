"""
ptkit - Platform Team 유틸리티 툴킷

타입 판별/변환, 컬렉션 유틸리티, 숫자 포맷팅, 그리고 printf 스타일 치환과
여러 줄 스니펫 추출을 지원하는 문자열 포맷터를 제공합니다.
"""

__version__ = "2.2.0"

from .errors import (
    ErrorCode,
    MalformedMarkerError,
    MissingArgumentError,
    TemplateFormatError,
    ToolkitError,
    UnknownMarkerError,
)
from .template import (
    FORMAT_ERROR,
    Snippet,
    WhitespaceMode,
    format,
    format_snippet,
    format_template,
    raise_error,
)
from .utils import (
    cmp,
    deep_copy,
    find_item_from_list,
    find_key_from_list,
    format_number,
    identity,
    is_array,
    is_boolean,
    is_function,
    is_int,
    is_number,
    is_object,
    is_string,
    keys,
    max_value,
    min_value,
    noop,
    range_list,
    stable_sort,
    to_bool,
    to_float,
    to_int,
    to_list,
    to_str,
    unimplemented,
    values,
)

__all__ = [
    # 에러
    "ErrorCode",
    "MalformedMarkerError",
    "MissingArgumentError",
    "TemplateFormatError",
    "ToolkitError",
    "UnknownMarkerError",
    # 포맷팅
    "FORMAT_ERROR",
    "Snippet",
    "WhitespaceMode",
    "format",
    "format_snippet",
    "format_template",
    "raise_error",
    "format_number",
    # 타입
    "is_array",
    "is_boolean",
    "is_function",
    "is_int",
    "is_number",
    "is_object",
    "is_string",
    "to_bool",
    "to_float",
    "to_int",
    "to_list",
    "to_str",
    # 컬렉션
    "cmp",
    "deep_copy",
    "find_item_from_list",
    "find_key_from_list",
    "identity",
    "keys",
    "max_value",
    "min_value",
    "noop",
    "range_list",
    "stable_sort",
    "unimplemented",
    "values",
]
