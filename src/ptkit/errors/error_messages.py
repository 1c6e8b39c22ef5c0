"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Template 관련
    ErrorCode.TEMPLATE_MALFORMED_MARKER: (
        "불완전한 포맷 표시입니다: 위치 {position}의 '%' 뒤에 변환 문자가 없습니다."
    ),
    ErrorCode.TEMPLATE_UNKNOWN_MARKER: (
        "알 수 없는 포맷 타입입니다: '%{marker}' (위치 {position})"
    ),
    ErrorCode.TEMPLATE_MISSING_ARGUMENT: (
        "포맷 표시 '%{marker}'(위치 {position})에 대응하는 인자가 없습니다."
    ),
    ErrorCode.SNIPPET_BEGIN_NOT_FOUND: (
        "여러 줄 포맷 - 시작 표시 줄을 찾을 수 없습니다"
    ),
    ErrorCode.SNIPPET_END_NOT_FOUND: (
        "여러 줄 포맷 - 종료 표시 줄을 찾을 수 없습니다 (태그: {tag})"
    ),
    ErrorCode.SNIPPET_SOURCE_UNAVAILABLE: (
        "여러 줄 포맷 - 소스 코드를 읽을 수 없습니다: {error}"
    ),
    # Config 관련
    ErrorCode.CONFIG_LOAD_FAILED: (
        "설정 파일 '{file_path}'를 로드하는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_INVALID: (
        "설정 값 '{field_name}'이 올바르지 않습니다: {value}"
    ),
    ErrorCode.CONFIG_FILE_NOT_FOUND: (
        "설정 파일 '{file_path}'을 찾을 수 없습니다."
    ),
    ErrorCode.WHITESPACE_MODE_INVALID: (
        "여러 줄 포맷 - 설정 오류: 알 수 없는 공백 모드 '{mode}'"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 에러가 발생했습니다: {error}"
    ),
    ErrorCode.USER_ERROR: (
        "{message}"
    ),
    ErrorCode.UNIMPLEMENTED: (
        "구현되지 않은 함수입니다."
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.TEMPLATE_UNKNOWN_MARKER)
        "알 수 없는 포맷 타입입니다: '%{marker}' (위치 {position})"
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(
        ...     ErrorCode.TEMPLATE_UNKNOWN_MARKER,
        ...     marker="k",
        ...     position=0
        ... )
        "알 수 없는 포맷 타입입니다: '%k' (위치 0)"
    """
    template = get_error_message(error_code)

    # 원본 context는 건드리지 않음 (예외 객체가 그대로 보관)
    values = dict(context)
    values["error_code"] = error_code

    try:
        return template.format(**values)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(values.keys())}]"
        )
