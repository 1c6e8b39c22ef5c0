"""에러 핸들러

ptkit의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class ToolkitError(Exception):
    """ptkit의 기본 예외 클래스

    모든 ptkit 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise ToolkitError(
        ...     ErrorCode.TEMPLATE_UNKNOWN_MARKER,
        ...     marker="k",
        ...     position=0
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error:
            self.context["error"] = str(original_error)

        # 에러 메시지 생성
        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "TEMPLATE_UNKNOWN_MARKER",
                "error_number": 1002,
                "category": "Template",
                "message": "알 수 없는 포맷 타입입니다: '%k' (위치 0)",
                "context": {"marker": "k", "position": 0}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        """에러를 문자열로 반환"""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """에러의 상세 표현 반환"""
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


# 카테고리별 예외 클래스
class TemplateFormatError(ToolkitError):
    """템플릿 치환 관련 에러 (호출자가 잡아야 하는 하드 실패)"""
    pass


class MalformedMarkerError(TemplateFormatError):
    """'%'로 끝나는 불완전한 포맷 표시"""

    def __init__(self, position: int):
        super().__init__(ErrorCode.TEMPLATE_MALFORMED_MARKER, position=position)


class UnknownMarkerError(TemplateFormatError):
    """지원하지 않는 변환 문자"""

    def __init__(self, marker: str, position: int):
        super().__init__(
            ErrorCode.TEMPLATE_UNKNOWN_MARKER, marker=marker, position=position
        )


class MissingArgumentError(TemplateFormatError):
    """포맷 표시 개수보다 인자가 적음"""

    def __init__(self, marker: str, position: int):
        super().__init__(
            ErrorCode.TEMPLATE_MISSING_ARGUMENT, marker=marker, position=position
        )


class SnippetError(ToolkitError):
    """스니펫 추출 관련 에러 (반환값 FORMAT_ERROR:... 로 변환됨)"""
    pass


class ConfigError(ToolkitError):
    """Config 관련 에러"""
    pass


class UnimplementedError(ToolkitError, NotImplementedError):
    """구현되지 않은 기능 호출 (except NotImplementedError로도 잡힘)"""
    pass


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    # Snippet 에러
    ErrorCode.SNIPPET_BEGIN_NOT_FOUND: SnippetError,
    ErrorCode.SNIPPET_END_NOT_FOUND: SnippetError,
    ErrorCode.SNIPPET_SOURCE_UNAVAILABLE: SnippetError,
    # Config 에러
    ErrorCode.CONFIG_LOAD_FAILED: ConfigError,
    ErrorCode.CONFIG_INVALID: ConfigError,
    ErrorCode.CONFIG_FILE_NOT_FOUND: ConfigError,
    ErrorCode.WHITESPACE_MODE_INVALID: ConfigError,
    # 기타
    ErrorCode.UNIMPLEMENTED: UnimplementedError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> ToolkitError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 ToolkitError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     data = json.loads(text)
        ... except json.JSONDecodeError as e:
        ...     raise handle_error(
        ...         ErrorCode.CONFIG_LOAD_FAILED,
        ...         original_error=e,
        ...         file_path="ptkit.json",
        ...     )
    """
    # 에러 코드에 맞는 예외 클래스 선택
    error_class = ERROR_CLASS_MAPPING.get(error_code, ToolkitError)

    # 예외 인스턴스 생성
    exception = error_class(
        error_code=error_code,
        original_error=original_error,
        **context
    )

    # 로깅 (순환 import 방지를 위해 여기서 import)
    if log:
        from ptkit.logging import get_logger
        logger = get_logger(__name__)

        # 에러 레벨에 따라 다르게 로깅
        if error_code.value >= 9000:
            logger.error(
                exception.message,
                error_code=error_code.name,
                **exception.context,
                exc_info=original_error
            )
        elif error_code.value >= 2000:
            logger.warning(
                exception.message,
                error_code=error_code.name,
                **exception.context
            )
        else:
            logger.debug(
                exception.message,
                error_code=error_code.name,
                **exception.context
            )

    return exception
