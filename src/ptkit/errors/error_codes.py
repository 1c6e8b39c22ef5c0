"""에러 코드 정의

ptkit의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """ptkit 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        10xx: Template(문자열 포맷팅) 관련 에러
        20xx: Config 관련 에러
        90xx: 기타 에러
    """

    # ==================== Template 관련 (1000-1999) ====================
    TEMPLATE_MALFORMED_MARKER = 1001
    """불완전한 포맷 표시 ('%' 뒤에 문자가 없음)"""

    TEMPLATE_UNKNOWN_MARKER = 1002
    """알 수 없는 포맷 변환 타입"""

    TEMPLATE_MISSING_ARGUMENT = 1003
    """포맷 표시에 대응하는 인자가 없음"""

    SNIPPET_BEGIN_NOT_FOUND = 1101
    """스니펫 시작 표시 줄을 찾을 수 없음"""

    SNIPPET_END_NOT_FOUND = 1102
    """스니펫 종료 표시 줄을 찾을 수 없음"""

    SNIPPET_SOURCE_UNAVAILABLE = 1103
    """스니펫 소스 코드를 읽을 수 없음"""

    # ==================== Config 관련 (2000-2999) ====================
    CONFIG_LOAD_FAILED = 2001
    """설정 파일 로드 실패"""

    CONFIG_INVALID = 2002
    """설정 값 형식 오류"""

    CONFIG_FILE_NOT_FOUND = 2005
    """설정 파일을 찾을 수 없음"""

    WHITESPACE_MODE_INVALID = 2101
    """알 수 없는 공백 처리 모드"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    USER_ERROR = 9002
    """호출자가 명시적으로 발생시킨 에러"""

    UNIMPLEMENTED = 9003
    """구현되지 않은 기능"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'TEMPLATE_UNKNOWN_MARKER (1002)')"""
        return f"{self.name} ({self.value})"

    @property
    def code(self) -> int:
        """에러 코드 숫자 반환"""
        return self.value

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 1000 <= code < 2000:
            return "Template"
        elif 2000 <= code < 3000:
            return "Config"
        else:
            return "Other"
