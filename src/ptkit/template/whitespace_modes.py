"""
스니펫 공백 처리 모드

WhitespaceMode: 추출한 스니펫 본문의 공백 후처리 정책 (Enum)
"""

from enum import Enum
from typing import List, Optional


class WhitespaceMode(str, Enum):
    """스니펫 공백 처리 모드"""
    KEEP = "KEEP"
    OUTDENT = "OUTDENT"
    TRIM = "TRIM"

    @classmethod
    def parse(cls, name: str) -> Optional["WhitespaceMode"]:
        """
        모드 이름을 해석합니다.

        'KEEP' 외에 이전 표기인 'WS-KEEP'도 허용합니다.
        대소문자는 구분하며 ('keep'은 알 수 없는 이름), 앞뒤 공백만 무시합니다.

        Returns:
            WhitespaceMode 또는 알 수 없는 이름이면 None
        """
        key = name.strip()
        if key.startswith("WS-"):
            key = key[3:]
        try:
            return cls(key)
        except ValueError:
            return None

    def apply(self, text: str) -> str:
        """본문에 모드별 공백 처리를 적용"""
        if self is WhitespaceMode.OUTDENT:
            return outdent(text)
        if self is WhitespaceMode.TRIM:
            return trim_lines(text)
        return text


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def outdent(text: str) -> str:
    """
    모든 줄에서 공통 최소 들여쓰기만큼 앞 문자를 제거합니다.

    빈 줄도 최소값 계산에 포함되며, 상대적인 들여쓰기는 유지됩니다.
    """
    lines = text.split("\n")
    width = min(_indent_width(line) for line in lines)
    return "\n".join(line[width:] for line in lines)


def _strip_blank_edges(lines: List[str]) -> List[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def trim_lines(text: str) -> str:
    """
    앞뒤의 빈 줄을 제거한 뒤 각 줄의 앞뒤 공백을 제거합니다.

    본문 중간의 빈 줄은 유지됩니다.
    """
    lines = _strip_blank_edges(text.split("\n"))
    return "\n".join(line.strip() for line in lines)
