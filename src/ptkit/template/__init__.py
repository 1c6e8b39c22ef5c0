"""
Template

printf 스타일 치환과 여러 줄 스니펫 추출 포맷팅
"""

from .formatter import format, raise_error
from .snippet import FORMAT_ERROR, Snippet, format_snippet, is_snippet_source
from .substitution import format_template, substitute
from .whitespace_modes import WhitespaceMode, outdent, trim_lines

__all__ = [
    "format",
    "raise_error",
    "FORMAT_ERROR",
    "Snippet",
    "format_snippet",
    "is_snippet_source",
    "format_template",
    "substitute",
    "WhitespaceMode",
    "outdent",
    "trim_lines",
]
