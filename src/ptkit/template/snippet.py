"""
여러 줄 스니펫 추출 포맷팅

소스 텍스트(또는 함수의 소스 코드)에서 주석 블록 형태로 표시된 스니펫을 찾아
본문을 추출하고, printf 스타일 치환과 공백 모드 처리를 적용합니다.

스니펫 형식:

    def user_row():
        '''
        /*<<<row;TRIM
            <tr><td>%s</td><td>%d</td></tr>
        row*/
        '''

    format_snippet(user_row, "alice", 30)  # '<tr><td>alice</td><td>30</td></tr>'

- 시작 표시 줄: 공백 + '/*' 또는 '/*!' + '<<<' + 태그 + 선택적 ';모드'
- 종료 표시 줄: 공백 + 같은 태그 + '*/'
- 시작 표시 줄은 소스의 첫 줄이 아니어야 합니다.

추출 실패는 예외가 아니라 'FORMAT_ERROR:<사유>' 문자열로 반환됩니다.
"""

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

from ptkit.config import get_settings
from ptkit.errors import ConfigError, ErrorCode, TemplateFormatError, handle_error
from ptkit.logging import get_logger
from .substitution import substitute
from .whitespace_modes import WhitespaceMode

logger = get_logger(__name__, component="SnippetExtractor")

FORMAT_ERROR = "FORMAT_ERROR"

LINE_SPLIT_RE = re.compile(r"\r?\n")

BEGIN_LINE_RE = re.compile(
    r"^[\t ]*/\*!?<<<(?P<tag>[A-Za-z0-9_]+)(?:;(?P<mode>.*))?$"
)


@dataclass(frozen=True)
class Snippet:
    """
    스니펫 소스로 취급할 텍스트

    일반 str은 템플릿으로 해석되므로, 텍스트 블록에서 스니펫을 추출하려면
    Snippet으로 감싸서 전달합니다.
    """
    source: str

    def __str__(self) -> str:
        return self.source


SnippetSource = Union[Snippet, Callable[..., Any]]


def is_snippet_source(value: Any) -> bool:
    """스니펫 추출 대상(Snippet 또는 호출 가능한 객체)인지 확인"""
    return isinstance(value, Snippet) or callable(value)


def _soft_error(error_code: ErrorCode, **context: Any) -> str:
    error = handle_error(error_code, **context)
    return f"{FORMAT_ERROR}:{error.message}"


def _read_source(source: SnippetSource) -> str:
    if isinstance(source, Snippet):
        return source.source
    return inspect.getsource(source)


def _find_begin(lines: List[str]) -> Optional[Tuple[int, re.Match]]:
    for index, line in enumerate(lines):
        match = BEGIN_LINE_RE.match(line)
        if match:
            return index, match
    return None


def _find_end(lines: List[str], tag: str, start: int) -> int:
    end_line_re = re.compile(r"^[\t ]*" + re.escape(tag) + r"\*/")
    for index in range(start, len(lines)):
        if end_line_re.match(lines[index]):
            return index
    return -1


def format_snippet(source: SnippetSource, *args: Any) -> str:
    """
    소스에서 스니펫을 추출하여 포맷팅합니다.

    Args:
        source: Snippet 또는 소스 코드를 읽을 수 있는 함수/클래스
        *args: 스니펫 본문의 포맷 표시에 치환할 값

    Returns:
        공백 모드가 적용된 스니펫 문자열, 또는 실패 시 'FORMAT_ERROR:<사유>'
    """
    try:
        text = _read_source(source)
    except (OSError, TypeError) as e:
        return _soft_error(ErrorCode.SNIPPET_SOURCE_UNAVAILABLE, original_error=e)

    lines = LINE_SPLIT_RE.split(text)

    # 시작 표시 줄 (첫 줄에 있으면 찾지 못한 것으로 처리)
    found = _find_begin(lines)
    if found is None or found[0] == 0:
        return _soft_error(ErrorCode.SNIPPET_BEGIN_NOT_FOUND)
    begin, match = found
    tag = match.group("tag")

    # 종료 표시 줄
    end = _find_end(lines, tag, begin + 1)
    if end < 0:
        return _soft_error(ErrorCode.SNIPPET_END_NOT_FOUND, tag=tag)

    # 공백 모드
    mode_name = match.group("mode")
    if mode_name is None or not mode_name.strip():
        try:
            mode_name = get_settings().default_whitespace_mode
        except ConfigError as e:
            # 잘못된 PTKIT_* 설정도 반환값으로 보고
            return f"{FORMAT_ERROR}:{e.message}"
    mode = WhitespaceMode.parse(mode_name)
    if mode is None:
        return _soft_error(ErrorCode.WHITESPACE_MODE_INVALID, mode=mode_name)

    body = "\n".join(lines[begin + 1:end])

    try:
        content = substitute(body, args)
    except TemplateFormatError as e:
        logger.debug("Snippet substitution failed", tag=tag, error=e.message)
        return f"{FORMAT_ERROR}:{e.message}"

    logger.debug(
        "Snippet extracted",
        tag=tag,
        mode=mode.value,
        begin_line=begin,
        end_line=end,
    )
    return mode.apply(content)
