"""
여러 줄 스니펫 추출 단위 테스트

src/ptkit/template/snippet.py 테스트
"""

import pytest

from ptkit.config import reset_settings
from ptkit.template.snippet import FORMAT_ERROR, Snippet, format_snippet, is_snippet_source


def _source(*lines: str) -> Snippet:
    return Snippet("\n".join(lines))


@pytest.mark.unit
class TestSnippetSource:
    """스니펫 소스 판별 테스트"""

    def test_snippet_and_callable_are_sources(self):
        assert is_snippet_source(Snippet("x"))
        assert is_snippet_source(lambda: None)

    def test_plain_string_is_not_source(self):
        assert not is_snippet_source("/*<<<tag")


@pytest.mark.unit
class TestFormatSnippet:
    """format_snippet() 테스트"""

    def test_extract_from_function_source(self):
        """함수 docstring 안의 스니펫 추출 (기본 OUTDENT)"""
        def user_list():
            """
            /*<<<list
                <ul>
                  <li>%s</li>
                </ul>
            list*/
            """

        assert format_snippet(user_list, "alice") == "<ul>\n  <li>alice</li>\n</ul>"

    def test_outdent_uses_global_minimum(self):
        """OUTDENT는 줄마다가 아니라 전체 최소 들여쓰기만큼 제거"""
        source = _source(
            "var html = function() {",
            "  /*<<<html;OUTDENT",
            "      <div>",
            "    <span>%d</span>",
            "        </div>",
            "  html*/",
            "};",
        )

        assert format_snippet(source, 5) == "  <div>\n<span>5</span>\n    </div>"

    def test_keep_mode(self):
        """KEEP은 본문을 그대로 유지"""
        source = _source(
            "header",
            "/*<<<raw;KEEP",
            "    a  ",
            "  b",
            "raw*/",
        )

        assert format_snippet(source) == "    a  \n  b"

    def test_trim_mode(self):
        """TRIM은 앞뒤 빈 줄을 없애고 각 줄을 trim, 중간 빈 줄은 유지"""
        source = _source(
            "header",
            "/*<<<text;TRIM",
            "",
            "   ",
            "   first %s  ",
            "",
            "\tsecond  ",
            "  ",
            "text*/",
        )

        assert format_snippet(source, "line") == "first line\n\nsecond"

    def test_legacy_mode_names(self):
        """'WS-TRIM' 같은 이전 표기도 허용"""
        source = _source("header", "/*<<<t;WS-TRIM", "  x  ", "t*/")

        assert format_snippet(source) == "x"

    def test_bang_comment_and_blank_mode(self):
        """'/*!' 주석과 빈 모드(';')는 기본 모드 사용"""
        source = _source("header", "\t/*!<<<t;", "    x", "      y", "\tt*/")

        assert format_snippet(source) == "x\n  y"

    def test_crlf_line_endings(self):
        """CRLF 줄바꿈도 처리"""
        source = Snippet("header\r\n/*<<<t;KEEP\r\nbody\r\nt*/\r\n")

        assert format_snippet(source) == "body"

    def test_end_marker_with_trailing_text(self):
        """종료 표시 뒤의 텍스트는 허용"""
        source = _source("header", "/*<<<t;KEEP", "body", "  t*/ trailing")

        assert format_snippet(source) == "body"

    def test_empty_body(self):
        """시작/종료 표시가 붙어 있으면 빈 문자열"""
        source = _source("header", "/*<<<t;TRIM", "t*/")

        assert format_snippet(source) == ""

    def test_first_matching_begin_line_wins(self):
        """첫 번째 시작 표시 줄만 사용"""
        source = _source(
            "header",
            "/*<<<a;KEEP",
            "from a",
            "a*/",
            "/*<<<b;KEEP",
            "from b",
            "b*/",
        )

        assert format_snippet(source) == "from a"

    def test_end_marker_must_match_tag(self):
        """다른 태그의 종료 표시는 무시"""
        source = _source("header", "/*<<<outer;KEEP", "inner*/", "outer*/")

        assert format_snippet(source) == "inner*/"

    def test_begin_on_first_line_is_not_found(self):
        """첫 줄의 시작 표시는 찾지 못한 것으로 처리"""
        source = _source("/*<<<t;KEEP", "body", "t*/")

        result = format_snippet(source)

        assert result.startswith(f"{FORMAT_ERROR}:")
        assert "시작" in result

    def test_missing_begin_marker(self):
        """시작 표시가 없으면 FORMAT_ERROR:"""
        result = format_snippet(_source("a", "b"))

        assert result.startswith("FORMAT_ERROR:")

    def test_missing_end_marker(self):
        """종료 표시가 없으면 FORMAT_ERROR:"""
        result = format_snippet(_source("header", "/*<<<t", "body"))

        assert result.startswith("FORMAT_ERROR:")
        assert "종료" in result

    def test_unknown_mode_is_config_error(self):
        """알 수 없는 모드 이름은 설정 오류"""
        result = format_snippet(_source("header", "/*<<<t;SQUASH", "body", "t*/"))

        assert result.startswith("FORMAT_ERROR:")
        assert "SQUASH" in result

    def test_substitution_error_is_returned(self):
        """본문 치환 실패도 예외 대신 FORMAT_ERROR: 반환"""
        result = format_snippet(_source("header", "/*<<<t", "%s %s", "t*/"), "one")

        assert result.startswith("FORMAT_ERROR:")

    def test_source_unavailable(self):
        """소스를 읽을 수 없는 내장 함수"""
        result = format_snippet(len)

        assert result.startswith("FORMAT_ERROR:")

    def test_default_mode_from_settings(self, monkeypatch):
        """모드 생략 시 PTKIT_DEFAULT_WS_MODE 설정을 따름"""
        monkeypatch.setenv("PTKIT_DEFAULT_WS_MODE", "KEEP")
        reset_settings()

        source = _source("header", "/*<<<t", "    body", "t*/")

        assert format_snippet(source) == "    body"

    @pytest.mark.parametrize(
        "env_name,value",
        [
            ("PTKIT_LOG_LEVEL", "verbose"),
            ("PTKIT_DEFAULT_WS_MODE", "SQUASH"),
        ],
    )
    def test_invalid_settings_are_returned(self, monkeypatch, env_name, value):
        """잘못된 환경 설정도 예외 대신 FORMAT_ERROR: 반환"""
        monkeypatch.setenv(env_name, value)
        reset_settings()

        result = format_snippet(_source("header", "/*<<<t", "    body", "t*/"))

        assert result.startswith(f"{FORMAT_ERROR}:")
        assert value.upper() in result

    def test_explicit_mode_ignores_invalid_settings(self, monkeypatch):
        """모드를 명시하면 설정을 읽지 않음"""
        monkeypatch.setenv("PTKIT_LOG_LEVEL", "verbose")
        reset_settings()

        source = _source("header", "/*<<<t;KEEP", "    body", "t*/")

        assert format_snippet(source) == "    body"
