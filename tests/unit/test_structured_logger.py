"""
Tests for structured logging

src/ptkit/logging/structured_logger.py 테스트
"""
import pytest
import logging
import logging.handlers
from pathlib import Path
import json

from ptkit.config import ToolkitSettings
from ptkit.logging.structured_logger import (
    DEBUG_LOG_FILE_NAME,
    ERROR_LOG_FILE_NAME,
    LOG_FILE_NAME,
    configure_from_settings,
    configure_structlog,
    get_logger,
)


@pytest.mark.unit
class TestStructuredLogger:
    """구조화된 로깅 테스트"""

    def test_configure_structlog_creates_log_files(self, tmp_path: Path):
        """configure_structlog이 로그 디렉토리와 파일을 생성하는지 테스트"""
        log_dir = tmp_path / "logs"

        configure_structlog(
            log_dir=str(log_dir),
            log_level="INFO",
            enable_json=True
        )

        assert log_dir.exists()
        assert (log_dir / LOG_FILE_NAME).exists()
        assert (log_dir / ERROR_LOG_FILE_NAME).exists()
        assert not (log_dir / DEBUG_LOG_FILE_NAME).exists()

    def test_configure_structlog_debug_mode(self, tmp_path: Path):
        """DEBUG 모드에서 디버그 로그 파일이 생성되는지 테스트"""
        log_dir = tmp_path / "logs"

        configure_structlog(
            log_dir=str(log_dir),
            log_level="DEBUG",
            enable_json=True
        )

        assert (log_dir / DEBUG_LOG_FILE_NAME).exists()

    def test_configure_structlog_without_log_dir(self):
        """log_dir 없이 콘솔 핸들러만 설정"""
        configure_structlog(log_level="WARNING", enable_json=False)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in root.handlers
        )

    def test_json_output_with_context(self, tmp_path: Path):
        """JSON 출력과 컨텍스트 바인딩 테스트"""
        log_dir = tmp_path / "logs"

        configure_structlog(
            log_dir=str(log_dir),
            log_level="INFO",
            enable_json=True
        )

        logger = get_logger(__name__, component="SnippetExtractor")
        logger.info("Snippet extracted", tag="html", mode="TRIM")

        log_content = (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        log_lines = [json.loads(line) for line in log_content.strip().split("\n") if line]

        last_log = log_lines[-1]
        assert last_log["event"] == "Snippet extracted"
        assert last_log["component"] == "SnippetExtractor"
        assert last_log["tag"] == "html"
        assert last_log["level"] == "info"

    def test_level_filtering(self, tmp_path: Path):
        """설정한 레벨 미만의 로그는 기록되지 않음"""
        log_dir = tmp_path / "logs"

        configure_structlog(
            log_dir=str(log_dir),
            log_level="WARNING",
            enable_json=True
        )

        logger = get_logger(__name__)
        logger.info("Info message")
        logger.error("Error message")

        log_content = (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        error_content = (log_dir / ERROR_LOG_FILE_NAME).read_text(encoding="utf-8")

        assert "Info message" not in log_content
        assert "Error message" in log_content
        assert "Error message" in error_content

    def test_configure_from_settings(self, tmp_path: Path):
        """ToolkitSettings의 로깅 항목 적용"""
        log_dir = tmp_path / "settings-logs"
        settings = ToolkitSettings(log_level="debug", log_dir=str(log_dir))

        configure_from_settings(settings)

        assert logging.getLogger().level == logging.DEBUG
        assert (log_dir / DEBUG_LOG_FILE_NAME).exists()
