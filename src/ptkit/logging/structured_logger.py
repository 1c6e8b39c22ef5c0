"""
ptkit 로깅 (structlog)

스니펫 추출, 설정 로드, 에러 처리 로그를 JSON 또는 콘솔 형식으로 출력합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# get_logger 컨텍스트 값
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_NAME = "ptkit.log"
ERROR_LOG_FILE_NAME = "ptkit-error.log"
DEBUG_LOG_FILE_NAME = "ptkit-debug.log"


def _rotating_handler(path: Path, max_mb: int, backups: int, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        str(path),
        maxBytes=max_mb * 1024 * 1024,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    ptkit 로그 출력을 설정합니다.

    콘솔에는 항상 출력하고, log_dir가 주어지면 ptkit.log / ptkit-error.log
    (DEBUG 레벨이면 ptkit-debug.log 포함) 파일에도 기록합니다.

    Example:
        >>> configure_structlog(log_dir="logs", log_level="DEBUG", enable_json=False)
    """
    renderer = JSONRenderer() if enable_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.PATHNAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level_name = log_level.upper()
    level = getattr(logging, level_name)
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(_rotating_handler(log_path / LOG_FILE_NAME, 10, 5, logging.NOTSET))
        handlers.append(_rotating_handler(log_path / ERROR_LOG_FILE_NAME, 5, 3, logging.ERROR))
        if level_name == "DEBUG":
            handlers.append(
                _rotating_handler(log_path / DEBUG_LOG_FILE_NAME, 20, 3, logging.DEBUG)
            )

    logging.basicConfig(format="%(message)s", level=level, handlers=handlers, force=True)


def configure_from_settings(settings=None) -> None:
    """ToolkitSettings(기본: get_settings())의 로깅 항목을 적용"""
    if settings is None:
        from ptkit.config import get_settings
        settings = get_settings()

    configure_structlog(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        enable_json=settings.enable_json_logs,
    )


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """이름과 기본 컨텍스트(예: component)가 바인딩된 로거 반환"""
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
