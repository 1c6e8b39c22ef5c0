"""
구조화된 로깅 인프라

structlog 기반 로깅 시스템
"""

from .structured_logger import configure_structlog, configure_from_settings, get_logger

__all__ = [
    "configure_structlog",
    "configure_from_settings",
    "get_logger",
]
