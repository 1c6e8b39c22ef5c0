"""Pytest configuration and fixtures."""

import os
import sys
import pytest
from pathlib import Path

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from ptkit.config import reset_settings  # noqa: E402

PTKIT_ENV_VARS = (
    "PTKIT_DEFAULT_WS_MODE",
    "PTKIT_LOG_LEVEL",
    "PTKIT_LOG_JSON",
    "PTKIT_LOG_DIR",
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 단위 테스트")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """테스트마다 PTKIT_* 환경변수와 캐시된 설정을 초기화"""
    for name in PTKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def project_root_path() -> Path:
    """Get project root path."""
    return project_root
