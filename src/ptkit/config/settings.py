"""
ptkit 설정

ToolkitSettings: 툴킷 전역 설정 (공백 모드 기본값, 로깅)
load_settings: JSON 파일 / .env / 환경변수에서 설정 로드
"""

import json
from dataclasses import dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from ptkit.errors import ErrorCode, handle_error
from .env_utils import parse_bool_env, parse_optional_str_env, parse_str_env

ENV_PREFIX = "PTKIT_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ToolkitSettings:
    """
    툴킷 설정

    딕셔너리 접근도 지원 (get(), [])
    """
    # Template 설정
    default_whitespace_mode: str = "OUTDENT"

    # Logging 설정
    log_level: str = "INFO"
    enable_json_logs: bool = True
    log_dir: Optional[str] = None

    _raw_data: dict = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        """값 정규화 및 검증"""
        # 순환 import 방지
        from ptkit.template.whitespace_modes import WhitespaceMode

        if WhitespaceMode.parse(self.default_whitespace_mode) is None:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                field_name="default_whitespace_mode",
                value=self.default_whitespace_mode,
            )

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                field_name="log_level",
                value=self.log_level,
            )

    def get(self, key: str, default=None):
        """
        딕셔너리처럼 get() 메서드 제공

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정 값 또는 기본값
        """
        if not key.startswith("_") and hasattr(self, key):
            return getattr(self, key)

        return self._raw_data.get(key, default)

    def __getitem__(self, key: str):
        """
        딕셔너리처럼 [] 접근 제공

        Raises:
            KeyError: 키가 없을 경우
        """
        if not key.startswith("_") and hasattr(self, key):
            return getattr(self, key)

        if key in self._raw_data:
            return self._raw_data[key]
        raise KeyError(f"설정 키를 찾을 수 없습니다: {key}")


def _field_names():
    return [f.name for f in fields(ToolkitSettings) if f.init]


def _load_json_config(config_path: Path) -> dict:
    """JSON 설정 파일을 읽어 딕셔너리로 반환"""
    if not config_path.exists():
        raise handle_error(ErrorCode.CONFIG_FILE_NOT_FOUND, file_path=str(config_path))

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise handle_error(
            ErrorCode.CONFIG_LOAD_FAILED,
            original_error=e,
            file_path=str(config_path),
        )

    if not isinstance(data, dict):
        raise handle_error(
            ErrorCode.CONFIG_LOAD_FAILED,
            file_path=str(config_path),
            error="최상위 값은 객체여야 합니다",
        )
    return data


def load_settings(
    env_file: Optional[Union[str, Path]] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> ToolkitSettings:
    """
    설정 로드

    우선순위: 환경변수(PTKIT_*) > JSON 설정 파일 > 기본값

    Args:
        env_file: 먼저 읽어들일 .env 파일 경로 (선택)
        config_path: JSON 설정 파일 경로 (선택)

    Returns:
        ToolkitSettings 인스턴스

    Raises:
        ConfigError: 설정 파일이 없거나 값이 잘못된 경우
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)

    data = {}
    if config_path is not None:
        data = _load_json_config(Path(config_path))

    known = set(_field_names())
    values = {key: value for key, value in data.items() if key in known}

    # 환경변수 오버라이드
    mode = parse_str_env(f"{ENV_PREFIX}DEFAULT_WS_MODE")
    if mode:
        values["default_whitespace_mode"] = mode

    log_level = parse_str_env(f"{ENV_PREFIX}LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    values["enable_json_logs"] = parse_bool_env(
        f"{ENV_PREFIX}LOG_JSON", default=values.get("enable_json_logs", True)
    )

    log_dir = parse_optional_str_env(f"{ENV_PREFIX}LOG_DIR")
    if log_dir:
        values["log_dir"] = log_dir

    settings = ToolkitSettings(**values)
    settings._raw_data = {key: value for key, value in data.items() if key not in known}
    return settings


@lru_cache(maxsize=1)
def get_settings() -> ToolkitSettings:
    """환경변수 기준 설정을 한 번만 로드하여 재사용"""
    return load_settings()


def reset_settings() -> None:
    """캐시된 설정 초기화 (테스트 및 환경변수 변경 후 사용)"""
    get_settings.cache_clear()
