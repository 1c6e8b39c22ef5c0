"""
Configuration

환경변수 / .env / JSON 파일 기반 설정 로더
"""

from .settings import ToolkitSettings, load_settings, get_settings, reset_settings
from .env_utils import parse_bool_env, parse_str_env, parse_optional_str_env

__all__ = [
    "ToolkitSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
    "parse_bool_env",
    "parse_str_env",
    "parse_optional_str_env",
]
