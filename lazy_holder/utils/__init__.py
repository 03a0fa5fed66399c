"""Utility modules for the lazy holder package."""

from .env_utils import parse_float_env, parse_list_env, parse_str_env
from .timer_utils import elapsed_ms, Timer

__all__ = [
    # Environment utilities
    "parse_float_env",
    "parse_list_env",
    "parse_str_env",
    # Timer utilities
    "elapsed_ms",
    "Timer",
]
