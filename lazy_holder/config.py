"""Holder configuration loaded from environment variables."""

import logging
import math
import threading
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_DEMO_VALUES, DEFAULT_LOCK_TIMEOUT_SECONDS, DEFAULT_LOG_LEVEL
from .utils.env_utils import parse_float_env, parse_list_env, parse_str_env

logger = logging.getLogger(__name__)


class HolderConfig(BaseModel):
    """Settings for the process-wide holder and the demo."""

    # Environment-derived defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    lock_timeout_seconds: Optional[float] = Field(
        default_factory=lambda: parse_float_env(
            "HOLDER_LOCK_TIMEOUT", DEFAULT_LOCK_TIMEOUT_SECONDS
        ),
        description="Seconds to wait for a concurrent construction (0 or unset waits forever)",
    )

    demo_values: List[str] = Field(
        default_factory=lambda: parse_list_env("DEMO_VALUES", DEFAULT_DEMO_VALUES),
        description="Init values passed to get_instance, one demo thread each",
    )

    log_level: str = Field(
        default_factory=lambda: (parse_str_env("LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        description="Logging level",
    )

    @field_validator("lock_timeout_seconds")
    @classmethod
    def validate_lock_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Reject negative, NaN and oversized timeouts; map 0 and inf to no timeout."""
        if v is None:
            return None
        if math.isnan(v) or v < 0:
            raise ValueError(f"HOLDER_LOCK_TIMEOUT must be a non-negative number, got {v}")
        if v == 0 or math.isinf(v):
            return None
        if v > threading.TIMEOUT_MAX:
            raise ValueError(f"HOLDER_LOCK_TIMEOUT must not exceed {threading.TIMEOUT_MAX}")
        return v

    @field_validator("demo_values")
    @classmethod
    def validate_demo_values(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("DEMO_VALUES must contain at least one value")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return v


_config: Optional[HolderConfig] = None


def get_config() -> HolderConfig:
    """Get or create the cached holder configuration."""
    global _config
    if _config is None:
        _config = HolderConfig()
        logger.debug(f"Holder config loaded: {_config}")
    return _config


def reset_config() -> None:
    """Reset cached configuration (for testing)."""
    global _config
    _config = None
