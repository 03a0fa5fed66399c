"""Core patterns module.

Provides the lazy singleton holder used for process-wide values.
"""

from .singleton import LazySingletonHolder, validate_timeout

__all__ = ["LazySingletonHolder", "validate_timeout"]
