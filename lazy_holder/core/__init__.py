"""Concurrency primitives and error types for the holder."""

from .exceptions import HolderError, InstanceTimeoutError, ReentrantInitializationError
from .patterns import LazySingletonHolder

__all__ = [
    "HolderError",
    "InstanceTimeoutError",
    "ReentrantInitializationError",
    "LazySingletonHolder",
]
