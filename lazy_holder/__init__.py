"""Lazy, thread-safe initialization of a process-wide singleton value."""

from .core import (
    HolderError,
    InstanceTimeoutError,
    LazySingletonHolder,
    ReentrantInitializationError,
)
from .instance import get_holder, get_instance
from .models import SingletonValue

__all__ = [
    "HolderError",
    "InstanceTimeoutError",
    "LazySingletonHolder",
    "ReentrantInitializationError",
    "SingletonValue",
    "get_holder",
    "get_instance",
]
