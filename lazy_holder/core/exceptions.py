"""
Custom exceptions raised by the singleton holder.

Errors raised by a payload factory are not wrapped; they propagate to the
caller unchanged.
"""

from typing import Optional, Dict, Any


class HolderError(Exception):
    """Base exception for singleton holder errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InstanceTimeoutError(HolderError):
    """
    Raised when the holder lock is not acquired within the timeout.

    The holder state is left untouched; a later call may still construct
    or return the instance.
    """

    def __init__(self, holder_name: str, timeout: Optional[float]):
        self.holder_name = holder_name
        self.timeout = timeout

        super().__init__(
            message=f"Timed out after {timeout}s waiting for '{holder_name}' to initialize",
            details={"holder": holder_name, "timeout": timeout},
        )


class ReentrantInitializationError(HolderError):
    """Raised when a factory calls back into the holder it is building."""

    def __init__(self, holder_name: str):
        self.holder_name = holder_name

        super().__init__(
            message=f"'{holder_name}' was requested again while it was being constructed",
            details={"holder": holder_name},
        )
