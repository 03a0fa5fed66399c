"""Thread-safe lazy singleton holder.

This module provides a generic holder that creates one value on first access
using double-checked locking, then hands the same instance to every caller
for the rest of its lifetime.
"""

import logging
import math
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from ..exceptions import InstanceTimeoutError, ReentrantInitializationError
from ...utils.timer_utils import Timer

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Marks the Absent state so that factories may legitimately return None.
_ABSENT: Any = object()


class LazySingletonHolder(Generic[T]):
    """Holds at most one lazily constructed instance.

    The first caller to reach the lock constructs the instance from its own
    init value; every other caller, including ones racing with the first,
    gets that same instance and its init value is discarded. Which racing
    caller wins is not defined.

    Usage:
        holder = LazySingletonHolder(lambda value: Settings(name=value))

        settings = holder.get_instance("primary")
        same = holder.get_instance("ignored")
        assert same is settings

    Note:
        If the factory raises, nothing is published and the next caller
        retries construction. Calling get_instance() on the same holder from
        inside the factory raises ReentrantInitializationError.
    """

    def __init__(
        self,
        factory: Callable[[Any], T],
        name: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize an empty holder.

        Args:
            factory: Builds the instance from the first winning init value
            name: Label used in logs and repr (defaults to the factory name)
            timeout: Default seconds to wait for the lock, None or inf blocks forever
        """
        self.factory = factory
        self.name = name or getattr(factory, "__name__", type(self).__name__)
        self.timeout = validate_timeout(timeout)
        self._instance: Any = _ABSENT
        self._lock = threading.Lock()
        self._constructing_thread: Optional[int] = None

    @property
    def is_initialized(self) -> bool:
        """True once an instance has been published."""
        return self._instance is not _ABSENT

    def peek(self) -> Optional[T]:
        """Return the instance if present, never constructing or locking."""
        instance = self._instance
        if instance is _ABSENT:
            return None
        return instance

    def get_instance(self, init_value: Any, timeout: Optional[float] = None) -> T:
        """Get the instance, constructing it from init_value on first access.

        Args:
            init_value: Argument for the factory, used only if this call
                constructs the instance
            timeout: Seconds to wait for the lock while another thread is
                constructing (overrides the holder default)

        Returns:
            The single instance held by this holder.

        Raises:
            InstanceTimeoutError: The lock was not acquired in time.
            ReentrantInitializationError: Called from inside the factory.
            Exception: Whatever the factory raised during construction.
        """
        instance = self._instance
        if instance is not _ABSENT:
            return instance

        if self._constructing_thread == threading.get_ident():
            raise ReentrantInitializationError(self.name)

        wait = validate_timeout(timeout) if timeout is not None else self.timeout
        if not self._acquire(wait):
            logger.warning(f"{self.name}: timed out after {wait}s waiting for construction")
            raise InstanceTimeoutError(self.name, wait)

        try:
            # Double-check after acquiring lock
            if self._instance is _ABSENT:
                self._instance = self._construct(init_value)
            else:
                logger.debug(f"{self.name}: lost initialization race, discarding {init_value!r}")
            return self._instance
        finally:
            self._lock.release()

    def _acquire(self, timeout: Optional[float]) -> bool:
        if timeout is None:
            return self._lock.acquire()
        return self._lock.acquire(timeout=timeout)

    def _construct(self, init_value: Any) -> T:
        # Caller holds the lock.
        self._constructing_thread = threading.get_ident()
        try:
            with Timer() as timer:
                instance = self.factory(init_value)
        except Exception as e:
            logger.error(f"{self.name}: construction from {init_value!r} failed: {e}")
            raise
        finally:
            self._constructing_thread = None

        logger.info(f"{self.name}: constructed in {timer.elapsed_ms:.2f}ms")
        return instance

    def __repr__(self) -> str:
        state = "present" if self.is_initialized else "absent"
        return f"LazySingletonHolder(name={self.name!r}, state={state})"


def validate_timeout(timeout: Optional[float]) -> Optional[float]:
    """Check a lock timeout, returning None for an unbounded wait.

    Infinity means wait forever. NaN, non-positive values and finite values
    above threading.TIMEOUT_MAX raise ValueError.
    """
    if timeout is None:
        return None
    if math.isnan(timeout) or timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    if math.isinf(timeout):
        return None
    if timeout > threading.TIMEOUT_MAX:
        raise ValueError(f"timeout must not exceed {threading.TIMEOUT_MAX}, got {timeout}")
    return timeout
