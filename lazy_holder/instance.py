"""Process-wide singleton accessor.

The holder below is created once per process, but stays empty until the
first get_instance() call. Code that needs a private singleton can build its
own LazySingletonHolder instead of sharing this one.
"""

import logging
from typing import Optional

from .config import get_config
from .constants import SINGLETON_HOLDER_NAME
from .core.patterns import LazySingletonHolder
from .models import SingletonValue

logger = logging.getLogger(__name__)


def _new_holder() -> LazySingletonHolder[SingletonValue]:
    return LazySingletonHolder(SingletonValue.from_init_value, name=SINGLETON_HOLDER_NAME)


_holder: LazySingletonHolder[SingletonValue] = _new_holder()


def get_holder() -> LazySingletonHolder[SingletonValue]:
    """Return the process-wide holder."""
    return _holder


def get_instance(init_value: str, timeout: Optional[float] = None) -> SingletonValue:
    """
    Get the process-wide SingletonValue, creating it on first access.

    Only the first successful caller's init_value is used. Callers must not
    assume their own value was honored.

    Args:
        init_value: Value to build the instance from if it does not exist yet
        timeout: Seconds to wait while another thread is constructing;
            defaults to HOLDER_LOCK_TIMEOUT (unset waits forever)

    Returns:
        SingletonValue: The one instance shared by every caller
    """
    holder = _holder
    if holder.is_initialized:
        return holder.get_instance(init_value)

    if timeout is None:
        timeout = get_config().lock_timeout_seconds
    return holder.get_instance(init_value, timeout=timeout)


def reset_holder() -> None:
    """Swap in a fresh, empty holder (for testing).

    The previous holder and its instance are left untouched, so references
    already handed out stay valid.
    """
    global _holder
    _holder = _new_holder()
    logger.debug("Process-wide holder reset")
