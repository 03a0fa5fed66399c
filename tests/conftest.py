"""Shared test fixtures and configuration."""

import threading
import time

import pytest


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clear holder environment variables."""
    monkeypatch.delenv("HOLDER_LOCK_TIMEOUT", raising=False)
    monkeypatch.delenv("DEMO_VALUES", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def mock_holder_env(monkeypatch):
    """Set up holder environment variables."""
    monkeypatch.setenv("HOLDER_LOCK_TIMEOUT", "2.5")
    monkeypatch.setenv("DEMO_VALUES", "ONE,TWO,THREE")
    monkeypatch.setenv("LOG_LEVEL", "debug")


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the process-wide holder and cached config around each test."""
    from lazy_holder.config import reset_config
    from lazy_holder.instance import reset_holder

    reset_config()
    reset_holder()

    yield

    reset_config()
    reset_holder()


# =============================================================================
# Factory Fixtures
# =============================================================================

class CountingFactory:
    """Factory that records every construction it performs."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, init_value):
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.calls.append(init_value)
        return {"value": init_value}


@pytest.fixture
def counting_factory():
    """A factory that counts constructions."""
    return CountingFactory()


@pytest.fixture
def slow_factory():
    """A counting factory that takes a while, widening the race window."""
    return CountingFactory(delay=0.05)
