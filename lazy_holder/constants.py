"""Package-wide constants and configuration defaults."""

# =============================================================================
# Holder
# =============================================================================
# 0 disables the lock timeout (block until construction finishes)
DEFAULT_LOCK_TIMEOUT_SECONDS = 0.0
SINGLETON_HOLDER_NAME = "SingletonValue"

# =============================================================================
# Demo
# =============================================================================
DEFAULT_DEMO_VALUES = ["FOO", "BAR"]
DEMO_HEADER = (
    "If you see the same value, then singleton was reused\n"
    "If you see different values, then 2 singletons were created\n"
    "\n"
    "RESULT:\n"
)

# =============================================================================
# Logging
# =============================================================================
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
