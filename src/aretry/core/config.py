r"""Default configuration values for the retry logic.

This module provides the configuration constants used by
``RetryConfigurator`` and the module-level shortcuts ``aretry.call``
and ``aretry.decorate``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY_IN_MS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRYABLE_EXCEPTIONS",
]

# Default maximum number of retries
# Total executions = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 2

# Default delay between two attempts in milliseconds
# A value <= 0 disables the delay
DEFAULT_DELAY_IN_MS = 300

# Exception classes that trigger a retry by default
# Only Exception subclasses are caught, so KeyboardInterrupt and SystemExit
# always propagate
DEFAULT_RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (Exception,)
