r"""Core configuration and validation for the retry logic."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY_IN_MS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRYABLE_EXCEPTIONS",
    "validate_delay_in_ms",
    "validate_exception_handler",
    "validate_exception_types",
    "validate_max_retries",
]

from aretry.core.config import (
    DEFAULT_DELAY_IN_MS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRYABLE_EXCEPTIONS,
)
from aretry.core.validation import (
    validate_delay_in_ms,
    validate_exception_handler,
    validate_exception_types,
    validate_max_retries,
)
