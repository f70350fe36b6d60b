r"""aretry - Retry fallible operations with composable exception handlers.

This package wraps any callable so that the exceptions it raises are
automatically retried according to a configurable policy: which
exceptions are retryable, how many times to retry, and how long to wait
between two attempts.

Key Features:
    - Decorator and direct-call APIs with sensible defaults
      (2 retries, 300 ms delay, every ``Exception`` is retryable)
    - Fluent ``RetryConfigurator`` to customize the retry logic
    - Composable exception handlers: type filter, retry limit, delay,
      logging, or any custom callable
    - Arguments and return values passed through unchanged, the last
      exception rethrown unchanged
    - Number of retries of the last call available on the wrapper

Example:
    ```pycon
    >>> import aretry
    >>> aretry.call(lambda x, y: x + y, 40, 2)
    42
    >>> @aretry.configure(max_retries=5, delay_in_ms=100).decorate
    ... def fetch_data(url):
    ...     return f"data from {url}"
    ...
    >>> fetch_data("https://api.example.com")
    'data from https://api.example.com'
    >>> fetch_data.get_retries()
    0

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY_IN_MS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRYABLE_EXCEPTIONS",
    "DelayMilliseconds",
    "RetryConfigurator",
    "RetryingCallable",
    "__version__",
    "call",
    "configure",
    "decorate",
]

from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

from aretry.configurator import RetryConfigurator
from aretry.core.config import (
    DEFAULT_DELAY_IN_MS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRYABLE_EXCEPTIONS,
)
from aretry.delay import DelayMilliseconds
from aretry.retrying import RetryingCallable

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"


def configure(
    max_retries: int = DEFAULT_MAX_RETRIES,
    delay_in_ms: int = DEFAULT_DELAY_IN_MS,
    retryable_exceptions: type[Exception] | Sequence[type[Exception]] = Exception,
) -> RetryConfigurator:
    """Return a configurator to customize the retry logic.

    Args:
        max_retries: The maximum number of retries.
        delay_in_ms: The delay between retries in milliseconds.
        retryable_exceptions: One exception class or a sequence of
            exception classes to retry on.

    Returns:
        A new retry configurator.

    Example:
        ```pycon
        >>> import aretry
        >>> configurator = aretry.configure(max_retries=1, delay_in_ms=0)
        >>> configurator.set_retryable_exceptions(OSError).retryable_exceptions
        (<class 'OSError'>,)

        ```
    """
    return RetryConfigurator(
        max_retries=max_retries,
        delay_in_ms=delay_in_ms,
        retryable_exceptions=retryable_exceptions,
    )


def decorate(operation: Callable[..., Any]) -> RetryingCallable:
    """Decorate the operation with the default retry behavior.

    Args:
        operation: The operation to retry on failure.

    Returns:
        The retrying callable.
    """
    return configure().decorate(operation)


def call(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Execute the operation with the default retry behavior.

    Args:
        operation: The operation to execute.
        *args: The positional arguments passed to the operation.
        **kwargs: The keyword arguments passed to the operation.

    Returns:
        The return value of the operation.
    """
    return configure().call(operation, *args, **kwargs)
