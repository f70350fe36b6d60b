r"""Parameter validation utilities for the retry configuration.

This module provides validation functions to ensure the retry options
meet the required constraints before a handler chain is built from
them.
"""

from __future__ import annotations

__all__ = [
    "validate_delay_in_ms",
    "validate_exception_handler",
    "validate_exception_types",
    "validate_max_retries",
]

from typing import Any


def validate_max_retries(max_retries: int) -> None:
    """Validate the maximum number of retries.

    Negative values are accepted and behave like 0, i.e. the operation
    is executed exactly once.

    Args:
        max_retries: The maximum number of retries.

    Raises:
        TypeError: If ``max_retries`` is not an integer.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_retries
        >>> validate_max_retries(2)
        >>> validate_max_retries(-1)
        >>> validate_max_retries(1.5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: max_retries must be an int, got 1.5

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an int, got {max_retries!r}"
        raise TypeError(msg)


def validate_delay_in_ms(delay_in_ms: int) -> None:
    """Validate the delay between retries.

    Args:
        delay_in_ms: The delay in milliseconds. Values <= 0 disable
            the delay.

    Raises:
        TypeError: If ``delay_in_ms`` is not an integer.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_delay_in_ms
        >>> validate_delay_in_ms(300)
        >>> validate_delay_in_ms(0)

        ```
    """
    if isinstance(delay_in_ms, bool) or not isinstance(delay_in_ms, int):
        msg = f"delay_in_ms must be an int, got {delay_in_ms!r}"
        raise TypeError(msg)


def validate_exception_types(exception_types: tuple[Any, ...]) -> None:
    """Validate a tuple of retryable exception classes.

    Args:
        exception_types: The exception classes to validate.

    Raises:
        TypeError: If one of the items is not a subclass of
            ``Exception``.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_exception_types
        >>> validate_exception_types((ValueError, OSError))
        >>> validate_exception_types((KeyboardInterrupt,))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: retryable exceptions must be subclasses of Exception, got <class 'KeyboardInterrupt'>

        ```
    """
    for exc_type in exception_types:
        if not isinstance(exc_type, type) or not issubclass(exc_type, Exception):
            msg = f"retryable exceptions must be subclasses of Exception, got {exc_type!r}"
            raise TypeError(msg)


def validate_exception_handler(handler: Any) -> None:
    """Validate an exception handler.

    Args:
        handler: The handler to validate.

    Raises:
        TypeError: If ``handler`` is not callable.
    """
    if not callable(handler):
        msg = f"exception handler must be callable, got {handler!r}"
        raise TypeError(msg)
