r"""Shared test helpers for the retry tests.

This module contains the exception classes and the flaky operation
used across multiple test files.
"""

from __future__ import annotations

__all__ = ["RETURN_VALUE", "FlakyOperation", "OtherError", "RetryableError"]

from typing import Any

RETURN_VALUE = "return-value"


class RetryableError(Exception):
    r"""Exception configured as retryable in the tests."""


class OtherError(Exception):
    r"""Exception that is not configured as retryable in the tests."""


class FlakyOperation:
    r"""Operation that fails a given number of times before succeeding.

    Args:
        failures: The number of calls that raise before the first
            success.
        exc_types: The classes of the raised exceptions, used in a
            round-robin fashion.
        return_value: The value returned once the failures are consumed.

    Attributes:
        calls: The ``(args, kwargs)`` of every call.
        raised: The exceptions raised so far.
    """

    def __init__(
        self,
        failures: int = 0,
        exc_types: tuple[type[Exception], ...] = (RetryableError,),
        return_value: Any = RETURN_VALUE,
    ) -> None:
        self.failures = failures
        self.exc_types = exc_types
        self.return_value = return_value
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.raised: list[Exception] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        if len(self.calls) > self.failures:
            return self.return_value
        exc_type = self.exc_types[(len(self.calls) - 1) % len(self.exc_types)]
        exc = exc_type(f"failure {len(self.calls)}")
        self.raised.append(exc)
        raise exc
