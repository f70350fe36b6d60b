r"""Retrying wrapper around a fallible operation.

This module implements the retry loop. The decision to retry or to
abort is entirely delegated to an exception handler, usually a
``DelegatingStack`` of smaller handlers built by ``RetryConfigurator``.
"""

from __future__ import annotations

__all__ = ["RetryingCallable"]

import functools
import logging
import types
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_exception_handler

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RetryingCallable:
    """Wrap an operation, represented as a callable, in retry logic.

    Every call executes the operation with the given arguments. When the
    operation raises an ``Exception``, the exception handler is invoked
    with it. If the handler returns, the operation is executed again with
    the same arguments. If the handler raises, that exception propagates
    to the caller. The wrapper has no limit of its own, so a handler
    that never raises retries forever.

    ``BaseException`` subclasses that are not ``Exception`` subclasses,
    like ``KeyboardInterrupt``, are never caught.

    The wrapper can decorate methods. Accessed through an instance, it
    binds that instance as the first argument of the operation. The
    wrapper and its retry count are shared by all the instances.

    Args:
        operation: The operation to execute and retry on failure.
        exception_handler: The callable invoked with the caught
            exception. It returns to allow a retry or raises to abort.
        reset_on_success: If ``True``, ``exception_handler.reset()`` is
            called when every call finishes, whether it returned or
            raised, so each call starts with a fresh retry budget.

    Raises:
        TypeError: If ``operation`` or ``exception_handler`` is not
            callable.

    Example:
        ```pycon
        >>> from aretry import RetryingCallable
        >>> from aretry.handlers import RethrowOnMaxRetries
        >>> attempts = []
        >>> def flaky(value):
        ...     attempts.append(value)
        ...     if len(attempts) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return value * 2
        ...
        >>> retrying = RetryingCallable(flaky, RethrowOnMaxRetries(max_retries=5))
        >>> retrying(21)
        42
        >>> retrying.get_retries()
        2

        ```
    """

    def __init__(
        self,
        operation: Callable[..., Any],
        exception_handler: Callable[[Exception], None],
        reset_on_success: bool = False,
    ) -> None:
        if not callable(operation):
            msg = f"operation must be callable, got {operation!r}"
            raise TypeError(msg)
        validate_exception_handler(exception_handler)
        self.operation = operation
        self.exception_handler = exception_handler
        self.reset_on_success = reset_on_success
        self._retries: int | None = None
        functools.update_wrapper(self, operation, updated=())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(operation={self.operation!r}, "
            f"exception_handler={self.exception_handler!r})"
        )

    @property
    def retries(self) -> int | None:
        r"""The number of retries of the most recent call, or ``None``
        if the wrapper was never called."""
        return self._retries

    def get_retries(self) -> int | None:
        """Return the number of retries used by the most recent call.

        Returns:
            The number of retries, or ``None`` before the first call.
        """
        return self._retries

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Execute the operation and retry it until it succeeds or the
        exception handler raises.

        All the arguments are passed through to the operation on every
        attempt.

        Returns:
            The return value of the operation.

        Raises:
            Exception: The exception raised by the exception handler,
                usually the last exception of the operation.
        """
        self._retries = 0
        try:
            return self._run(args, kwargs)
        finally:
            if self.reset_on_success:
                self._reset_handler()

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def _run(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        while True:
            try:
                result = self.operation(*args, **kwargs)
            except Exception as exc:
                try:
                    self.exception_handler(exc)
                except Exception:
                    logger.debug(
                        f"{self._name} failed after {self._retries} retries "
                        f"with {type(exc).__qualname__}"
                    )
                    raise
                self._retries += 1
                logger.debug(
                    f"{self._name} failed with {type(exc).__qualname__}: {exc} "
                    f"(retry {self._retries})"
                )
            else:
                return result

    @property
    def _name(self) -> str:
        return getattr(self.operation, "__qualname__", repr(self.operation))

    def _reset_handler(self) -> None:
        reset = getattr(self.exception_handler, "reset", None)
        if callable(reset):
            reset()
