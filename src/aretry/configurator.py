r"""Builder for configuring the retry logic.

``RetryConfigurator`` turns a few high-level options into a chain of
exception handlers and wraps operations with it.
"""

from __future__ import annotations

__all__ = ["RetryConfigurator"]

import logging
from typing import TYPE_CHECKING, Any

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
from aretry.handlers import (
    DelayHandler,
    DelegatingStack,
    RethrowNonRetryableExceptions,
    RethrowOnMaxRetries,
)
from aretry.retrying import RetryingCallable

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger: logging.Logger = logging.getLogger(__name__)


class RetryConfigurator:
    """Configure the retry logic and decorate operations with it.

    By default:

    - The operation is retried twice, i.e. at most three executions. If
      it still fails, the last exception is rethrown.
    - Retries have a 300 milliseconds delay between them.
    - Every ``Exception`` triggers the retry logic.

    The setters return the configurator itself so they can be chained.
    Each call to ``decorate`` builds a new handler chain, so the
    configurator can be changed and reused afterwards without affecting
    the operations it already decorated. The custom handlers are the
    exception: the same instances are put in every chain, so their state
    and their ``reset`` method are shared by all the decorated
    operations. Stateful handlers should be added to one configurator
    per operation.

    Args:
        max_retries: The maximum number of retries. Values <= 0 mean the
            operation is executed once.
        delay_in_ms: The delay between retries in milliseconds. Values
            <= 0 disable the delay.
        retryable_exceptions: One exception class or a sequence of
            exception classes to retry on. An empty sequence means every
            ``Exception``.
        reset_on_success: If ``True``, the retry counter of a decorated
            operation is reset after every call, successful or not.

    Example:
        ```pycon
        >>> from aretry import RetryConfigurator
        >>> configurator = (
        ...     RetryConfigurator()
        ...     .set_max_retries(5)
        ...     .set_delay_in_ms(0)
        ...     .set_retryable_exceptions(ConnectionError, TimeoutError)
        ... )
        >>> configurator.max_retries
        5
        >>> configurator.retryable_exceptions
        (<class 'ConnectionError'>, <class 'TimeoutError'>)
        >>> configurator.call(lambda x, y: x + y, 40, 2)
        42

        ```
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        delay_in_ms: int = DEFAULT_DELAY_IN_MS,
        retryable_exceptions: type[Exception] | Sequence[type[Exception]] = Exception,
        reset_on_success: bool = False,
    ) -> None:
        self.set_max_retries(max_retries)
        self.set_delay_in_ms(delay_in_ms)
        if isinstance(retryable_exceptions, type):
            retryable_exceptions = (retryable_exceptions,)
        self._set_retryable_exceptions(tuple(retryable_exceptions))
        self.set_reset_on_success(reset_on_success)
        self._exception_handlers: list[Callable[[Exception], None]] = []

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._retryable_exceptions)
        return (
            f"{self.__class__.__qualname__}(max_retries={self._max_retries}, "
            f"delay_in_ms={self._delay_in_ms}, retryable_exceptions=({names}))"
        )

    @property
    def max_retries(self) -> int:
        r"""The maximum number of retries."""
        return self._max_retries

    @property
    def delay_in_ms(self) -> int:
        r"""The delay between retries in milliseconds."""
        return self._delay_in_ms

    @property
    def retryable_exceptions(self) -> tuple[type[Exception], ...]:
        r"""The exception classes to catch and retry on."""
        return self._retryable_exceptions

    @property
    def reset_on_success(self) -> bool:
        r"""Whether the retry counter is reset after every call."""
        return self._reset_on_success

    @property
    def exception_handlers(self) -> tuple[Callable[[Exception], None], ...]:
        r"""The custom exception handlers added to the chain."""
        return tuple(self._exception_handlers)

    def set_max_retries(self, max_retries: int) -> RetryConfigurator:
        """Set the maximum number of retries.

        Args:
            max_retries: The maximum number of retries.

        Returns:
            The configurator itself.
        """
        validate_max_retries(max_retries)
        self._max_retries = max_retries
        return self

    def set_delay_in_ms(self, delay_in_ms: int) -> RetryConfigurator:
        """Set the delay between retries in milliseconds.

        Set to zero to disable the delay.

        Args:
            delay_in_ms: The delay in milliseconds.

        Returns:
            The configurator itself.
        """
        validate_delay_in_ms(delay_in_ms)
        self._delay_in_ms = delay_in_ms
        return self

    def set_retryable_exceptions(
        self, exc_type: type[Exception], *more_exc_types: type[Exception]
    ) -> RetryConfigurator:
        """Set the exception classes to catch and retry on.

        The operation is only executed again for exceptions that are
        instances of one of the configured classes. Other exceptions
        propagate immediately.

        Args:
            exc_type: A retryable exception class.
            *more_exc_types: Additional retryable exception classes.

        Returns:
            The configurator itself.

        Raises:
            TypeError: If one of the classes is not an ``Exception``
                subclass.
        """
        self._set_retryable_exceptions((exc_type, *more_exc_types))
        return self

    def set_reset_on_success(self, reset_on_success: bool) -> RetryConfigurator:
        """Set whether the retry counter is reset after every call of a
        decorated operation, whether it succeeded or failed.

        Args:
            reset_on_success: ``True`` to give every call of a decorated
                operation the full retry budget.

        Returns:
            The configurator itself.
        """
        self._reset_on_success = bool(reset_on_success)
        return self

    def add_exception_handler(self, handler: Callable[[Exception], None]) -> RetryConfigurator:
        """Add a custom exception handler to the chain.

        Custom handlers run after the retry limit check and before the
        delay, in the order they were added. They only see exceptions
        that are going to be retried, unless one of them raises.
        The handler itself is added, not a copy, and it is shared by
        every chain built afterwards.

        Args:
            handler: A callable accepting the caught exception.

        Returns:
            The configurator itself.

        Raises:
            TypeError: If ``handler`` is not callable.
        """
        validate_exception_handler(handler)
        self._exception_handlers.append(handler)
        return self

    def build_exception_handler(self) -> DelegatingStack:
        """Build the handler chain from the current options.

        The chain contains, in this order: the exception type filter if
        the retryable exceptions are restricted, the retry limit, the
        custom handlers, and the delay if it is > 0.

        Returns:
            A new handler chain.
        """
        handlers: list[Callable[[Exception], None]] = []
        # the filter is skipped in the default unrestricted case
        if self._retryable_exceptions != DEFAULT_RETRYABLE_EXCEPTIONS:
            handlers.append(RethrowNonRetryableExceptions(*self._retryable_exceptions))
        handlers.append(RethrowOnMaxRetries(self._max_retries))
        handlers.extend(self._exception_handlers)
        if self._delay_in_ms > 0:
            handlers.append(DelayHandler(self._delay_in_ms))
        return DelegatingStack(*handlers)

    def decorate(self, operation: Callable[..., Any]) -> RetryingCallable:
        """Return a callable that decorates the given operation that
        should be retried on failure.

        Can be used as a function decorator.

        Args:
            operation: The operation to retry on failure.

        Returns:
            The retrying callable.

        Example:
            ```pycon
            >>> from aretry import RetryConfigurator
            >>> @RetryConfigurator(max_retries=3, delay_in_ms=0).decorate
            ... def fetch(key):
            ...     return key.upper()
            ...
            >>> fetch("abc")
            'ABC'

            ```
        """
        exception_handler = self.build_exception_handler()
        logger.debug(f"Decorating {operation!r} with {exception_handler!r}")
        return RetryingCallable(
            operation, exception_handler, reset_on_success=self._reset_on_success
        )

    def call(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Execute the operation and its arguments with the configured
        retry behavior.

        Args:
            operation: The operation to execute.
            *args: The positional arguments passed to the operation.
            **kwargs: The keyword arguments passed to the operation.

        Returns:
            The return value of the operation.
        """
        return self.decorate(operation)(*args, **kwargs)

    def _set_retryable_exceptions(self, exception_types: tuple[type[Exception], ...]) -> None:
        validate_exception_types(exception_types)
        self._retryable_exceptions = exception_types or DEFAULT_RETRYABLE_EXCEPTIONS
