r"""Abstract base class for exception handlers."""

from __future__ import annotations

__all__ = ["BaseExceptionHandler"]

from abc import ABC, abstractmethod


class BaseExceptionHandler(ABC):
    """Abstract base class for exception handlers.

    An exception handler receives the exception raised by the wrapped
    operation and decides what happens next. Returning normally
    suppresses the exception so the operation can be retried. Raising
    (usually the same exception) aborts the retry loop.

    Any callable with the signature ``handler(exc) -> None`` can be used
    as a handler. This base class only adds the optional ``reset`` hook
    for handlers that keep some state between invocations.
    """

    @abstractmethod
    def __call__(self, exc: Exception) -> None:
        """Handle an exception raised by the wrapped operation.

        Args:
            exc: The caught exception.

        Raises:
            Exception: To abort the retry loop, usually ``exc`` itself.
        """

    def reset(self) -> None:
        """Reset the internal state of the handler.

        The default implementation does nothing because most handlers
        are stateless.
        """
