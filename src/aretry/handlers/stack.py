r"""Exception handler that delegates to a sequence of handlers."""

from __future__ import annotations

__all__ = ["DelegatingStack"]

from typing import TYPE_CHECKING

from aretry.core.validation import validate_exception_handler
from aretry.handlers.base import BaseExceptionHandler

if TYPE_CHECKING:
    from collections.abc import Callable


class DelegatingStack(BaseExceptionHandler):
    """Delegate the exception handling to an ordered sequence of
    handlers.

    The handlers are invoked in order with the same exception. The
    first handler that raises stops the chain and its exception
    propagates, so the order matters: filters first, counters next,
    delays last. If every handler returns, the exception is suppressed.

    Args:
        *handlers: The exception handlers. Any callable accepting the
            exception is valid.

    Raises:
        TypeError: If one of the handlers is not callable.

    Example:
        ```pycon
        >>> from aretry.handlers import (
        ...     DelegatingStack,
        ...     RethrowNonRetryableExceptions,
        ...     RethrowOnMaxRetries,
        ... )
        >>> stack = DelegatingStack(
        ...     RethrowNonRetryableExceptions(OSError), RethrowOnMaxRetries(max_retries=3)
        ... )
        >>> stack(OSError("disk busy"))  # suppressed
        >>> stack(KeyError("missing"))
        Traceback (most recent call last):
        ...
        KeyError: 'missing'

        ```
    """

    def __init__(self, *handlers: Callable[[Exception], None]) -> None:
        for handler in handlers:
            validate_exception_handler(handler)
        self.handlers = handlers

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({', '.join(map(repr, self.handlers))})"

    def __call__(self, exc: Exception) -> None:
        for handler in self.handlers:
            handler(exc)

    def reset(self) -> None:
        """Reset every handler of the stack that defines ``reset``."""
        for handler in self.handlers:
            reset = getattr(handler, "reset", None)
            if callable(reset):
                reset()
