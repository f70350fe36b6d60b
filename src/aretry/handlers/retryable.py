r"""Exception handler that filters the exceptions by type."""

from __future__ import annotations

__all__ = ["RethrowNonRetryableExceptions"]

import logging

from aretry.core.validation import validate_exception_types
from aretry.handlers.base import BaseExceptionHandler

logger: logging.Logger = logging.getLogger(__name__)


class RethrowNonRetryableExceptions(BaseExceptionHandler):
    """Rethrow the caught exception unless it is an instance of one of
    the configured exception classes.

    Subclasses of the configured classes are retryable too.

    Args:
        *exception_types: The retryable exception classes. At least
            one class is required.

    Raises:
        ValueError: If no exception class is given.
        TypeError: If one of the classes is not an ``Exception``
            subclass.

    Example:
        ```pycon
        >>> from aretry.handlers import RethrowNonRetryableExceptions
        >>> handler = RethrowNonRetryableExceptions(ConnectionError, TimeoutError)
        >>> handler(ConnectionResetError("reset"))  # suppressed
        >>> handler(ValueError("bad value"))
        Traceback (most recent call last):
        ...
        ValueError: bad value

        ```
    """

    def __init__(self, *exception_types: type[Exception]) -> None:
        if not exception_types:
            msg = "at least one retryable exception class is required"
            raise ValueError(msg)
        validate_exception_types(exception_types)
        self.exception_types = exception_types

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self.exception_types)
        return f"{self.__class__.__qualname__}({names})"

    def __call__(self, exc: Exception) -> None:
        if isinstance(exc, self.exception_types):
            return
        logger.debug(f"{type(exc).__qualname__} is not retryable, rethrowing")
        raise exc
