r"""Exception handler that limits the number of retries."""

from __future__ import annotations

__all__ = ["RethrowOnMaxRetries"]

import logging

from aretry.core.validation import validate_max_retries
from aretry.handlers.base import BaseExceptionHandler

logger: logging.Logger = logging.getLogger(__name__)


class RethrowOnMaxRetries(BaseExceptionHandler):
    """Limit the number of suppressed exceptions to a configured
    maximum.

    The handler counts its invocations. The first ``max_retries``
    exceptions are suppressed, the next one is rethrown. A value <= 0
    rethrows the very first exception.

    Args:
        max_retries: The maximum number of retries.
        reset_on_exhaustion: If ``True``, the counter goes back to 0 when
            the limit is reached, so a reused handler starts from the
            beginning. If ``False``, every later exception is rethrown
            until ``reset`` is called.

    Example:
        ```pycon
        >>> from aretry.handlers import RethrowOnMaxRetries
        >>> handler = RethrowOnMaxRetries(max_retries=1)
        >>> handler(RuntimeError("first"))  # suppressed
        >>> handler.retries
        1
        >>> handler(RuntimeError("second"))
        Traceback (most recent call last):
        ...
        RuntimeError: second
        >>> handler.retries
        0

        ```
    """

    def __init__(self, max_retries: int, reset_on_exhaustion: bool = True) -> None:
        validate_max_retries(max_retries)
        self.max_retries = max_retries
        self.reset_on_exhaustion = reset_on_exhaustion
        self.retries = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_retries={self.max_retries}, "
            f"reset_on_exhaustion={self.reset_on_exhaustion})"
        )

    def __call__(self, exc: Exception) -> None:
        if self.retries < self.max_retries:
            self.retries += 1
            return
        logger.debug(f"Max retries ({self.max_retries}) reached, rethrowing {type(exc).__qualname__}")
        if self.reset_on_exhaustion:
            self.reset()
        raise exc

    def reset(self) -> None:
        """Reset the retry counter to 0."""
        self.retries = 0
