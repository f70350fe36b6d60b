r"""Exception handler that pauses before the next attempt."""

from __future__ import annotations

__all__ = ["DelayHandler"]

from aretry.core.config import DEFAULT_DELAY_IN_MS
from aretry.delay import DelayMilliseconds
from aretry.handlers.base import BaseExceptionHandler


class DelayHandler(BaseExceptionHandler):
    """Always suppress the exception after waiting a fixed delay.

    This handler should be the last one of a chain, so the delay is
    only spent when a retry actually follows.

    Args:
        milliseconds: The delay in milliseconds (default: 300).
            A value <= 0 disables the delay.

    Example:
        ```pycon
        >>> from aretry.handlers import DelayHandler
        >>> handler = DelayHandler(milliseconds=0)
        >>> handler(RuntimeError("boom"))  # suppressed, no wait

        ```
    """

    def __init__(self, milliseconds: int = DEFAULT_DELAY_IN_MS) -> None:
        self.delay = DelayMilliseconds(milliseconds)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(milliseconds={self.delay.milliseconds})"

    def __call__(self, exc: Exception) -> None:  # noqa: ARG002
        self.delay()
