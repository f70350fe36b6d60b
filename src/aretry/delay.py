r"""Delay primitive used to pause between two attempts."""

from __future__ import annotations

__all__ = ["DelayMilliseconds"]

import logging
import time

from aretry.core.config import DEFAULT_DELAY_IN_MS
from aretry.core.validation import validate_delay_in_ms

logger: logging.Logger = logging.getLogger(__name__)


class DelayMilliseconds:
    """Block the calling thread for a fixed number of milliseconds.

    The wait relies on ``time.sleep`` so it does not keep a CPU core
    busy. A delay <= 0 is a no-op.

    Args:
        milliseconds: The delay in milliseconds (default: 300).

    Example:
        ```pycon
        >>> from aretry.delay import DelayMilliseconds
        >>> delay = DelayMilliseconds(milliseconds=0)
        >>> delay.milliseconds
        0
        >>> delay()  # returns immediately

        ```
    """

    def __init__(self, milliseconds: int = DEFAULT_DELAY_IN_MS) -> None:
        validate_delay_in_ms(milliseconds)
        self.milliseconds = milliseconds

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(milliseconds={self.milliseconds})"

    def __call__(self) -> None:
        """Wait the configured amount of milliseconds."""
        if self.milliseconds <= 0:
            return
        logger.debug(f"Waiting {self.milliseconds}ms before retry")
        time.sleep(self.milliseconds / 1000)
