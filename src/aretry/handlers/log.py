r"""Exception handler that logs the exceptions before a retry."""

from __future__ import annotations

__all__ = ["LogExceptions"]

import logging

from aretry.handlers.base import BaseExceptionHandler


class LogExceptions(BaseExceptionHandler):
    """Log the caught exception and suppress it.

    Place it after the handlers that may abort the retry loop so only
    the exceptions that are actually retried get logged.

    Args:
        logger: The logger to use. Defaults to the ``aretry`` logger.
        level: The log level (default: ``logging.WARNING``).

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.handlers import LogExceptions
        >>> handler = LogExceptions(logging.getLogger("my_app"), level=logging.INFO)
        >>> handler(ConnectionError("connection refused"))

        ```
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self.logger = logger if logger is not None else logging.getLogger("aretry")
        self.level = level

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(logger={self.logger.name!r}, "
            f"level={logging.getLevelName(self.level)})"
        )

    def __call__(self, exc: Exception) -> None:
        self.logger.log(
            self.level, f"Retrying after {type(exc).__qualname__}: {exc}", exc_info=exc
        )
