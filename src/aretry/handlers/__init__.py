r"""Exception handlers deciding whether a failed operation is retried.

Each handler receives the caught exception. It suppresses the exception
by returning normally, or aborts the retry loop by raising it.
"""

from __future__ import annotations

__all__ = [
    "BaseExceptionHandler",
    "DelayHandler",
    "DelegatingStack",
    "LogExceptions",
    "RethrowNonRetryableExceptions",
    "RethrowOnMaxRetries",
]

from aretry.handlers.base import BaseExceptionHandler
from aretry.handlers.delay import DelayHandler
from aretry.handlers.log import LogExceptions
from aretry.handlers.max_retries import RethrowOnMaxRetries
from aretry.handlers.retryable import RethrowNonRetryableExceptions
from aretry.handlers.stack import DelegatingStack
