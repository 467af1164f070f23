"""Resilience – BackoffExecutor."""
from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from stripe_webhooks.kernel.errors import is_rate_limited
from stripe_webhooks.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff

T = TypeVar("T")
logger = logging.getLogger(__name__)


class BackoffExecutor:
    """Run a remote call, sleeping and retrying while it is rate limited.

    Only failures accepted by *retry_on* (HTTP 429 by default) are retried;
    any other exception propagates on the first attempt, unchanged. With the
    default ``max_attempts=None`` there is no attempt limit: a caller that is
    rate limited forever blocks forever. Passing a number makes the executor
    re-raise the last rate-limit error once that many attempts were made.
    """

    def __init__(
        self,
        backoff: BackoffStrategy | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        retry_on: Callable[[BaseException], bool] = is_rate_limited,
        max_attempts: int | None = None,
    ) -> None:
        self.backoff = backoff or ExponentialBackoff(base_delay=1.0)
        self.max_attempts = max_attempts
        self._sleep = sleep
        self._retry_on = retry_on

    def execute(self, call: Callable[[], T]) -> T:
        """Invoke *call* until it succeeds or fails with a non-retryable error."""
        attempt = 0
        while True:
            try:
                return call()
            except Exception as exc:
                if not self._retry_on(exc):
                    raise
                attempt += 1
                if self.max_attempts is not None and attempt >= self.max_attempts:
                    raise
                delay = self.backoff.compute(attempt - 1)
                logger.warning("rate limited attempt=%d delay=%.2fs exc=%r", attempt, delay, exc)
                self._sleep(delay)


__all__ = ["BackoffExecutor"]
