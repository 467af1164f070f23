"""Resilience – TenacityBackoffExecutor adapter."""
from __future__ import annotations

import time
from typing import Any, Callable, TypeVar

import tenacity

from stripe_webhooks.kernel.errors import is_rate_limited

T = TypeVar("T")


class TenacityBackoffExecutor:
    """Backoff executor backed by the ``tenacity`` library.

    Provides the same ``execute`` interface as
    :class:`~stripe_webhooks.resilience.retry.policy.BackoffExecutor` so the
    two are interchangeable wherever a resource accepts an executor.

    Parameters
    ----------
    base_delay:
        First wait in seconds; each following wait doubles it.
    sleep:
        Blocking sleep function, replaced by a recorder in tests.
    retry_on:
        Predicate selecting the exceptions worth retrying. Defaults to
        :func:`~stripe_webhooks.kernel.errors.is_rate_limited`.
    max_attempts:
        ``None`` (the default) retries forever.
    kwargs:
        Additional keyword arguments forwarded to :class:`tenacity.Retrying`.
    """

    def __init__(
        self,
        base_delay: float = 1.0,
        *,
        sleep: Callable[[float], None] = time.sleep,
        retry_on: Callable[[BaseException], bool] = is_rate_limited,
        max_attempts: int | None = None,
        **kwargs: Any,
    ) -> None:
        self._base_delay = base_delay
        self._sleep = sleep
        self._retry_on = retry_on
        self._max_attempts = max_attempts
        self._extra_kwargs = kwargs

    def _build_retrying(self) -> tenacity.Retrying:
        stop = (
            tenacity.stop_never
            if self._max_attempts is None
            else tenacity.stop_after_attempt(self._max_attempts)
        )
        return tenacity.Retrying(
            stop=stop,
            wait=tenacity.wait_exponential(multiplier=self._base_delay, exp_base=2),
            retry=tenacity.retry_if_exception(self._retry_on),
            sleep=self._sleep,
            reraise=True,
            **self._extra_kwargs,
        )

    def execute(self, call: Callable[[], T]) -> T:
        """Execute *call* with tenacity-driven exponential backoff."""
        return self._build_retrying()(call)


__all__ = ["TenacityBackoffExecutor"]
