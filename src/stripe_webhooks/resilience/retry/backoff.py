"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute the wait (seconds) before retry number *attempt* (0-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """Delay doubles each retry: ``base_delay * 2^attempt``.

    Uncapped unless *max_delay* is given.
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        delay = self._base * (2 ** attempt)
        if self._max is not None:
            return min(delay, self._max)
        return delay


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
