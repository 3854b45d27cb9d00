# vikingdb_sdk/core/retry.py
# SPDX-License-Identifier: Apache-2.0
"""
Async retry helper with exponential backoff and jitter.

The helper is protocol-agnostic: the caller decides which failures are
transient through a `should_retry` predicate. The VikingDB Transport passes
`vikingdb_sdk.vector.errors.is_retryable_error`.

Backoff schedule
----------------
Before retry *k* (k >= 1) the helper sleeps `delay + uniform(0, delay)`,
capped at `max_backoff_s`, where `delay` starts at `initial_backoff_s` and is
multiplied by `multiplier` (capped) after each sleep. With the defaults the
first gap lies in [0.1s, 0.2s], the second in [0.2s, 0.4s], and so on up to
10s.

Usage:
    from vikingdb_sdk.core.retry import RetryPolicy, retry_async

    result = await retry_async(
        lambda: send_once(),
        max_retries=3,
        should_retry=is_retryable_error,
        policy=RetryPolicy(initial_backoff_s=0.2),
    )
"""
from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "RetryPolicy",
    "DEFAULT_RETRY_POLICY",
    "retry_async",
]


@dataclass(frozen=True)
class RetryPolicy:
    """
    Backoff configuration.

    Attributes:
        initial_backoff_s: Base delay before the first retry (seconds).
        max_backoff_s:     Ceiling for both the delay and each individual sleep.
        multiplier:        Growth factor applied to the delay after each retry.
        use_jitter:        Add `uniform(0, delay)` on top of the delay.
    """

    initial_backoff_s: float = 0.1
    max_backoff_s: float = 10.0
    multiplier: float = 2.0
    use_jitter: bool = True

    def __post_init__(self):
        if self.initial_backoff_s <= 0 or self.max_backoff_s <= 0:
            raise ValueError("Backoff times must be positive")
        if self.initial_backoff_s > self.max_backoff_s:
            raise ValueError("initial_backoff_s cannot exceed max_backoff_s")
        if self.multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")

    def sleep_for(self, delay: float) -> float:
        """Sleep duration for the current delay, jitter included."""
        jitter = random.uniform(0, delay) if self.use_jitter else 0.0
        return min(delay + jitter, self.max_backoff_s)

    def next_delay(self, delay: float) -> float:
        return min(delay * self.multiplier, self.max_backoff_s)


DEFAULT_RETRY_POLICY = RetryPolicy()


async def retry_async(
    fn: Callable[[], Awaitable[Any]],
    *,
    max_retries: int,
    should_retry: Optional[Callable[[BaseException], bool]] = None,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    on_backoff: Optional[Callable[[int, float, BaseException], None]] = None,
    sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
) -> Any:
    """
    Invoke `fn` until it succeeds, fails with a non-retryable error, or the
    retry budget is spent.

    Args:
        fn:           Zero-arg coroutine factory, called once per attempt.
        max_retries:  Retries after the first attempt. 0 means a single
                      attempt; negative values are treated as 0.
        should_retry: Predicate over the raised exception. None retries
                      every `Exception`.
        policy:       Backoff schedule.
        on_backoff:   Optional hook `(retry_no, sleep_seconds, exc)` called
                      before each sleep. Hook failures are logged and ignored.
        sleep:        Awaitable sleep function (defaults to asyncio.sleep).

    Returns:
        Whatever `fn()` returns on the first successful attempt.

    Raises:
        The last exception raised by `fn`. `asyncio.CancelledError` and other
        BaseExceptions are never retried.
    """
    retries = max(0, int(max_retries))
    do_sleep = sleep or asyncio.sleep
    delay = policy.initial_backoff_s

    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            if should_retry is not None and not should_retry(exc):
                raise
            if attempt >= retries:
                raise

            attempt += 1
            sleep_s = policy.sleep_for(delay)
            delay = policy.next_delay(delay)

            if on_backoff:
                try:
                    on_backoff(attempt, sleep_s, exc)
                except Exception as hook_error:  # noqa: BLE001
                    logger.debug("on_backoff hook failed: %s", hook_error)

            await do_sleep(sleep_s)
