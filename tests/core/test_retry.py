# SPDX-License-Identifier: Apache-2.0
"""
Core: retry_async attempt counts and backoff schedule.

Sleeps are injected so the schedule can be asserted without waiting.
"""

import asyncio

import pytest

from vikingdb_sdk.core.retry import RetryPolicy, retry_async
from vikingdb_sdk.vector.errors import (
    VikingDBError,
    invalid_parameter_error,
    is_retryable_error,
    service_unavailable_error,
)

pytestmark = pytest.mark.asyncio


class FakeSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


def failing(error, succeed_after=None):
    state = {"calls": 0}

    async def fn():
        state["calls"] += 1
        if succeed_after is not None and state["calls"] > succeed_after:
            return "done"
        raise error

    return fn, state


async def test_retry_exhaustion_makes_max_retries_plus_one_attempts():
    sleep = FakeSleep()
    fn, state = failing(service_unavailable_error("busy"))

    with pytest.raises(VikingDBError) as exc_info:
        await retry_async(fn, max_retries=3, should_retry=is_retryable_error, sleep=sleep)

    assert state["calls"] == 4
    assert len(sleep.calls) == 3
    assert exc_info.value.status_code == 503


async def test_retry_backoff_bounds_follow_doubling_schedule():
    sleep = FakeSleep()
    fn, _ = failing(service_unavailable_error("busy"))

    with pytest.raises(VikingDBError):
        await retry_async(fn, max_retries=4, should_retry=is_retryable_error, sleep=sleep)

    bounds = [(0.1, 0.2), (0.2, 0.4), (0.4, 0.8), (0.8, 1.6)]
    for slept, (low, high) in zip(sleep.calls, bounds):
        assert low <= slept <= high


async def test_retry_sleep_never_exceeds_max_backoff():
    sleep = FakeSleep()
    fn, _ = failing(service_unavailable_error("busy"))
    policy = RetryPolicy(initial_backoff_s=1.0, max_backoff_s=1.5)

    with pytest.raises(VikingDBError):
        await retry_async(fn, max_retries=5, should_retry=is_retryable_error, policy=policy, sleep=sleep)

    assert len(sleep.calls) == 5
    assert all(s <= 1.5 for s in sleep.calls)


async def test_retry_without_jitter_is_exact():
    sleep = FakeSleep()
    fn, _ = failing(service_unavailable_error("busy"))
    policy = RetryPolicy(use_jitter=False)

    with pytest.raises(VikingDBError):
        await retry_async(fn, max_retries=3, should_retry=is_retryable_error, policy=policy, sleep=sleep)

    assert sleep.calls == pytest.approx([0.1, 0.2, 0.4])


async def test_retry_non_retryable_error_fails_on_first_attempt():
    sleep = FakeSleep()
    fn, state = failing(invalid_parameter_error("bad"))

    with pytest.raises(VikingDBError):
        await retry_async(fn, max_retries=3, should_retry=is_retryable_error, sleep=sleep)

    assert state["calls"] == 1
    assert sleep.calls == []


@pytest.mark.parametrize("max_retries", [0, -1, -10])
async def test_retry_zero_or_negative_budget_means_single_attempt(max_retries):
    fn, state = failing(service_unavailable_error("busy"))

    with pytest.raises(VikingDBError):
        await retry_async(fn, max_retries=max_retries, should_retry=is_retryable_error, sleep=FakeSleep())

    assert state["calls"] == 1


async def test_retry_returns_first_success():
    fn, state = failing(service_unavailable_error("busy"), succeed_after=2)

    result = await retry_async(fn, max_retries=3, should_retry=is_retryable_error, sleep=FakeSleep())

    assert result == "done"
    assert state["calls"] == 3


async def test_retry_backoff_hook_failure_is_ignored():
    fn, state = failing(service_unavailable_error("busy"), succeed_after=1)
    seen = []

    def hook(retry_no, sleep_s, exc):
        seen.append(retry_no)
        raise RuntimeError("hook exploded")

    result = await retry_async(fn, max_retries=2, on_backoff=hook, sleep=FakeSleep())

    assert result == "done"
    assert seen == [1]


async def test_retry_never_retries_cancellation():
    calls = 0

    async def fn():
        nonlocal calls
        calls += 1
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await retry_async(fn, max_retries=3, sleep=FakeSleep())

    assert calls == 1


async def test_retry_policy_rejects_invalid_values():
    with pytest.raises(ValueError):
        RetryPolicy(initial_backoff_s=0)
    with pytest.raises(ValueError):
        RetryPolicy(initial_backoff_s=2.0, max_backoff_s=1.0)
    with pytest.raises(ValueError):
        RetryPolicy(multiplier=0.5)
