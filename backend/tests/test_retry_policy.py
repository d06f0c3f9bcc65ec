from pathlib import Path
import asyncio
import random
import sys

import httpx
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skillswap.core.errors import ConfigurationError, ErrorKind, ProviderError
from skillswap.services.retry import backoff_delay, classify_error, execute_with_retry


class FlakyOperation:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        outcome = self.outcomes[min(self.calls, len(self.outcomes)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class NoJitter:
    def uniform(self, low, high):
        return 0.0


def _run(operation, *, max_retries=3, base_delay=1.0, rng=None):
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    async def runner():
        return await execute_with_retry(
            operation, max_retries, base_delay, sleep=fake_sleep, rng=rng or NoJitter()
        )

    return asyncio.run(runner()), delays


def _status_error(status):
    request = httpx.Request("POST", "https://api.example.test/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)


def test_fatal_error_is_not_retried():
    operation = FlakyOperation([ProviderError("bad key", kind=ErrorKind.fatal, status_code=401)])
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    with pytest.raises(ProviderError):
        asyncio.run(execute_with_retry(operation, 3, 0.01, sleep=fake_sleep, rng=NoJitter()))
    assert operation.calls == 1
    assert delays == []


def test_transient_errors_exhaust_attempts_and_reraise_last():
    errors = [RuntimeError(f"timeout {index}") for index in range(3)]
    operation = FlakyOperation(errors)
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    with pytest.raises(RuntimeError) as excinfo:
        asyncio.run(execute_with_retry(operation, 3, 0.5, sleep=fake_sleep, rng=NoJitter()))

    assert operation.calls == 3
    assert excinfo.value is errors[-1]
    assert delays == [pytest.approx(0.5), pytest.approx(1.0)]


def test_success_after_one_transient_failure():
    operation = FlakyOperation([RuntimeError("connection reset"), "ok"])
    result, delays = _run(operation, base_delay=0.01)
    assert result == "ok"
    assert operation.calls == 2
    assert len(delays) == 1


def test_single_attempt_never_sleeps():
    operation = FlakyOperation([RuntimeError("boom")])
    delays = []

    async def fake_sleep(delay):
        delays.append(delay)

    with pytest.raises(RuntimeError):
        asyncio.run(execute_with_retry(operation, 1, 1.0, sleep=fake_sleep))
    assert operation.calls == 1
    assert delays == []


def test_zero_attempts_is_rejected():
    operation = FlakyOperation(["never"])
    with pytest.raises(ValueError):
        asyncio.run(execute_with_retry(operation, 0))
    assert operation.calls == 0


def test_unavailable_backoff_doubles_from_two_base_delays():
    operation = FlakyOperation(
        [
            ProviderError("overloaded", kind=ErrorKind.unavailable, status_code=503),
            ProviderError("overloaded", kind=ErrorKind.unavailable, status_code=503),
            "done",
        ]
    )
    result, delays = _run(operation, base_delay=0.25)
    assert result == "done"
    assert delays == [pytest.approx(0.5), pytest.approx(1.0)]


def test_backoff_jitter_stays_within_bounds():
    rng = random.Random(7)
    for attempt in (1, 2, 3):
        unavailable = backoff_delay(ErrorKind.unavailable, attempt, 1.0, rng)
        assert 2**attempt <= unavailable <= 2**attempt + 2.0
        transient = backoff_delay(ErrorKind.transient, attempt, 1.0, rng)
        assert 2 ** (attempt - 1) <= transient <= 2 ** (attempt - 1) + 1.0


def test_classify_error_by_status_and_message():
    assert classify_error(_status_error(400)) == ErrorKind.fatal
    assert classify_error(_status_error(403)) == ErrorKind.fatal
    assert classify_error(_status_error(429)) == ErrorKind.unavailable
    assert classify_error(_status_error(503)) == ErrorKind.unavailable
    assert classify_error(_status_error(500)) == ErrorKind.transient
    assert classify_error(RuntimeError("got 503 Service Unavailable")) == ErrorKind.unavailable
    assert classify_error(ConfigurationError("MISTRAL_API_KEY is not configured")) == ErrorKind.fatal
    assert classify_error(TimeoutError("read timed out")) == ErrorKind.transient
