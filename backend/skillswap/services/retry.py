from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import httpx

from skillswap.core.errors import ConfigurationError, ErrorKind, ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FATAL_STATUS_CODES = {400, 401, 403}
UNAVAILABLE_STATUS_CODES = {429, 503}
UNAVAILABLE_JITTER_SECONDS = 2.0
TRANSIENT_JITTER_SECONDS = 1.0


@dataclass
class RetryState:
    max_attempts: int
    attempt: int = 1
    last_error: BaseException | None = None

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_attempts


def error_kind_for_status(status_code: int) -> ErrorKind:
    if status_code in FATAL_STATUS_CODES:
        return ErrorKind.fatal
    if status_code in UNAVAILABLE_STATUS_CODES:
        return ErrorKind.unavailable
    return ErrorKind.transient


def classify_error(error: BaseException) -> ErrorKind:
    if isinstance(error, ProviderError):
        return error.kind
    if isinstance(error, ConfigurationError):
        return ErrorKind.fatal
    if isinstance(error, httpx.HTTPStatusError):
        return error_kind_for_status(error.response.status_code)
    # Untyped errors from a third-party SDK: only the message is left to go on.
    if "503" in str(error):
        return ErrorKind.unavailable
    return ErrorKind.transient


def backoff_delay(
    kind: ErrorKind,
    attempt: int,
    base_delay: float,
    rng: random.Random | None = None,
) -> float:
    source = rng or random
    if kind == ErrorKind.unavailable:
        return base_delay * 2**attempt + source.uniform(0, UNAVAILABLE_JITTER_SECONDS)
    return base_delay * 2 ** (attempt - 1) + source.uniform(0, TRANSIENT_JITTER_SECONDS)


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
    *,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    rng: random.Random | None = None,
) -> T:
    """Run ``operation`` until it succeeds, fails fatally, or ``max_retries`` attempts are spent.

    Fatal errors (bad request, bad credentials, missing configuration) are
    re-raised on the first occurrence. Rate-limited/unavailable errors back off
    for ``base_delay * 2**attempt`` plus up to 2s of jitter, anything else for
    ``base_delay * 2**(attempt - 1)`` plus up to 1s. The last error is re-raised
    once the attempts run out.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    state = RetryState(max_attempts=max_retries)
    while True:
        try:
            return await operation()
        except Exception as exc:
            state.last_error = exc
            kind = classify_error(exc)
            logger.warning(
                "Attempt %s/%s failed (%s): %s",
                state.attempt,
                state.max_attempts,
                kind.value,
                exc,
            )
            if kind == ErrorKind.fatal:
                logger.error("Non-retryable error, giving up")
                raise
            if state.exhausted:
                logger.error("Max retries exceeded, giving up")
                raise

            delay = backoff_delay(kind, state.attempt, base_delay, rng)
            logger.info("Retrying in %.0fms", delay * 1000)
            await sleep(delay)
            state.attempt += 1
