"""Hooks consulted while a call builder executes a request.

A Delegate sees every step of a call and decides whether failed attempts are
retried. The default never retries; RetryDelegate backs off exponentially on
transient failures.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Optional

import httpx

_LOGGER = logging.getLogger(__name__)

TRANSIENT_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class MethodInfo(NamedTuple):
    id: str
    http_method: str


@dataclass(frozen=True)
class Retry:
    delay: Optional[float] = None

    @classmethod
    def abort(cls) -> "Retry":
        return cls(None)

    @classmethod
    def after(cls, seconds: float) -> "Retry":
        return cls(max(0.0, float(seconds)))

    @property
    def should_retry(self) -> bool:
        return self.delay is not None


class Delegate:
    def begin(self, info: MethodInfo) -> None:
        pass

    def token(self, err: Exception) -> Optional[str]:
        """Called when the authenticator failed. Return a token to use instead, or None."""
        return None

    def pre_request(self) -> None:
        pass

    def http_error(self, err: httpx.HTTPError) -> Retry:
        return Retry.abort()

    def http_failure(self, response: httpx.Response, error_json: Optional[Any]) -> Retry:
        return Retry.abort()

    def response_json_decode_error(self, body: str, err: Exception) -> None:
        pass

    def finished(self, is_success: bool) -> None:
        pass


class DefaultDelegate(Delegate):
    pass


def exponential_intervals(initial_delay: float, num_retries: int, factor: float = 2.0,
                          fuzz: float = 0.5, max_delay: float = 60.0) -> Iterator[float]:
    """Yields num_retries delays, each randomly chosen in [(1 - fuzz) * d, d]."""
    delay = min(initial_delay, max_delay)
    for _ in range(num_retries):
        yield delay * (1 - fuzz * random.random())
        delay = min(delay * factor, max_delay)


class RetryDelegate(Delegate):
    """Retries transport errors and transient HTTP statuses with exponential backoff.

    The budget is per call: ``begin`` resets it, so one instance can be shared
    by sequential calls.
    """

    def __init__(self, num_retries: int = 5, initial_delay: float = 1.0, factor: float = 2.0,
                 fuzz: float = 0.5, max_delay: float = 60.0):
        self.num_retries = num_retries
        self.initial_delay = initial_delay
        self.factor = factor
        self.fuzz = fuzz
        self.max_delay = max_delay
        self._intervals: Iterator[float] = iter(())
        self._info: Optional[MethodInfo] = None

    def begin(self, info: MethodInfo) -> None:
        self._info = info
        self._intervals = exponential_intervals(
            self.initial_delay, self.num_retries, self.factor, self.fuzz, self.max_delay)

    def _next(self, reason: str, retry_after: Optional[float] = None) -> Retry:
        delay = next(self._intervals, None)
        if delay is None:
            _LOGGER.warning("%s: giving up after %d retries (%s)",
                            self._info.id if self._info else "call", self.num_retries, reason)
            return Retry.abort()
        if retry_after is not None:
            delay = max(delay, retry_after)
        _LOGGER.warning("%s: %s, retrying in %.2fs",
                        self._info.id if self._info else "call", reason, delay)
        return Retry.after(delay)

    def http_error(self, err: httpx.HTTPError) -> Retry:
        return self._next(f"transport error {err!r}")

    def http_failure(self, response: httpx.Response, error_json: Optional[Any]) -> Retry:
        if response.status_code not in TRANSIENT_STATUS_CODES:
            return Retry.abort()
        retry_after = None
        header = response.headers.get("Retry-After")
        if header is not None:
            try:
                retry_after = float(header)
            except ValueError:
                retry_after = None
        return self._next(f"HTTP {response.status_code}", retry_after)
