"""httpx transport wrappers with retry, backoff, and rate-limit handling."""

from __future__ import annotations

import asyncio
import logging
import random
import threading
import time
from collections.abc import Collection

import httpx

_LOG = logging.getLogger(__name__)

DEFAULT_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})


class _RetryPolicy:
    def __init__(
        self,
        *,
        max_retries: int,
        backoff_cap: float,
        retryable_status_codes: Collection[int],
    ) -> None:
        self._max_retries = max_retries
        self._backoff_cap = backoff_cap
        self._retryable_status_codes = frozenset(retryable_status_codes)

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    def _backoff_seconds(self, attempt: int) -> float:
        seconds = min(self._backoff_cap, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying content API request (attempt %d) in %.2fs", attempt + 1, seconds)
        return seconds


class RetryingTransport(_RetryPolicy, httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with automatic retry on transient failures.

    - Exponential backoff with jitter, capped at *backoff_cap* seconds.
    - HTTP 429 pauses **all** requests sharing this transport until the
      ``Retry-After`` delay has passed.
    - Other retryable statuses honour ``Retry-After`` before backing off.
    - Transport-level errors (connection reset, timeouts) are retried; the last
      one is re-raised once retries are exhausted.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        backoff_cap: float = 4.0,
        retryable_status_codes: Collection[int] = DEFAULT_RETRYABLE_STATUS_CODES,
    ) -> None:
        super().__init__(
            max_retries=max_retries,
            backoff_cap=backoff_cap,
            retryable_status_codes=retryable_status_codes,
        )
        self._transport = transport or httpx.AsyncHTTPTransport()

        self._rate_limit_lock = asyncio.Lock()
        self._rate_limit_clear = asyncio.Event()
        self._rate_limit_clear.set()
        self._rate_limit_pause_until = 0.0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            await self._rate_limit_clear.wait()
            exhausted = attempt >= self._max_retries

            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError:
                if exhausted:
                    raise
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in self._retryable_status_codes or exhausted:
                return response

            retry_after = self._parse_retry_after(response)
            await response.aclose()
            if response.status_code == 429:
                await self._apply_rate_limit_pause(retry_after)
            elif retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _apply_rate_limit_pause(self, retry_after: float) -> None:
        now = time.monotonic()
        async with self._rate_limit_lock:
            until = now + max(0.0, retry_after)
            if until <= self._rate_limit_pause_until:
                return
            self._rate_limit_pause_until = until
            self._rate_limit_clear.clear()

        await asyncio.sleep(max(0.0, self._rate_limit_pause_until - time.monotonic()))

        async with self._rate_limit_lock:
            if time.monotonic() >= self._rate_limit_pause_until:
                self._rate_limit_clear.set()

    async def _sleep_backoff(self, attempt: int) -> None:
        await asyncio.sleep(self._backoff_seconds(attempt))


class SyncRetryingTransport(_RetryPolicy, httpx.BaseTransport):
    """Blocking counterpart of :class:`RetryingTransport` for ``httpx.Client``.

    A 429 response pushes back every request sharing this transport, across
    threads, until its ``Retry-After`` delay has passed.
    """

    def __init__(
        self,
        *,
        transport: httpx.BaseTransport | None = None,
        max_retries: int = 3,
        backoff_cap: float = 4.0,
        retryable_status_codes: Collection[int] = DEFAULT_RETRYABLE_STATUS_CODES,
    ) -> None:
        super().__init__(
            max_retries=max_retries,
            backoff_cap=backoff_cap,
            retryable_status_codes=retryable_status_codes,
        )
        self._transport = transport or httpx.HTTPTransport()

        self._rate_limit_lock = threading.Lock()
        self._rate_limit_pause_until = 0.0

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            self._wait_for_rate_limit()
            exhausted = attempt >= self._max_retries

            try:
                response = self._transport.handle_request(request)
            except httpx.TransportError:
                if exhausted:
                    raise
                self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in self._retryable_status_codes or exhausted:
                return response

            retry_after = self._parse_retry_after(response)
            response.close()
            if response.status_code == 429:
                self._extend_rate_limit_pause(retry_after)
            elif retry_after > 0:
                time.sleep(retry_after)
            self._sleep_backoff(attempt)
            attempt += 1

    def close(self) -> None:
        self._transport.close()

    def _extend_rate_limit_pause(self, retry_after: float) -> None:
        until = time.monotonic() + max(0.0, retry_after)
        with self._rate_limit_lock:
            self._rate_limit_pause_until = max(self._rate_limit_pause_until, until)

    def _wait_for_rate_limit(self) -> None:
        with self._rate_limit_lock:
            remaining = self._rate_limit_pause_until - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)

    def _sleep_backoff(self, attempt: int) -> None:
        time.sleep(self._backoff_seconds(attempt))
