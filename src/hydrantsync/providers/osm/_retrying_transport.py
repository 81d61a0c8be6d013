"""httpx transport wrapper with retry, backoff, and rate-limit handling."""

from __future__ import annotations

import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

# Only these methods are retried after the server has seen the request.
_SAFE_METHODS = frozenset({"GET", "HEAD"})

# Failures where the request never reached the server.
_CONNECT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class RetryingTransport(httpx.BaseTransport):
    """Wraps an httpx transport with automatic retry on transient failures.

    - Retry with exponential backoff + jitter (up to *max_retries* attempts)
    - Honour ``Retry-After`` on 429 and 502 / 503 / 504 responses
    - Writes (``PUT``) are only retried when the connection could not be
      established, so a node is never created twice
    """

    def __init__(
        self,
        *,
        transport: httpx.BaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.HTTPTransport()
        self._max_retries = max_retries

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        for attempt in range(self._max_retries + 1):
            try:
                response = self._transport.handle_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries or not self._can_retry_error(request, exc):
                    raise
                self._sleep_backoff(attempt)
                continue

            if (
                response.status_code in _RETRYABLE_STATUS_CODES
                and request.method in _SAFE_METHODS
                and attempt < self._max_retries
            ):
                retry_after = self._parse_retry_after(response)
                response.close()
                if retry_after > 0:
                    time.sleep(retry_after)
                self._sleep_backoff(attempt)
                continue

            return response

        raise httpx.TransportError("Request failed after retries")  # pragma: no cover

    def close(self) -> None:
        self._transport.close()

    @staticmethod
    def _can_retry_error(request: httpx.Request, exc: httpx.TransportError) -> bool:
        return request.method in _SAFE_METHODS or isinstance(exc, _CONNECT_ERRORS)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0 if response.status_code == 429 else 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    @staticmethod
    def _sleep_backoff(attempt: int) -> None:
        seconds = min(4.0, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying OSM request (attempt %d)", attempt + 1)
        time.sleep(seconds)
