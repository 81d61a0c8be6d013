"""Thin synchronous HTTP client for the OSM API 0.6."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from hydrantsync.contracts.exceptions import AuthenticationError, ProviderError
from hydrantsync.providers.osm._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_XML_CONTENT_TYPE = "text/xml; charset=utf-8"
_DEBUG_BODY_LIMIT = 1024


class OsmClient:
    """Issues requests against the OSM API and maps failures to provider errors.

    Every non-2xx response raises; the message carries status and body.
    """

    def __init__(
        self,
        *,
        api_url: str,
        username: str,
        password: str,
        user_agent: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=api_url,
            auth=httpx.BasicAuth(username, password),
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=RetryingTransport(transport=transport, max_retries=max_retries),
        )

    def close(self) -> None:
        self._http.close()

    def get(self, path: str, *, params: dict[str, Any] | None = None) -> str:
        return self._request("GET", path, params=params)

    def put(self, path: str, body: str) -> str:
        return self._request("PUT", path, content=body.encode("utf-8"), headers={"Content-Type": _XML_CONTENT_TYPE})

    def _request(self, method: str, path: str, **kwargs: Any) -> str:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ProviderError(f"OSM API request failed: {method} {path}: {exc}") from exc

        self._log_exchange(response)

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"OSM API rejected the credentials ({response.status_code})",
                status_code=response.status_code,
                body=response.text,
            )
        if not response.is_success:
            raise ProviderError(
                f"OSM API responded with status code {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.text

    @staticmethod
    def _log_exchange(response: httpx.Response) -> None:
        if not _LOG.isEnabledFor(logging.DEBUG):
            return
        request = response.request
        request_body = request.content.decode("utf-8", errors="replace")
        _LOG.debug(
            "%s %s -> %d\n%s\n---\n%s",
            request.method,
            request.url,
            response.status_code,
            request_body[:_DEBUG_BODY_LIMIT],
            response.text[:_DEBUG_BODY_LIMIT],
        )
