"""Async HTTP transport for the Brizo REST API.

Performs single request/response exchanges. HTTP-level failures (4xx/5xx) are
returned to the caller with their status. Faults below HTTP (connection,
decoding, redirect loops, malformed URLs) and timeouts are raised as
``BrizoError`` values.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from brizo.core.exceptions import classify, network_error, timeout_error

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

API_BASE_URL = "https://api.brizo-cloud.com"
DEFAULT_TIMEOUT = 30
API_KEY_HEADER = "X-API-Key"


# =============================================================================
# Responses
# =============================================================================


@dataclass
class ApiResponse:
    """Parsed response from an API endpoint."""

    status: int
    headers: httpx.Headers
    data: Any

    @property
    def ok(self) -> bool:
        """Check if the status is below 400."""
        return self.status < 400

    def raise_for_status(self) -> ApiResponse:
        """Raise the classified error for a failed response.

        Raises:
            BrizoError: If status is 400 or above.
        """
        if self.status >= 400:
            raise classify(self.status, self.data, self.headers)
        return self


@dataclass
class RawResponse:
    """Response from a raw byte transfer."""

    status: int
    headers: httpx.Headers
    content: bytes

    @property
    def ok(self) -> bool:
        """Check if the status is below 400."""
        return self.status < 400


def parse_body(text: str) -> Any:
    """Parse a response body as JSON, falling back to the raw text."""
    if not text:
        return {}
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


# =============================================================================
# BrizoHttpClient
# =============================================================================


@dataclass
class BrizoHttpClient:
    """HTTP transport for the Brizo API."""

    api_key: str
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)
    _client: httpx.AsyncClient | None = field(init=False, default=None, repr=False)
    _raw_client: httpx.AsyncClient | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalize URL."""
        self.base_url = self.base_url.rstrip("/")

    # =========================================================================
    # Client Management
    # =========================================================================

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every API request."""
        return {
            "Content-Type": "application/json",
            API_KEY_HEADER: self.api_key,
            **self.headers,
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the API client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.default_headers,
                follow_redirects=True,
                transport=self.transport,
            )
        return self._client

    def _get_raw_client(self) -> httpx.AsyncClient:
        """Get or create the client for transfer URLs (no API key)."""
        if self._raw_client is None:
            self._raw_client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._raw_client

    async def aclose(self) -> None:
        """Close the HTTP clients."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._raw_client is not None:
            await self._raw_client.aclose()
            self._raw_client = None

    async def __aenter__(self) -> BrizoHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        body: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        follow_redirects: bool | None = None,
    ) -> ApiResponse:
        """Execute a single API request.

        Args:
            method: HTTP method.
            path: API path.
            query: Query parameters (None and empty values are dropped).
            body: JSON body.
            headers: Additional headers.
            timeout: Request timeout override in seconds.
            follow_redirects: Redirect policy override.

        Returns:
            Parsed response, including 4xx/5xx responses.

        Raises:
            BrizoError: TIMEOUT or NETWORK kind on transport faults.
        """
        client = self._get_client()
        params = {k: str(v) for k, v in (query or {}).items() if v is not None and v != ""}
        request_timeout = timeout if timeout is not None else self.timeout

        extra: dict[str, Any] = {}
        if follow_redirects is not None:
            extra["follow_redirects"] = follow_redirects

        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = await client.request(
                method,
                path,
                params=params or None,
                json=body,
                headers=headers,
                timeout=request_timeout,
                **extra,
            )
        except httpx.TimeoutException as e:
            raise timeout_error(f"Request timeout after {request_timeout}s") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise network_error(f"Request failed: {e}") from e

        return ApiResponse(status=resp.status_code, headers=resp.headers, data=parse_body(resp.text))

    async def get(self, path: str, **kwargs: Any) -> ApiResponse:
        """GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, body: Any | None = None, **kwargs: Any) -> ApiResponse:
        """POST request."""
        return await self.request("POST", path, body=body, **kwargs)

    async def patch(self, path: str, body: Any | None = None, **kwargs: Any) -> ApiResponse:
        """PATCH request."""
        return await self.request("PATCH", path, body=body, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> ApiResponse:
        """DELETE request."""
        return await self.request("DELETE", path, **kwargs)

    async def put_raw(
        self,
        url: str,
        content: bytes,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """PUT raw bytes to an absolute URL.

        Args:
            url: Full transfer URL.
            content: Bytes to send.
            headers: Request headers.
            timeout: Request timeout override in seconds.

        Returns:
            Raw response, including 4xx/5xx responses.

        Raises:
            BrizoError: TIMEOUT or NETWORK kind on transport faults.
        """
        client = self._get_raw_client()
        request_timeout = timeout if timeout is not None else self.timeout

        try:
            resp = await client.put(
                url,
                content=content,
                headers=headers,
                timeout=request_timeout,
            )
        except httpx.TimeoutException as e:
            raise timeout_error(f"Upload timeout after {request_timeout}s") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise network_error(f"Upload failed: {e}") from e

        return RawResponse(status=resp.status_code, headers=resp.headers, content=resp.content)
