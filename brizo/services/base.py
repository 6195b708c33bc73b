"""Base service with common methods for all Brizo services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from brizo.core.exceptions import validation_error

if TYPE_CHECKING:
    from brizo.core.client import ApiResponse, BrizoHttpClient


class BaseService:
    """Base service class with common functionality."""

    def __init__(self, client: BrizoHttpClient) -> None:
        """Initialize service with HTTP transport.

        Args:
            client: BrizoHttpClient instance
        """
        self.client = client

    async def _get(self, path: str, **kwargs: Any) -> Any:
        """Execute GET request and return the response envelope.

        Args:
            path: API endpoint path
            **kwargs: Additional request parameters

        Returns:
            Parsed JSON response body

        Raises:
            BrizoError: Classified error for non-2xx responses
        """
        resp = await self.client.get(path, **kwargs)
        return resp.raise_for_status().data

    async def _post(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        """Execute POST request and return the response envelope."""
        resp = await self.client.post(path, body, **kwargs)
        return resp.raise_for_status().data

    async def _patch(self, path: str, body: Any | None = None, **kwargs: Any) -> Any:
        """Execute PATCH request and return the response envelope."""
        resp = await self.client.patch(path, body, **kwargs)
        return resp.raise_for_status().data

    async def _delete(self, path: str, **kwargs: Any) -> Any:
        """Execute DELETE request and return the response envelope."""
        resp = await self.client.delete(path, **kwargs)
        return resp.raise_for_status().data

    async def _request(self, method: str, path: str, **kwargs: Any) -> ApiResponse:
        """Execute a request and return the full response after status checks."""
        resp = await self.client.request(method, path, **kwargs)
        return resp.raise_for_status()

    @staticmethod
    def _unwrap(envelope: Any) -> Any:
        """Extract the ``data`` member from a ``{status, data}`` envelope."""
        if isinstance(envelope, dict) and "data" in envelope:
            return envelope["data"]
        return envelope

    @staticmethod
    def _require(value: str | None, name: str) -> str:
        """Validate a required identifier before any request is made.

        Raises:
            BrizoError: VALIDATION kind if the value is empty
        """
        if not value:
            raise validation_error(f"{name} is required")
        return value

    def _build_path(self, *parts: str) -> str:
        """Build API path from parts.

        Args:
            *parts: Path segments

        Returns:
            Joined path string
        """
        return "/" + "/".join(p.strip("/") for p in parts if p)
