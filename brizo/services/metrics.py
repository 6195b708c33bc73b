"""Metrics service for account usage statistics."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Optional

from brizo.models.metrics import ApiRequestsUsage, Metrics, StorageUsage, UploadStats

from .base import BaseService

if TYPE_CHECKING:
    from brizo.core.client import BrizoHttpClient

# Seconds a metrics response is reused
METRICS_CACHE_TTL = 5.0


def _percentage(used: int, limit: int) -> int:
    if not limit:
        return 0
    return round(used / limit * 100)


class MetricsService(BaseService):
    """Service for usage metrics, with a short-lived cache."""

    def __init__(self, client: BrizoHttpClient, cache_ttl: float = METRICS_CACHE_TTL) -> None:
        super().__init__(client)
        self.cache_ttl = cache_ttl
        self._cache: Optional[Metrics] = None
        self._cache_expiry = 0.0

    def invalidate_cache(self) -> None:
        """Drop the cached metrics."""
        self._cache = None
        self._cache_expiry = 0.0

    async def get(self, use_cache: bool = True) -> Metrics:
        """Get usage metrics.

        Args:
            use_cache: Reuse a response younger than ``cache_ttl`` seconds.

        Returns:
            Metrics for the account.
        """
        now = time.monotonic()
        if use_cache and self._cache is not None and now < self._cache_expiry:
            return self._cache

        envelope = await self._get("/v1/metrics")
        self._cache = Metrics.model_validate(self._unwrap(envelope) or {})
        self._cache_expiry = now + self.cache_ttl
        return self._cache

    async def get_storage_usage(self) -> StorageUsage:
        """Get storage used against the account limit."""
        metrics = await self.get()
        return StorageUsage(
            used=metrics.storage_used_raw,
            used_formatted=metrics.storage_used,
            limit=metrics.storage_limit_raw,
            limit_formatted=metrics.storage_limit,
            percentage=_percentage(metrics.storage_used_raw, metrics.storage_limit_raw),
        )

    async def get_api_requests_usage(self) -> ApiRequestsUsage:
        """Get API requests made against the account limit."""
        metrics = await self.get()
        return ApiRequestsUsage(
            used=metrics.api_requests,
            limit=metrics.api_requests_limit,
            percentage=_percentage(metrics.api_requests, metrics.api_requests_limit),
            tracked=metrics.show_api_requests_card,
        )

    async def get_upload_stats(self) -> UploadStats:
        """Get upload counters."""
        metrics = await self.get()
        return UploadStats(total_uploads=metrics.total_uploads, files_stored=metrics.files_stored)
