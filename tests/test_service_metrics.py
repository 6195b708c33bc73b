"""Unit tests for MetricsService and S3CredentialService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from brizo.core.client import ApiResponse
from brizo.core.exceptions import BrizoError, ErrorKind
from brizo.services.metrics import MetricsService
from brizo.services.s3credentials import S3CredentialService

METRICS = {
    "storageUsed": "1.5 GB",
    "storageUsedRaw": 1_610_612_736,
    "storageLimit": "10 GB",
    "storageLimitRaw": 10_737_418_240,
    "apiRequests": 2500,
    "apiRequestsLimit": 10000,
    "showApiRequestsCard": True,
    "totalUploads": 42,
    "filesStored": 40,
}


def _resp(status: int, data: object) -> ApiResponse:
    return ApiResponse(status=status, headers=httpx.Headers({}), data=data)


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock BrizoHttpClient."""
    client = MagicMock()
    client.get = AsyncMock(return_value=_resp(200, {"status": "success", "data": METRICS}))
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.delete = AsyncMock()
    return client


class TestMetricsService:
    """Tests for MetricsService."""

    async def test_get(self, mock_client: MagicMock):
        metrics = await MetricsService(mock_client).get()

        assert metrics.storage_used == "1.5 GB"
        assert metrics.total_uploads == 42
        mock_client.get.assert_awaited_once_with("/v1/metrics")

    async def test_cached_within_ttl(self, mock_client: MagicMock):
        service = MetricsService(mock_client)

        with patch("brizo.services.metrics.time.monotonic", side_effect=[100.0, 103.0]):
            await service.get()
            await service.get()

        assert mock_client.get.await_count == 1

    async def test_refetched_after_ttl(self, mock_client: MagicMock):
        service = MetricsService(mock_client)

        with patch("brizo.services.metrics.time.monotonic", side_effect=[100.0, 105.5]):
            await service.get()
            await service.get()

        assert mock_client.get.await_count == 2

    async def test_bypass_and_invalidate(self, mock_client: MagicMock):
        service = MetricsService(mock_client)

        await service.get()
        await service.get(use_cache=False)
        service.invalidate_cache()
        await service.get()

        assert mock_client.get.await_count == 3

    async def test_storage_usage(self, mock_client: MagicMock):
        usage = await MetricsService(mock_client).get_storage_usage()

        assert usage.used == 1_610_612_736
        assert usage.used_formatted == "1.5 GB"
        assert usage.limit_formatted == "10 GB"
        assert usage.percentage == 15

    async def test_api_requests_usage(self, mock_client: MagicMock):
        usage = await MetricsService(mock_client).get_api_requests_usage()

        assert usage.percentage == 25
        assert usage.tracked is True

    async def test_zero_limit_percentage(self, mock_client: MagicMock):
        mock_client.get.return_value = _resp(200, {"data": {"storageUsedRaw": 500}})

        usage = await MetricsService(mock_client).get_storage_usage()

        assert usage.percentage == 0

    async def test_upload_stats(self, mock_client: MagicMock):
        stats = await MetricsService(mock_client).get_upload_stats()

        assert stats.total_uploads == 42
        assert stats.files_stored == 40


CREDENTIAL = {
    "id": "cred1",
    "name": "backup",
    "accessKeyId": "AKIA123",
    "created": "2024-05-01",
}


class TestS3CredentialService:
    """Tests for S3CredentialService."""

    async def test_list(self, mock_client: MagicMock):
        mock_client.get.return_value = _resp(200, {"data": [CREDENTIAL]})

        creds = await S3CredentialService(mock_client).list()

        assert creds[0].access_key_id == "AKIA123"
        assert creds[0].secret_access_key is None
        mock_client.get.assert_awaited_once_with("/v1/s3-credentials")

    async def test_create_default_name(self, mock_client: MagicMock):
        mock_client.post.return_value = _resp(
            200, {"data": {**CREDENTIAL, "name": "Unnamed", "secretAccessKey": "s3cr3t"}}
        )

        cred = await S3CredentialService(mock_client).create()

        assert cred.secret_access_key == "s3cr3t"
        mock_client.post.assert_awaited_once_with("/v1/s3-credentials", {"name": "Unnamed"})

    async def test_update_requires_name(self, mock_client: MagicMock):
        with pytest.raises(BrizoError) as exc_info:
            await S3CredentialService(mock_client).update("cred1", "")

        assert exc_info.value.kind is ErrorKind.VALIDATION
        mock_client.patch.assert_not_called()

    async def test_delete(self, mock_client: MagicMock):
        mock_client.delete.return_value = _resp(200, {"status": "success"})

        await S3CredentialService(mock_client).delete("cred1")

        mock_client.delete.assert_awaited_once_with("/v1/s3-credentials/cred1")

    async def test_s3_config_defaults(self, mock_client: MagicMock):
        mock_client.get.return_value = _resp(
            200, {"data": {"endpoint": "https://s3.brizo.test", "bucket": "user-1"}}
        )

        config = await S3CredentialService(mock_client).get_s3_config("AKIA123", "s3cr3t")

        assert config.endpoint == "https://s3.brizo.test"
        assert config.region == "auto"
        assert config.force_path_style is True
        assert config.bucket == "user-1"
        mock_client.get.assert_awaited_once_with("/v1/s3-credentials/connection-info")

    async def test_s3_config_from_connection_info(self, mock_client: MagicMock):
        mock_client.get.return_value = _resp(
            200,
            {"data": {"endpoint": "https://s3.brizo.test", "region": "eu-1", "forcePathStyle": False}},
        )

        config = await S3CredentialService(mock_client).get_s3_config("AKIA123", "s3cr3t")

        assert config.region == "eu-1"
        assert config.force_path_style is False

    async def test_s3_config_requires_keys(self, mock_client: MagicMock):
        with pytest.raises(BrizoError):
            await S3CredentialService(mock_client).get_s3_config("AKIA123", "")

        mock_client.get.assert_not_called()
