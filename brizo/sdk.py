"""High-level entry point bundling every Brizo service."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import httpx

from brizo.core.client import API_BASE_URL, DEFAULT_TIMEOUT, BrizoHttpClient
from brizo.core.config import Config, get_api_key
from brizo.core.exceptions import validation_error
from brizo.models.file import File, FileList
from brizo.models.folder import FolderList
from brizo.models.upload import UploadRequest, UploadSource
from brizo.services import (
    FileService,
    FolderService,
    MetricsService,
    S3CredentialService,
)
from brizo.uploaders.constants import ROOT_FOLDER_ID

logger = logging.getLogger(__name__)

HEALTH_PATH = "/health"


def mask_api_key(api_key: str) -> str:
    """Hide all but the ends of a key, e.g. ``brz_...9f3a``."""
    if len(api_key) <= 8:
        return "****"
    return f"{api_key[:4]}...{api_key[-4:]}"


class Brizo:
    """Client for the Brizo file storage API.

    Example:
        async with Brizo(api_key) as brizo:
            file = await brizo.upload("report.pdf")
            outcome = await brizo.uploads.upload_batch(requests, concurrency=5)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: Account API key.
            base_url: API root URL.
            timeout: Default request timeout in seconds.
            headers: Extra headers sent with every API request.
            transport: Custom httpx transport (used by tests).

        Raises:
            BrizoError: VALIDATION if the API key is missing.
        """
        if not api_key:
            raise validation_error("API key is required")
        self.base_url = base_url
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.transport = transport
        self._build(api_key)

    def _build(self, api_key: str) -> None:
        self.client = BrizoHttpClient(
            api_key=api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
        )
        self.files = FileService(self.client)
        self.uploads = self.files.uploads
        self.folders = FolderService(self.client)
        self.metrics = MetricsService(self.client)
        self.s3_credentials = S3CredentialService(self.client)

    @classmethod
    def from_profile(
        cls,
        profile: Optional[str] = None,
        *,
        config_path: Optional[Path] = None,
        api_key: Optional[str] = None,
        **kwargs: Any,
    ) -> Brizo:
        """Create a client from a config profile and ``BRIZO_API_KEY``."""
        config = Config.load(config_path)
        settings = config.get_profile(profile)
        return cls(
            api_key or get_api_key() or "",
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    # =========================================================================
    # API Key
    # =========================================================================

    def get_api_key(self) -> str:
        """Return the current API key, masked."""
        return mask_api_key(self.client.api_key)

    async def set_api_key(self, api_key: str) -> None:
        """Replace the API key, rebuilding the transport and services.

        Raises:
            BrizoError: VALIDATION if the API key is missing.
        """
        if not api_key:
            raise validation_error("API key is required")
        await self.client.aclose()
        self._build(api_key)
        logger.debug("API key replaced")

    # =========================================================================
    # Shortcuts
    # =========================================================================

    async def health_check(self) -> Any:
        """Check that the API is reachable."""
        resp = await self.client.get(HEALTH_PATH)
        return resp.raise_for_status().data

    async def upload(
        self,
        source: UploadSource,
        filename: Optional[str] = None,
        folder_id: Optional[str] = None,
    ) -> File:
        """Upload one file to a folder (root by default)."""
        if filename is None and isinstance(source, (str, os.PathLike)):
            filename = Path(source).name
        return await self.uploads.upload(
            UploadRequest(source=source, filename=filename, folder_id=folder_id or ROOT_FOLDER_ID)
        )

    async def list_files(self, **kwargs: Any) -> FileList:
        return await self.files.list(**kwargs)

    async def list_folders(self, **kwargs: Any) -> FolderList:
        return await self.folders.list(**kwargs)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> Brizo:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
