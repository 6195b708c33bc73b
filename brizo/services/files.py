"""File service for Brizo file operations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from brizo.core.exceptions import validation_error
from brizo.models.file import File, FileList
from brizo.models.upload import BatchOutcome, UploadRequest
from brizo.uploaders.constants import DEFAULT_CONCURRENCY

from .base import BaseService
from .uploads import BatchProgressCallback, ItemCallback, UploadService

if TYPE_CHECKING:
    from brizo.core.client import BrizoHttpClient

ROOT_FOLDER = "root"


class FileService(BaseService):
    """Service for listing, moving, deleting, and uploading files."""

    def __init__(self, client: BrizoHttpClient) -> None:
        super().__init__(client)
        self.uploads = UploadService(client)

    async def list(
        self,
        *,
        page: int = 1,
        per_page: int = 20,
        search: str | None = None,
        type: str | None = None,
        sort: str = "-created",
        folder_id: str | None = None,
    ) -> FileList:
        """List files with pagination and filtering.

        Args:
            page: Page number.
            per_page: Items per page (max 100).
            search: Filename search string.
            type: MIME type filter.
            sort: Sort order, e.g. ``-created``, ``name``, ``-size``.
            folder_id: Folder filter (``root`` for the root folder).

        Returns:
            One page of files.
        """
        envelope = await self._get(
            "/v1/files",
            query={
                "page": page or 1,
                "perPage": per_page or 20,
                "search": search,
                "type": type,
                "sort": sort or "-created",
                "folderId": folder_id,
            },
        )
        return FileList.model_validate(self._unwrap(envelope))

    async def get(self, file_id: str) -> File:
        """Get file information by ID."""
        file_id = self._require(file_id, "File ID")
        envelope = await self._get(self._build_path("v1/files", file_id))
        return File.model_validate(self._unwrap(envelope))

    async def delete(self, file_id: str) -> dict[str, Any]:
        """Delete a file.

        Returns:
            Deletion result (``status`` and ``message``).
        """
        file_id = self._require(file_id, "File ID")
        return await self._delete(self._build_path("v1/files", file_id))

    async def move(self, file_id: str, folder_id: str | None = None) -> File:
        """Move a file to another folder.

        Args:
            file_id: File ID.
            folder_id: Target folder ID; empty or None moves to the root.

        Returns:
            Updated file.
        """
        file_id = self._require(file_id, "File ID")
        envelope = await self._patch(
            self._build_path("v1/files", file_id, "move"),
            {"folderId": folder_id or ROOT_FOLDER},
        )
        return File.model_validate(self._unwrap(envelope))

    async def get_download_url(self, file_id: str) -> str:
        """Get a signed download URL for a file.

        Raises:
            BrizoError: VALIDATION if the API did not redirect.
        """
        file_id = self._require(file_id, "File ID")
        resp = await self._request(
            "GET",
            self._build_path("v1/files", file_id, "download"),
            follow_redirects=False,
        )
        location = resp.headers.get("location")
        if location:
            return location
        raise validation_error("Failed to get download URL")

    @staticmethod
    def get_share_url(file: File | dict[str, Any] | None) -> str | None:
        """Return the public share URL of a file, if it has one."""
        if file is None:
            return None
        if isinstance(file, dict):
            return file.get("shareUrl") or None
        return file.share_url or None

    # =========================================================================
    # Uploads
    # =========================================================================

    async def upload(
        self,
        request: UploadRequest | None = None,
        *,
        timeout: float | None = None,
        **options: Any,
    ) -> File:
        """Upload one file.

        Accepts an ``UploadRequest`` or its fields as keyword arguments::

            await files.upload(source="photo.jpg", folder_id="abc")
        """
        if request is None and options:
            request = UploadRequest(**options)
        return await self.uploads.upload(request, timeout=timeout)

    async def upload_batch(
        self,
        requests: Iterable[UploadRequest],
        concurrency: int = DEFAULT_CONCURRENCY,
        on_item_complete: ItemCallback | None = None,
        on_progress: BatchProgressCallback | None = None,
        *,
        timeout: float | None = None,
    ) -> BatchOutcome:
        """Upload many files; see ``UploadService.upload_batch``."""
        return await self.uploads.upload_batch(
            requests,
            concurrency,
            on_item_complete,
            on_progress,
            timeout=timeout,
        )
