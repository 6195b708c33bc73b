"""Upload service for Brizo file uploads.

A single upload runs three strictly sequential steps:

1. presign: ask the API for a single-use transfer grant
2. transfer: PUT the bytes to the grant's URL
3. commit: register the transferred object as a file record

Nothing is retried. ``upload_batch`` runs uploads in fixed-size groups,
waiting for each group to drain before starting the next, and records
per-item failures instead of raising them.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from brizo.core.exceptions import (
    BrizoError,
    ErrorKind,
    upload_error,
    validation_error,
)
from brizo.core.logging import log_context
from brizo.models.file import File
from brizo.models.upload import (
    BatchFailure,
    BatchOutcome,
    BatchSuccess,
    ResolvedSource,
    TransferGrant,
    UploadRequest,
)
from brizo.uploaders.common import percent_complete, split_into_batches
from brizo.uploaders.constants import (
    COMPLETE_PATH,
    DEFAULT_CONCURRENCY,
    PRESIGN_PATH,
    PROGRESS_DONE,
    PROGRESS_START,
    ROOT_FOLDER_ID,
)
from brizo.uploaders.mimetypes import get_mime_type

from .base import BaseService

logger = logging.getLogger(__name__)

ItemCallback = Callable[[File | None, BrizoError | None], None]
BatchProgressCallback = Callable[[int, int, int], None]


def _label(request: Any) -> str:
    if isinstance(request, UploadRequest):
        return request.label
    return repr(request)


class UploadService(BaseService):
    """Service for presigned uploads."""

    # =========================================================================
    # Single Upload
    # =========================================================================

    async def upload(
        self,
        request: UploadRequest | None,
        *,
        timeout: float | None = None,
    ) -> File:
        """Upload one file and return its committed record.

        Args:
            request: What to upload and where.
            timeout: Per-request timeout override in seconds.

        Returns:
            Committed file record.

        Raises:
            BrizoError: VALIDATION before any request for bad input; the
                classified API error if presign or commit fails; UPLOAD if
                the byte transfer fails.
        """
        source = await self.resolve_source(request)
        folder_id = request.folder_id or ROOT_FOLDER_ID  # type: ignore[union-attr]

        with log_context(
            "upload",
            logger,
            filename=source.filename,
            size=source.size,
            content_type=source.content_type,
        ) as ctx:
            grant = await self.request_grant(source, folder_id, timeout=timeout)
            ctx.debug("Transfer grant issued for key %s", grant.transfer_key)
            await self.transfer(grant, source, request.on_progress, timeout=timeout)
            return await self.commit(grant, source, folder_id, timeout=timeout)

    async def resolve_source(self, request: UploadRequest | None) -> ResolvedSource:
        """Validate a request and load its bytes.

        Args:
            request: Upload request.

        Returns:
            Bytes, filename, size, and content type to upload.

        Raises:
            BrizoError: VALIDATION if the source is missing, empty, unreadable,
                or is bytes without a filename.
        """
        if request is None or request.source is None:
            raise validation_error("File is required")

        source = request.source
        if isinstance(source, (bytes, bytearray)):
            if not request.filename:
                raise validation_error("Filename is required when uploading bytes")
            content = bytes(source)
            filename = request.filename
        elif isinstance(source, (str, os.PathLike)):
            raw_path = os.fsdecode(source)
            if not raw_path.strip():
                raise validation_error("File path cannot be empty")

            path = Path(raw_path)
            if not path.exists():
                raise validation_error(f"File not found: {raw_path}", {"path": raw_path})
            if not path.is_file():
                raise validation_error(f"Not a file: {raw_path}", {"path": raw_path})

            try:
                content = await asyncio.to_thread(path.read_bytes)
            except OSError as e:
                raise validation_error(f"Cannot read file: {raw_path}: {e}", {"path": raw_path}) from e
            filename = request.filename or path.name
        else:
            raise validation_error("File must be a file path or bytes")

        return ResolvedSource(
            content=content,
            filename=filename,
            size=len(content),
            content_type=request.content_type or get_mime_type(filename),
        )

    async def request_grant(
        self,
        source: ResolvedSource,
        folder_id: str = "",
        *,
        timeout: float | None = None,
    ) -> TransferGrant:
        """Ask the API for a transfer grant.

        Raises:
            BrizoError: Classified error for non-2xx responses; GENERIC if the
                response does not contain a grant.
        """
        envelope = await self._post(
            PRESIGN_PATH,
            {
                "filename": source.filename,
                "fileType": source.content_type,
                "size": source.size,
                "folderId": folder_id,
            },
            timeout=timeout,
        )

        try:
            return TransferGrant.model_validate(self._unwrap(envelope))
        except ValidationError as e:
            raise BrizoError(
                ErrorKind.GENERIC,
                "Malformed presign response",
                details={"filename": source.filename, "errors": e.error_count()},
            ) from e

    async def transfer(
        self,
        grant: TransferGrant,
        source: ResolvedSource,
        on_progress: Callable[[int], None] | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """PUT the bytes to the grant's URL.

        The progress sink sees 0 before the transfer and 100 after it succeeds.
        A sink that raises fails the transfer like any other fault.

        Raises:
            BrizoError: UPLOAD kind for any transfer fault, carrying filename,
                size, and transfer key.
        """

        def failed(reason: str, status_code: int | None = None) -> BrizoError:
            logger.error("Transfer of %s failed: %s", source.filename, reason)
            return upload_error(
                f"Failed to upload file: {reason}",
                filename=source.filename,
                size=source.size,
                transfer_key=grant.transfer_key,
                status_code=status_code,
            )

        try:
            if on_progress:
                on_progress(PROGRESS_START)
            resp = await self.client.put_raw(
                grant.upload_url,
                source.content,
                grant.transfer_headers(source.content_type, source.size),
                timeout=timeout,
            )
        except BrizoError as e:
            raise failed(e.message) from e
        except Exception as e:
            raise failed(str(e) or type(e).__name__) from e

        if not resp.ok:
            raise failed(f"Upload failed with status {resp.status}", resp.status)

        if on_progress:
            try:
                on_progress(PROGRESS_DONE)
            except Exception as e:
                raise failed(str(e) or type(e).__name__) from e

    async def commit(
        self,
        grant: TransferGrant,
        source: ResolvedSource,
        folder_id: str = "",
        *,
        timeout: float | None = None,
    ) -> File:
        """Register a transferred object as a file record.

        Raises:
            BrizoError: Classified error for non-2xx responses; GENERIC if the
                response does not contain a file record.
        """
        envelope = await self._post(
            COMPLETE_PATH,
            {
                "key": grant.transfer_key,
                "filename": source.filename,
                "size": source.size,
                "type": source.content_type,
                "folderId": folder_id,
            },
            timeout=timeout,
        )

        payload = self._unwrap(envelope)
        if isinstance(payload, dict) and isinstance(payload.get("file"), dict):
            payload = payload["file"]

        try:
            return File.model_validate(payload)
        except ValidationError as e:
            raise BrizoError(
                ErrorKind.GENERIC,
                "Malformed upload completion response",
                details={"filename": source.filename, "transfer_key": grant.transfer_key},
            ) from e

    # =========================================================================
    # Batch Upload
    # =========================================================================

    async def upload_batch(
        self,
        requests: Iterable[UploadRequest],
        concurrency: int = DEFAULT_CONCURRENCY,
        on_item_complete: ItemCallback | None = None,
        on_progress: BatchProgressCallback | None = None,
        *,
        timeout: float | None = None,
    ) -> BatchOutcome:
        """Upload many files, ``concurrency`` at a time.

        Requests are split into consecutive groups of ``concurrency``. All
        uploads in a group run together and the next group starts only once
        every upload in the current one has settled. A failed item never
        affects the others.

        Args:
            requests: Upload requests in submission order.
            concurrency: Group size (peak in-flight uploads).
            on_item_complete: Called as ``(file, None)`` or ``(None, error)``
                right after each item settles.
            on_progress: Called as ``(percent, completed, total)`` after each
                item settles.
            timeout: Per-request timeout override in seconds.

        Returns:
            BatchOutcome with one entry per request, in completion order.

        Raises:
            BrizoError: VALIDATION if concurrency is below 1.
        """
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            raise validation_error(
                "Concurrency must be a positive integer", {"concurrency": concurrency}
            )

        pending = list(requests)
        total = len(pending)
        outcome = BatchOutcome()
        completed = 0

        async def run_one(request: UploadRequest) -> None:
            nonlocal completed
            label = _label(request)
            file: File | None = None
            error: BrizoError | None = None

            try:
                file = await self.upload(request, timeout=timeout)
            except BrizoError as e:
                error = e
            except Exception as e:
                logger.exception("Unexpected failure uploading %s", label)
                error = BrizoError(
                    ErrorKind.GENERIC,
                    str(e) or type(e).__name__,
                    details={"exception": type(e).__name__},
                )

            if error is not None:
                logger.warning("Upload of %s failed: %s", label, error.message)
                outcome.failed.append(BatchFailure.from_error(label, error))
            elif file is not None:
                outcome.successful.append(BatchSuccess(file=file, label=label))

            completed += 1
            if on_item_complete:
                on_item_complete(file, error)
            if on_progress:
                on_progress(percent_complete(completed, total), completed, total)

        with log_context("upload_batch", logger, total=total, concurrency=concurrency):
            for group in split_into_batches(pending, concurrency):
                await asyncio.gather(*(run_one(request) for request in group))

            logger.info(
                "Batch upload finished: %d succeeded, %d failed",
                len(outcome.successful),
                len(outcome.failed),
            )

        return outcome
