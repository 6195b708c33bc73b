"""Upload request, transfer grant, and batch outcome models."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import httpx
from pydantic import AliasChoices, ConfigDict, Field, field_validator
from pydantic import BaseModel as PydanticBaseModel

from brizo.core.exceptions import BrizoError, ErrorKind

from .file import File

ProgressSink = Callable[[int], None]
UploadSource = Union[str, os.PathLike, bytes, bytearray]


# =============================================================================
# Upload Request
# =============================================================================


@dataclass(frozen=True)
class UploadRequest:
    """A single file to upload.

    Attributes:
        source: Path to a local file, or the file contents as bytes.
        filename: Name to store the file under. Required for byte sources;
            defaults to the path's base name otherwise.
        content_type: MIME type. Inferred from the filename when omitted.
        folder_id: Target folder ID. Empty string targets the root folder.
        on_progress: Called with 0 before the transfer and 100 after it.
    """

    source: UploadSource
    filename: Optional[str] = None
    content_type: Optional[str] = None
    folder_id: str = ""
    on_progress: Optional[ProgressSink] = field(default=None, compare=False)

    @property
    def is_buffer(self) -> bool:
        """Check if the source is in-memory bytes."""
        return isinstance(self.source, (bytes, bytearray))

    @property
    def label(self) -> str:
        """Name used to report this request in batch outcomes."""
        if self.filename:
            return self.filename
        if self.is_buffer:
            return "<bytes>"
        return os.fspath(self.source) if self.source is not None else ""


@dataclass(frozen=True)
class ResolvedSource:
    """Upload source after local validation."""

    content: bytes
    filename: str
    size: int
    content_type: str


# =============================================================================
# Transfer Grant
# =============================================================================


class TransferGrant(PydanticBaseModel):
    """Single-use authorization to PUT bytes to storage."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    upload_url: str = Field(..., validation_alias=AliasChoices("url", "uploadUrl", "upload_url"))
    transfer_key: str = Field(..., validation_alias=AliasChoices("key", "transferKey", "transfer_key"))
    extra_headers: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("headers", "extraHeaders", "extra_headers"),
    )

    @field_validator("extra_headers", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def transfer_headers(self, content_type: str, size: int) -> httpx.Headers:
        """Headers for the byte transfer; grant headers win on conflict.

        Names compare case-insensitively, so a grant's ``content-type``
        replaces the default ``Content-Type`` instead of doubling it.
        """
        headers = httpx.Headers({"Content-Type": content_type, "Content-Length": str(size)})
        for name, value in self.extra_headers.items():
            headers[name] = str(value)
        return headers


# =============================================================================
# Batch Outcome
# =============================================================================


@dataclass(frozen=True)
class BatchSuccess:
    """A committed file tagged with the request that produced it."""

    file: File
    label: str


@dataclass(frozen=True)
class BatchFailure:
    """A failed request and why it failed."""

    label: str
    message: str
    kind: ErrorKind = ErrorKind.GENERIC

    @classmethod
    def from_error(cls, label: str, error: BrizoError) -> BatchFailure:
        """Build from a raised error."""
        return cls(label=label, message=error.message, kind=error.kind)


@dataclass
class BatchOutcome:
    """Per-item results of a batch upload, in completion order."""

    successful: list[BatchSuccess] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of requests processed."""
        return len(self.successful) + len(self.failed)

    @property
    def success(self) -> bool:
        """Check if every request succeeded."""
        return not self.failed

    @property
    def success_rate(self) -> float:
        """Calculate success rate percentage."""
        if self.total == 0:
            return 100.0
        return (len(self.successful) / self.total) * 100

    @property
    def files(self) -> list[File]:
        """Committed files in completion order."""
        return [entry.file for entry in self.successful]
