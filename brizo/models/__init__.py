"""Data models for brizo.

Provides Pydantic models for backend records and dataclasses for upload
requests and batch outcomes.
"""

from __future__ import annotations

from .base import BaseModel
from .file import File, FileList
from .folder import (
    Folder,
    FolderList,
    FolderPathSegment,
    FolderTree,
    FolderTreeError,
    FolderWithPath,
)
from .metrics import ApiRequestsUsage, Metrics, StorageUsage, UploadStats
from .s3credential import S3Config, S3ConnectionInfo, S3Credential
from .upload import (
    BatchFailure,
    BatchOutcome,
    BatchSuccess,
    ResolvedSource,
    TransferGrant,
    UploadRequest,
)

__all__ = [
    # Base
    "BaseModel",
    # Files
    "File",
    "FileList",
    # Folders
    "Folder",
    "FolderList",
    "FolderPathSegment",
    "FolderTree",
    "FolderTreeError",
    "FolderWithPath",
    # Metrics
    "Metrics",
    "StorageUsage",
    "ApiRequestsUsage",
    "UploadStats",
    # S3
    "S3Credential",
    "S3ConnectionInfo",
    "S3Config",
    # Uploads
    "UploadRequest",
    "ResolvedSource",
    "TransferGrant",
    "BatchSuccess",
    "BatchFailure",
    "BatchOutcome",
]
