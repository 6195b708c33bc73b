"""Service layer for the Brizo API.

Provides service classes that encapsulate Brizo REST API operations.
"""

from __future__ import annotations

from .base import BaseService
from .files import FileService
from .folders import FolderService
from .metrics import MetricsService
from .s3credentials import S3CredentialService
from .uploads import UploadService

__all__ = [
    "BaseService",
    "FileService",
    "FolderService",
    "MetricsService",
    "S3CredentialService",
    "UploadService",
]
