"""Usage metrics models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseModel


class Metrics(BaseModel):
    """Account usage metrics."""

    storage_used: Optional[str] = Field(None, alias="storageUsed")
    storage_used_raw: int = Field(0, alias="storageUsedRaw")
    storage_limit: Optional[str] = Field(None, alias="storageLimit")
    storage_limit_raw: int = Field(0, alias="storageLimitRaw")
    api_requests: int = Field(0, alias="apiRequests")
    api_requests_limit: int = Field(0, alias="apiRequestsLimit")
    show_api_requests_card: bool = Field(False, alias="showApiRequestsCard")
    total_uploads: int = Field(0, alias="totalUploads")
    files_stored: int = Field(0, alias="filesStored")


class StorageUsage(BaseModel):
    """Storage used against the account limit."""

    used: int
    used_formatted: Optional[str] = None
    limit: int
    limit_formatted: Optional[str] = None
    percentage: int


class ApiRequestsUsage(BaseModel):
    """API requests made against the account limit."""

    used: int
    limit: int
    percentage: int
    tracked: bool


class UploadStats(BaseModel):
    """Upload counters."""

    total_uploads: int
    files_stored: int
