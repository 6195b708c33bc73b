"""S3-compatible credential models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseModel


class S3Credential(BaseModel):
    """S3 access key (secret only present right after creation)."""

    id: str
    access_key_id: str = Field(..., alias="accessKeyId")
    secret_access_key: Optional[str] = Field(None, alias="secretAccessKey")
    name: str = "Unnamed"
    created: Optional[str] = None
    last_used: Optional[str] = Field(None, alias="lastUsed")
    request_count: Optional[int] = Field(None, alias="requestCount")


class S3ConnectionInfo(BaseModel):
    """Endpoint details for S3-compatible clients."""

    endpoint: str
    bucket: Optional[str] = None
    region: Optional[str] = None
    force_path_style: Optional[bool] = Field(None, alias="forcePathStyle")
    info: Optional[str] = None


class S3Config(BaseModel):
    """Ready-to-use configuration for an S3 client."""

    endpoint: str
    region: str
    access_key_id: str
    secret_access_key: str
    force_path_style: bool
    bucket: Optional[str] = None
