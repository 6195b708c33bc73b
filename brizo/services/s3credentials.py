"""S3 credential service for S3-compatible access keys."""

from __future__ import annotations

from typing import Any

from brizo.core.exceptions import validation_error
from brizo.models.s3credential import S3Config, S3ConnectionInfo, S3Credential

from .base import BaseService


class S3CredentialService(BaseService):
    """Service for managing S3-compatible credentials."""

    async def list(self) -> list[S3Credential]:
        """List credentials (secret keys are never returned)."""
        envelope = await self._get("/v1/s3-credentials")
        return [S3Credential.model_validate(c) for c in self._unwrap(envelope) or []]

    async def create(self, name: str = "Unnamed") -> S3Credential:
        """Create credentials.

        The returned secret access key is only available in this response.
        """
        envelope = await self._post("/v1/s3-credentials", {"name": name or "Unnamed"})
        return S3Credential.model_validate(self._unwrap(envelope))

    async def update(self, credential_id: str, name: str) -> S3Credential:
        """Rename credentials."""
        credential_id = self._require(credential_id, "Credential ID")
        if not name:
            raise validation_error("Name is required")
        envelope = await self._patch(
            self._build_path("v1/s3-credentials", credential_id), {"name": name}
        )
        return S3Credential.model_validate(self._unwrap(envelope))

    async def delete(self, credential_id: str) -> dict[str, Any]:
        """Delete credentials."""
        credential_id = self._require(credential_id, "Credential ID")
        return await self._delete(self._build_path("v1/s3-credentials", credential_id))

    async def get_connection_info(self) -> S3ConnectionInfo:
        """Get the S3 endpoint, bucket, and region."""
        envelope = await self._get("/v1/s3-credentials/connection-info")
        return S3ConnectionInfo.model_validate(self._unwrap(envelope))

    async def get_s3_config(self, access_key_id: str, secret_access_key: str) -> S3Config:
        """Build a client configuration for an S3-compatible SDK.

        Args:
            access_key_id: Access key ID.
            secret_access_key: Secret access key.

        Returns:
            Endpoint, region, credentials, and addressing style.
        """
        if not access_key_id or not secret_access_key:
            raise validation_error("Access key ID and secret access key are required")

        info = await self.get_connection_info()
        return S3Config(
            endpoint=info.endpoint,
            region=info.region or "auto",
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            force_path_style=info.force_path_style is not False,
            bucket=info.bucket,
        )
