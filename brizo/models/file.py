"""File records returned by the Brizo API."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseModel


class File(BaseModel):
    """Committed file record."""

    id: str = Field(..., description="Unique file ID")
    name: Optional[str] = Field(None, description="Internal storage name")
    original_name: Optional[str] = Field(None, alias="originalName", description="Original filename")
    mime_type: Optional[str] = Field(None, alias="mimeType", description="Content type")
    size: int = Field(0, description="File size in bytes")
    public_id: Optional[str] = Field(None, alias="publicId", description="Public share ID")
    downloads: int = Field(0, description="Number of downloads")
    folder: str = Field("", description="Parent folder ID (empty for root)")
    share_url: Optional[str] = Field(None, alias="shareUrl", description="Public share URL")
    created: Optional[str] = Field(None, description="Creation timestamp")
    updated: Optional[str] = Field(None, description="Last update timestamp")

    @classmethod
    def table_columns(cls) -> list[str]:
        """Return columns for table output."""
        return ["id", "original_name", "mime_type", "size_display", "folder", "created"]

    def to_row(self, columns: list[str] | None = None) -> dict[str, str]:
        """Convert to row for table output."""
        cols = columns or self.table_columns()
        data = self.model_dump()
        data["size_display"] = self.size_display
        return {col: str(data.get(col) or "") for col in cols}

    @property
    def display_name(self) -> str:
        """Return original filename if available, otherwise storage name."""
        return self.original_name or self.name or self.id

    @property
    def size_display(self) -> str:
        """Return human-readable file size."""
        size = float(self.size)
        for unit in ["B", "KB", "MB", "GB", "TB"]:
            if size < 1024:
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} PB"


class FileList(BaseModel):
    """One page of files."""

    page: int = 1
    per_page: int = Field(20, alias="perPage")
    total_items: int = Field(0, alias="totalItems")
    total_pages: int = Field(0, alias="totalPages")
    items: list[File] = Field(default_factory=list)

    @property
    def has_next(self) -> bool:
        """Check if more pages follow this one."""
        return self.page < self.total_pages
