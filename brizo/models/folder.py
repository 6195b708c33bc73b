"""Folder records returned by the Brizo API."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseModel


class Folder(BaseModel):
    """Folder record."""

    id: str = Field(..., description="Unique folder ID")
    name: str = Field(..., description="Folder name")
    parent: str = Field("", description="Parent folder ID (empty for root)")
    share_url: Optional[str] = Field(None, alias="shareUrl", description="Public share URL")
    created: Optional[str] = Field(None, description="Creation timestamp")
    updated: Optional[str] = Field(None, description="Last update timestamp")

    @classmethod
    def table_columns(cls) -> list[str]:
        """Return columns for table output."""
        return ["id", "name", "parent", "created"]


class FolderWithPath(Folder):
    """Folder annotated with its location in the tree."""

    path: list[str] = Field(default_factory=list)

    @property
    def path_string(self) -> str:
        """Return the path joined with slashes, e.g. ``photos/2024``."""
        return "/".join(self.path)


class FolderList(BaseModel):
    """Folders under one parent."""

    items: list[Folder] = Field(default_factory=list)
    total_items: int = Field(0, alias="totalItems")


class FolderPathSegment(BaseModel):
    """One breadcrumb segment from the root to a folder."""

    id: str
    name: str


class FolderTreeError(BaseModel):
    """A subtree that could not be listed."""

    parent_id: str
    error: str


class FolderTree(BaseModel):
    """Flattened recursive folder listing."""

    folders: list[FolderWithPath] = Field(default_factory=list)
    errors: list[FolderTreeError] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        """Check if every subtree was listed."""
        return not self.errors
