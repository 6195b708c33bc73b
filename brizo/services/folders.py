"""Folder service for Brizo folder operations."""

from __future__ import annotations

import logging
from typing import Any

from brizo.core.exceptions import BrizoError, validation_error
from brizo.models.folder import (
    Folder,
    FolderList,
    FolderPathSegment,
    FolderTree,
    FolderTreeError,
    FolderWithPath,
)

from .base import BaseService

logger = logging.getLogger(__name__)


class FolderService(BaseService):
    """Service for folder CRUD and tree operations."""

    async def list(self, parent_id: str = "") -> FolderList:
        """List folders under a parent (root when empty)."""
        envelope = await self._get("/v1/folders", query={"parentId": parent_id or ""})
        return FolderList.model_validate(self._unwrap(envelope))

    async def get(self, folder_id: str) -> Folder:
        """Get folder information by ID."""
        folder_id = self._require(folder_id, "Folder ID")
        envelope = await self._get(self._build_path("v1/folders", folder_id))
        return Folder.model_validate(self._unwrap(envelope))

    async def get_path(self, folder_id: str) -> list[FolderPathSegment]:
        """Get the breadcrumb from the root down to a folder."""
        folder_id = self._require(folder_id, "Folder ID")
        envelope = await self._get(self._build_path("v1/folders", folder_id, "path"))
        return [FolderPathSegment.model_validate(s) for s in self._unwrap(envelope) or []]

    async def create(self, name: str, parent_id: str = "") -> Folder:
        """Create a folder.

        Args:
            name: Folder name.
            parent_id: Parent folder ID (root when empty).

        Returns:
            Created folder.
        """
        if not name:
            raise validation_error("Folder name is required")
        envelope = await self._post("/v1/folders", {"name": name, "parentId": parent_id or ""})
        return Folder.model_validate(self._unwrap(envelope))

    async def rename(self, folder_id: str, new_name: str) -> Folder:
        """Rename a folder."""
        folder_id = self._require(folder_id, "Folder ID")
        if not new_name:
            raise validation_error("New folder name is required")
        envelope = await self._patch(self._build_path("v1/folders", folder_id), {"name": new_name})
        return Folder.model_validate(self._unwrap(envelope))

    async def move(self, folder_id: str, parent_id: str = "") -> Folder:
        """Move a folder under another parent (``root`` or empty for the root)."""
        folder_id = self._require(folder_id, "Folder ID")
        envelope = await self._patch(
            self._build_path("v1/folders", folder_id),
            {"parentId": "" if parent_id == "root" else parent_id or ""},
        )
        return Folder.model_validate(self._unwrap(envelope))

    async def delete(self, folder_id: str, delete_contents: bool = False) -> dict[str, Any]:
        """Delete a folder.

        Args:
            folder_id: Folder ID.
            delete_contents: Also delete contents; otherwise files move to root.

        Returns:
            Deletion result (``status`` and ``message``).
        """
        folder_id = self._require(folder_id, "Folder ID")
        return await self._delete(
            self._build_path("v1/folders", folder_id),
            query={"deleteContents": "true" if delete_contents else None},
        )

    async def list_all(self, parent_id: str = "") -> FolderTree:
        """List every folder below a parent, depth first.

        A subtree that fails to list is recorded in ``FolderTree.errors``
        and skipped; the walk continues with its siblings.
        """
        tree = FolderTree()

        async def walk(parent: str, prefix: list[str]) -> None:
            try:
                listing = await self.list(parent)
            except BrizoError as e:
                logger.warning("Failed to list folder %r: %s", parent, e.message)
                tree.errors.append(FolderTreeError(parent_id=parent, error=e.message))
                return

            for folder in listing.items:
                entry = FolderWithPath.model_validate(
                    {**folder.model_dump(), "path": [*prefix, folder.name]}
                )
                tree.folders.append(entry)
                await walk(folder.id, entry.path)

        await walk(parent_id, [])
        return tree

    async def create_path(self, path: str) -> Folder:
        """Create every missing folder along a slash-separated path.

        Existing folders are matched case-insensitively.

        Args:
            path: Folder path, e.g. ``photos/2024/vacation``.

        Returns:
            The deepest folder.
        """
        if not path:
            raise validation_error("Path is required")

        parts = [p.strip() for p in path.split("/") if p.strip()]
        if not parts:
            raise validation_error("Invalid path", {"path": path})

        parent_id = ""
        folder: Folder
        for part in parts:
            listing = await self.list(parent_id)
            folder = next(
                (f for f in listing.items if f.name.lower() == part.lower()),
                None,
            )
            if folder is None:
                logger.debug("Creating folder %s under %r", part, parent_id)
                folder = await self.create(part, parent_id)
            parent_id = folder.id

        return folder

    @staticmethod
    def get_share_url(folder: Folder | dict[str, Any] | None) -> str | None:
        """Return the public share URL of a folder, if shared."""
        if folder is None:
            return None
        if isinstance(folder, dict):
            return folder.get("shareUrl") or None
        return folder.share_url or None
