"""Unit tests for FolderService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from brizo.core.client import ApiResponse
from brizo.core.exceptions import BrizoError, ErrorKind
from brizo.models.folder import Folder, FolderTree
from brizo.services.folders import FolderService


def _resp(status: int, data: object) -> ApiResponse:
    return ApiResponse(status=status, headers=httpx.Headers({}), data=data)


def _folder(folder_id: str, name: str, parent: str = "") -> dict:
    return {"id": folder_id, "name": name, "parent": parent, "created": "2024-05-01"}


def _listing(*folders: dict) -> ApiResponse:
    return _resp(200, {"status": "success", "data": {"items": list(folders), "totalItems": len(folders)}})


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock BrizoHttpClient."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.delete = AsyncMock()
    return client


@pytest.fixture
def service(mock_client: MagicMock) -> FolderService:
    return FolderService(mock_client)


class TestFolderCrud:
    """Tests for single-folder operations."""

    async def test_list_root(self, service: FolderService, mock_client: MagicMock):
        mock_client.get.return_value = _listing(_folder("a", "docs"), _folder("b", "photos"))

        result = await service.list()

        assert [f.name for f in result.items] == ["docs", "photos"]
        assert result.total_items == 2
        mock_client.get.assert_awaited_once_with("/v1/folders", query={"parentId": ""})

    async def test_get_path(self, service: FolderService, mock_client: MagicMock):
        mock_client.get.return_value = _resp(
            200, {"data": [{"id": "a", "name": "docs"}, {"id": "c", "name": "2024"}]}
        )

        segments = await service.get_path("c")

        assert [s.name for s in segments] == ["docs", "2024"]
        mock_client.get.assert_awaited_once_with("/v1/folders/c/path")

    async def test_create(self, service: FolderService, mock_client: MagicMock):
        mock_client.post.return_value = _resp(200, {"data": _folder("n1", "new", "a")})

        folder = await service.create("new", parent_id="a")

        assert folder.id == "n1"
        mock_client.post.assert_awaited_once_with("/v1/folders", {"name": "new", "parentId": "a"})

    async def test_create_requires_name(self, service: FolderService, mock_client: MagicMock):
        with pytest.raises(BrizoError) as exc_info:
            await service.create("")

        assert exc_info.value.kind is ErrorKind.VALIDATION
        mock_client.post.assert_not_called()

    async def test_rename(self, service: FolderService, mock_client: MagicMock):
        mock_client.patch.return_value = _resp(200, {"data": _folder("a", "documents")})

        folder = await service.rename("a", "documents")

        assert folder.name == "documents"
        mock_client.patch.assert_awaited_once_with("/v1/folders/a", {"name": "documents"})

    @pytest.mark.parametrize(("target", "sent"), [("b", "b"), ("root", ""), ("", "")])
    async def test_move(self, service: FolderService, mock_client: MagicMock, target: str, sent: str):
        mock_client.patch.return_value = _resp(200, {"data": _folder("a", "docs", sent)})

        await service.move("a", target)

        mock_client.patch.assert_awaited_once_with("/v1/folders/a", {"parentId": sent})

    @pytest.mark.parametrize(("contents", "flag"), [(False, None), (True, "true")])
    async def test_delete(self, service: FolderService, mock_client: MagicMock, contents: bool, flag):
        mock_client.delete.return_value = _resp(200, {"status": "success"})

        await service.delete("a", delete_contents=contents)

        mock_client.delete.assert_awaited_once_with("/v1/folders/a", query={"deleteContents": flag})

    def test_share_url(self):
        folder = Folder.model_validate({**_folder("a", "docs"), "shareUrl": "https://brizo.test/f/a"})
        assert FolderService.get_share_url(folder) == "https://brizo.test/f/a"
        assert FolderService.get_share_url({"id": "a"}) is None


class TestListAll:
    """Tests for the recursive folder walk."""

    async def test_builds_paths(self, service: FolderService, mock_client: MagicMock):
        tree = {
            "": [_folder("a", "docs"), _folder("b", "photos")],
            "a": [_folder("c", "2024", "a")],
            "b": [],
            "c": [],
        }

        async def get(path: str, query: dict) -> ApiResponse:
            return _listing(*tree[query["parentId"]])

        mock_client.get.side_effect = get

        result = await service.list_all()

        assert isinstance(result, FolderTree)
        assert result.complete
        assert [(f.id, f.path_string) for f in result.folders] == [
            ("a", "docs"),
            ("c", "docs/2024"),
            ("b", "photos"),
        ]

    async def test_failed_branch_recorded(self, service: FolderService, mock_client: MagicMock):
        async def get(path: str, query: dict) -> ApiResponse:
            if query["parentId"] == "a":
                return _resp(500, {"message": "boom"})
            if query["parentId"] == "":
                return _listing(_folder("a", "docs"), _folder("b", "photos"))
            return _listing()

        mock_client.get.side_effect = get

        result = await service.list_all()

        assert [f.id for f in result.folders] == ["a", "b"]
        assert not result.complete
        assert result.errors[0].parent_id == "a"
        assert result.errors[0].error == "boom"


class TestCreatePath:
    """Tests for FolderService.create_path."""

    async def test_reuses_existing_and_creates_missing(self, service: FolderService, mock_client: MagicMock):
        listings = {"": [_folder("a", "Photos")], "a": []}

        async def get(path: str, query: dict) -> ApiResponse:
            return _listing(*listings.get(query["parentId"], []))

        mock_client.get.side_effect = get
        mock_client.post.return_value = _resp(200, {"data": _folder("n1", "2024", "a")})

        folder = await service.create_path("photos/2024/")

        assert folder.id == "n1"
        mock_client.post.assert_awaited_once_with("/v1/folders", {"name": "2024", "parentId": "a"})

    @pytest.mark.parametrize("path", ["", "/", " / / "])
    async def test_invalid_path(self, service: FolderService, mock_client: MagicMock, path: str):
        with pytest.raises(BrizoError) as exc_info:
            await service.create_path(path)

        assert exc_info.value.kind is ErrorKind.VALIDATION
        mock_client.get.assert_not_called()
