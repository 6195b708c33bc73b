"""Pytest configuration and fixtures for brizo tests."""

from __future__ import annotations

import json
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generator, Union

import httpx
import pytest

from brizo.core.client import BrizoHttpClient

API_URL = "https://api.brizo.test"
STORAGE_URL = "https://storage.brizo.test"
TEST_API_KEY = "brz_test_0123456789abcdef"

Handler = Callable[[httpx.Request], httpx.Response]


def json_response(status: int, data: Any = None, headers: dict[str, str] | None = None) -> Handler:
    """Build a handler that always answers with the given JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=data if data is not None else {}, headers=headers)

    return handler


class FakeBackend:
    """Routes requests by (method, path) to handlers and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Union[Handler, list[Handler]]] = {}
        self.requests: list[httpx.Request] = []

    def route(self, method: str, path: str, *handlers: Handler) -> None:
        """Register handlers; several handlers are used in turn, the last one repeats."""
        self.routes[(method, path)] = list(handlers) if len(handlers) > 1 else handlers[0]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        handler = self.routes.get(key)
        if handler is None:
            return httpx.Response(404, json={"message": f"No route for {key}"})
        if isinstance(handler, list):
            handler = handler.pop(0) if len(handler) > 1 else handler[0]
        return handler(request)

    def calls(self, method: str | None = None, path: str | None = None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if (method is None or r.method == method) and (path is None or r.url.path == path)
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def http_client(backend: FakeBackend) -> Any:
    """BrizoHttpClient wired to the fake backend."""
    client = BrizoHttpClient(
        api_key=TEST_API_KEY,
        base_url=API_URL,
        transport=httpx.MockTransport(backend),
    )
    yield client
    await client.aclose()


def file_record(file_id: str, name: str, size: int = 0, folder: str = "", **extra: Any) -> dict:
    """A file record as the API returns it."""
    return {
        "id": file_id,
        "name": f"{file_id}_{name}",
        "originalName": name,
        "mimeType": extra.pop("mimeType", "application/octet-stream"),
        "size": size,
        "folder": folder,
        "downloads": 0,
        "created": "2024-05-01 10:00:00.000Z",
        **extra,
    }


@pytest.fixture
def sample_config_yaml() -> str:
    """Sample config YAML content."""
    return """
default_profile: work
output_format: table

profiles:
  work:
    base_url: https://api.brizo.test
    timeout: 45
    default_folder: fld_inbox
    concurrency: 5

  personal:
    base_url: https://api.brizo-cloud.com
"""
