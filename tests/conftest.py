"""Shared test fixtures for the exaroton client."""

from __future__ import annotations

import json

import httpx
import pytest

from exaroton.api.client import ExarotonClient
from exaroton.api.models import FileInfoData, ServerData
from exaroton.entities import File, Server
from exaroton.session import Exaroton


class FakeAPI:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        data=None,
        error: str | None = None,
        success: bool | None = None,
        status: int = 200,
        content: bytes | None = None,
    ) -> None:
        if content is None:
            if success is None:
                success = data is not None
            content = json.dumps(
                {"success": success, "error": error, "data": data}
            ).encode()
        self._routes[(method, path)] = httpx.Response(status, content=content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode().removeprefix("/v1/")
        response = self._routes.get((request.method, path))
        if response is None:
            return httpx.Response(
                404,
                json={"success": False, "error": "Not found", "data": None},
            )
        return httpx.Response(response.status_code, content=response.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def client(api):
    return ExarotonClient("test-token", transport=httpx.MockTransport(api.handler))


@pytest.fixture
def session(api):
    return Exaroton("test-token", transport=httpx.MockTransport(api.handler))


@pytest.fixture
def sample_server_data():
    """Raw server payload as returned by the API."""
    return {
        "id": "tgkm731xO7GiHt76",
        "name": "example",
        "address": "example.exaroton.me",
        "motd": "Welcome to the server of example!",
        "status": 1,
        "host": "zeta.exaroton.com",
        "port": 28156,
        "players": {"max": 20, "count": 2, "list": ["alice", "bob"]},
        "software": {
            "id": "C7HbRgqdaPEAbwsO",
            "name": "Vanilla",
            "version": "1.20.1",
        },
        "shared": False,
    }


@pytest.fixture
def sample_file_data():
    return {
        "path": "/configs",
        "name": "configs",
        "isTextFile": False,
        "isConfigFile": False,
        "isDirectory": True,
        "isLog": False,
        "isReadable": True,
        "isWritable": True,
        "size": 0,
        "children": [
            {
                "path": "configs/server.properties",
                "name": "server.properties",
                "isTextFile": True,
                "isConfigFile": True,
                "isDirectory": False,
                "isLog": False,
                "isReadable": True,
                "isWritable": True,
                "size": 1234,
                "children": None,
            }
        ],
    }


@pytest.fixture
def sample_server(client, sample_server_data):
    return Server(client, ServerData.model_validate(sample_server_data))


@pytest.fixture
def sample_file(client, sample_server, sample_file_data):
    child = sample_file_data["children"][0]
    return File(client, sample_server, FileInfoData.model_validate(child))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own exaroton environment out of the tests."""
    monkeypatch.delenv("EXAROTON_TOKEN", raising=False)
    monkeypatch.delenv("EXAROTON_SERVER_ID", raising=False)
