"""Entities wrapping decoded API payloads.

Entities are read-only snapshots. Operations that re-fetch state return a
new entity and leave the original untouched.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import IO, AsyncIterable, AsyncIterator

import httpx

from exaroton.api.client import ExarotonClient
from exaroton.api.endpoints.files import FilesAPI
from exaroton.api.endpoints.playerlists import PlayerListsAPI
from exaroton.api.endpoints.servers import ServersAPI
from exaroton.api.exceptions import ExarotonStateError
from exaroton.api.models import (
    FileInfoData,
    Logs,
    PlayerInfo,
    ServerData,
    ServerStatus,
    ShareLogs,
    Software,
)
from exaroton.api.resources import normalize_path
from exaroton.api.websocket import ServerSubscription


class Server:
    """A server snapshot plus the operations scoped to it.

    Attributes:
        id: Unique server id.
        name: Server name, also used as the subdomain of ``address``.
        address: Full address players connect to.
        motd: Message of the day at fetch time.
        status: Current ``ServerStatus``.
        host: Host of the running server, if online.
        port: Port of the running server, if online.
        players: Player capacity, count and names.
        software: Installed software, or None if none is configured.
        shared: Whether the server is shared with the account.
        fetched: True if this snapshot came from ``refresh()``.
    """

    def __init__(
        self, client: ExarotonClient, data: ServerData, *, fetched: bool = False
    ) -> None:
        self._client = client
        self._data = data
        self._fetched = fetched
        self._subscription: ServerSubscription[Server] | None = None

    def __repr__(self) -> str:
        return f"Server(id={self.id!r}, name={self.name!r}, status={self.status.name})"

    @property
    def data(self) -> ServerData:
        return self._data

    @property
    def id(self) -> str:
        return self._data.id

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def address(self) -> str:
        return self._data.address

    @property
    def motd(self) -> str:
        return self._data.motd

    @property
    def status(self) -> ServerStatus:
        return self._data.status

    @property
    def host(self) -> str | None:
        return self._data.host

    @property
    def port(self) -> int | None:
        return self._data.port

    @property
    def players(self) -> PlayerInfo:
        return self._data.players

    @property
    def software(self) -> Software | None:
        return self._data.software

    @property
    def shared(self) -> bool:
        return self._data.shared

    @property
    def fetched(self) -> bool:
        return self._fetched

    def has_status(self, *statuses: ServerStatus) -> bool:
        return self.status in statuses

    async def refresh(self) -> Server:
        data = await ServersAPI(self._client).get(self.id)
        return Server(self._client, data, fetched=True)

    async def fetch_motd(self) -> str:
        return await ServersAPI(self._client).get_motd(self.id)

    async def set_motd(self, motd: str) -> str:
        return await ServersAPI(self._client).set_motd(self.id, motd)

    async def get_ram(self) -> int:
        return await ServersAPI(self._client).get_ram(self.id)

    async def set_ram(self, ram: int) -> int:
        return await ServersAPI(self._client).set_ram(self.id, ram)

    async def start(self, use_own_credits: bool | None = None) -> None:
        await ServersAPI(self._client).start(self.id, use_own_credits)

    async def stop(self) -> None:
        await ServersAPI(self._client).stop(self.id)

    async def restart(self) -> None:
        await ServersAPI(self._client).restart(self.id)

    async def execute_command(self, command: str) -> None:
        await ServersAPI(self._client).execute_command(self.id, command)

    async def get_logs(self) -> Logs:
        return await ServersAPI(self._client).get_logs(self.id)

    async def share_logs(self) -> ShareLogs:
        return await ServersAPI(self._client).share_logs(self.id)

    async def get_player_lists(self) -> list[str]:
        return await PlayerListsAPI(self._client).list(self.id)

    async def get_player_list(self, name: str) -> PlayerList:
        entries = await PlayerListsAPI(self._client).get(self.id, name)
        return PlayerList(self._client, self, name, entries)

    async def get_file(self, path: str) -> File:
        data = await FilesAPI(self._client).info(self.id, path)
        return File(self._client, self, data)

    @property
    def subscription(self) -> ServerSubscription[Server] | None:
        return self._subscription

    async def subscribe(self) -> ServerSubscription[Server]:
        """Open a websocket for live status updates.

        A server tracks one subscription; an existing one is closed first.
        """
        if self._subscription is not None and self._subscription.active:
            await self._subscription.close()
        subscription = ServerSubscription(
            self._client, self.id, lambda data: Server(self._client, data)
        )
        self._subscription = await subscription.open()
        return subscription

    async def unsubscribe(self) -> None:
        subscription = self._subscription
        if subscription is None or not subscription.active:
            raise ExarotonStateError("No websocket connection active")
        self._subscription = None
        await subscription.close()


class PlayerList:
    """A named player list (whitelist, ops, banned-players, ...)."""

    def __init__(
        self,
        client: ExarotonClient,
        server: Server,
        name: str,
        entries: list[str] | None,
    ) -> None:
        self._client = client
        self._server = server
        self._name = name
        self._entries = tuple(entries) if entries is not None else None

    def __repr__(self) -> str:
        return f"PlayerList(name={self.name!r}, entries={self.entries!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def server(self) -> Server:
        return self._server

    @property
    def entries(self) -> list[str] | None:
        return list(self._entries) if self._entries is not None else None

    async def get_entries(self) -> list[str]:
        return await PlayerListsAPI(self._client).get(self._server.id, self._name)

    async def add(self, *entries: str) -> PlayerList:
        result = await PlayerListsAPI(self._client).add(
            self._server.id, self._name, list(entries)
        )
        return PlayerList(self._client, self._server, self._name, result)

    async def remove(self, *entries: str) -> PlayerList:
        result = await PlayerListsAPI(self._client).remove(
            self._server.id, self._name, list(entries)
        )
        return PlayerList(self._client, self._server, self._name, result)


class File:
    """A file or directory on a server."""

    def __init__(
        self, client: ExarotonClient, server: Server, data: FileInfoData
    ) -> None:
        self._client = client
        self._server = server
        self._data = data
        self._path = normalize_path(data.path)

    def __repr__(self) -> str:
        return f"File(path={self.path!r})"

    @property
    def server(self) -> Server:
        return self._server

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def is_text_file(self) -> bool:
        return self._data.is_text_file

    @property
    def is_config_file(self) -> bool:
        return self._data.is_config_file

    @property
    def is_directory(self) -> bool:
        return self._data.is_directory

    @property
    def is_log(self) -> bool:
        return self._data.is_log

    @property
    def is_readable(self) -> bool:
        return self._data.is_readable

    @property
    def is_writable(self) -> bool:
        return self._data.is_writable

    @property
    def children(self) -> list[File] | None:
        if self._data.children is None:
            return None
        return [File(self._client, self._server, child) for child in self._data.children]

    async def get_info(self) -> File:
        data = await FilesAPI(self._client).info(self._server.id, self.path)
        return File(self._client, self._server, data)

    async def get_content(self) -> str:
        return await FilesAPI(self._client).get_content(self._server.id, self.path)

    async def download(self, target: str | os.PathLike[str]) -> None:
        await FilesAPI(self._client).download(self._server.id, self.path, target)

    @asynccontextmanager
    async def download_stream(self) -> AsyncIterator[httpx.Response]:
        async with FilesAPI(self._client).download_stream(
            self._server.id, self.path
        ) as response:
            yield response

    async def put_content(self, content: str) -> None:
        await FilesAPI(self._client).put_content(self._server.id, self.path, content)

    async def upload(self, source: str | os.PathLike[str]) -> None:
        await FilesAPI(self._client).upload(self._server.id, self.path, source)

    async def upload_stream(self, stream: IO[bytes] | AsyncIterable[bytes] | bytes) -> None:
        await FilesAPI(self._client).upload_stream(self._server.id, self.path, stream)

    async def delete(self) -> None:
        await FilesAPI(self._client).delete(self._server.id, self.path)

    async def create_as_directory(self) -> None:
        await FilesAPI(self._client).create_directory(self._server.id, self.path)
