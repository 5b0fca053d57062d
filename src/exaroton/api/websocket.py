"""Websocket subscription to live server status."""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Callable, Generic, TypeVar

from pydantic import ValidationError
from websockets.asyncio.client import ClientConnection, connect
from websockets.protocol import State

from exaroton.api import resources
from exaroton.api.client import ExarotonClient
from exaroton.api.exceptions import ExarotonDecodeError, ExarotonStateError
from exaroton.api.models import ServerData

PING_INTERVAL = 3.0

T = TypeVar("T")


class ServerSubscription(Generic[T]):
    """An open websocket session for one server.

    Returned by ``Server.subscribe()``. Use it as an async context manager or
    call ``close()`` when done; nothing closes it implicitly.
    """

    def __init__(
        self,
        client: ExarotonClient,
        server_id: str,
        wrap: Callable[[ServerData], T],
        *,
        connector: Callable[..., Any] | None = None,
    ) -> None:
        self._client = client
        self._server_id = server_id
        self._wrap = wrap
        self._connector = connector or connect
        self._connection: ClientConnection | None = None

    @property
    def server_id(self) -> str:
        return self._server_id

    @property
    def active(self) -> bool:
        return self._connection is not None and self._connection.state is State.OPEN

    async def open(self) -> ServerSubscription[T]:
        if self._connection is not None:
            raise ExarotonStateError("Websocket connection is already open")
        url = self._client.websocket_url(resources.websocket(self._server_id))
        headers = self._client.headers()
        user_agent = headers.pop("User-Agent")
        self._connection = await self._connector(
            url,
            additional_headers=headers,
            user_agent_header=user_agent,
            ping_interval=PING_INTERVAL,
        )
        return self

    def _require_connection(self) -> ClientConnection:
        if self._connection is None:
            raise ExarotonStateError("No websocket connection active")
        return self._connection

    @staticmethod
    def _decode_frame(raw: str | bytes) -> dict[str, Any]:
        try:
            message = json.loads(raw)
        except ValueError as exc:
            raise ExarotonDecodeError(f"Invalid websocket frame: {raw!r}") from exc
        if not isinstance(message, dict):
            raise ExarotonDecodeError(f"Invalid websocket frame: {raw!r}")
        return message

    async def recv(self) -> dict[str, Any]:
        """Receive and decode the next JSON frame."""
        return self._decode_frame(await self._require_connection().recv())

    async def send(
        self, type: str, data: Any = None, stream: str | None = None
    ) -> None:
        message: dict[str, Any] = {"type": type}
        if stream is not None:
            message["stream"] = stream
        if data is not None:
            message["data"] = data
        await self._require_connection().send(json.dumps(message))

    async def messages(self) -> AsyncIterator[dict[str, Any]]:
        """Yield decoded frames until the server closes the connection."""
        connection = self._require_connection()
        async for raw in connection:
            yield self._decode_frame(raw)

    async def status_updates(self) -> AsyncIterator[T]:
        """Yield a fresh server snapshot for every ``status`` frame."""
        async for message in self.messages():
            if message.get("type") != "status":
                continue
            try:
                data = ServerData.model_validate(message.get("data"))
            except ValidationError as exc:
                raise ExarotonDecodeError(f"Invalid status update: {exc}") from exc
            yield self._wrap(data)

    async def close(self) -> None:
        connection = self._require_connection()
        self._connection = None
        await connection.close(code=1001)

    async def __aenter__(self) -> ServerSubscription[T]:
        if self._connection is None:
            await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._connection is not None:
            await self.close()
