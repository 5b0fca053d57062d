"""Top-level entry point: one configured session per token."""

from __future__ import annotations

import httpx

from exaroton.api.client import ExarotonClient
from exaroton.api.endpoints.account import AccountAPI
from exaroton.api.endpoints.servers import ServersAPI
from exaroton.api.models import Account
from exaroton.config import (
    DEFAULT_HOST,
    DEFAULT_PROTOCOL,
    USER_AGENT,
    current_server_id,
    load_config,
)
from exaroton.entities import Server


class Exaroton:
    """Session holding the token and request defaults.

    Every entity created through the session shares its HTTP client, so a
    token change applies to all requests sent after it.
    """

    def __init__(
        self,
        token: str,
        *,
        host: str = DEFAULT_HOST,
        protocol: str = DEFAULT_PROTOCOL,
        user_agent: str = USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = ExarotonClient(
            token,
            host=host,
            protocol=protocol,
            user_agent=user_agent,
            transport=transport,
        )

    @classmethod
    def from_config(cls) -> Exaroton:
        """Build a session from the config file and environment."""
        config = load_config()
        return cls(
            config.api.token,
            host=config.api.host,
            protocol=config.api.protocol,
            user_agent=config.api.user_agent,
        )

    @property
    def client(self) -> ExarotonClient:
        return self._client

    @property
    def token(self) -> str:
        return self._client.token

    def set_token(self, token: str) -> Exaroton:
        self._client.set_token(token)
        return self

    async def get_account(self) -> Account:
        return await AccountAPI(self._client).get()

    async def get_servers(self) -> list[Server]:
        servers = await ServersAPI(self._client).list()
        return [Server(self._client, data) for data in servers]

    async def get_server(self, server_id: str) -> Server:
        data = await ServersAPI(self._client).get(server_id)
        return Server(self._client, data)

    async def get_current_server(self) -> Server | None:
        """Server named by ``EXAROTON_SERVER_ID``; None (and no request) if unset."""
        server_id = current_server_id()
        if server_id is None:
            return None
        return await self.get_server(server_id)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> Exaroton:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
