"""Player list API endpoints."""

from __future__ import annotations

from exaroton.api import resources
from exaroton.api.client import ExarotonClient
from exaroton.api.models import PlayerListEntries


class PlayerListsAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def list(self, server_id: str) -> list[str]:
        return await self._client.call(
            "GET",
            resources.playerlists(server_id),
            list[str],
            message="An error occurred getting the player lists",
        )

    async def get(self, server_id: str, name: str) -> list[str]:
        return await self._client.call(
            "GET",
            resources.playerlist(server_id, name),
            list[str],
            message=f"An error occurred getting the {name} player list",
        )

    async def add(self, server_id: str, name: str, entries: list[str]) -> list[str]:
        return await self._client.call(
            "PUT",
            resources.playerlist(server_id, name),
            list[str],
            json=PlayerListEntries(entries=entries).model_dump(by_alias=True),
            message=f"An error occurred adding entries to the {name} player list",
        )

    async def remove(self, server_id: str, name: str, entries: list[str]) -> list[str]:
        return await self._client.call(
            "DELETE",
            resources.playerlist(server_id, name),
            list[str],
            json=PlayerListEntries(entries=entries).model_dump(by_alias=True),
            message=f"An error occurred removing entries from the {name} player list",
        )
