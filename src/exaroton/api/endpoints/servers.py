"""Server API endpoints."""

from __future__ import annotations

from exaroton.api import resources
from exaroton.api.client import ExarotonClient
from exaroton.api.exceptions import ExarotonValidationError
from exaroton.api.models import (
    Command,
    Logs,
    Motd,
    Ram,
    ServerData,
    ShareLogs,
    StartOptions,
)

MIN_RAM = 2
MAX_RAM = 16


class ServersAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def list(self) -> list[ServerData]:
        return await self._client.call(
            "GET",
            resources.servers(),
            list[ServerData],
            message="An error occurred while requesting all servers",
        )

    async def get(self, server_id: str) -> ServerData:
        return await self._client.call(
            "GET",
            resources.server(server_id),
            ServerData,
            message=f"An error occurred requesting the server with id {server_id}",
        )

    async def get_motd(self, server_id: str) -> str:
        motd = await self._client.call(
            "GET",
            resources.motd(server_id),
            Motd,
            message="An error occurred fetching the server's MOTD",
        )
        return motd.motd

    async def set_motd(self, server_id: str, motd: str) -> str:
        result = await self._client.call(
            "POST",
            resources.motd(server_id),
            Motd,
            json=Motd(motd=motd).model_dump(by_alias=True),
            message="An error occurred setting the server's MOTD",
        )
        return result.motd

    async def get_ram(self, server_id: str) -> int:
        ram = await self._client.call(
            "GET",
            resources.ram(server_id),
            Ram,
            message="An error occurred getting the server's RAM",
        )
        return ram.ram

    async def set_ram(self, server_id: str, ram: int) -> int:
        if isinstance(ram, bool) or not isinstance(ram, int) or not MIN_RAM <= ram <= MAX_RAM:
            raise ExarotonValidationError(
                f"RAM can only be set to an integer between {MIN_RAM} and {MAX_RAM}, got {ram!r}"
            )
        result = await self._client.call(
            "POST",
            resources.ram(server_id),
            Ram,
            json=Ram(ram=ram).model_dump(by_alias=True),
            message="An error occurred updating the server's RAM",
        )
        return result.ram

    async def start(self, server_id: str, use_own_credits: bool | None = None) -> None:
        """Start the server.

        Without ``use_own_credits`` this is a plain GET. With it, the flag is
        POSTed so a shared server can be started on the caller's own credits.
        Both forms raise if the API reports an error.
        """
        if use_own_credits is None:
            await self._client.call_action(
                "GET",
                resources.start(server_id),
                message="An error occurred starting the server",
            )
            return
        await self._client.call_action(
            "POST",
            resources.start(server_id),
            json=StartOptions(use_own_credits=use_own_credits).model_dump(by_alias=True),
            message="An error occurred starting the server",
        )

    async def stop(self, server_id: str) -> None:
        await self._client.call_action(
            "GET",
            resources.stop(server_id),
            message="An error occurred stopping the server",
        )

    async def restart(self, server_id: str) -> None:
        await self._client.call_action(
            "GET",
            resources.restart(server_id),
            message="An error occurred restarting the server",
        )

    async def execute_command(self, server_id: str, command: str) -> None:
        await self._client.call_action(
            "POST",
            resources.command(server_id),
            json=Command(command=command).model_dump(by_alias=True),
            message="An error occurred executing the command",
        )

    async def get_logs(self, server_id: str) -> Logs:
        return await self._client.call(
            "GET",
            resources.logs(server_id),
            Logs,
            message="An error occurred getting the server logs",
        )

    async def share_logs(self, server_id: str) -> ShareLogs:
        return await self._client.call(
            "GET",
            resources.share_logs(server_id),
            ShareLogs,
            message="An error occurred uploading the server logs",
        )
