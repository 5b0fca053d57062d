"""Account API endpoints."""

from __future__ import annotations

from exaroton.api import resources
from exaroton.api.client import ExarotonClient
from exaroton.api.models import Account


class AccountAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def get(self) -> Account:
        return await self._client.call(
            "GET",
            resources.account(),
            Account,
            message="An error occurred while getting account info",
        )
