"""Async HTTP client for the exaroton API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from exaroton.api.envelope import Envelope, check, decode_envelope, unwrap
from exaroton.api.exceptions import ExarotonAPIError, ExarotonDecodeError
from exaroton.api.resources import Resource
from exaroton.config import API_PREFIX, DEFAULT_HOST, DEFAULT_PROTOCOL, USER_AGENT


class ExarotonClient:
    """Async API client for exaroton.

    Uses a single long-lived httpx.AsyncClient to reuse TCP/TLS connections.
    The client is lazily initialized on first request. The bearer token is
    read when each request is built, so ``set_token`` only affects requests
    sent afterwards.
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
        self._token = token
        self._host = host
        self._protocol = protocol
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def token(self) -> str:
        return self._token

    def set_token(self, token: str) -> ExarotonClient:
        self._token = token
        return self

    @property
    def base_url(self) -> str:
        return f"{self._protocol}://{self._host}/{API_PREFIX}"

    def websocket_url(self, resource: Resource) -> str:
        scheme = "wss" if self._protocol == "https" else "ws"
        return f"{scheme}://{self._host}/{API_PREFIX}{resource.path}"

    def headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "User-Agent": self._user_agent,
        }
        if extra:
            headers.update(extra)
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=httpx.Timeout(30.0, connect=10.0),
                transport=self._transport,
            )
        return self._client

    async def send(
        self,
        method: str,
        resource: Resource,
        *,
        json: Any = None,
        content: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        client = self._get_client()
        return await client.request(
            method,
            resource.path,
            json=json,
            content=content,
            headers=self.headers(headers),
        )

    def _decode(
        self, response: httpx.Response, payload_type: Any, message: str
    ) -> Envelope[Any]:
        try:
            envelope = decode_envelope(response.content, payload_type)
        except ExarotonDecodeError:
            if not response.is_success:
                raise ExarotonAPIError(
                    message,
                    f"HTTP {response.status_code}",
                    status_code=response.status_code,
                ) from None
            raise
        if not response.is_success:
            raise ExarotonAPIError(
                message,
                envelope.error or f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return envelope

    async def call(
        self,
        method: str,
        resource: Resource,
        payload_type: Any,
        *,
        message: str,
        json: Any = None,
    ) -> Any:
        """Send a request and return the unwrapped envelope payload."""
        response = await self.send(method, resource, json=json)
        return unwrap(self._decode(response, payload_type, message), message)

    async def call_action(
        self,
        method: str,
        resource: Resource,
        *,
        message: str,
        json: Any = None,
    ) -> None:
        """Send a request whose envelope only reports success or an error."""
        response = await self.send(method, resource, json=json)
        check(self._decode(response, Any, message), message)

    async def call_raw(
        self,
        method: str,
        resource: Resource,
        *,
        message: str,
        content: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request validated by HTTP status alone (file data endpoints)."""
        response = await self.send(method, resource, content=content, headers=headers)
        self._check_status(response, message)
        return response

    @asynccontextmanager
    async def stream(
        self, method: str, resource: Resource, *, message: str
    ) -> AsyncIterator[httpx.Response]:
        """Open a streamed response; the body is read while the context is open."""
        client = self._get_client()
        async with client.stream(
            method, resource.path, headers=self.headers()
        ) as response:
            self._check_status(response, message)
            yield response

    @staticmethod
    def _check_status(response: httpx.Response, message: str) -> None:
        if response.status_code != 200:
            raise ExarotonAPIError(message, status_code=response.status_code)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
