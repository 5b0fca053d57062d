"""File API endpoints.

``files/info`` answers with the usual JSON envelope. ``files/data`` serves and
accepts raw file bodies, so those calls are checked by HTTP status only.
"""

from __future__ import annotations

import asyncio
import os
from contextlib import asynccontextmanager
from typing import IO, Any, AsyncIterable, AsyncIterator

import httpx

from exaroton.api import resources
from exaroton.api.client import ExarotonClient
from exaroton.api.exceptions import ExarotonIOError
from exaroton.api.models import FileInfoData

CHUNK_SIZE = 64 * 1024


async def _read_chunks(fp: IO[bytes]) -> AsyncIterator[bytes]:
    while True:
        try:
            chunk = await asyncio.to_thread(fp.read, CHUNK_SIZE)
        except OSError as exc:
            raise ExarotonIOError("An error occurred reading the upload source") from exc
        if not chunk:
            break
        yield chunk


class FilesAPI:
    def __init__(self, client: ExarotonClient) -> None:
        self._client = client

    async def info(self, server_id: str, path: str) -> FileInfoData:
        return await self._client.call(
            "GET",
            resources.file_info(server_id, path),
            FileInfoData,
            message=f"An error occurred getting the file info for {path}",
        )

    async def get_content(self, server_id: str, path: str) -> str:
        response = await self._client.call_raw(
            "GET",
            resources.file_data(server_id, path),
            message="An error occurred getting the file content",
        )
        return response.text

    async def download(
        self, server_id: str, path: str, target: str | os.PathLike[str]
    ) -> None:
        """Stream the file body into ``target``, replacing it if it exists."""
        async with self._client.stream(
            "GET",
            resources.file_data(server_id, path),
            message="An error occurred downloading the file",
        ) as response:
            try:
                f = await asyncio.to_thread(open, target, "wb")
                try:
                    async for chunk in response.aiter_bytes():
                        await asyncio.to_thread(f.write, chunk)
                finally:
                    f.close()
            except OSError as exc:
                raise ExarotonIOError(
                    f"An error occurred writing the file to {os.fspath(target)}"
                ) from exc

    @asynccontextmanager
    async def download_stream(
        self, server_id: str, path: str
    ) -> AsyncIterator[httpx.Response]:
        """Yield the open response; read it with ``aiter_bytes()`` inside the block."""
        async with self._client.stream(
            "GET",
            resources.file_data(server_id, path),
            message="An error occurred reading the file stream",
        ) as response:
            yield response

    async def put_content(self, server_id: str, path: str, content: str) -> None:
        await self._client.call_raw(
            "PUT",
            resources.file_data(server_id, path),
            content=content.encode("utf-8"),
            message="An error occurred updating the file",
        )

    async def upload(
        self, server_id: str, path: str, source: str | os.PathLike[str]
    ) -> None:
        try:
            fp = open(source, "rb")
        except OSError as exc:
            raise ExarotonIOError(
                f"An error occurred opening {os.fspath(source)}"
            ) from exc
        try:
            await self._client.call_raw(
                "PUT",
                resources.file_data(server_id, path),
                content=_read_chunks(fp),
                message="An error occurred uploading the file",
            )
        finally:
            fp.close()

    async def upload_stream(
        self,
        server_id: str,
        path: str,
        stream: IO[bytes] | AsyncIterable[bytes] | bytes,
    ) -> None:
        """Upload from an already open binary stream; the caller keeps ownership of it."""
        content: Any = stream
        if hasattr(stream, "read"):
            content = _read_chunks(stream)
        await self._client.call_raw(
            "PUT",
            resources.file_data(server_id, path),
            content=content,
            message="An error occurred uploading the file",
        )

    async def delete(self, server_id: str, path: str) -> None:
        await self._client.call_raw(
            "DELETE",
            resources.file_data(server_id, path),
            message="An error occurred deleting the file from the server",
        )

    async def create_directory(self, server_id: str, path: str) -> None:
        await self._client.call_raw(
            "PUT",
            resources.file_data(server_id, path),
            headers={"Content-Type": "inode/directory"},
            message="An error occurred creating the directory",
        )
