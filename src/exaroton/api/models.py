"""Pydantic models for exaroton API payloads."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from exaroton.api.exceptions import ExarotonValidationError


class _ExarotonModel(BaseModel):
    """Read-only model using the API's camelCase keys on the wire."""
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ServerStatus(IntEnum):
    OFFLINE = 0
    ONLINE = 1
    STARTING = 2
    STOPPING = 3
    RESTARTING = 4
    SAVING = 5
    LOADING = 6
    CRASHED = 7
    PENDING = 8
    # 9 is not assigned by the API
    PREPARING = 10

    @classmethod
    def from_code(cls, code: int) -> ServerStatus:
        if isinstance(code, bool) or not isinstance(code, int):
            raise ExarotonValidationError(f"Invalid status code: {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise ExarotonValidationError(f"Invalid status code: {code}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


class Account(_ExarotonModel):
    name: str
    email: str
    verified: bool
    credits: float


class PlayerInfo(_ExarotonModel):
    max: int
    count: int
    names: list[str] = Field(alias="list")


class Software(_ExarotonModel):
    id: str
    name: str
    version: str


class ServerData(_ExarotonModel):
    id: str
    name: str
    address: str
    motd: str
    status: ServerStatus
    host: str | None = None
    port: int | None = None
    players: PlayerInfo
    software: Software | None = None
    shared: bool

    @field_validator("status", mode="before")
    @classmethod
    def _decode_status(cls, v):
        if isinstance(v, ServerStatus):
            return v
        return ServerStatus.from_code(v)


class FileInfoData(_ExarotonModel):
    path: str
    name: str
    is_text_file: bool
    is_config_file: bool
    is_directory: bool
    is_log: bool
    is_readable: bool
    is_writable: bool
    size: int
    # None means "not listed", which is not the same as an empty directory
    children: list[FileInfoData] | None = None

    @field_validator("path", mode="after")
    @classmethod
    def _normalize_path(cls, v: str) -> str:
        return v.lstrip("/")


class Logs(_ExarotonModel):
    content: str | None = None


class ShareLogs(_ExarotonModel):
    id: str
    url: str
    raw: str


class Ram(_ExarotonModel):
    ram: int


class Motd(_ExarotonModel):
    motd: str


class Command(_ExarotonModel):
    command: str


class StartOptions(_ExarotonModel):
    use_own_credits: bool = False


class PlayerListEntries(_ExarotonModel):
    entries: list[str]


FileInfoData.model_rebuild()
