"""Resource paths for the exaroton API.

Every endpoint is an ordered chain of segments. Literal segments are used
verbatim, parameter segments are percent-encoded so that a value such as a
nested file path travels as a single path component.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote


@dataclass(frozen=True)
class Segment:
    value: str
    param: bool = False

    def render(self) -> str:
        if self.param:
            return quote(self.value, safe="")
        return self.value


@dataclass(frozen=True)
class Resource:
    segments: tuple[Segment, ...] = ()

    def child(self, name: str) -> Resource:
        return Resource(self.segments + (Segment(name),))

    def param(self, value: str) -> Resource:
        return Resource(self.segments + (Segment(str(value), param=True),))

    @property
    def path(self) -> str:
        """Path relative to the API base URL, without a leading slash."""
        return "/".join(segment.render() for segment in self.segments)

    def __str__(self) -> str:
        return self.path


def clean_server_id(server_id: str) -> str:
    """Strip whitespace and the leading ``#`` shown in the exaroton panel."""
    return server_id.strip().lstrip("#").strip()


def normalize_path(path: str) -> str:
    return path.lstrip("/")


ROOT = Resource()


def account() -> Resource:
    return ROOT.child("account")


def servers() -> Resource:
    return ROOT.child("servers")


def server(server_id: str) -> Resource:
    return servers().param(clean_server_id(server_id))


def logs(server_id: str) -> Resource:
    return server(server_id).child("logs")


def share_logs(server_id: str) -> Resource:
    return logs(server_id).child("share")


def options(server_id: str) -> Resource:
    return server(server_id).child("options")


def motd(server_id: str) -> Resource:
    return options(server_id).child("motd")


def ram(server_id: str) -> Resource:
    return options(server_id).child("ram")


def start(server_id: str) -> Resource:
    return server(server_id).child("start")


def stop(server_id: str) -> Resource:
    return server(server_id).child("stop")


def restart(server_id: str) -> Resource:
    return server(server_id).child("restart")


def command(server_id: str) -> Resource:
    return server(server_id).child("command")


def playerlists(server_id: str) -> Resource:
    return server(server_id).child("playerlists")


def playerlist(server_id: str, name: str) -> Resource:
    return playerlists(server_id).param(name)


def files(server_id: str) -> Resource:
    return server(server_id).child("files")


def file_info(server_id: str, path: str) -> Resource:
    return files(server_id).child("info").param(normalize_path(path))


def file_data(server_id: str, path: str) -> Resource:
    return files(server_id).child("data").param(normalize_path(path))


def websocket(server_id: str) -> Resource:
    return server(server_id).child("websocket")
