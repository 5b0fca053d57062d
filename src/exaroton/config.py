"""Configuration management for the exaroton client.

Reads and writes TOML config at ~/.config/exaroton/config.toml. The
``EXAROTON_TOKEN`` environment variable takes precedence over the file.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

VERSION = "1.0.0"

DEFAULT_HOST = "api.exaroton.com"
DEFAULT_PROTOCOL = "https"
API_PREFIX = "v1/"
USER_AGENT = f"exaroton-py@{VERSION}"

TOKEN_ENV = "EXAROTON_TOKEN"
SERVER_ID_ENV = "EXAROTON_SERVER_ID"

CONFIG_DIR = Path.home() / ".config" / "exaroton"
CONFIG_PATH = CONFIG_DIR / "config.toml"


@dataclass
class APIConfig:
    token: str = ""
    host: str = DEFAULT_HOST
    protocol: str = DEFAULT_PROTOCOL
    user_agent: str = USER_AGENT


@dataclass
class ExarotonConfig:
    api: APIConfig = field(default_factory=APIConfig)


def current_server_id() -> str | None:
    """Server id from the environment, or None when unset or blank."""
    value = os.environ.get(SERVER_ID_ENV)
    if not value or not value.strip():
        return None
    return value


def _read_file() -> dict:
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def load_config() -> ExarotonConfig:
    """Load config from TOML file, returning defaults if missing or corrupt."""
    data = _read_file()
    api_data = data.get("api", {})

    config = ExarotonConfig(
        api=APIConfig(
            token=api_data.get("token", ""),
            host=api_data.get("host", DEFAULT_HOST),
            protocol=api_data.get("protocol", DEFAULT_PROTOCOL),
            user_agent=api_data.get("user_agent", USER_AGENT),
        ),
    )

    token = os.environ.get(TOKEN_ENV)
    if token:
        config.api.token = token
    return config


def save_config(config: ExarotonConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "api": {
            "token": config.api.token,
            "host": config.api.host,
            "protocol": config.api.protocol,
            "user_agent": config.api.user_agent,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)
