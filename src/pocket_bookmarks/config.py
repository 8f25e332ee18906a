"""Configuration loading and saving.

Config file location: ~/.config/pocket-bookmarks/config.toml

Schema:
    [auth]
    consumer_key = "..."
    access_token = "..."
    username = "..."

    [api]
    host = "https://getpocket.com/v3"

    [fetch]
    timeout = 30.0
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w

from .client import DEFAULT_TIMEOUT, ClientConfig

CONFIG_DIR = Path.home() / ".config" / "pocket-bookmarks"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_HOST = "https://getpocket.com/v3"


@dataclass
class AuthConfig:
    consumer_key: str
    access_token: str
    username: str = ""


@dataclass
class AppConfig:
    auth: AuthConfig
    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            host=self.host,
            consumer_key=self.auth.consumer_key,
            access_token=self.auth.access_token,
            username=self.auth.username,
        )


def load_config(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load and validate config from TOML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    auth_data = data.get("auth", {})
    consumer_key = auth_data.get("consumer_key", "")
    access_token = auth_data.get("access_token", "")

    if not consumer_key or not access_token:
        raise ValueError(
            "Config missing required auth.consumer_key and auth.access_token"
        )

    api_data = data.get("api", {})
    fetch_data = data.get("fetch", {})

    return AppConfig(
        auth=AuthConfig(
            consumer_key=consumer_key,
            access_token=access_token,
            username=auth_data.get("username", ""),
        ),
        host=api_data.get("host", DEFAULT_HOST),
        timeout=float(fetch_data.get("timeout", DEFAULT_TIMEOUT)),
    )


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file with restricted permissions."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "auth": {
            "consumer_key": config.auth.consumer_key,
            "access_token": config.auth.access_token,
            "username": config.auth.username,
        },
        "api": {
            "host": config.host,
        },
        "fetch": {
            "timeout": config.timeout,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

    # Restrict permissions: file contains the access token
    os.chmod(config_path, 0o600)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    """Check if config file exists."""
    return config_path.exists()
