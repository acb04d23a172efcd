"""Configuration management for taskdeck."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.engine import ViewSettings
from .core.sorting import DEFAULT_SORT

logger = logging.getLogger(__name__)

TASKDECK_HOME = Path(os.environ.get("TASKDECK_HOME", Path.home() / "taskdeck"))
CONFIG_FILE = TASKDECK_HOME / "config" / "taskdeck.conf"
TOKEN_FILE = TASKDECK_HOME / "config" / ".token.json"


@dataclass
class Config:
    """taskdeck configuration."""

    api_url: str = "http://localhost:8080/api"
    request_timeout: int = 10
    snapshot_file: str = ""
    default_sort: str = DEFAULT_SORT.value
    upcoming_limit: int = 5
    recent_limit: int = 5
    calendar_cell_limit: int = 3

    def view_settings(self) -> ViewSettings:
        return ViewSettings(
            upcoming_limit=self.upcoming_limit,
            recent_limit=self.recent_limit,
            calendar_cell_limit=self.calendar_cell_limit,
        )


@dataclass
class Tokens:
    """Bearer token for the todo API."""

    access_token: str = ""

    def save(self, path: Path | None = None) -> None:
        """Save token to file."""
        path = path or TOKEN_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"access_token": self.access_token}))
        path.chmod(0o600)

    @classmethod
    def load(cls, path: Path | None = None) -> "Tokens":
        """Load token from file. TASKDECK_TOKEN overrides the file."""
        env_token = os.environ.get("TASKDECK_TOKEN")
        if env_token:
            return cls(access_token=env_token)
        path = path or TOKEN_FILE
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
            return cls(access_token=data.get("access_token", ""))
        except (json.JSONDecodeError, AttributeError):
            logger.warning(f"Ignoring unreadable token file {path}")
            return cls()


def _parse_value(value: str) -> str:
    """Strip quotes, or inline comments on unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, keeping {default}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskdeck.conf."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _parse_value(value.strip())

        match key:
            case "api_url":
                config.api_url = value.rstrip("/")
            case "request_timeout":
                config.request_timeout = _parse_int(key, value, config.request_timeout)
            case "snapshot_file":
                config.snapshot_file = value
            case "default_sort":
                config.default_sort = value
            case "upcoming_limit":
                config.upcoming_limit = _parse_int(key, value, config.upcoming_limit)
            case "recent_limit":
                config.recent_limit = _parse_int(key, value, config.recent_limit)
            case "calendar_cell_limit":
                config.calendar_cell_limit = _parse_int(key, value, config.calendar_cell_limit)
            case _:
                logger.debug(f"Ignoring unknown config key {key}")

    return config
