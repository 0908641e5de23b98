"""Configuration management for Duke."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DUKE_HOME = Path(os.environ.get("DUKE_HOME", Path.home() / "duke"))
CONFIG_FILE = DUKE_HOME / "config" / "duke.conf"
DATA_DIR = DUKE_HOME / "data"


@dataclass
class Config:
    """Duke configuration."""

    data_file: str = str(DATA_DIR / "tasks.json")
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            users.append(int(entry))
        except ValueError:
            logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {entry!r}")
    return users


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from duke.conf file."""
    config_file = config_file or CONFIG_FILE
    config = Config()

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = str(Path(value).expanduser())
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
