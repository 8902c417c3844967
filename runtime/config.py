"""
Bot Configuration

Reads the startup settings for the homework bot:
- Discord bot token (required)
- Keep-alive server port (optional, defaults to 3000)

Values come from the process environment, with a local .env file loaded
first so existing variables always win.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class ConfigError(Exception):
    """Raised when required settings are missing or malformed"""
    pass


@dataclass(frozen=True)
class BotConfig:
    """Configuration for the homework bot process"""
    discord_token: str
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "BotConfig":
        """Build the config from environment variables, loading .env first"""
        load_dotenv(dotenv_path, override=False)

        token = os.getenv("DISCORD_BOT_TOKEN", "").strip()
        if not token:
            raise ConfigError("DISCORD_BOT_TOKEN is not set")

        port = _parse_port(os.getenv("PORT"))
        logger.info(f"Configuration loaded (port={port})")
        return cls(discord_token=token, port=port)


def _parse_port(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"PORT out of range: {port}")
    return port
