"""Configuration management for fitdash."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

FITDASH_HOME = Path(os.environ.get("FITDASH_HOME", Path.home() / "fitdash"))
CONFIG_FILE = FITDASH_HOME / "config" / "fitdash.conf"

DEFAULT_CHAT_ENDPOINT = "https://api.groq.com/v1/chat"
DEFAULT_CHAT_TIMEOUT = 30.0

API_KEY_ENV = "FITDASH_CHAT_API_KEY"
ENDPOINT_ENV = "FITDASH_CHAT_ENDPOINT"


@dataclass
class Config:
    """fitdash configuration."""

    chat_api_key: str = field(default="", repr=False)
    chat_endpoint: str = DEFAULT_CHAT_ENDPOINT
    chat_timeout: float = DEFAULT_CHAT_TIMEOUT


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def _parse_timeout(value: str, current: float) -> float:
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Invalid CHAT_TIMEOUT {value!r}, keeping {current}s")
        return current
    if timeout <= 0:
        logger.warning(f"CHAT_TIMEOUT must be positive, keeping {current}s")
        return current
    return timeout


def load_config(path: Path | None = None) -> Config:
    """Load configuration from fitdash.conf, then apply environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "chat_api_key":
                    config.chat_api_key = value
                case "chat_endpoint":
                    config.chat_endpoint = value
                case "chat_timeout":
                    config.chat_timeout = _parse_timeout(value, config.chat_timeout)
                case _:
                    logger.debug(f"Ignoring unknown config key: {key}")

    # Environment wins over the file so secrets can stay out of it
    if os.environ.get(API_KEY_ENV):
        config.chat_api_key = os.environ[API_KEY_ENV]
    if os.environ.get(ENDPOINT_ENV):
        config.chat_endpoint = os.environ[ENDPOINT_ENV]

    return config
