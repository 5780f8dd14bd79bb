"""Wiring layer between configuration, adapters and the core."""

import logging

from .adapters.http_chat import HttpChatService
from .config import Config, load_config
from .core.chat import ChatSession
from .core.dashboard import Dashboard
from .ports.chat_service import ChatService

logger = logging.getLogger(__name__)


def create_chat_service(config: Config) -> HttpChatService:
    """Build the HTTP chat adapter from config. The key is never hardcoded."""
    if not config.chat_api_key:
        logger.warning("No chat API key configured - chat replies will fall back to the error message")
    return HttpChatService(
        api_key=config.chat_api_key,
        endpoint=config.chat_endpoint,
        timeout=config.chat_timeout,
    )


def create_dashboard(config: Config | None = None, chat_service: ChatService | None = None) -> Dashboard:
    """Create a fresh dashboard with empty state slices."""
    config = config or load_config()
    service = chat_service or create_chat_service(config)
    return Dashboard(chat=ChatSession(service, timeout=config.chat_timeout))
