"""Adapters - I/O implementations of ports."""

from .http_chat import HttpChatService

__all__ = [
    "HttpChatService",
]
