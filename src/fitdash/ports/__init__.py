"""Ports - interfaces/protocols for external dependencies."""

from .chat_service import ChatService

__all__ = [
    "ChatService",
]
