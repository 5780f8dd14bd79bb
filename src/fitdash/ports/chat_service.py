"""Chat service interface."""

from typing import Protocol


class ChatService(Protocol):
    """Interface for a remote text-completion endpoint."""

    async def reply(self, message: str) -> str:
        """Return the reply text for one user message.

        Raises ChatServiceError when no usable reply is available.
        """
        ...
