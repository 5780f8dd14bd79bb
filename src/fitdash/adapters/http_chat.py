"""HTTP chat adapter - JSON request/response client for the chat endpoint."""

import asyncio
import logging

import requests

from fitdash.config import DEFAULT_CHAT_ENDPOINT, DEFAULT_CHAT_TIMEOUT
from fitdash.core.chat import ChatServiceError

logger = logging.getLogger(__name__)


class HttpChatService:
    """
    Chat endpoint adapter.

    Implements ChatService protocol. Posts {"message": ...} with a bearer
    token and reads the "response" field. No business logic - just I/O.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_CHAT_ENDPOINT,
        timeout: float = DEFAULT_CHAT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session or requests.Session()

    def __repr__(self) -> str:
        return f"HttpChatService(endpoint={self.endpoint!r})"

    def _post(self, message: str) -> str:
        """Blocking request. Every failure mode surfaces as ChatServiceError."""
        try:
            resp = self._session.post(
                self.endpoint,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json={"message": message},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ChatServiceError(f"Request to {self.endpoint} failed: {e}") from e
        except Exception as e:
            # e.g. UnicodeEncodeError from http.client on a non-latin-1 header value
            raise ChatServiceError(f"Could not send request to {self.endpoint}: {e!r}") from e

        if not resp.ok:
            raise ChatServiceError(f"Chat endpoint returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ChatServiceError("Chat endpoint returned invalid JSON") from e

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise ChatServiceError("Chat endpoint response has no 'response' text")

        logger.debug(f"Chat reply received ({len(data['response'])} chars)")
        return data["response"]

    async def reply(self, message: str) -> str:
        """Send one message without blocking the event loop."""
        return await asyncio.to_thread(self._post, message)
