"""Chat history and the asynchronous message exchange."""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fitdash.ports.chat_service import ChatService

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, something went wrong. Please try again later."


class ChatServiceError(Exception):
    """Raised by chat services when no usable reply could be obtained."""

    pass


class Sender(Enum):
    USER = "user"
    BOT = "bot"


class ExchangeStatus(Enum):
    """Lifecycle of one user message: sent (pending) until the reply resolves it."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ChatMessage:
    text: str
    sender: Sender


@dataclass
class ChatExchange:
    """A user message and the state of its outbound request."""

    message: ChatMessage
    status: ExchangeStatus = ExchangeStatus.PENDING

    @property
    def resolved(self) -> bool:
        return self.status is not ExchangeStatus.PENDING


class ChatSession:
    """
    Owns the chat history and performs one outbound call per user message.

    The user message is appended before the request goes out. The bot reply
    is appended to whatever the history holds when the request resolves, so
    concurrent sends never overwrite each other. Replies land in resolution
    order, not send order.
    """

    def __init__(
        self,
        service: "ChatService",
        timeout: float | None = 30.0,
        initial: list[ChatMessage] | None = None,
    ):
        self.service = service
        self.timeout = timeout
        self._messages: list[ChatMessage] = list(initial or [])
        self._exchanges: list[ChatExchange] = []

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    @property
    def exchanges(self) -> list[ChatExchange]:
        return list(self._exchanges)

    @property
    def pending(self) -> int:
        """Number of user messages still waiting on a reply."""
        return sum(1 for e in self._exchanges if not e.resolved)

    async def send(self, text: str) -> ChatMessage | None:
        """
        Send a user message and append the bot's answer.

        Blank text is ignored and returns None. Otherwise returns the bot
        message that was appended: the service reply, or the fallback text
        when the service fails or times out.
        """
        if not text.strip():
            logger.debug("Ignoring blank chat message")
            return None

        user_message = ChatMessage(text, Sender.USER)
        exchange = ChatExchange(user_message)
        self._messages.append(user_message)
        self._exchanges.append(exchange)

        try:
            reply = await asyncio.wait_for(self.service.reply(text), timeout=self.timeout)
        except ChatServiceError as e:
            logger.warning(f"Chat request failed: {e}")
            exchange.status = ExchangeStatus.FAILED
            reply = FALLBACK_REPLY
        except asyncio.TimeoutError:
            logger.warning(f"Chat request timed out after {self.timeout}s")
            exchange.status = ExchangeStatus.FAILED
            reply = FALLBACK_REPLY
        except Exception as e:
            # Cancellation is a BaseException and still propagates
            logger.warning(f"Chat service raised unexpectedly: {e!r}")
            exchange.status = ExchangeStatus.FAILED
            reply = FALLBACK_REPLY
        else:
            exchange.status = ExchangeStatus.SUCCEEDED

        bot_message = ChatMessage(reply, Sender.BOT)
        self._messages.append(bot_message)
        return bot_message
