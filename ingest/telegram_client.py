"""
Telegram bot client wrapper for message ingestion.
Handles bot login and delivers channel posts and direct messages.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from telethon import TelegramClient, events
from telethon.sessions import StringSession

logger = logging.getLogger(__name__)

CHAT_CHANNEL = "channel"
CHAT_GROUP = "group"
CHAT_PRIVATE = "private"


@dataclass
class IncomingMessage:
    """Wrapper for incoming Telegram message."""
    id: int
    text: str
    chat_id: int
    chat_type: str
    timestamp: datetime
    raw_message: Any = None  # Original Telethon message

    @property
    def is_channel_post(self) -> bool:
        """Broadcast channel post (as opposed to group or private chat)."""
        return self.chat_type == CHAT_CHANNEL


def chat_type_of(event) -> str:
    """Classify a Telethon NewMessage event by chat kind."""
    if event.is_channel and not event.is_group:
        return CHAT_CHANNEL
    if event.is_group:
        return CHAT_GROUP
    return CHAT_PRIVATE


def to_incoming(event) -> IncomingMessage:
    """Convert Telethon NewMessage event to IncomingMessage."""
    message = event.message
    return IncomingMessage(
        id=message.id,
        text=message.message or "",
        chat_id=event.chat_id,
        chat_type=chat_type_of(event),
        timestamp=message.date or datetime.now(),
        raw_message=message
    )


MessageHandler = Callable[[IncomingMessage], Awaitable[Any]]


class TelegramIngestClient:
    """
    Telegram bot client.

    The bot receives posts of channels it administers and messages sent
    to it directly; every message is passed to the registered handler.
    Telethon runs each update in its own task, so handlers for separate
    messages may overlap.
    """

    def __init__(self, api_id: int, api_hash: str, bot_token: str):
        self.api_id = api_id
        self.api_hash = api_hash
        self.bot_token = bot_token

        self._client: Optional[TelegramClient] = None

    async def connect(self) -> bool:
        """Log in as bot."""
        try:
            self._client = TelegramClient(StringSession(), self.api_id, self.api_hash)
            await self._client.start(bot_token=self.bot_token)

            me = await self._client.get_me()
            logger.info(f"Connected as: @{me.username} (id: {me.id})")
            return True

        except Exception as e:
            logger.error(f"Connection failed: {e}")
            return False

    def add_handler(self, handler: MessageHandler) -> None:
        """Route every new message to handler(IncomingMessage)."""
        if not self._client:
            raise RuntimeError("Not connected")

        async def _on_new_message(event):
            message = to_incoming(event)
            logger.debug(f"New {message.chat_type} message {message.id} in {message.chat_id}")
            await handler(message)

        self._client.add_event_handler(_on_new_message, events.NewMessage())

    async def run_until_disconnected(self) -> None:
        if not self._client:
            raise RuntimeError("Not connected")
        await self._client.run_until_disconnected()

    async def disconnect(self):
        """Disconnect from Telegram."""
        if self._client:
            await self._client.disconnect()
