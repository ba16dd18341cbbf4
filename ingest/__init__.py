"""Ingest module - Telegram bot client and message dispatching."""
from .telegram_client import IncomingMessage, TelegramIngestClient
from .dispatcher import MessageDispatcher

__all__ = ['IncomingMessage', 'TelegramIngestClient', 'MessageDispatcher']
