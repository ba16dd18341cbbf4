"""
Message dispatcher - orchestrates the parsing pipeline.
Routes messages through scope check -> classification -> extraction -> publish.
"""
import logging
from typing import List

from .telegram_client import IncomingMessage, TelegramIngestClient
from core.errors import StoreError
from core.event import EventRecord
from core.gazetteer import Gazetteer
from parsers.classification import classify_threat, is_threat_message
from parsers.extraction import extract_locations
from storage.firebase import FirebaseStore
from storage.publisher import EventPublisher
from utils.metrics import get_metrics
from utils.text import normalize

logger = logging.getLogger(__name__)


class MessageDispatcher:
    """
    Central dispatcher for message processing pipeline.

    Pipeline:
    1. Receive raw message
    2. Check threat vocabulary (else ignore)
    3. Classify threat type (rocket before shahed)
    4. Extract and resolve locations
    5. Publish: channel posts replace same-type records, direct messages append
    """

    def __init__(self, gazetteer: Gazetteer, publisher: EventPublisher):
        self.gazetteer = gazetteer
        self.publisher = publisher

        self._processed_count = 0
        self._published_count = 0
        self._failed_count = 0

    async def process_message(self, message: IncomingMessage) -> List[EventRecord]:
        """
        Process a single incoming message.

        Store errors propagate to the caller; see handle().

        Args:
            message: Incoming message from Telegram

        Returns:
            Records written to the store
        """
        metrics = get_metrics()
        metrics.messages_received += 1

        if not message.text:
            metrics.messages_ignored += 1
            return []

        normalized = normalize(message.text)
        if not is_threat_message(normalized):
            logger.debug(f"Not about drones/rockets, skipped (chat {message.chat_id})")
            metrics.messages_ignored += 1
            return []

        threat_type = classify_threat(normalized)
        locations = extract_locations(message.text, self.gazetteer)
        logger.info(
            f"{threat_type.value} message in {message.chat_type} {message.chat_id}: "
            + (", ".join(f"{loc.name}: {loc.count}" for loc in locations.values()) or "no locations"),
            extra={'chat_id': message.chat_id}
        )

        records = await self.publisher.publish(
            threat_type,
            locations,
            channel_scoped=message.is_channel_post
        )

        self._processed_count += 1
        self._published_count += len(records)
        return records

    async def handle(self, message: IncomingMessage) -> None:
        """
        Per-message error boundary.

        A failed message is logged and dropped: writes already made stay
        in the store and nothing is retried.
        """
        try:
            await self.process_message(message)
        except StoreError as e:
            self._failed_count += 1
            get_metrics().store_failures += 1
            logger.error(f"Store error processing message {message.id}: {e}", extra={'chat_id': message.chat_id})
        except Exception:
            self._failed_count += 1
            logger.exception(f"Error processing message {message.id}", extra={'chat_id': message.chat_id})

    @property
    def stats(self) -> dict:
        """Get dispatcher statistics."""
        return {
            'processed': self._processed_count,
            'published': self._published_count,
            'failed': self._failed_count,
        }


async def create_and_run_dispatcher(settings, gazetteer: Gazetteer) -> None:
    """
    Create bot client, store and dispatcher and run until disconnected.

    Convenience function for main().
    """
    client = TelegramIngestClient(
        api_id=settings.api_id,
        api_hash=settings.api_hash,
        bot_token=settings.bot_token
    )

    if not await client.connect():
        raise RuntimeError("Failed to connect to Telegram")

    store = FirebaseStore.from_settings(settings)
    dispatcher = MessageDispatcher(
        gazetteer=gazetteer,
        publisher=EventPublisher(store)
    )
    client.add_handler(dispatcher.handle)

    logger.info(f"Store: {settings.database_url}/{settings.namespace}")
    logger.info(f"Gazetteer: {len(gazetteer)} entries")

    try:
        await client.run_until_disconnected()
    finally:
        logger.info(f"Dispatcher stats: {dispatcher.stats}")
        await store.close()
        await client.disconnect()
