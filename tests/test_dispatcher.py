"""Tests for message dispatcher."""
import random
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.errors import StoreError
from ingest.dispatcher import MessageDispatcher
from ingest.telegram_client import (
    CHAT_CHANNEL, CHAT_GROUP, CHAT_PRIVATE, IncomingMessage, chat_type_of, to_incoming,
)
from storage.publisher import EventPublisher
from utils.metrics import get_metrics


@pytest.fixture
def dispatcher(gazetteer, store):
    return MessageDispatcher(gazetteer=gazetteer, publisher=EventPublisher(store, rng=random.Random(7)))


def make_message(text: str, chat_type: str = CHAT_CHANNEL, msg_id: int = 1) -> IncomingMessage:
    """Create IncomingMessage for testing."""
    return IncomingMessage(
        id=msg_id,
        text=text,
        chat_id=-100123,
        chat_type=chat_type,
        timestamp=datetime.now(),
    )


@pytest.mark.asyncio
async def test_channel_post_publishes(dispatcher, store):
    records = await dispatcher.process_message(make_message("2 БпЛА на Суми"))
    assert len(records) == 2
    assert store.get_all.await_count == 1
    assert store.set.await_count == 2


@pytest.mark.asyncio
async def test_direct_message_skips_purge(dispatcher, store):
    records = await dispatcher.process_message(make_message("2 БпЛА на Суми", chat_type=CHAT_PRIVATE))
    assert len(records) == 2
    store.get_all.assert_not_awaited()
    store.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_group_message_is_not_channel_scoped(dispatcher, store):
    await dispatcher.process_message(make_message("БпЛА на Київ", chat_type=CHAT_GROUP))
    store.get_all.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_message_ignored(dispatcher, store):
    assert await dispatcher.process_message(make_message("")) == []
    assert store.method_calls == []


@pytest.mark.asyncio
async def test_off_topic_message_has_no_store_calls(dispatcher, store):
    records = await dispatcher.process_message(make_message("Повітряна тривога на Київщині"))
    assert records == []
    assert store.method_calls == []
    assert get_metrics().messages_ignored == 1


@pytest.mark.asyncio
async def test_rocket_type_from_keywords(dispatcher, store):
    records = await dispatcher.process_message(make_message("2 БпЛА на Суми\n1 ракета на Київ"))
    assert {r.type.value for r in records} == {"rocket"}


@pytest.mark.asyncio
async def test_handle_logs_store_failure(dispatcher, store):
    store.get_all.side_effect = StoreError("HTTP 401")

    await dispatcher.handle(make_message("2 БпЛА на Суми"))

    store.set.assert_not_awaited()
    assert dispatcher.stats["failed"] == 1
    assert get_metrics().store_failures == 1


@pytest.mark.asyncio
async def test_handle_keeps_partial_writes(dispatcher, store):
    """A failure mid-batch leaves already written records and doesn't retry."""
    written = {}
    calls = {"n": 0}

    async def flaky_set(key, value):
        calls["n"] += 1
        if calls["n"] == 2:
            raise StoreError("connection reset")
        written[key] = value

    store.set.side_effect = flaky_set

    await dispatcher.handle(make_message("3 БпЛА на Київ", chat_type=CHAT_PRIVATE))

    assert len(written) == 1
    assert store.set.await_count == 2
    assert dispatcher.stats["failed"] == 1


@pytest.mark.asyncio
async def test_dispatcher_stats(dispatcher):
    await dispatcher.process_message(make_message("3 БпЛА на Київ"))
    stats = dispatcher.stats
    assert stats["processed"] == 1
    assert stats["published"] == 3
    assert stats["failed"] == 0


def _event(is_channel: bool, is_group: bool, text: str = "БпЛА на Київ"):
    event = MagicMock()
    event.is_channel = is_channel
    event.is_group = is_group
    event.chat_id = -100500
    event.message.id = 42
    event.message.message = text
    event.message.date = datetime(2024, 1, 1)
    return event


def test_chat_type_of():
    assert chat_type_of(_event(is_channel=True, is_group=False)) == CHAT_CHANNEL
    assert chat_type_of(_event(is_channel=True, is_group=True)) == CHAT_GROUP
    assert chat_type_of(_event(is_channel=False, is_group=True)) == CHAT_GROUP
    assert chat_type_of(_event(is_channel=False, is_group=False)) == CHAT_PRIVATE


def test_to_incoming():
    message = to_incoming(_event(is_channel=True, is_group=False))
    assert message.id == 42
    assert message.text == "БпЛА на Київ"
    assert message.chat_id == -100500
    assert message.is_channel_post


def test_to_incoming_without_text():
    message = to_incoming(_event(is_channel=False, is_group=False, text=None))
    assert message.text == ""
    assert not message.is_channel_post


@pytest.mark.asyncio
async def test_handler_wiring():
    """add_handler converts Telethon events and passes them on."""
    from ingest.telegram_client import TelegramIngestClient

    client = TelegramIngestClient(api_id=1, api_hash="hash", bot_token="token")
    client._client = MagicMock()
    received = AsyncMock()

    client.add_handler(received)
    callback = client._client.add_event_handler.call_args[0][0]
    await callback(_event(is_channel=True, is_group=False))

    received.assert_awaited_once()
    assert received.await_args[0][0].is_channel_post
