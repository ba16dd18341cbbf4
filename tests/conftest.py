"""
Pytest configuration and fixtures.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.gazetteer import Gazetteer
from storage.firebase import FirebaseStore
from utils.metrics import get_metrics

KYIV = (50.4501, 30.5234)
SUMY = (50.9077, 34.7981)


@pytest.fixture(autouse=True)
def reset_metrics():
    get_metrics().reset()
    yield
    get_metrics().reset()


@pytest.fixture
def gazetteer():
    """Bundled gazetteer."""
    return Gazetteer.default()


@pytest.fixture
def store():
    """Store mock backed by a dict, records every call."""
    data = {}
    mock = MagicMock(spec=FirebaseStore)

    async def get_all():
        return dict(data)

    async def set_(key, value):
        data[key] = value

    async def delete(key):
        data.pop(key, None)

    mock.get_all = AsyncMock(side_effect=get_all)
    mock.set = AsyncMock(side_effect=set_)
    mock.delete = AsyncMock(side_effect=delete)
    mock.data = data
    return mock
