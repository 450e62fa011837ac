from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.fixtures.clock import FixedClock
from tests.fixtures.message_sender import RecordingMessageSender


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository method as an AsyncMock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = AsyncMock()
    uow.plans = AsyncMock()
    uow.memberships = AsyncMock()
    uow.attendance = AsyncMock()
    uow.health_metrics = AsyncMock()
    uow.notifications = AsyncMock()

    return uow


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 3, 10, 10, 0, 0))


@pytest.fixture
def sender():
    return RecordingMessageSender()
