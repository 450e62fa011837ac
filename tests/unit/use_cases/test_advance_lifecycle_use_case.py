from datetime import date

import pytest

from gym_service.app.use_cases.memberships import AdvanceLifecycleUseCase


@pytest.mark.asyncio
async def test_activates_then_expires_with_separate_commits(mock_uow):
    mock_uow.memberships.activate_pending.return_value = 2
    mock_uow.memberships.expire_active.return_value = 1
    today = date(2025, 3, 10)

    result = await AdvanceLifecycleUseCase(mock_uow).execute(today)

    assert result.is_ok()
    assert result.value.activated == 2
    assert result.value.expired == 1
    assert result.value.today == today
    mock_uow.memberships.activate_pending.assert_awaited_once_with(today)
    mock_uow.memberships.expire_active.assert_awaited_once_with(today)
    assert mock_uow.commit.await_count == 2


@pytest.mark.asyncio
async def test_nothing_to_do(mock_uow):
    mock_uow.memberships.activate_pending.return_value = 0
    mock_uow.memberships.expire_active.return_value = 0

    result = await AdvanceLifecycleUseCase(mock_uow).execute(date(2025, 3, 10))

    assert result.is_ok()
    assert result.value.activated == 0
    assert result.value.expired == 0


@pytest.mark.asyncio
async def test_store_error_propagates(mock_uow):
    mock_uow.memberships.activate_pending.return_value = 1
    mock_uow.memberships.expire_active.side_effect = RuntimeError("database is locked")

    with pytest.raises(RuntimeError):
        await AdvanceLifecycleUseCase(mock_uow).execute(date(2025, 3, 10))

    # First update already committed
    assert mock_uow.commit.await_count == 1
