from datetime import date, timedelta

import pytest
import pytest_asyncio

from gym_service.domain.entities import Membership, MembershipPlan, MembershipStatus

TODAY = date(2025, 3, 10)


@pytest_asyncio.fixture
async def plan_id(db_session):
    plan = MembershipPlan(name="Monthly", duration_days=30, price=50.0)
    db_session.add(plan)
    await db_session.commit()
    return plan.id


def new_membership(user_id, plan_id, start, status):
    return Membership(
        user_id=user_id,
        plan_id=plan_id,
        start_date=start,
        end_date=start + timedelta(days=29),
        status=status,
    )


@pytest.mark.asyncio
async def test_create_get_and_update(uow_scope, create_user, plan_id):
    user_id = await create_user("store@example.com")

    async with uow_scope() as uow, uow:
        created = await uow.memberships.create(
            new_membership(user_id, plan_id, TODAY, MembershipStatus.pending)
        )
        await uow.commit()
        membership_id = created.id

    async with uow_scope() as uow, uow:
        membership = await uow.memberships.get_by_id(membership_id)
        assert membership.status == MembershipStatus.pending

        membership.status = MembershipStatus.active
        await uow.memberships.update(membership)
        await uow.commit()

    async with uow_scope() as uow, uow:
        assert (await uow.memberships.get_by_id(membership_id)).status == MembershipStatus.active


@pytest.mark.asyncio
async def test_get_by_user_id_ordered_by_start(uow_scope, create_user, plan_id):
    user_id = await create_user("history@example.com")
    other_id = await create_user("other@example.com")

    async with uow_scope() as uow, uow:
        await uow.memberships.create(new_membership(user_id, plan_id, TODAY, MembershipStatus.active))
        await uow.memberships.create(
            new_membership(user_id, plan_id, TODAY - timedelta(days=60), MembershipStatus.expired)
        )
        await uow.memberships.create(new_membership(other_id, plan_id, TODAY, MembershipStatus.active))
        await uow.commit()

    async with uow_scope() as uow, uow:
        history = await uow.memberships.get_by_user_id(user_id)

    assert [m.start_date for m in history] == [TODAY - timedelta(days=60), TODAY]


@pytest.mark.asyncio
async def test_list_by_status(uow_scope, create_user, plan_id):
    user_id = await create_user("status@example.com")

    async with uow_scope() as uow, uow:
        await uow.memberships.create(
            new_membership(user_id, plan_id, TODAY - timedelta(days=60), MembershipStatus.expired)
        )
        await uow.memberships.create(new_membership(user_id, plan_id, TODAY, MembershipStatus.active))
        await uow.memberships.create(
            new_membership(user_id, plan_id, TODAY + timedelta(days=30), MembershipStatus.pending)
        )
        await uow.commit()

    async with uow_scope() as uow, uow:
        pending = await uow.memberships.list_by_status(MembershipStatus.pending)
        expired = await uow.memberships.list_by_status(MembershipStatus.expired)

    assert [m.start_date for m in pending] == [TODAY + timedelta(days=30)]
    assert [m.start_date for m in expired] == [TODAY - timedelta(days=60)]
