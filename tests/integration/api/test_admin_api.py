from contextlib import asynccontextmanager
from datetime import date, datetime, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient

from gym_service.domain.entities import AttendanceEntry, Membership, MembershipPlan, MembershipStatus, UserRole

TODAY = date(2025, 3, 10)


@pytest_asyncio.fixture
async def plan(db_session):
    plan = MembershipPlan(name="Monthly", duration_days=30, price=50.0)
    db_session.add(plan)
    await db_session.commit()
    return plan


async def add_membership(db_session, user_id, plan_id, start, end, status=MembershipStatus.active):
    db_session.add(
        Membership(user_id=user_id, plan_id=plan_id, start_date=start, end_date=end, status=status)
    )
    await db_session.commit()


@pytest.mark.asyncio
async def test_member_cannot_reach_admin_routes(client: AsyncClient, member):
    _, headers = member

    for path in ("/admin/dashboard", "/admin/plans", "/admin/users", "/admin/export/attendance.csv"):
        response = await client.get(path, headers=headers)
        assert response.status_code == 403, path

    response = await client.post("/admin/run-daily", headers=headers)
    assert response.status_code == 403


# ============================================================================
# Reports
# ============================================================================


@pytest.mark.asyncio
async def test_admin_dashboard_stats(client: AsyncClient, admin, member, create_user, db_session, plan):
    member_id, _ = member
    _, headers = admin
    other = await create_user("other@example.com", name="Riley")
    await add_membership(db_session, member_id, plan.id, TODAY - timedelta(days=2), TODAY + timedelta(days=5))
    await add_membership(db_session, other, plan.id, TODAY - timedelta(days=60), TODAY + timedelta(days=20))
    db_session.add(AttendanceEntry(user_id=member_id, check_in=datetime(2025, 3, 10, 7, 0)))
    db_session.add(AttendanceEntry(user_id=member_id, check_in=datetime(2025, 3, 9, 7, 0)))
    await db_session.commit()

    data = (await client.get("/admin/dashboard", headers=headers)).json()

    assert data["stats"] == {
        "members": 2,
        "active_memberships": 2,
        "expiring_7d": 1,
        "checkins_today": 1,
        "revenue_30d": 50.0,
    }
    assert data["top_members"][0]["name"] == "Morgan"
    assert data["top_members"][0]["visits"] == 2
    assert [e["user_name"] for e in data["upcoming_expiries"]] == ["Morgan"]
    assert {u["email"] for u in data["latest_members"]} == {"member@example.com", "other@example.com"}


@pytest.mark.asyncio
async def test_membership_reports(client: AsyncClient, admin, member, create_user, db_session, plan):
    member_id, _ = member
    _, headers = admin
    later = await create_user("later@example.com", name="Sam")
    await add_membership(db_session, member_id, plan.id, TODAY - timedelta(days=25), TODAY + timedelta(days=4))
    await add_membership(db_session, later, plan.id, TODAY - timedelta(days=5), TODAY + timedelta(days=24))
    await add_membership(
        db_session, later, plan.id, TODAY + timedelta(days=25), TODAY + timedelta(days=54),
        MembershipStatus.pending,
    )

    active = (await client.get("/admin/memberships/active", headers=headers)).json()["memberships"]
    expiring = (await client.get("/admin/memberships/expiring", headers=headers)).json()["memberships"]

    assert [m["user_email"] for m in active] == ["member@example.com", "later@example.com"]
    assert [m["user_email"] for m in expiring] == ["member@example.com"]


@pytest.mark.asyncio
async def test_today_checkins(client: AsyncClient, admin, member, db_session):
    member_id, _ = member
    _, headers = admin
    db_session.add(AttendanceEntry(user_id=member_id, check_in=datetime(2025, 3, 10, 6, 0)))
    db_session.add(AttendanceEntry(user_id=member_id, check_in=datetime(2025, 3, 9, 23, 59)))
    await db_session.commit()

    checkins = (await client.get("/admin/checkins/today", headers=headers)).json()["checkins"]

    assert [c["check_in"] for c in checkins] == ["2025-03-10T06:00:00"]
    assert checkins[0]["member_name"] == "Morgan"


@pytest.mark.asyncio
async def test_export_attendance_csv(client: AsyncClient, admin, create_user, db_session):
    _, headers = admin
    quoted = await create_user("quoted@example.com", name='Alex "The Rock"')
    db_session.add(
        AttendanceEntry(
            user_id=quoted, check_in=datetime(2025, 3, 2, 7, 0), check_out=datetime(2025, 3, 2, 8, 30)
        )
    )
    db_session.add(AttendanceEntry(user_id=quoted, check_in=datetime(2025, 3, 3, 18, 0)))
    db_session.add(AttendanceEntry(user_id=quoted, check_in=datetime(2025, 3, 4, 9, 0)))
    await db_session.commit()

    response = await client.get(
        "/admin/export/attendance.csv", params={"from": "2025-03-02", "to": "2025-03-03"}, headers=headers
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="attendance_2025-03-02_to_2025-03-03.csv"'
    )
    assert response.text == (
        "Member,Check In,Check Out,Method\r\n"
        '"Alex ""The Rock""","2025-03-02 07:00:00","2025-03-02 08:30:00","manual"\r\n'
        '"Alex ""The Rock""","2025-03-03 18:00:00","","manual"\r\n'
    )


@pytest.mark.asyncio
async def test_export_attendance_defaults_and_bad_range(client: AsyncClient, admin):
    _, headers = admin

    default = await client.get("/admin/export/attendance.csv", headers=headers)
    reversed_range = await client.get(
        "/admin/export/attendance.csv", params={"from": "2025-03-05", "to": "2025-03-01"}, headers=headers
    )

    assert 'filename="attendance_2025-02-09_to_2025-03-10.csv"' in default.headers["content-disposition"]
    assert default.text == "Member,Check In,Check Out,Method\r\n"
    assert reversed_range.status_code == 400
    assert reversed_range.json()["error"]["code"] == "INVALID_DATE_RANGE"


# ============================================================================
# Plans
# ============================================================================


@pytest.mark.asyncio
async def test_plan_crud(client: AsyncClient, admin):
    _, headers = admin

    created = await client.post(
        "/admin/plans", json={"name": "Quarterly", "duration_days": 90, "price": 120}, headers=headers
    )
    assert created.status_code == 201
    plan_id = created.json()["id"]

    duplicate = await client.post(
        "/admin/plans", json={"name": "Quarterly", "duration_days": 91}, headers=headers
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "PLAN_NAME_TAKEN"

    updated = await client.put(
        f"/admin/plans/{plan_id}",
        json={"name": "Quarter", "duration_days": 92, "price": 110, "description": "Three months"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["duration_days"] == 92
    assert updated.json()["description"] == "Three months"

    listing = (await client.get("/admin/plans", headers=headers)).json()["plans"]
    assert [p["name"] for p in listing] == ["Quarter"]

    deleted = await client.delete(f"/admin/plans/{plan_id}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": True, "plan_id": plan_id}

    missing = await client.delete(f"/admin/plans/{plan_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "PLAN_NOT_FOUND"


@pytest.mark.asyncio
async def test_plan_validation(client: AsyncClient, admin):
    _, headers = admin

    zero_days = await client.post("/admin/plans", json={"name": "Bad", "duration_days": 0}, headers=headers)
    negative = await client.post(
        "/admin/plans", json={"name": "Bad", "duration_days": 10, "price": -1}, headers=headers
    )

    assert zero_days.status_code == 422
    assert negative.status_code == 422


@pytest.mark.asyncio
async def test_plan_in_use_cannot_be_deleted(client: AsyncClient, admin, member, plan, db_session):
    member_id, _ = member
    _, headers = admin
    await add_membership(db_session, member_id, plan.id, TODAY, TODAY + timedelta(days=29))

    response = await client.delete(f"/admin/plans/{plan.id}", headers=headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "PLAN_IN_USE"


# ============================================================================
# Users
# ============================================================================


@pytest.mark.asyncio
async def test_list_users_filters(client: AsyncClient, admin, member, create_user):
    _, headers = admin
    await create_user("dormant@example.com", name="Dormant Dana", is_active=False)

    everyone = (await client.get("/admin/users", headers=headers)).json()["users"]
    inactive = (await client.get("/admin/users", params={"status": "inactive"}, headers=headers)).json()["users"]
    admins = (await client.get("/admin/users", params={"role": "admin"}, headers=headers)).json()["users"]
    search = (await client.get("/admin/users", params={"q": "dana"}, headers=headers)).json()["users"]

    assert len(everyone) == 3
    assert [u["email"] for u in inactive] == ["dormant@example.com"]
    assert [u["email"] for u in admins] == ["admin@gym.com"]
    assert [u["email"] for u in search] == ["dormant@example.com"]


@pytest.mark.asyncio
async def test_deactivate_and_reactivate_member(client: AsyncClient, admin, member):
    member_id, _ = member
    _, headers = admin

    first = await client.post(f"/admin/users/{member_id}/deactivate", headers=headers)
    again = await client.post(f"/admin/users/{member_id}/deactivate", headers=headers)
    back = await client.post(f"/admin/users/{member_id}/reactivate", headers=headers)

    assert first.status_code == 200
    assert first.json()["user"]["is_active"] is False
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_INACTIVE"
    assert back.json()["user"]["is_active"] is True


@pytest.mark.asyncio
async def test_admin_accounts_are_protected(client: AsyncClient, admin, create_user):
    admin_id, headers = admin
    other_admin = await create_user("boss@gym.com", role=UserRole.admin)

    self_response = await client.post(f"/admin/users/{admin_id}/deactivate", headers=headers)
    other_response = await client.post(f"/admin/users/{other_admin}/deactivate", headers=headers)
    unknown = await client.post(
        "/admin/users/00000000-0000-0000-0000-000000000000/deactivate", headers=headers
    )

    assert self_response.status_code == 400
    assert self_response.json()["error"]["code"] == "CANNOT_DEACTIVATE_SELF"
    assert other_response.status_code == 400
    assert other_response.json()["error"]["code"] == "CANNOT_MODIFY_ADMIN"
    assert unknown.status_code == 404


# ============================================================================
# Jobs
# ============================================================================


@pytest.mark.asyncio
async def test_run_daily_now(client: AsyncClient, admin, member, plan, db_session, sender):
    member_id, _ = member
    _, headers = admin
    await add_membership(db_session, member_id, plan.id, TODAY - timedelta(days=28), TODAY + timedelta(days=1))
    await add_membership(
        db_session, member_id, plan.id, TODAY + timedelta(days=2), TODAY + timedelta(days=31),
        MembershipStatus.pending,
    )

    response = await client.post("/admin/run-daily", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["failed"] is False
    assert data["daily"]["renewal_created"] == 1
    assert data["daily"]["attendance_created"] == 1
    assert len(sender.to("member@example.com")) == 2

    second = (await client.post("/admin/run-daily", headers=headers)).json()
    assert second["daily"]["renewal_created"] == 0
    assert second["daily"]["renewal_skipped"] == 1
    assert second["daily"]["attendance_skipped"] == 1


@pytest.mark.asyncio
async def test_run_daily_failure_returns_error_body(client: AsyncClient, admin, job_runner):
    _, headers = admin

    @asynccontextmanager
    async def broken_scope():
        raise RuntimeError("database is locked")
        yield

    job_runner.uow_scope = broken_scope

    response = await client.post("/admin/run-daily", headers=headers)

    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "DAILY_RUN_FAILED", "message": "Internal server error"}
    }
    assert job_runner.gate.last_run_key is None
