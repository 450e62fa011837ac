from datetime import date, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient

from gym_service.domain.entities import MembershipPlan


@pytest_asyncio.fixture
async def plans(db_session):
    monthly = MembershipPlan(name="Monthly", duration_days=30, price=50.0)
    weekly = MembershipPlan(name="Weekly", duration_days=7, price=15.0)
    db_session.add(monthly)
    db_session.add(weekly)
    await db_session.commit()
    return {"monthly": str(monthly.id), "weekly": str(weekly.id)}


@pytest.mark.asyncio
async def test_list_plans_by_duration(client: AsyncClient, member, plans):
    _, headers = member

    response = await client.get("/plans", headers=headers)

    assert response.status_code == 200
    assert [p["name"] for p in response.json()["plans"]] == ["Weekly", "Monthly"]


@pytest.mark.asyncio
async def test_subscribe_then_chain(client: AsyncClient, member, plans):
    _, headers = member

    first = await client.post("/subscribe", json={"plan_id": plans["monthly"]}, headers=headers)
    second = await client.post("/subscribe", json={"plan_id": plans["weekly"]}, headers=headers)

    assert first.status_code == 201
    assert first.json()["status"] == "active"
    assert first.json()["start_date"] == "2025-03-10"
    assert first.json()["end_date"] == "2025-04-08"

    assert second.status_code == 201
    assert second.json()["status"] == "pending"
    assert second.json()["start_date"] == "2025-04-09"
    assert second.json()["end_date"] == "2025-04-15"


@pytest.mark.asyncio
async def test_subscribe_unknown_plan(client: AsyncClient, member):
    _, headers = member

    response = await client.post(
        "/subscribe", json={"plan_id": "00000000-0000-0000-0000-000000000000"}, headers=headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PLAN_NOT_FOUND"


@pytest.mark.asyncio
async def test_dashboard(client: AsyncClient, member, plans):
    _, headers = member

    empty = await client.get("/dashboard", headers=headers)
    assert empty.status_code == 200
    assert empty.json()["membership"] is None
    assert empty.json()["weekly_checkins"] == 0
    assert empty.json()["latest_health"] is None

    await client.post("/subscribe", json={"plan_id": plans["monthly"]}, headers=headers)
    await client.post("/subscribe", json={"plan_id": plans["weekly"]}, headers=headers)
    await client.post("/attendance/check-in", headers=headers)
    await client.post("/health-metrics", json={"weight_kg": 81.0, "height_cm": 180}, headers=headers)

    data = (await client.get("/dashboard", headers=headers)).json()
    assert data["membership"]["plan_name"] == "Monthly"
    assert data["membership"]["status"] == "active"
    assert data["weekly_checkins"] == 1
    assert data["latest_health"]["bmi"] == 25.0


@pytest.mark.asyncio
async def test_profile_update(client: AsyncClient, member):
    _, headers = member

    response = await client.put(
        "/me",
        json={"name": "  Morgan Lee ", "phone": "555-0100", "gender": "female", "date_of_birth": "1990-05-01"},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Morgan Lee"
    assert data["phone"] == "555-0100"
    assert data["gender"] == "female"
    assert data["date_of_birth"] == "1990-05-01"

    cleared = await client.put("/me", json={"name": "Morgan Lee", "phone": "  "}, headers=headers)
    assert cleared.json()["phone"] is None
    assert cleared.json()["gender"] is None


@pytest.mark.asyncio
async def test_deactivated_user_is_rejected_on_every_request(client: AsyncClient, member, admin):
    member_id, member_headers = member
    _, admin_headers = admin

    response = await client.post(f"/admin/users/{member_id}/deactivate", headers=admin_headers)
    assert response.status_code == 200

    response = await client.get("/dashboard", headers=member_headers)
    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "ACCOUNT_DEACTIVATED"


# ============================================================================
# Attendance
# ============================================================================


@pytest.mark.asyncio
async def test_check_in_and_out(client: AsyncClient, member, clock):
    _, headers = member

    first = await client.post("/attendance/check-in", headers=headers)
    duplicate = await client.post("/attendance/check-in", headers=headers)
    assert first.json()["changed"] is True
    assert duplicate.json()["changed"] is False
    assert duplicate.json()["entry"]["id"] == first.json()["entry"]["id"]

    listing = (await client.get("/attendance", headers=headers)).json()
    assert len(listing["entries"]) == 1
    assert listing["open_entry"]["id"] == first.json()["entry"]["id"]

    clock.advance(hours=1, minutes=15)
    out = await client.post("/attendance/check-out", headers=headers)
    again = await client.post("/attendance/check-out", headers=headers)
    assert out.json()["changed"] is True
    assert out.json()["entry"]["check_out"] == "2025-03-10T11:15:00"
    assert again.json()["changed"] is False

    listing = (await client.get("/attendance", headers=headers)).json()
    assert listing["open_entry"] is None


# ============================================================================
# Health metrics and tips
# ============================================================================


@pytest.mark.asyncio
async def test_health_metric_upsert_and_height_fallback(client: AsyncClient, member, clock):
    _, headers = member
    yesterday = (clock.today() - timedelta(days=1)).isoformat()

    await client.post(
        "/health-metrics", json={"entry_date": yesterday, "weight_kg": 80.0, "height_cm": 180}, headers=headers
    )
    overwritten = await client.post(
        "/health-metrics", json={"entry_date": yesterday, "weight_kg": 81.0, "height_cm": 180}, headers=headers
    )
    today = await client.post("/health-metrics", json={"weight_kg": 81.0}, headers=headers)

    assert overwritten.json()["bmi"] == 25.0
    assert today.json()["entry_date"] == date(2025, 3, 10).isoformat()
    assert today.json()["height_cm"] == 180.0
    assert today.json()["bmi"] == 25.0

    metrics = (await client.get("/health-metrics", headers=headers)).json()["metrics"]
    assert [m["entry_date"] for m in metrics] == ["2025-03-09", "2025-03-10"]
    assert metrics[0]["weight_kg"] == 81.0


@pytest.mark.asyncio
async def test_tips(client: AsyncClient, member):
    _, headers = member
    await client.post(
        "/health-metrics",
        json={"weight_kg": 95.0, "height_cm": 175, "heart_rate_bpm": 110},
        headers=headers,
    )

    tips = (await client.get("/tips", headers=headers)).json()

    assert tips["weekly_checkins"] == 0
    assert tips["tips"][0].startswith("Aim for 150-300 minutes")
    assert any(t.startswith("Your attendance is low") for t in tips["tips"])
    assert any(t.startswith("Resting heart rate seems high") for t in tips["tips"])


# ============================================================================
# Notifications
# ============================================================================


@pytest.mark.asyncio
async def test_notifications_inbox(client: AsyncClient, member, admin, plans):
    _, member_headers = member
    _, admin_headers = admin

    await client.post("/subscribe", json={"plan_id": plans["weekly"]}, headers=member_headers)
    await client.post("/admin/run-daily", headers=admin_headers)

    inbox = (await client.get("/notifications", headers=member_headers)).json()
    types = sorted(n["type"] for n in inbox["notifications"])
    assert types == ["attendance"]
    assert inbox["unread_count"] == 1

    marked = (await client.post("/notifications/mark-all-read", headers=member_headers)).json()
    assert marked["updated"] == 1

    inbox = (await client.get("/notifications", headers=member_headers)).json()
    assert inbox["unread_count"] == 0
    assert all(n["is_read"] for n in inbox["notifications"])
