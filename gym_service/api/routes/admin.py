from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from gym_service.api.error import ClientError, ServerError
from gym_service.app.jobs.notification_job_runner import JobRunSummary, NotificationJobRunner
from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.admin import (
    AdminDashboardResponse,
    CheckinReportResponse,
    CreatePlanUseCase,
    DeletePlanResponse,
    DeletePlanUseCase,
    ExportAttendanceUseCase,
    GetAdminDashboardUseCase,
    ListActiveMembershipsUseCase,
    ListExpiringMembershipsUseCase,
    ListTodayCheckinsUseCase,
    ListUsersUseCase,
    MembershipReportResponse,
    PlanCommand,
    SetUserActiveUseCase,
    UpdatePlanUseCase,
    UserListResponse,
    UserStatusResponse,
)
from gym_service.app.use_cases.memberships import ListPlansUseCase, PlanListResponse, PlanResponse
from gym_service.depends import (
    CurrentUser,
    get_clock,
    get_job_runner,
    get_unit_of_work,
    require_admin,
)
from gym_service.libs.result import Error

router = APIRouter(prefix="/admin", tags=["Admin"])

PLAN_ERROR_STATUS = {
    "PLAN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PLAN_NAME_TAKEN": status.HTTP_409_CONFLICT,
    "PLAN_IN_USE": status.HTTP_409_CONFLICT,
}

USER_ERROR_STATUS = {
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CANNOT_DEACTIVATE_SELF": status.HTTP_400_BAD_REQUEST,
    "CANNOT_MODIFY_ADMIN": status.HTTP_400_BAD_REQUEST,
    "ALREADY_INACTIVE": status.HTTP_409_CONFLICT,
    "ALREADY_ACTIVE": status.HTTP_409_CONFLICT,
}


def _raise_for(error, status_map: dict):
    if error.code in status_map:
        raise ClientError(error, status_code=status_map[error.code])
    raise ServerError(error)


# ============================================================================
# Reports
# ============================================================================


@router.get("/dashboard", status_code=status.HTTP_200_OK, response_model=AdminDashboardResponse)
async def admin_dashboard(
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await GetAdminDashboardUseCase(uow, clock).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/memberships/active", status_code=status.HTTP_200_OK, response_model=MembershipReportResponse
)
async def active_memberships(
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListActiveMembershipsUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/memberships/expiring", status_code=status.HTTP_200_OK, response_model=MembershipReportResponse
)
async def expiring_memberships(
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await ListExpiringMembershipsUseCase(uow, clock).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/checkins/today", status_code=status.HTTP_200_OK, response_model=CheckinReportResponse)
async def checkins_today(
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await ListTodayCheckinsUseCase(uow, clock).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/export/attendance.csv", status_code=status.HTTP_200_OK)
async def export_attendance(
    date_from: Optional[date] = Query(default=None, alias="from"),
    date_to: Optional[date] = Query(default=None, alias="to"),
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    CSV of check-ins between from and to (inclusive), last 30 days by default.

    Raises:
        - 400 Bad Request: from is after to
    """
    result = await ExportAttendanceUseCase(uow, clock).execute(date_from, date_to)

    if result.is_err():
        _raise_for(result.error, {"INVALID_DATE_RANGE": status.HTTP_400_BAD_REQUEST})

    export = result.value
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


# ============================================================================
# Plans
# ============================================================================


@router.get("/plans", status_code=status.HTTP_200_OK, response_model=PlanListResponse)
async def list_plans(
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPlansUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/plans", status_code=status.HTTP_201_CREATED, response_model=PlanResponse)
async def create_plan(
    request: PlanCommand,
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 409 Conflict: Plan name already used
    """
    result = await CreatePlanUseCase(uow).execute(request)

    if result.is_err():
        _raise_for(result.error, PLAN_ERROR_STATUS)

    return result.value


@router.put("/plans/{plan_id}", status_code=status.HTTP_200_OK, response_model=PlanResponse)
async def update_plan(
    plan_id: UUID,
    request: PlanCommand,
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePlanUseCase(uow).execute(plan_id, request)

    if result.is_err():
        _raise_for(result.error, PLAN_ERROR_STATUS)

    return result.value


@router.delete("/plans/{plan_id}", status_code=status.HTTP_200_OK, response_model=DeletePlanResponse)
async def delete_plan(
    plan_id: UUID,
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Plan does not exist
        - 409 Conflict: Memberships still reference the plan
    """
    result = await DeletePlanUseCase(uow).execute(plan_id)

    if result.is_err():
        _raise_for(result.error, PLAN_ERROR_STATUS)

    return result.value


# ============================================================================
# Users
# ============================================================================


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    q: Optional[str] = Query(default=None, description="Name or email fragment"),
    user_status: Optional[str] = Query(default=None, alias="status", description="active, inactive or all"),
    role: Optional[str] = Query(default=None, description="member, admin or all"),
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUsersUseCase(uow).execute(q, user_status, role)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/users/{user_id}/deactivate", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def deactivate_user(
    user_id: UUID,
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SetUserActiveUseCase(uow).execute(admin.id, user_id, active=False)

    if result.is_err():
        _raise_for(result.error, USER_ERROR_STATUS)

    return result.value


@router.post(
    "/users/{user_id}/reactivate", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def reactivate_user(
    user_id: UUID,
    admin: CurrentUser = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SetUserActiveUseCase(uow).execute(admin.id, user_id, active=True)

    if result.is_err():
        _raise_for(result.error, USER_ERROR_STATUS)

    return result.value


# ============================================================================
# Jobs
# ============================================================================


@router.post("/run-daily", status_code=status.HTTP_200_OK, response_model=JobRunSummary)
async def run_daily(
    admin: CurrentUser = Depends(require_admin),
    runner: NotificationJobRunner = Depends(get_job_runner),
):
    """
    Runs the lifecycle sweep and daily notifications now, regardless of the hour.

    Raises:
        - 500 Internal Server Error: The run failed; the daily gate stays open
    """
    summary = await runner.run_now()

    if summary.failed:
        raise ServerError(Error("DAILY_RUN_FAILED", "Daily run failed", reason=summary.error))

    return summary
