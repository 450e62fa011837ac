from fastapi import APIRouter, Depends, status

from gym_service.api.error import ServerError
from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.attendance import (
    AttendanceListResponse,
    CheckInOutResponse,
    CheckInUseCase,
    CheckOutUseCase,
    ListAttendanceUseCase,
)
from gym_service.depends import CurrentUser, get_active_user, get_clock, get_unit_of_work

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.get("", status_code=status.HTTP_200_OK, response_model=AttendanceListResponse)
async def list_attendance(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAttendanceUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/check-in", status_code=status.HTTP_200_OK, response_model=CheckInOutResponse)
async def check_in(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """No-op (changed=false) when a visit is already open"""
    result = await CheckInUseCase(uow, clock).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/check-out", status_code=status.HTTP_200_OK, response_model=CheckInOutResponse)
async def check_out(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """No-op (changed=false) when no visit is open"""
    result = await CheckOutUseCase(uow, clock).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
