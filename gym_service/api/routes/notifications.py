from fastapi import APIRouter, Depends, status

from gym_service.api.error import ServerError
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.notifications import (
    ListNotificationsUseCase,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    NotificationListResponse,
)
from gym_service.depends import CurrentUser, get_active_user, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListNotificationsUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/mark-all-read", status_code=status.HTTP_200_OK, response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllReadUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
