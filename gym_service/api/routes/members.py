from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from gym_service.api.error import ClientError, ServerError
from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.memberships import (
    DashboardResponse,
    GetDashboardUseCase,
    ListPlansUseCase,
    PlanListResponse,
    SubscribeResponse,
    SubscribeUseCase,
)
from gym_service.app.use_cases.users import (
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from gym_service.depends import CurrentUser, get_active_user, get_clock, get_unit_of_work

router = APIRouter(tags=["Member"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(current_user.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.put("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_me(
    request: UpdateProfileCommand,
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateProfileUseCase(uow).execute(current_user.id, request)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/dashboard", status_code=status.HTTP_200_OK, response_model=DashboardResponse)
async def dashboard(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await GetDashboardUseCase(uow, clock).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/plans", status_code=status.HTTP_200_OK, response_model=PlanListResponse)
async def list_plans(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPlansUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class SubscribeRequest(BaseModel):
    plan_id: UUID = Field(..., description="Plan to subscribe to")


@router.post("/subscribe", status_code=status.HTTP_201_CREATED, response_model=SubscribeResponse)
async def subscribe(
    request: SubscribeRequest,
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Starts today when no membership is running, otherwise queues after it.

    Raises:
        - 404 Not Found: Plan does not exist
    """
    result = await SubscribeUseCase(uow, clock).execute(current_user.id, request.plan_id)

    if result.is_err():
        error = result.error
        if error.code == "PLAN_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
