from fastapi import APIRouter, Depends, status

from gym_service.api.error import ServerError
from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.health import (
    GetTipsUseCase,
    HealthMetricListResponse,
    HealthMetricResponse,
    ListHealthMetricsUseCase,
    RecordHealthMetricCommand,
    RecordHealthMetricUseCase,
    TipsResponse,
)
from gym_service.depends import CurrentUser, get_active_user, get_clock, get_unit_of_work

router = APIRouter(tags=["Health"])


@router.get("/health-metrics", status_code=status.HTTP_200_OK, response_model=HealthMetricListResponse)
async def list_health_metrics(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListHealthMetricsUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/health-metrics", status_code=status.HTTP_200_OK, response_model=HealthMetricResponse)
async def record_health_metric(
    request: RecordHealthMetricCommand,
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """Creates or overwrites the entry for entry_date (today by default)"""
    result = await RecordHealthMetricUseCase(uow, clock).execute(current_user.id, request)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/tips", status_code=status.HTTP_200_OK, response_model=TipsResponse)
async def tips(
    current_user: CurrentUser = Depends(get_active_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    result = await GetTipsUseCase(uow, clock).execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
