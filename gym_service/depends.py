from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from gym_service.adapter.services.smtp_message_sender import SmtpMessageSender
from gym_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gym_service.api.utils.jwt import verify_jwt
from gym_service.app.jobs.daily_run_gate import DailyRunGate
from gym_service.app.jobs.notification_job_runner import NotificationJobRunner
from gym_service.app.services.clock import Clock, SystemClock
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import UserRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

system_clock = SystemClock()
message_sender = SmtpMessageSender.from_config(ApplicationConfig)


@asynccontextmanager
async def unit_of_work_scope() -> AsyncIterator[UnitOfWork]:
    """Job-scoped unit of work on its own session"""
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


job_runner = NotificationJobRunner(
    uow_scope=unit_of_work_scope,
    sender=message_sender,
    clock=system_clock,
    gate=DailyRunGate(system_clock, ApplicationConfig.DAILY_RUN_HOUR),
    dashboard_url=f"{ApplicationConfig.BASE_URL.rstrip('/')}/dashboard",
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_clock() -> Clock:
    return system_clock


def get_message_sender() -> IMessageSender:
    return message_sender


def get_job_runner() -> NotificationJobRunner:
    return job_runner


class CurrentUser(BaseModel):
    """Authenticated caller, reloaded from the store on every request"""

    id: UUID
    name: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and role

    Raises:
        HTTPException: 401 if token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    payload = verify_jwt(credentials.credentials)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def get_active_user(
    payload: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Loads the token's user; a deactivated account is turned away on every
    request, not only at login.

    Raises:
        HTTPException: 401 if the user no longer exists, 403 if deactivated
    """
    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    async with uow:
        user = await uow.users.get_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User no longer exists",
            )
        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail={
                    "code": "ACCOUNT_DEACTIVATED",
                    "message": "Your account has been deactivated. Please contact an administrator.",
                },
            )
        return CurrentUser(id=user.id, name=user.name, email=user.email, role=user.role)


async def require_admin(user: CurrentUser = Depends(get_active_user)) -> CurrentUser:
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"code": "FORBIDDEN", "message": "Admin access required"},
        )
    return user
