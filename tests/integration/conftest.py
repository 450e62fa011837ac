from contextlib import asynccontextmanager
from datetime import datetime

import bcrypt
import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from gym_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gym_service.app.jobs.daily_run_gate import DailyRunGate
from gym_service.app.jobs.notification_job_runner import NotificationJobRunner
from gym_service.depends import (
    get_clock,
    get_job_runner,
    get_message_sender,
    get_unit_of_work,
)
from gym_service.domain.entities import User, UserRole
from tests.fixtures.auth import auth_headers
from tests.fixtures.clock import FixedClock
from tests.fixtures.message_sender import RecordingMessageSender

TEST_PASSWORD = "secret123"
# Hashed once; bcrypt is slow by design
TEST_PASSWORD_HASH = bcrypt.hashpw(TEST_PASSWORD.encode(), bcrypt.gensalt(4)).decode()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uow_scope(session_factory):
    @asynccontextmanager
    async def scope():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    return scope


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 3, 10, 10, 0, 0))


@pytest.fixture
def sender():
    return RecordingMessageSender()


@pytest.fixture
def job_runner(uow_scope, sender, clock):
    return NotificationJobRunner(
        uow_scope=uow_scope,
        sender=sender,
        clock=clock,
        gate=DailyRunGate(clock, run_hour=9),
        dashboard_url="http://test/dashboard",
    )


@pytest_asyncio.fixture
async def client(db_session, clock, sender, job_runner):
    from httpx import ASGITransport
    from gym_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_message_sender] = lambda: sender
    app.dependency_overrides[get_job_runner] = lambda: job_runner

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user(db_session):
    """Insert a user directly; returns the id"""

    async def _create_user(
        email: str,
        name: str = "Member",
        role: UserRole = UserRole.member,
        is_active: bool = True,
        email_verified: bool = True,
        created_at: datetime = None,
    ):
        user = User(
            name=name,
            email=email,
            password_hash=TEST_PASSWORD_HASH,
            role=role,
            is_active=is_active,
            email_verified=email_verified,
        )
        if created_at is not None:
            user.created_at = created_at
        db_session.add(user)
        await db_session.commit()
        return user.id

    return _create_user


@pytest_asyncio.fixture
async def member(create_user):
    user_id = await create_user("member@example.com", name="Morgan")
    return user_id, auth_headers(user_id)


@pytest_asyncio.fixture
async def admin(create_user):
    user_id = await create_user("admin@gym.com", name="Admin", role=UserRole.admin)
    return user_id, auth_headers(user_id, UserRole.admin)
