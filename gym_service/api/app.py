from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def init_database(engine) -> None:
    # Register every table on SQLModel.metadata
    import gym_service.domain.entities

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def build_lifespan(ApplicationConfig):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from gym_service.adapter.services.scheduler import build_scheduler
        from gym_service.app.use_cases.admin import SeedAdminUseCase
        from gym_service.depends import engine, job_runner, unit_of_work_scope

        await init_database(engine)

        async with unit_of_work_scope() as uow:
            result = await SeedAdminUseCase(uow).execute(
                ApplicationConfig.ADMIN_SEED_EMAIL, ApplicationConfig.ADMIN_SEED_PASSWORD
            )
        if result.is_err():
            raise ServerError(result.error)

        scheduler = None
        if ApplicationConfig.SCHEDULER_ENABLED:
            scheduler = build_scheduler(job_runner)
            scheduler.start()
            logger.info(f"Scheduler started, daily run hour {ApplicationConfig.DAILY_RUN_HOUR}")

        try:
            yield
        finally:
            if scheduler is not None:
                scheduler.shutdown(wait=False)
                logger.info("Scheduler stopped")

    return lifespan


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(
        title="Gym Service API",
        version="0.1.0",
        lifespan=build_lifespan(ApplicationConfig),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from gym_service.api.routes import (
        admin,
        attendance,
        auth,
        health_check,
        health_metrics,
        members,
        notifications,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(members.router, tags=["Member"])
    app.include_router(attendance.router, tags=["Attendance"])
    app.include_router(health_metrics.router, tags=["Health"])
    app.include_router(notifications.router, tags=["Notifications"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
