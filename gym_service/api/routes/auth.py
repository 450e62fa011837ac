from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from gym_service.api.error import ClientError, ServerError
from gym_service.app.services.clock import Clock
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    VerifyEmailUseCase,
    ResendVerificationUseCase,
    LoginResponse,
    VerifyEmailResponse,
    ResendVerificationResponse,
)
from gym_service.depends import get_clock, get_message_sender, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sender: IMessageSender = Depends(get_message_sender),
    clock: Clock = Depends(get_clock),
):
    """
    Member Registration

    Creates an unverified member account and emails a verification link.

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    # Map HTTP request to Command (validated business intent)
    command = RegisterCommand(
        name=request.name.strip(), email=request.email.strip().lower(), password=request.password
    )

    use_case = RegisterUseCase(uow, sender, clock, ApplicationConfig.BASE_URL)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account deactivated or email not verified
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email.strip().lower(), request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code in ("USER_DEACTIVATED", "EMAIL_NOT_VERIFIED"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


class VerifyEmailRequest(BaseModel):
    token: str = Field(..., description="Email verification token")


async def _verify(token: str, uow: UnitOfWork, clock: Clock) -> VerifyEmailResponse:
    use_case = VerifyEmailUseCase(uow, clock)
    result = await use_case.execute(token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=VerifyEmailResponse)
async def verify_email(
    request: VerifyEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Raises:
        - 400 Bad Request: Unknown or expired token
    """
    return await _verify(request.token, uow, clock)


@router.get("/verify-email", status_code=status.HTTP_200_OK, response_model=VerifyEmailResponse)
async def verify_email_link(
    token: str = Query(default="", description="Token from the verification email"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Target of the link in the verification email.

    Raises:
        - 400 Bad Request: Missing, unknown or expired token
    """
    return await _verify(token, uow, clock)


class ResendVerificationRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/resend-verification",
    status_code=status.HTTP_200_OK,
    response_model=ResendVerificationResponse,
)
async def resend_verification(
    request: ResendVerificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sender: IMessageSender = Depends(get_message_sender),
    clock: Clock = Depends(get_clock),
):
    """
    Same neutral answer whether or not the email is registered.
    """
    use_case = ResendVerificationUseCase(uow, sender, clock, ApplicationConfig.BASE_URL)
    result = await use_case.execute(request.email.strip().lower())

    if result.is_err():
        raise ServerError(result.error)

    return result.value
