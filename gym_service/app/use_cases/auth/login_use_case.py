"""
Login Use Case

Handles member/admin authentication and returns a JWT access token.
"""

import bcrypt

from gym_service.api.utils.jwt import generate_jwt
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password answer the same INVALID_CREDENTIALS
    - Deactivated accounts are refused
    - Email must be verified
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Hash dummy password to maintain constant time
                bcrypt.checkpw(b"dummy_password", bcrypt.hashpw(b"dummy", bcrypt.gensalt(4)))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(Error("USER_DEACTIVATED", "Account is deactivated"))

            password_valid = bcrypt.checkpw(
                password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.email_verified:
                return Return.err(
                    Error(
                        "EMAIL_NOT_VERIFIED",
                        "Your email is not verified. We can resend the verification link.",
                    )
                )

            access_token = generate_jwt(user.id, user.role.value)

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                        email_verified=user.email_verified,
                    ),
                )
            )
