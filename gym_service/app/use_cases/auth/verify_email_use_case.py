"""
Verify Email Use Case

Handles email verification via secure token.
"""

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Error, Result, Return
from .dtos import VerifyEmailResponse


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token must match a user's verification_token and not be expired
    - Sets email_verified = True
    - Clears verification token (single-use)
    - Already verified users return success and lose the stale token
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyEmailResponse]:
        """
        Errors:
            - INVALID_TOKEN: missing, unknown or expired token
        """
        token = (token or "").strip()
        if not token:
            return Return.err(Error("INVALID_TOKEN", "Missing token"))

        async with self.uow:
            user = await self.uow.users.get_by_verification_token(token)

            if (
                user is None
                or user.verification_expires_at is None
                or user.verification_expires_at < self.clock.now()
            ):
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired verification link")
                )

            already_verified = user.email_verified

            user.email_verified = True
            user.verification_token = None
            user.verification_expires_at = None
            await self.uow.users.update(user)
            await self.uow.commit()

            if already_verified:
                return Return.ok(VerifyEmailResponse(
                    status="verified",
                    message="Email already verified. You can sign in now."
                ))

            return Return.ok(VerifyEmailResponse(
                status="verified",
                message="Email verified! You can sign in now."
            ))
