"""
Resend Verification Email Use Case

Handles resending email verification tokens to users.
"""

from gym_service.app.services.clock import Clock
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.libs.result import Result, Return
from .dtos import ResendVerificationResponse
from .verification import new_verification_token, send_verification_email

NEUTRAL_MESSAGE = (
    "If an account exists for that email and is unverified, "
    "we sent a new verification link."
)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Only unverified existing users get a new token (24 hours)
    - New token replaces the old one
    - Same response for every email (no enumeration)
    """

    def __init__(self, uow: UnitOfWork, sender: IMessageSender, clock: Clock, base_url: str):
        self.uow = uow
        self.sender = sender
        self.clock = clock
        self.base_url = base_url

    async def execute(self, email: str) -> Result[ResendVerificationResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip())

            if user is not None and not user.email_verified:
                token, expires_at = new_verification_token(self.clock.now())
                user.verification_token = token
                user.verification_expires_at = expires_at
                await self.uow.users.update(user)
                await self.uow.commit()

                await send_verification_email(self.sender, user, token, self.base_url)

            return Return.ok(ResendVerificationResponse(status="sent", message=NEUTRAL_MESSAGE))
