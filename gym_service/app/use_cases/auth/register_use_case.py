import bcrypt

from gym_service.app.services.clock import Clock
from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.domain.entities import User, UserRole
from gym_service.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse, UserInfo
from .verification import new_verification_token, send_verification_email

BCRYPT_ROUNDS = 12


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse]

    Business Logic:
    1. Reject an email that is already registered
    2. Hash password with bcrypt
    3. Create User with role=member, email_verified=False
    4. Issue a 24-hour verification token
    5. Commit, then send the verification email best-effort
    """

    def __init__(self, uow: UnitOfWork, sender: IMessageSender, clock: Clock, base_url: str):
        self.uow = uow
        self.sender = sender
        self.clock = clock
        self.base_url = base_url

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(BCRYPT_ROUNDS)
            )
            token, expires_at = new_verification_token(self.clock.now())

            user = User(
                name=command.name,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                role=UserRole.member,
                email_verified=False,
                verification_token=token,
                verification_expires_at=expires_at,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            await send_verification_email(self.sender, user, token, self.base_url)

            return Return.ok(
                RegisterResponse(
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                        email_verified=user.email_verified,
                    ),
                    message="We sent you a verification link. Please check your email.",
                )
            )
