from abc import ABC, abstractmethod

from gym_service.domain.entities import User


class IMessageSender(ABC):
    """Outbound "send message to a user" collaborator"""

    @abstractmethod
    async def send(self, recipient: User, subject: str, body: str) -> bool:
        """
        Deliver a message to a user.

        Best-effort: returns False when delivery failed or is disabled.
        Callers on the notification path must not let a failure escape.
        """
        pass
