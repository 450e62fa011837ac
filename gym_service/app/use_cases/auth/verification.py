"""
Email verification helpers shared by registration and resend.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Tuple
from urllib.parse import quote

from gym_service.app.services.message_sender import IMessageSender
from gym_service.app.services.message_templates import render_verification_body
from gym_service.domain.entities import User

logger = logging.getLogger(__name__)

VERIFICATION_TOKEN_BYTES = 24
VERIFICATION_TTL = timedelta(hours=24)
VERIFY_EMAIL_PATH = "/auth/verify-email"


def new_verification_token(now: datetime) -> Tuple[str, datetime]:
    """48 hex chars token and its expiry"""
    return secrets.token_hex(VERIFICATION_TOKEN_BYTES), now + VERIFICATION_TTL


async def send_verification_email(
    sender: IMessageSender, user: User, token: str, base_url: str
) -> bool:
    """Best-effort: a failed send is logged, the token stays valid for a resend"""
    url = f"{base_url.rstrip('/')}{VERIFY_EMAIL_PATH}?token={quote(token)}"
    try:
        sent = await sender.send(user, "Verify your email", render_verification_body(user.name, url))
    except Exception as e:
        logger.warning(f"Verification email to {user.email} failed: {e}")
        return False
    if not sent:
        logger.warning(f"Verification email to {user.email} was not sent")
    return sent
