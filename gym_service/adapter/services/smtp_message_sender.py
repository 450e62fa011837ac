"""
SMTP Message Sender

Delivers member messages over SMTP. smtplib blocks, so each send runs in a
worker thread.
"""

import asyncio
import logging
import re
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from gym_service.app.services.message_sender import IMessageSender
from gym_service.domain.entities import User

logger = logging.getLogger(__name__)


def html_to_text(html_body: str) -> str:
    text = html_body.replace("<br>", "\n").replace("</p>", "\n")
    return re.sub(r"<[^>]+>", "", text).strip()


class SmtpMessageSender(IMessageSender):
    """Returns False instead of raising when email is disabled or SMTP fails"""

    def __init__(
        self,
        host: str,
        port: int = 587,
        user: str = "",
        password: str = "",
        mail_from: str = "",
        use_tls: bool = True,
        enabled: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.mail_from = mail_from or user
        self.use_tls = use_tls
        self.enabled = enabled
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpMessageSender":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            user=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            mail_from=config.MAIL_FROM,
            use_tls=config.SMTP_USE_TLS,
            enabled=config.EMAIL_ENABLED,
        )

    def is_configured(self) -> bool:
        return bool(self.enabled and self.host and self.mail_from)

    async def send(self, recipient: User, subject: str, body: str) -> bool:
        if not self.is_configured():
            logger.debug(f"Email disabled, not sending '{subject}' to user {recipient.id}")
            return False

        message = self._build_message(recipient.email, subject, body)
        try:
            await asyncio.to_thread(self._send_blocking, recipient.email, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {recipient.email}: {e}")
            return False

        logger.info(f"Email sent to {recipient.email}: {subject}")
        return True

    def _build_message(self, to_email: str, subject: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.mail_from
        msg["To"] = to_email

        # Plain text fallback
        msg.attach(MIMEText(html_to_text(html_body), "plain"))
        msg.attach(MIMEText(html_body, "html"))
        return msg

    def _send_blocking(self, to_email: str, message: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls(context=ssl.create_default_context())
            if self.user and self.password:
                server.login(self.user, self.password)
            server.sendmail(self.mail_from, to_email, message.as_string())
