"""
Message Templates

Subjects and HTML bodies for outbound member messages.
"""

from html import escape
from typing import Optional

from gym_service.domain.entities import NotificationType

SUBJECTS = {
    NotificationType.renewal.value: "Membership Renewal Reminder",
    NotificationType.attendance.value: "We miss you at the gym",
    NotificationType.health.value: "Health Tip",
}
DEFAULT_SUBJECT = "Gym Notification"


def subject_for(notification_type: str) -> str:
    return SUBJECTS.get(notification_type, DEFAULT_SUBJECT)


def render_notification_body(name: Optional[str], message: str, dashboard_url: str = "") -> str:
    link = ""
    if dashboard_url:
        link = f'<p><a href="{escape(dashboard_url)}">Open your dashboard</a></p>'
    return (
        '<div style="font-family:Arial,sans-serif">'
        f"<p>Hi {escape(name or 'Member')},</p>"
        f"<p>{escape(message)}</p>"
        f"{link}"
        "<hr>"
        "<small>This is an automated message from Gym Management System.</small>"
        "</div>"
    )


def render_verification_body(name: Optional[str], verify_url: str) -> str:
    url = escape(verify_url)
    return (
        '<div style="font-family:Arial,sans-serif">'
        f"<p>Hi {escape(name or 'there')},</p>"
        "<p>Thanks for signing up. Please verify your email address using the link below:</p>"
        f'<p><a href="{url}">Verify Email</a></p>'
        "<p>If the link doesn't work, copy and paste this address:</p>"
        f"<p>{url}</p>"
        "<hr>"
        "<small>This link expires in 24 hours.</small>"
        "</div>"
    )
