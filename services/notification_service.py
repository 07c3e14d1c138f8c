import logging
from dataclasses import dataclass, field
from html import escape
from typing import List, Protocol

from fastapi_mail import FastMail, MessageSchema, MessageType

from core.config import Settings
from core.exceptions import NotificationError
from schemas.contact import ContactSubmission

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "New Contact Form Submission"


@dataclass(frozen=True)
class OutgoingEmail:
    sender_name: str
    sender_email: str
    recipients: List[str] = field(default_factory=list)
    subject: str = DEFAULT_SUBJECT
    html: str = ""

    @property
    def sender(self) -> str:
        return f"{self.sender_name} <{self.sender_email}>"


def compose_subject_line(subject: str | None) -> str:
    return f"New Contact: {subject}" if subject else DEFAULT_SUBJECT


def compose_contact_email(submission: ContactSubmission, settings: Settings) -> OutgoingEmail:
    """Build the operator notification for a validated submission.

    Sender and recipient come from configuration, never from the visitor.
    Visitor text is escaped before it is embedded in the HTML body.
    """
    name = escape(submission.full_name)
    email = escape(submission.email)
    message = escape(submission.message)

    subject_row = ""
    if submission.subject:
        subject_row = f'<p style="margin: 10px 0;"><strong>Subject:</strong> {escape(submission.subject)}</p>'

    html = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #333; border-bottom: 2px solid #4F46E5; padding-bottom: 10px;">
            New Contact Form Submission
        </h2>
        <div style="background-color: #f9fafb; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p style="margin: 10px 0;"><strong>Name:</strong> {name}</p>
            <p style="margin: 10px 0;"><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
            {subject_row}
        </div>
        <div style="background-color: #fff; padding: 20px; border-left: 4px solid #4F46E5; margin: 20px 0;">
            <h3 style="color: #333; margin-top: 0;">Message:</h3>
            <p style="white-space: pre-wrap; line-height: 1.6;">{message}</p>
        </div>
        <p style="color: #6b7280; font-size: 14px; margin-top: 30px;">
            This message was sent via your website's contact form.
        </p>
    </div>
    """

    return OutgoingEmail(
        sender_name=settings.MAIL_FROM_NAME,
        sender_email=settings.MAIL_FROM,
        recipients=[settings.OWNER_EMAIL],
        subject=compose_subject_line(submission.subject),
        html=html,
    )


class Notifier(Protocol):
    async def send(self, email: OutgoingEmail) -> None: ...


class EmailNotifier:
    """Delivers notifications over SMTP through fastapi-mail."""

    def __init__(self, fast_mail: FastMail):
        self.fast_mail = fast_mail

    async def send(self, email: OutgoingEmail) -> None:
        try:
            message = MessageSchema(
                subject=email.subject,
                recipients=email.recipients,
                body=email.html,
                subtype=MessageType.html,
                from_email=email.sender_email,
                from_name=email.sender_name,
            )
            await self.fast_mail.send_message(message)
        except Exception as e:
            raise NotificationError() from e
