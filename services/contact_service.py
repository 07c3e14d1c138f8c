import logging

from starlette.concurrency import run_in_threadpool

from core.config import Settings
from core.exceptions import NotificationError, SubmissionValidationError
from schemas.contact import (
    MIN_MESSAGE_LENGTH,
    ContactRequest,
    ContactSubmission,
    replace_lone_surrogates,
    text_length,
)
from services.contact_repository import ContactRepository
from services.notification_service import Notifier, compose_contact_email

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
MESSAGE_TOO_SHORT = f"Message must be at least {MIN_MESSAGE_LENGTH} characters"


def _clean(value: str | None) -> str:
    return replace_lone_surrogates(value or "").strip()


def validate_submission(payload: ContactRequest) -> ContactSubmission:
    """Server-side gate. Runs on every request regardless of client checks."""
    full_name = _clean(payload.full_name)
    email = _clean(payload.email)
    message = _clean(payload.message)

    if not full_name or not email or not message:
        raise SubmissionValidationError(MISSING_FIELDS)

    if text_length(message) < MIN_MESSAGE_LENGTH:
        raise SubmissionValidationError(MESSAGE_TOO_SHORT)

    return ContactSubmission(
        full_name=full_name,
        email=email,
        subject=_clean(payload.subject) or None,
        message=message,
    )


class ContactService:
    """Validates, stores, then notifies.

    Storage and notification are two independent effects with no shared
    transaction. A storage failure stops the pipeline before any email is
    attempted. Notification is attempted at most once per stored submission;
    whether its failure fails the request is controlled by
    ``notification_required``.
    """

    def __init__(
        self,
        repository: ContactRepository,
        notifier: Notifier,
        settings: Settings,
    ):
        self.repository = repository
        self.notifier = notifier
        self.settings = settings

    async def submit(self, payload: ContactRequest) -> bool:
        """Run the pipeline. Returns whether the notification went out."""
        submission = validate_submission(payload)
        logger.info(f"Processing contact form submission from: {submission.email}")

        await run_in_threadpool(self.repository.insert, submission)
        logger.info("Contact message stored in database")

        email = compose_contact_email(submission, self.settings)
        try:
            await self.notifier.send(email)
        except NotificationError as e:
            logger.error(
                f"Notification email for submission from {submission.email} failed: {e.__cause__ or e}"
            )
            if self.settings.NOTIFICATION_REQUIRED:
                raise
            return False

        logger.info(f"Notification email sent for submission from {submission.email}")
        return True
