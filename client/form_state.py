import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from client.submission_client import ContactClient
from schemas.contact import MIN_MESSAGE_LENGTH, text_length

logger = logging.getLogger(__name__)

FIELDS = ("fullName", "email", "subject", "message")


class SubmitResult(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    TOO_SHORT = "too_short"
    BUSY = "busy"


@dataclass(frozen=True)
class Notice:
    title: str
    description: str
    variant: str = "default"


TOO_SHORT_NOTICE = Notice(
    title="Message too short",
    description=f"Please write at least {MIN_MESSAGE_LENGTH} characters in your message.",
    variant="destructive",
)
SUCCESS_NOTICE = Notice(
    title="✅ Your message was sent successfully!",
    description="I will get back to you as soon as possible.",
)
FAILURE_NOTICE = Notice(
    title="❌ Failed to send your message",
    description="Please try again later.",
    variant="destructive",
)


def _log_notice(notice: Notice) -> None:
    logger.info(f"{notice.title} {notice.description}")


class ContactForm:
    """State behind the contact form: field values, busy flag, submit."""

    def __init__(self, client: ContactClient, notify: Optional[Callable[[Notice], None]] = None):
        self.client = client
        self.notify = notify or _log_notice
        self._values: Dict[str, str] = dict.fromkeys(FIELDS, "")
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def values(self) -> Dict[str, str]:
        return dict(self._values)

    def update(self, field: str, value: str) -> None:
        if field not in self._values:
            raise KeyError(f"Unknown contact form field: {field}")
        self._values[field] = value

    def reset(self) -> None:
        self._values = dict.fromkeys(FIELDS, "")

    @property
    def counter_label(self) -> str:
        return f"{text_length(self._values['message'])}/{MIN_MESSAGE_LENGTH} characters minimum"

    async def submit(self) -> SubmitResult:
        if self._busy:
            return SubmitResult.BUSY

        # fast local gate; the server checks again
        if text_length(self._values["message"]) < MIN_MESSAGE_LENGTH:
            self.notify(TOO_SHORT_NOTICE)
            return SubmitResult.TOO_SHORT

        self._busy = True
        try:
            outcome = await self.client.submit(
                full_name=self._values["fullName"],
                email=self._values["email"],
                subject=self._values["subject"],
                message=self._values["message"],
            )
        finally:
            self._busy = False

        if not outcome.ok:
            logger.error(f"Error submitting contact form: {outcome.kind.value} {outcome.detail}")
            self.notify(FAILURE_NOTICE)
            return SubmitResult.FAILURE

        self.reset()
        self.notify(SUCCESS_NOTICE)
        return SubmitResult.SUCCESS
