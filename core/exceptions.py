from fastapi import status


class ContactError(Exception):
    """Base error for the contact pipeline.

    ``public_message`` is what the visitor sees; technical detail stays in the logs.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Failed to process contact form"

    def __init__(self, public_message: str | None = None):
        if public_message is not None:
            self.public_message = public_message
        super().__init__(self.public_message)


class SubmissionValidationError(ContactError):
    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid request body"


class PersistenceError(ContactError):
    public_message = "Failed to store contact message"


class NotificationError(ContactError):
    public_message = "Failed to send notification email"
