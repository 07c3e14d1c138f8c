"""
Test doubles for the persistence and email collaborators.
"""
from core.config import Settings
from core.exceptions import NotificationError, PersistenceError


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    async def send(self, email):
        self.sent.append(email)


class FailingNotifier(RecordingNotifier):
    async def send(self, email):
        self.sent.append(email)
        raise NotificationError() from ConnectionRefusedError("smtp down")


class RecordingRepository:
    def __init__(self):
        self.inserted = []

    def insert(self, submission):
        self.inserted.append(submission)


class FailingRepository(RecordingRepository):
    def insert(self, submission):
        self.inserted.append(submission)
        raise PersistenceError()


class ExplodingRepository(RecordingRepository):
    def insert(self, submission):
        raise RuntimeError("unexpected driver failure")


def make_settings(**overrides):
    values = dict(
        DATABASE_URL="sqlite://",
        MAIL_USERNAME="mailer",
        MAIL_PASSWORD="secret",
        MAIL_FROM="noreply@example.com",
        MAIL_FROM_NAME="Contact Form",
        MAIL_SERVER="smtp.example.com",
        MAIL_SUPPRESS_SEND=True,
        OWNER_EMAIL="owner@example.com",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)
