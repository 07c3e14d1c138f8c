import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from core.exceptions import PersistenceError
from models.contact import Contact
from schemas.contact import ContactSubmission

logger = logging.getLogger(__name__)


class ContactRepository(Protocol):
    def insert(self, submission: ContactSubmission) -> None: ...


class SQLModelContactRepository:
    """Stores submissions in the ``contacts`` table, one row per call."""

    def __init__(self, session: Session):
        self.session = session

    def insert(self, submission: ContactSubmission) -> None:
        contact = Contact(
            full_name=submission.full_name,
            email=submission.email,
            subject=submission.subject or None,
            message=submission.message,
        )
        try:
            self.session.add(contact)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Database error while storing contact from {submission.email}: {e}")
            raise PersistenceError() from e
