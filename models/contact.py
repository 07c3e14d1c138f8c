# backend/models/contact.py
from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactBase(SQLModel):
    full_name: str
    email: str
    subject: Optional[str] = None
    message: str


class Contact(ContactBase, table=True):
    __tablename__ = "contacts"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
