from pydantic import BaseModel, Field
from typing import Optional

MIN_MESSAGE_LENGTH = 20


def text_length(value: str) -> int:
    """Length in UTF-16 code units, the unit browsers count form input in."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def replace_lone_surrogates(value: str) -> str:
    """Swap unpaired surrogates for U+FFFD, as a browser does when it UTF-8 encodes a body."""
    return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


class ContactRequest(BaseModel):
    """Raw payload as posted by the contact form. Nothing is trusted yet."""
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    class Config:
        populate_by_name = True


class ContactSubmission(BaseModel):
    """A submission that passed validation. Subject is None when blank."""
    full_name: str
    email: str
    subject: Optional[str] = None
    message: str

    class Config:
        frozen = True


class ContactResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
