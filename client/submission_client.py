import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from schemas.contact import replace_lone_surrogates

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "/send-contact-email"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"
    APPLICATION_ERROR = "application_error"


@dataclass(frozen=True)
class SubmissionOutcome:
    kind: OutcomeKind
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def _clean(value: Optional[str]) -> str:
    return replace_lone_surrogates(value or "").strip()


def build_payload(full_name: str, email: str, subject: Optional[str], message: str) -> Dict[str, Any]:
    """Trim every field and turn a blank subject into null."""
    return {
        "fullName": _clean(full_name),
        "email": _clean(email),
        "subject": _clean(subject) or None,
        "message": _clean(message),
    }


class ContactClient:
    """Posts contact submissions to the backend. Never retries on its own."""

    def __init__(
        self,
        base_url: str,
        endpoint: str = DEFAULT_ENDPOINT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.endpoint = endpoint
        self.http_client = http_client

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}{self.endpoint}"
        if self.http_client is not None:
            return await self.http_client.post(url, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(url, json=payload)

    async def submit(
        self,
        full_name: str,
        email: str,
        subject: Optional[str],
        message: str,
    ) -> SubmissionOutcome:
        payload = build_payload(full_name, email, subject, message)

        try:
            response = await self._post(payload)
        except httpx.RequestError as e:
            logger.error(f"Could not reach contact endpoint: {e!r}")
            return SubmissionOutcome(OutcomeKind.TRANSPORT_ERROR, str(e))

        try:
            data = response.json()
        except ValueError:
            data = None

        error = data.get("error") if isinstance(data, dict) else None
        if not response.is_success or error:
            detail = error or f"HTTP {response.status_code}"
            logger.warning(f"Contact endpoint rejected submission: {detail}")
            return SubmissionOutcome(OutcomeKind.APPLICATION_ERROR, detail)

        return SubmissionOutcome(OutcomeKind.SUCCESS, data.get("message") if isinstance(data, dict) else None)
