from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel import Session

from core.config import Settings
from database import get_session
from schemas.contact import ContactRequest, ContactResponse, ErrorResponse
from services.contact_repository import ContactRepository, SQLModelContactRepository
from services.contact_service import ContactService
from services.notification_service import Notifier

router = APIRouter()

CONTACT_PATH = "/send-contact-email"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_contact_repository(session: Session = Depends(get_session)) -> ContactRepository:
    return SQLModelContactRepository(session)


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_contact_service(
    repository: ContactRepository = Depends(get_contact_repository),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_app_settings),
) -> ContactService:
    return ContactService(repository, notifier, settings)


@router.options(CONTACT_PATH, include_in_schema=False)
def contact_preflight():
    # CORS headers are attached by the app middleware
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    CONTACT_PATH,
    response_model=ContactResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_contact_email(
    data: ContactRequest,
    service: ContactService = Depends(get_contact_service),
):
    notified = await service.submit(data)
    if notified:
        return ContactResponse(message="Contact form submitted and email sent successfully")
    return ContactResponse(message="Contact form submitted successfully")
