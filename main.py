import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.engine import Engine

from api import contact
from core.config import Settings, get_settings
from core.cors import add_cors_headers, error_response
from core.exceptions import ContactError
from core.mail import build_fast_mail
from database import build_engine, create_db_and_tables
from services.notification_service import EmailNotifier, Notifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    """Build the contact API.

    Settings are validated here so a missing credential stops the process at
    startup. ``engine`` and ``notifier`` can be swapped for test doubles.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    engine = engine or build_engine(settings)
    notifier = notifier or EmailNotifier(build_fast_mail(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 App starting up...")
        create_db_and_tables(engine)
        yield
        engine.dispose()
        logger.info("🛑 App shutting down...")

    app = FastAPI(lifespan=lifespan, title="Contact Form Backend")
    app.state.settings = settings
    app.state.engine = engine
    app.state.notifier = notifier

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    # CORS on every response, registered last so it wraps the logger
    app.middleware("http")(add_cors_headers)

    @app.exception_handler(ContactError)
    async def contact_error_handler(request: Request, exc: ContactError):
        return error_response(exc.status_code, exc.public_message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body: {[(err['loc'], err['type']) for err in exc.errors()]}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Error in contact pipeline: {exc}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to process contact form")

    app.include_router(contact.router)

    @app.get("/")
    def read_root():
        return {"message": "Backend running and connected to DB!"}

    return app


app = create_app()
