"""
Shared pytest fixtures for the contact pipeline tests.
"""
import os

# main builds a module-level app on import, so it needs a complete environment
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MAIL_USERNAME", "mailer")
os.environ.setdefault("MAIL_PASSWORD", "secret")
os.environ.setdefault("MAIL_FROM", "noreply@example.com")
os.environ.setdefault("MAIL_SERVER", "smtp.example.com")
os.environ.setdefault("MAIL_SUPPRESS_SEND", "true")
os.environ.setdefault("OWNER_EMAIL", "owner@example.com")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from api.contact import get_contact_repository
from tests.fakes import RecordingNotifier, make_settings
from main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(settings, engine, notifier):
    return create_app(settings=settings, engine=engine, notifier=notifier)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def use_repository(app):
    """Swap the persistence collaborator for a test double."""
    def _use(repository):
        app.dependency_overrides[get_contact_repository] = lambda: repository
        return repository
    yield _use
    app.dependency_overrides.clear()
