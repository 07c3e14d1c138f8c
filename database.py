# backend/database.py
from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel, Session

from core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the configured system of record."""
    return create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, pool_recycle=3600)


def create_db_and_tables(engine: Engine):
    """Initializes the database and creates all tables from models package"""
    # Importing models package ensures SQLModel metadata is populated
    import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


# Dependency to get a database session
def get_session(request: Request):
    """Provides a transactional database session bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
