import logging

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import Settings

import app.models.requirement_type  # noqa
import app.models.requirement  # noqa
import app.models.comment  # noqa

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    url = settings.database_url
    connect_args = {}
    # Algunos proveedores entregan el esquema antiguo "postgres://", que SQLAlchemy ya no acepta;
    # sin driver explícito se fija psycopg2, que es el que se instala
    for scheme in ("postgres://", "postgresql://"):
        if url.startswith(scheme):
            url = "postgresql+psycopg2://" + url[len(scheme):]
    if url.startswith("postgresql"):
        connect_args["sslmode"] = settings.database_sslmode
    elif url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=settings.sql_echo, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Crea las tablas que falten. No es un sistema de migraciones: no versiona ni hace rollback."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables checked/created successfully.")


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
