import logging

from sqlmodel import SQLModel, create_engine

from hospital import models  # noqa: F401
from hospital.core.config import settings

logger = logging.getLogger(__name__)

connect_args = {}
if settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, connect_args=connect_args)


# make sure all SQLModel models are imported (hospital.models) before initializing DB
# otherwise, SQLModel might not register every table
def init_db() -> None:
    logger.info("Creating database tables")
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created")
