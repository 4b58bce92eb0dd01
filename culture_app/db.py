import logging
import os

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

DATABASE_URL = os.getenv("CULTURE_DATABASE_URL", "sqlite:///./bharatiya_culture.db")

Base = declarative_base()

logger = logging.getLogger(__name__)


def make_engine(database_url: str = DATABASE_URL) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db(request: Request):
    db: Session = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_schema(engine: Engine) -> None:
    # models register themselves on Base when imported
    from culture_app.models import level, video  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Levels and videos tables created/verified")
