import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from culture_app.db import DATABASE_URL, init_schema, make_engine, make_session_factory
from culture_app.models.level import Level

logger = logging.getLogger(__name__)

SAMPLE_LEVELS = [
    {
        "number": 1,
        "title": "Festivals & Celebrations",
        "description": "Explore the vibrant festivals of India",
        "icon": "🎉",
        "status": "available",
        "points": 100,
    },
    {
        "number": 2,
        "title": "Folk Arts & Music",
        "description": "Discover India's rich folk arts and music",
        "icon": "🎨",
        "status": "locked",
        "points": 150,
    },
    {
        "number": 3,
        "title": "Mythology & Epics",
        "description": "Journey through Indian mythology and epics",
        "icon": "📖",
        "status": "locked",
        "points": 200,
    },
]


def seed_sample_levels(session_factory: sessionmaker, samples: list[dict] | None = None) -> int:
    """Insert each sample level whose number is not taken yet.

    Existing rows are never touched. A failure on one sample is logged and
    the remaining samples are still attempted. Returns the number inserted.
    """
    inserted = 0
    for sample in samples if samples is not None else SAMPLE_LEVELS:
        db: Session = session_factory()
        try:
            existing = db.query(Level.id).filter(Level.number == sample["number"]).first()
            if existing:
                logger.info("Level %s already exists", sample["number"])
                continue
            db.add(Level(**sample))
            db.commit()
            inserted += 1
            logger.info("Inserted level %s: %s", sample["number"], sample["title"])
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Error inserting sample level %s", sample.get("number"))
        finally:
            db.close()
    return inserted


def seed(database_url: str = DATABASE_URL) -> None:
    engine = make_engine(database_url)
    try:
        init_schema(engine)
        seed_sample_levels(make_session_factory(engine))
    finally:
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
