from sqlalchemy.orm import Session
from culture_app.models.level import Level
from culture_app.models.video import Video

LEVEL_FIELDS = ("number", "title", "description", "icon", "status", "points")


def list_levels(db: Session) -> list[Level]:
    return db.query(Level).order_by(Level.number).all()


def get_level(db: Session, level_id: int) -> Level | None:
    return db.query(Level).filter(Level.id == level_id).first()


def create_level(db: Session, fields: dict) -> int:
    # keys left out of the body fall back to the column defaults; explicit nulls are stored
    values = {key: value for key, value in fields.items() if key in LEVEL_FIELDS}
    level = Level(**values)
    db.add(level)
    db.commit()
    return level.id


def replace_level(db: Session, level_id: int, fields: dict) -> int:
    values = {key: fields.get(key) for key in LEVEL_FIELDS}
    updated = db.query(Level).filter(Level.id == level_id).update(values, synchronize_session=False)
    db.commit()
    return updated


def delete_level(db: Session, level_id: int) -> tuple[int, int]:
    """Delete a level together with every video attached to it.

    Both deletes share the session transaction, so a failure on the level
    row rolls the video deletion back as well.
    """
    videos_deleted = db.query(Video).filter(Video.level_id == level_id).delete(synchronize_session=False)
    levels_deleted = db.query(Level).filter(Level.id == level_id).delete(synchronize_session=False)
    db.commit()
    return videos_deleted, levels_deleted
