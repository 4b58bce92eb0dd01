from typing import Any

from sqlalchemy.orm import Session
from culture_app.models.level import Level
from culture_app.models.video import Video

VIDEO_FIELDS = ("level_id", "title", "description", "filename", "file_size", "mime_type", "video_data")


def list_videos_with_level(db: Session) -> list[tuple[Video, int | None, str | None]]:
    rows = (
        db.query(Video, Level.number, Level.title)
        .outerjoin(Level, Video.level_id == Level.id)
        .order_by(Level.number, Video.title)
        .all()
    )
    return [(video, level_number, level_title) for video, level_number, level_title in rows]


def list_videos_for_level(db: Session, level_id: int) -> list[Video]:
    return db.query(Video).filter(Video.level_id == level_id).all()


def get_video(db: Session, video_id: int) -> Video | None:
    return db.query(Video).filter(Video.id == video_id).first()


def create_video(db: Session, fields: dict[str, Any]) -> int:
    video = Video(**{key: fields.get(key) for key in VIDEO_FIELDS})
    db.add(video)
    db.commit()
    return video.id


def delete_video(db: Session, video_id: int) -> int:
    deleted = db.query(Video).filter(Video.id == video_id).delete(synchronize_session=False)
    db.commit()
    return deleted
