import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from culture_app.db import get_db
from culture_app.schemas.video import VideoCreated, VideoOut, VideoUploadIn, VideoWithLevelOut
from culture_app.services import videos as video_store

router = APIRouter(prefix="/api/videos", tags=["videos"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[VideoWithLevelOut])
def list_videos(db: Session = Depends(get_db)):
    rows = video_store.list_videos_with_level(db)
    logger.info("Fetched %d videos", len(rows))
    return [
        VideoWithLevelOut(
            **VideoOut.model_validate(video).model_dump(),
            level_number=level_number,
            level_title=level_title,
        )
        for video, level_number, level_title in rows
    ]


@router.get("/level/{level_id}", response_model=list[VideoOut])
def list_videos_for_level(level_id: int, db: Session = Depends(get_db)):
    rows = video_store.list_videos_for_level(db, level_id)
    logger.info("Fetched %d videos for level %s", len(rows), level_id)
    return rows


@router.post("", response_model=VideoCreated)
def upload_video(payload: VideoUploadIn | None = None, db: Session = Depends(get_db)):
    if payload is None or not payload.video_data:
        raise HTTPException(status_code=400, detail="No video data provided")

    logger.info(
        "Uploading video: title=%r level_id=%s file_size=%s",
        payload.title,
        payload.level_id,
        payload.file_size,
    )
    new_id = video_store.create_video(db, payload.model_dump())
    logger.info("Video uploaded with ID: %s", new_id)
    return {"id": new_id, "message": "Video uploaded successfully"}


@router.get("/{video_id}", response_model=VideoOut)
def get_video(video_id: int, db: Session = Depends(get_db)):
    video = video_store.get_video(db, video_id)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.delete("/{video_id}")
def delete_video(video_id: int, db: Session = Depends(get_db)):
    video_store.delete_video(db, video_id)
    return {"message": "Video deleted successfully"}
