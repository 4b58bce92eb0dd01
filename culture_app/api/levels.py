import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from culture_app.db import get_db
from culture_app.schemas.level import LevelCreated, LevelIn, LevelOut
from culture_app.services import levels as level_store

router = APIRouter(prefix="/api/levels", tags=["levels"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[LevelOut])
def list_levels(db: Session = Depends(get_db)):
    rows = level_store.list_levels(db)
    logger.info("Fetched %d levels", len(rows))
    return rows


@router.get("/{level_id}", response_model=LevelOut | None)
def get_level(level_id: int, db: Session = Depends(get_db)):
    # absent levels answer 200 with a null body; videos answer 404
    return level_store.get_level(db, level_id)


@router.post("", response_model=LevelCreated)
def create_level(payload: LevelIn, db: Session = Depends(get_db)):
    new_id = level_store.create_level(db, payload.model_dump(exclude_unset=True))
    logger.info("Created level %s (number=%s)", new_id, payload.number)
    return {"id": new_id, "message": "Level created successfully"}


@router.put("/{level_id}")
def update_level(level_id: int, payload: LevelIn, db: Session = Depends(get_db)):
    updated = level_store.replace_level(db, level_id, payload.model_dump())
    if not updated:
        logger.info("Update for level %s matched no rows", level_id)
    return {"message": "Level updated successfully"}


@router.delete("/{level_id}")
def delete_level(level_id: int, db: Session = Depends(get_db)):
    videos_deleted, _ = level_store.delete_level(db, level_id)
    logger.info("Deleted level %s and %d videos", level_id, videos_deleted)
    return {"message": "Level and associated videos deleted successfully"}
