from pydantic import BaseModel, Field
from datetime import datetime
from culture_app.schemas.fields import TextField


class VideoUploadIn(BaseModel):
    """Upload body as sent by the admin page (camelCase for file metadata)."""

    level_id: int | None = None
    title: TextField = None
    description: TextField = None
    video_data: TextField = Field(default=None, alias="videoData")
    filename: TextField = None
    file_size: int | None = Field(default=None, alias="fileSize")
    mime_type: TextField = Field(default=None, alias="mimeType")

    class Config:
        populate_by_name = True


class VideoOut(BaseModel):
    id: int
    level_id: int | None = None
    title: str
    description: str | None = None
    filename: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    video_data: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class VideoWithLevelOut(VideoOut):
    level_number: int | None = None
    level_title: str | None = None


class VideoCreated(BaseModel):
    id: int
    message: str
