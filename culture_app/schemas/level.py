from pydantic import BaseModel
from datetime import datetime
from culture_app.schemas.fields import TextField

class LevelIn(BaseModel):
    number: int | None = None
    title: TextField = None
    description: TextField = None
    icon: TextField = None
    status: TextField = None
    points: int | None = None

class LevelOut(BaseModel):
    id: int
    number: int | None = None
    title: str
    description: str | None = None
    icon: str | None = None
    status: str | None = None
    points: int | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True

class LevelCreated(BaseModel):
    id: int
    message: str
