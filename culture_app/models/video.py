from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from culture_app.db import Base

class Video(Base):
    __tablename__ = "videos"
    id = Column(Integer, primary_key=True, autoincrement=True)
    level_id = Column(Integer, ForeignKey("levels.id"), nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    filename = Column(String)
    file_size = Column(Integer)
    mime_type = Column(String)
    video_data = Column(Text)  # base64 payload, stored inline
    created_at = Column(DateTime, default=datetime.utcnow)
