from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from culture_app.db import Base

class Level(Base):
    __tablename__ = "levels"
    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(Integer, unique=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    icon = Column(String)
    status = Column(String, default="locked", server_default="locked")
    points = Column(Integer, default=100, server_default="100")
    created_at = Column(DateTime, default=datetime.utcnow)
