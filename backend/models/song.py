from sqlalchemy import Column, Integer, String
from database import Base


class Song(Base):
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    artist = Column(String, nullable=True)
    album = Column(String, nullable=True)
    year = Column(Integer, nullable=True)
