from sqlalchemy import Column, Integer, String
from database import Base


# Represents a video game entry
class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    description = Column(String, nullable=True)
    genre = Column(String, nullable=True)
