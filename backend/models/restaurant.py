from sqlalchemy import Column, Integer, String
from database import Base


# Represents a restaurant with its location and a short description
class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    address = Column(String, nullable=True)
    description = Column(String, nullable=True)
