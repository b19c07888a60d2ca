from sqlalchemy import Column, Integer, String
from database import Base


# Represents a grocery item; price and expiration are kept as entered (e.g. "0.29", "05-17-23")
class Grocery(Base):
    __tablename__ = "groceries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    price = Column(String, nullable=True)
    expiration = Column(String, nullable=True)
