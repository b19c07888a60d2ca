# backend/models/users.py
from sqlalchemy import Column, Integer, String, Boolean
from database import Base

# Represents an identity seen through the OAuth2 provider; created on first login
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    google_sub = Column(String, nullable=True)
    picture_url = Column(String, nullable=True)
    full_name = Column(String, nullable=True)
    given_name = Column(String, nullable=True)
    family_name = Column(String, nullable=True)
    email_verified = Column(Boolean, nullable=False, default=False)
    locale = Column(String, nullable=True)
    hosted_domain = Column(String, nullable=True)
    admin = Column(Boolean, nullable=False, default=False)
