from sqlalchemy import Column, String, Boolean, Float
from database import Base


# Represents a campus dining commons; keyed by its short code (e.g. "ortega")
class UCSBDiningCommons(Base):
    __tablename__ = "ucsbdiningcommons"

    code = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=True)
    has_sack_meal = Column(Boolean, nullable=False, default=False)
    has_take_out_meal = Column(Boolean, nullable=False, default=False)
    has_dining_cam = Column(Boolean, nullable=False, default=False)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
