from sqlalchemy import Column, Integer, String, DateTime
from database import Base


# Represents a named date on the academic calendar
class UCSBDate(Base):
    __tablename__ = "ucsbdates"

    id = Column(Integer, primary_key=True, index=True)
    # Quarter in YYYYQ form, e.g. "20222" for Spring 2022
    quarter_yyyyq = Column(String, nullable=True, index=True)
    name = Column(String, nullable=True)
    local_date_time = Column(DateTime, nullable=True)
