from typing import Optional
from pydantic import Field, NaiveDatetime
from schemas.common import ORMBase


class UCSBDateBase(ORMBase):
    quarter_yyyyq: Optional[str] = Field(None, description="Quarter in YYYYQ form, e.g. 20222")
    name: Optional[str] = None
    local_date_time: Optional[NaiveDatetime] = None


class UCSBDateUpdate(UCSBDateBase):
    pass


class UCSBDateOut(UCSBDateBase):
    id: int
