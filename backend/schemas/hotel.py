from typing import Optional
from schemas.common import ORMBase


class HotelBase(ORMBase):
    name: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None


class HotelUpdate(HotelBase):
    pass


class HotelOut(HotelBase):
    id: int
