from typing import Optional
from schemas.common import ORMBase


class RestaurantBase(ORMBase):
    name: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None


class RestaurantUpdate(RestaurantBase):
    pass


class RestaurantOut(RestaurantBase):
    id: int
