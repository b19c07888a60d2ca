from typing import Optional
from schemas.common import ORMBase


class GroceryBase(ORMBase):
    name: Optional[str] = None
    price: Optional[str] = None
    expiration: Optional[str] = None


class GroceryUpdate(GroceryBase):
    pass


class GroceryOut(GroceryBase):
    id: int
