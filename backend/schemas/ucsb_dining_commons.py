from typing import Optional
from schemas.common import ORMBase


class UCSBDiningCommonsBase(ORMBase):
    name: Optional[str] = None
    has_sack_meal: bool = False
    has_take_out_meal: bool = False
    has_dining_cam: bool = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None


# Body of PUT /api/ucsbdiningcommons; the code itself is never changed
class UCSBDiningCommonsUpdate(UCSBDiningCommonsBase):
    pass


class UCSBDiningCommonsOut(UCSBDiningCommonsBase):
    code: str
