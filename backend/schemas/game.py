from typing import Optional
from schemas.common import ORMBase


class GameBase(ORMBase):
    name: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None


# Body of PUT /api/games
class GameUpdate(GameBase):
    pass


class GameOut(GameBase):
    id: int
