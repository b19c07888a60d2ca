from typing import Optional
from schemas.common import ORMBase


class SongBase(ORMBase):
    artist: Optional[str] = None
    album: Optional[str] = None
    year: Optional[int] = None


class SongUpdate(SongBase):
    pass


class SongOut(SongBase):
    id: int
