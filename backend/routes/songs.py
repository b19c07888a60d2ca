# backend/routes/songs.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.song import Song
from repositories.entities import SongRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.song import SongOut, SongUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/songs", tags=["Songs"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> SongRepository:
    return SongRepository(db)


@router.get("/all", response_model=List[SongOut])
def all_songs(
    repo: SongRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


@router.get("", response_model=SongOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: SongRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    song = repo.find_by_id(id)
    if song is None:
        raise EntityNotFoundError(Song, id)
    return song


@router.post("/post", response_model=SongOut)
def post_song(
    artist: str = Query(..., description="artist"),
    album: str = Query(..., description="album"),
    year: int = Query(..., description="year"),
    repo: SongRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    song = Song(artist=artist, album=album, year=year)
    return repo.save(song)


@router.delete("", response_model=GenericMessage)
def delete_song(
    id: int = Query(..., description="id"),
    repo: SongRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    song = repo.find_by_id(id)
    if song is None:
        raise EntityNotFoundError(Song, id)
    repo.delete(song)
    return generic_message(f"Song with id {id} deleted")


@router.put("", response_model=SongOut)
def update_song(
    incoming: SongUpdate,
    id: int = Query(..., description="id"),
    repo: SongRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    song = repo.find_by_id(id)
    if song is None:
        raise EntityNotFoundError(Song, id)

    song.artist = incoming.artist
    song.album = incoming.album
    song.year = incoming.year

    return repo.save(song)
