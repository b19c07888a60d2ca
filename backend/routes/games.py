# backend/routes/games.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.game import Game
from repositories.entities import GameRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.game import GameOut, GameUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/games", tags=["Games"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> GameRepository:
    return GameRepository(db)


@router.get("/all", response_model=List[GameOut])
def all_games(
    repo: GameRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


@router.get("", response_model=GameOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: GameRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    game = repo.find_by_id(id)
    if game is None:
        raise EntityNotFoundError(Game, id)
    return game


@router.post("/post", response_model=GameOut)
def post_game(
    name: str = Query(..., description="name (ex: the Legend of Zelda)"),
    description: str = Query(..., description="description (ex: Play as link and save the princess)"),
    genre: str = Query(..., description="genre (ex: open world)"),
    repo: GameRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    game = Game(name=name, description=description, genre=genre)
    return repo.save(game)


@router.delete("", response_model=GenericMessage)
def delete_game(
    id: int = Query(..., description="id"),
    repo: GameRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    game = repo.find_by_id(id)
    if game is None:
        raise EntityNotFoundError(Game, id)
    repo.delete(game)
    return generic_message(f"Game with id {id} deleted")


@router.put("", response_model=GameOut)
def update_game(
    incoming: GameUpdate,
    id: int = Query(..., description="id"),
    repo: GameRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    game = repo.find_by_id(id)
    if game is None:
        raise EntityNotFoundError(Game, id)

    game.name = incoming.name
    game.description = incoming.description
    game.genre = incoming.genre

    return repo.save(game)
