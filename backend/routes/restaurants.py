# backend/routes/restaurants.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.restaurant import Restaurant
from repositories.entities import RestaurantRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.restaurant import RestaurantOut, RestaurantUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/restaurants", tags=["Restaurants"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> RestaurantRepository:
    return RestaurantRepository(db)


@router.get("/all", response_model=List[RestaurantOut])
def all_restaurants(
    repo: RestaurantRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


@router.get("", response_model=RestaurantOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: RestaurantRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    restaurant = repo.find_by_id(id)
    if restaurant is None:
        raise EntityNotFoundError(Restaurant, id)
    return restaurant


@router.post("/post", response_model=RestaurantOut)
def post_restaurant(
    name: str = Query(..., description="name (ex: Freebirds)"),
    address: str = Query(..., description="address (ex: 879 Embarcadero del Norte, Isla Vista)"),
    description: str = Query(..., description="description (ex: Burritos)"),
    repo: RestaurantRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    restaurant = Restaurant(name=name, address=address, description=description)
    return repo.save(restaurant)


@router.delete("", response_model=GenericMessage)
def delete_restaurant(
    id: int = Query(..., description="id"),
    repo: RestaurantRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    restaurant = repo.find_by_id(id)
    if restaurant is None:
        raise EntityNotFoundError(Restaurant, id)
    repo.delete(restaurant)
    return generic_message(f"Restaurant with id {id} deleted")


@router.put("", response_model=RestaurantOut)
def update_restaurant(
    incoming: RestaurantUpdate,
    id: int = Query(..., description="id"),
    repo: RestaurantRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    restaurant = repo.find_by_id(id)
    if restaurant is None:
        raise EntityNotFoundError(Restaurant, id)

    restaurant.name = incoming.name
    restaurant.address = incoming.address
    restaurant.description = incoming.description

    return repo.save(restaurant)
