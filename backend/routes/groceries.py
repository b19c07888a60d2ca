# backend/routes/groceries.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.grocery import Grocery
from repositories.entities import GroceryRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.grocery import GroceryOut, GroceryUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/groceries", tags=["Groceries"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> GroceryRepository:
    return GroceryRepository(db)


# List all groceries
@router.get("/all", response_model=List[GroceryOut])
def all_groceries(
    repo: GroceryRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


# Get a single grocery
@router.get("", response_model=GroceryOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: GroceryRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    grocery = repo.find_by_id(id)
    if grocery is None:
        raise EntityNotFoundError(Grocery, id)
    return grocery


# Create a new grocery (Admin only)
@router.post("/post", response_model=GroceryOut)
def post_grocery(
    name: str = Query(..., description="name (ex: Banana)"),
    price: str = Query(..., description="price (ex: 5.99)"),
    expiration: str = Query(..., description="expiration (ex: 05-18-23)"),
    repo: GroceryRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    grocery = Grocery(name=name, price=price, expiration=expiration)
    return repo.save(grocery)


# Delete a grocery (Admin only)
@router.delete("", response_model=GenericMessage)
def delete_grocery(
    id: int = Query(..., description="id"),
    repo: GroceryRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    grocery = repo.find_by_id(id)
    if grocery is None:
        raise EntityNotFoundError(Grocery, id)
    repo.delete(grocery)
    return generic_message(f"Grocery with id {id} deleted")


# Update a single grocery (Admin only)
@router.put("", response_model=GroceryOut)
def update_grocery(
    incoming: GroceryUpdate,
    id: int = Query(..., description="id"),
    repo: GroceryRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    grocery = repo.find_by_id(id)
    if grocery is None:
        raise EntityNotFoundError(Grocery, id)

    grocery.name = incoming.name
    grocery.price = incoming.price
    grocery.expiration = incoming.expiration

    return repo.save(grocery)
