# backend/routes/hotels.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.hotel import Hotel
from repositories.entities import HotelRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.hotel import HotelOut, HotelUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/hotels", tags=["Hotels"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> HotelRepository:
    return HotelRepository(db)


# List all hotels
@router.get("/all", response_model=List[HotelOut])
def all_hotels(
    repo: HotelRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


# Get a single hotel
@router.get("", response_model=HotelOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: HotelRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    hotel = repo.find_by_id(id)
    if hotel is None:
        raise EntityNotFoundError(Hotel, id)
    return hotel


# Create a new hotel (Admin only)
@router.post("/post", response_model=HotelOut)
def post_hotel(
    name: str = Query(..., description="name (ex: Hotel Californian)"),
    address: str = Query(..., description="address (ex: 36 State St, Santa Barbara, CA 93101)"),
    description: str = Query(..., description="description (ex: Beachfront hotel near Stearns Wharf)"),
    repo: HotelRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    hotel = Hotel(name=name, address=address, description=description)
    return repo.save(hotel)


# Delete a hotel (Admin only)
@router.delete("", response_model=GenericMessage)
def delete_hotel(
    id: int = Query(..., description="id"),
    repo: HotelRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    hotel = repo.find_by_id(id)
    if hotel is None:
        raise EntityNotFoundError(Hotel, id)
    repo.delete(hotel)
    return generic_message(f"Hotel with id {id} deleted")


# Update a single hotel (Admin only)
@router.put("", response_model=HotelOut)
def update_hotel(
    incoming: HotelUpdate,
    id: int = Query(..., description="id"),
    repo: HotelRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    hotel = repo.find_by_id(id)
    if hotel is None:
        raise EntityNotFoundError(Hotel, id)

    hotel.name = incoming.name
    hotel.address = incoming.address
    hotel.description = incoming.description

    return repo.save(hotel)
