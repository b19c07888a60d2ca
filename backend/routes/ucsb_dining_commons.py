# backend/routes/ucsb_dining_commons.py
from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.ucsb_dining_commons import UCSBDiningCommons
from repositories.entities import UCSBDiningCommonsRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.ucsb_dining_commons import UCSBDiningCommonsOut, UCSBDiningCommonsUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/ucsbdiningcommons", tags=["UCSB Dining Commons"], responses={404: {"model": ErrorResponse}})

# Dining commons are keyed by their code rather than a generated id


def get_repository(db: Session = Depends(get_db)) -> UCSBDiningCommonsRepository:
    return UCSBDiningCommonsRepository(db)


@router.get("/all", response_model=List[UCSBDiningCommonsOut])
def all_commons(
    repo: UCSBDiningCommonsRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    return repo.find_all()


@router.get("", response_model=UCSBDiningCommonsOut)
def get_by_code(
    code: str = Query(..., description="code (ex: ortega)"),
    repo: UCSBDiningCommonsRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    commons = repo.find_by_id(code)
    if commons is None:
        raise EntityNotFoundError(UCSBDiningCommons, code)
    return commons


@router.post("/post", response_model=UCSBDiningCommonsOut)
def post_commons(
    code: str = Query(..., description="code (ex: ortega)"),
    name: str = Query(..., description="name (ex: Ortega)"),
    has_sack_meal: bool = Query(..., description="has_sack_meal"),
    has_take_out_meal: bool = Query(..., description="has_take_out_meal"),
    has_dining_cam: bool = Query(..., description="has_dining_cam"),
    latitude: float = Query(..., description="latitude (ex: 34.410987)"),
    longitude: float = Query(..., description="longitude (ex: -119.84709)"),
    repo: UCSBDiningCommonsRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    commons = UCSBDiningCommons(
        code=code,
        name=name,
        has_sack_meal=has_sack_meal,
        has_take_out_meal=has_take_out_meal,
        has_dining_cam=has_dining_cam,
        latitude=latitude,
        longitude=longitude,
    )
    return repo.save(commons)


@router.delete("", response_model=GenericMessage)
def delete_commons(
    code: str = Query(..., description="code (ex: ortega)"),
    repo: UCSBDiningCommonsRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    commons = repo.find_by_id(code)
    if commons is None:
        raise EntityNotFoundError(UCSBDiningCommons, code)
    repo.delete(commons)
    return generic_message(f"UCSBDiningCommons with id {code} deleted")


@router.put("", response_model=UCSBDiningCommonsOut)
def update_commons(
    incoming: UCSBDiningCommonsUpdate,
    code: str = Query(..., description="code (ex: ortega)"),
    repo: UCSBDiningCommonsRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    commons = repo.find_by_id(code)
    if commons is None:
        raise EntityNotFoundError(UCSBDiningCommons, code)

    commons.name = incoming.name
    commons.has_sack_meal = incoming.has_sack_meal
    commons.has_take_out_meal = incoming.has_take_out_meal
    commons.has_dining_cam = incoming.has_dining_cam
    commons.latitude = incoming.latitude
    commons.longitude = incoming.longitude

    return repo.save(commons)
