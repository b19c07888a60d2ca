# backend/routes/ucsb_dates.py
from pydantic import NaiveDatetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.ucsb_date import UCSBDate
from repositories.ucsb_dates import UCSBDateRepository
from schemas.common import ErrorResponse, GenericMessage
from schemas.ucsb_date import UCSBDateOut, UCSBDateUpdate
from services.current_user import CurrentUser
from utils.errors import EntityNotFoundError, generic_message
from utils.tokenJWT import require_admin, require_user

router = APIRouter(prefix="/api/ucsbdates", tags=["UCSB Dates"], responses={404: {"model": ErrorResponse}})


def get_repository(db: Session = Depends(get_db)) -> UCSBDateRepository:
    return UCSBDateRepository(db)


# List all UCSB dates, optionally only those of one quarter
@router.get("/all", response_model=List[UCSBDateOut])
def all_ucsb_dates(
    quarter_yyyyq: Optional[str] = Query(None, description="only dates of this quarter (ex: 20222)"),
    repo: UCSBDateRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    if quarter_yyyyq:
        return repo.find_all_by_quarter_yyyyq(quarter_yyyyq)
    return repo.find_all()


# Get a single date
@router.get("", response_model=UCSBDateOut)
def get_by_id(
    id: int = Query(..., description="id"),
    repo: UCSBDateRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_user),
):
    ucsb_date = repo.find_by_id(id)
    if ucsb_date is None:
        raise EntityNotFoundError(UCSBDate, id)
    return ucsb_date


# Create a new date (Admin only)
@router.post("/post", response_model=UCSBDateOut)
def post_ucsb_date(
    quarter_yyyyq: str = Query(..., description="quarter_yyyyq (ex: 20222)"),
    name: str = Query(..., description="name (ex: noon on January 2nd)"),
    local_date_time: NaiveDatetime = Query(..., description="local_date_time in ISO format (ex: 2022-01-03T00:00:00)"),
    repo: UCSBDateRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    ucsb_date = UCSBDate(quarter_yyyyq=quarter_yyyyq, name=name, local_date_time=local_date_time)
    return repo.save(ucsb_date)


# Delete a date (Admin only)
@router.delete("", response_model=GenericMessage)
def delete_ucsb_date(
    id: int = Query(..., description="id"),
    repo: UCSBDateRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    ucsb_date = repo.find_by_id(id)
    if ucsb_date is None:
        raise EntityNotFoundError(UCSBDate, id)
    repo.delete(ucsb_date)
    return generic_message(f"UCSBDate with id {id} deleted")


# Update a single date (Admin only)
@router.put("", response_model=UCSBDateOut)
def update_ucsb_date(
    incoming: UCSBDateUpdate,
    id: int = Query(..., description="id"),
    repo: UCSBDateRepository = Depends(get_repository),
    current_user: CurrentUser = Depends(require_admin),
):
    ucsb_date = repo.find_by_id(id)
    if ucsb_date is None:
        raise EntityNotFoundError(UCSBDate, id)

    ucsb_date.quarter_yyyyq = incoming.quarter_yyyyq
    ucsb_date.name = incoming.name
    ucsb_date.local_date_time = incoming.local_date_time

    return repo.save(ucsb_date)
