# backend/routes/admin.py
from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.orm import Session
from database import get_db
from repositories.users import UserRepository
from schemas.user import UserResponse
from services.current_user import CurrentUser
from utils.tokenJWT import require_admin

router = APIRouter(prefix="/api/admin", tags=["Admin"])


# Retrieve every stored user (Admin only)
@router.get("/users", response_model=List[UserResponse])
def users(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    return UserRepository(db).find_all()
