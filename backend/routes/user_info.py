# backend/routes/user_info.py
from fastapi import APIRouter, Depends

from schemas.user import CurrentUserResponse, SystemInfo, UserResponse
from services.current_user import CurrentUser
from services.system_info import SystemInfoService, get_system_info_service
from utils.tokenJWT import require_user

router = APIRouter(prefix="/api", tags=["User information"])


# Stored user and granted roles of the caller
@router.get("/currentUser", response_model=CurrentUserResponse)
def get_current_user(current_user: CurrentUser = Depends(require_user)):
    return CurrentUserResponse(
        user=UserResponse.model_validate(current_user.user),
        roles=sorted(current_user.roles),
    )


# Public flags for the frontend
@router.get("/systemInfo", response_model=SystemInfo)
def get_system_info(service: SystemInfoService = Depends(get_system_info_service)):
    return service.get_system_info()
