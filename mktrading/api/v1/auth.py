"""
Authentication API Routes
"""
from fastapi import APIRouter, Depends

from mktrading.core.database import Store, get_store
from mktrading.core.exceptions import AuthError
from mktrading.core.security import create_access_token, get_current_user
from mktrading.schemas import LoginRequest, LoginResponse, UserInfo
from mktrading.services.user_service import UserService

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(login_data: LoginRequest, store: Store = Depends(get_store)):
    """Exchange a username and password for a bearer token"""
    user = UserService(store).authenticate(login_data.username, login_data.password)
    if not user:
        raise AuthError("Invalid username or password")

    token = create_access_token(user["id"], user["username"])
    return {"token": token, "user": user}


@router.get("/me", response_model=UserInfo)
async def get_current_user_info(current_user: dict = Depends(get_current_user)):
    """Identity carried by the presented token"""
    return current_user
