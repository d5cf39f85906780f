# File: inventory_api/api/routes_auth.py

from fastapi import APIRouter, Depends
from pymongo.database import Database

from inventory_api.api.deps import get_app_settings, get_db
from inventory_api.core.config import Settings
from inventory_api.schemas.user import LoginRequest, LoginResponse
from inventory_api.services import user_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(
    payload: LoginRequest,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Check an email/password pair.

    Unknown email and wrong password both answer 401 "Invalid credentials".
    """
    return user_service.authenticate_user(
        db,
        email=payload.email,
        password=payload.password,
        rounds=settings.bcrypt_rounds,
    )
