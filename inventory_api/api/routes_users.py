# File: inventory_api/api/routes_users.py

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from inventory_api.api.deps import get_app_settings, get_db
from inventory_api.core.config import Settings
from inventory_api.schemas.user import UserCreate, UserRead
from inventory_api.services import user_service

router = APIRouter()


@router.post(
    "/users",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
def create_user(
    payload: UserCreate,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Register a new user. The password is stored as a bcrypt hash and never
    returned.
    """
    return user_service.register_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        rounds=settings.bcrypt_rounds,
    )


@router.get("/users", response_model=list[UserRead], summary="List users")
def list_users(db: Database = Depends(get_db)):
    return user_service.list_users(db)
