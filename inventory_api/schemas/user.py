# File: inventory_api/schemas/user.py

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from inventory_api.schemas.base import TrimmedStr


class UserBase(BaseModel):
    name: TrimmedStr
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        # emails are unique case-insensitively
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class UserRead(UserBase):
    id: str
    createdAt: datetime
    updatedAt: datetime


class LoginRequest(BaseModel):
    email: TrimmedStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoginResponse(BaseModel):
    message: str
    name: str
