"""Pydantic schemas for user data validation."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user schema."""
    login: str = Field(..., min_length=1, max_length=50)


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., min_length=1)


class User(UserBase):
    """Schema for user response."""
    id: int
    registration_date: date

    model_config = ConfigDict(from_attributes=True)


class UserWithToken(User):
    """Schema for user response carrying an access token."""
    access_token: str
    token_type: str = "bearer"


class AuthContext(BaseModel):
    """Identity of the authenticated caller, passed by value into handlers."""
    user_id: int
    login: str

    model_config = ConfigDict(frozen=True)
