"""Pydantic schemas for category data validation."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from components.category.models import TransactionType


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=100)
    type: TransactionType
    description: Optional[str] = None
    color: Optional[str] = Field(None, max_length=9)
    registration_date: Optional[int] = Field(None, ge=1, le=31, description="Day of month the recurrence fires")
    amount: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_recurrence(self) -> "CategoryBase":
        if self.registration_date is not None and self.amount is None:
            raise ValueError("amount is required for recurring categories")
        return self


class CategoryCreate(CategoryBase):
    """Schema for category creation."""
    pass


class CategoryUpdate(CategoryBase):
    """Schema for category update."""
    pass


class Category(BaseModel):
    """Schema for category response."""
    id: int
    user_id: Optional[int] = None
    name: str
    type: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_deleted: bool
    registration_date: Optional[int] = None
    registration_next_date: Optional[date] = None
    amount: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)
