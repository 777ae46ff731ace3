"""Pydantic schemas for transaction data validation."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from components.category.models import TransactionType


class TransactionBase(BaseModel):
    """Base transaction schema."""
    date: date
    amount: float = Field(..., ge=0)
    type: TransactionType
    category_id: int
    memo: Optional[str] = Field(None, max_length=255)


class TransactionCreate(TransactionBase):
    """Schema for transaction creation."""
    pass


class TransactionUpdate(TransactionBase):
    """Schema for transaction update."""
    pass


class Transaction(BaseModel):
    """Schema for transaction response."""
    id: int
    user_id: int
    category_id: int
    date: date
    amount: float
    type: str
    memo: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryMonthTotal(BaseModel):
    """Schema for one month + category aggregate of a yearly summary."""
    month: int
    category_id: int
    total_amount: float


class MonthSummary(BaseModel):
    """Schema for income and expense totals of a month."""
    start: date
    end: date
    income: float
    expense: float
    balance: float
