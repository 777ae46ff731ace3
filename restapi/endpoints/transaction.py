"""Transaction endpoints for the API."""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.core.schemas import Message
from components.transaction import schemas
from components.transaction.repository import TransactionRepository
from components.user.schemas import AuthContext
from restapi.dependencies import get_today
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Transaction])
async def read_transactions(
    day: Optional[date] = Query(None, alias="date", description="Any day of the month to list (defaults to today)"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """Get transactions of one month ordered by date."""
    return await TransactionRepository(db).get_by_month(current_user.user_id, day or today)


@router.get("/summary", response_model=List[schemas.CategoryMonthTotal])
async def get_year_summary(
    day: Optional[date] = Query(None, alias="date", description="Any day of the year to summarize (defaults to today)"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """
    Get yearly totals grouped by month and category.

    Returns one entry per month and category with:
    - Month number (1-12)
    - Category ID
    - Sum of transaction amounts
    """
    return await TransactionRepository(db).get_year_summary(current_user.user_id, day or today)


@router.get("/monthly-summary", response_model=schemas.MonthSummary)
async def get_month_summary(
    day: Optional[date] = Query(None, alias="date", description="Any day of the month to summarize (defaults to today)"),
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """Get income, expense and balance of one month."""
    return await TransactionRepository(db).get_month_summary(current_user.user_id, day or today)


@router.get("/{transaction_id}", response_model=schemas.Transaction)
async def read_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Get a specific transaction by ID."""
    transaction = await TransactionRepository(db).get_by_id(current_user.user_id, transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("/", response_model=schemas.Transaction, status_code=201)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Create a new transaction."""
    return await TransactionRepository(db).create(current_user.user_id, transaction)


@router.put("/{transaction_id}", response_model=schemas.Transaction)
async def update_transaction(
    transaction_id: int,
    transaction: schemas.TransactionUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Update a transaction."""
    updated = await TransactionRepository(db).update(current_user.user_id, transaction_id, transaction)
    if updated is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return updated


@router.delete("/{transaction_id}", response_model=Message)
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Delete a transaction."""
    if not await TransactionRepository(db).delete(current_user.user_id, transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return Message(message="Transaction deleted successfully")
