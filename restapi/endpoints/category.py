"""Category endpoints for the API."""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from components.category import schemas
from components.category.repository import CategoryRepository
from components.core.init_db import get_db
from components.core.schemas import Message
from components.user.schemas import AuthContext
from restapi.dependencies import get_today
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Category])
async def read_categories(
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Get active categories, income first, then expense, then by name."""
    return await CategoryRepository(db).get_all(current_user.user_id)


@router.get("/{category_id}", response_model=schemas.Category)
async def read_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Get a specific category by ID."""
    category = await CategoryRepository(db).get_by_id(current_user.user_id, category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("/", response_model=schemas.Category, status_code=201)
async def create_category(
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """
    Create a new category.

    When `registration_date` (day of month) is given the category is
    recurring: `amount` is required and the first firing is scheduled on the
    next occurrence of that day after today.
    """
    return await CategoryRepository(db).create(current_user.user_id, category, today)


@router.put("/{category_id}", response_model=schemas.Category)
async def update_category(
    category_id: int,
    category: schemas.CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """Update a category."""
    updated = await CategoryRepository(db).update(current_user.user_id, category_id, category, today)
    if updated is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return updated


@router.delete("/{category_id}", response_model=schemas.Category)
async def soft_delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Mark a category as deleted. Its transactions are kept."""
    deleted = await CategoryRepository(db).soft_delete(current_user.user_id, category_id)
    if deleted is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return deleted


@router.delete("/{category_id}/permanent", response_model=Message)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(get_current_user)
):
    """Delete a category permanently."""
    if not await CategoryRepository(db).delete(current_user.user_id, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Message(message="Category deleted successfully")
