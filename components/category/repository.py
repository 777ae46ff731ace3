"""Repository for category operations."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.category.models import Category, TransactionType
from components.category.schemas import CategoryCreate, CategoryUpdate
from components.core import errors
from components.core.dates import next_registration_date
from components.transaction.models import Transaction

logger = logging.getLogger(__name__)

TYPE_PRECEDENCE = case(
    (Category.type == TransactionType.income.value, 0),
    (Category.type == TransactionType.expense.value, 1),
    else_=2,
)


def visible_to(user_id: int):
    """Ownership filter: own rows plus legacy rows without an owner."""
    return or_(Category.user_id == user_id, Category.user_id.is_(None))


class CategoryRepository:
    """Repository for category operations scoped to one user."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self, user_id: int) -> List[Category]:
        """Get active categories ordered by type precedence, then name."""
        result = await self.session.execute(
            select(Category)
            .where(visible_to(user_id), Category.is_deleted.is_(False))
            .order_by(TYPE_PRECEDENCE, Category.name, Category.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, user_id: int, category_id: int, include_deleted: bool = False) -> Optional[Category]:
        """Get a category visible to the user."""
        query = select(Category).where(Category.id == category_id, visible_to(user_id))
        if not include_deleted:
            query = query.where(Category.is_deleted.is_(False))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, user_id: int, category: CategoryCreate, today: date) -> Category:
        """Create a new category, scheduling its first firing if it is recurring."""
        db_category = Category(
            user_id=user_id,
            name=category.name,
            type=category.type.value,
            description=category.description,
            color=category.color,
            is_deleted=False,
            registration_date=category.registration_date,
            amount=category.amount,
        )
        if category.registration_date is not None:
            db_category.registration_next_date = next_registration_date(category.registration_date, today)
        self.session.add(db_category)
        await self.session.commit()
        await self.session.refresh(db_category)
        return db_category

    async def update(
        self, user_id: int, category_id: int, category: CategoryUpdate, today: date
    ) -> Optional[Category]:
        """Update category by ID."""
        db_category = await self.get_by_id(user_id, category_id)
        if not db_category:
            return None
        # The recurring job posts into the owner's ledger.
        if category.registration_date is not None and db_category.user_id is None:
            raise errors.ValidationError(
                f"Category {category_id} has no owner and cannot be recurring"
            )

        db_category.name = category.name
        db_category.type = category.type.value
        db_category.description = category.description
        db_category.color = category.color
        db_category.amount = category.amount

        if category.registration_date is None:
            db_category.registration_date = None
            db_category.registration_next_date = None
        elif (
            category.registration_date != db_category.registration_date
            or db_category.registration_next_date is None
        ):
            db_category.registration_date = category.registration_date
            db_category.registration_next_date = next_registration_date(category.registration_date, today)

        await self.session.commit()
        await self.session.refresh(db_category)
        return db_category

    async def soft_delete(self, user_id: int, category_id: int) -> Optional[Category]:
        """Mark category as deleted; existing transactions keep referencing it."""
        db_category = await self.get_by_id(user_id, category_id)
        if not db_category:
            return None

        db_category.is_deleted = True
        await self.session.commit()
        await self.session.refresh(db_category)
        return db_category

    async def delete(self, user_id: int, category_id: int) -> bool:
        """Remove category row permanently."""
        db_category = await self.get_by_id(user_id, category_id, include_deleted=True)
        if not db_category:
            return False

        result = await self.session.execute(
            select(func.count(Transaction.id)).where(Transaction.category_id == category_id)
        )
        transaction_count = result.scalar_one()
        if transaction_count:
            raise errors.ConflictError(
                f"Cannot delete category {category_id}: it has {transaction_count} "
                f"transaction{'s' if transaction_count != 1 else ''}"
            )

        await self.session.delete(db_category)
        await self.session.commit()
        logger.info("Category %s deleted by user %s", category_id, user_id)
        return True
