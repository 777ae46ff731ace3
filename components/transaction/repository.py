"""Repository for transaction operations."""

from datetime import date
from typing import List, Optional

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from components.category.models import TransactionType
from components.core import errors
from components.core.dates import month_window, year_window
from components.transaction.models import Transaction
from components.transaction import schemas


class TransactionRepository:
    """Repository for transaction operations scoped to one user."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def _check_category(self, user_id: int, category_id: int) -> None:
        from components.category.repository import CategoryRepository

        category = await CategoryRepository(self.session).get_by_id(user_id, category_id)
        if category is None:
            raise errors.ValidationError(errors.category_not_found(category_id))

    async def get_by_month(self, user_id: int, day: date) -> List[Transaction]:
        """Get transactions within the month containing ``day``."""
        start, end = month_window(day)
        result = await self.session.execute(
            select(Transaction)
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .order_by(Transaction.date, Transaction.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, user_id: int, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        result = await self.session.execute(
            select(Transaction).where(
                Transaction.id == transaction_id,
                Transaction.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: int, transaction: schemas.TransactionCreate) -> Transaction:
        """Create a new transaction against a visible, active category."""
        await self._check_category(user_id, transaction.category_id)
        db_transaction = Transaction(
            user_id=user_id,
            category_id=transaction.category_id,
            date=transaction.date,
            amount=transaction.amount,
            type=transaction.type.value,
            memo=transaction.memo,
        )
        self.session.add(db_transaction)
        await self.session.commit()
        await self.session.refresh(db_transaction)
        return db_transaction

    async def update(
        self, user_id: int, transaction_id: int, transaction: schemas.TransactionUpdate
    ) -> Optional[Transaction]:
        """Update transaction by ID."""
        db_transaction = await self.get_by_id(user_id, transaction_id)
        if not db_transaction:
            return None

        if transaction.category_id != db_transaction.category_id:
            await self._check_category(user_id, transaction.category_id)

        db_transaction.category_id = transaction.category_id
        db_transaction.date = transaction.date
        db_transaction.amount = transaction.amount
        db_transaction.type = transaction.type.value
        db_transaction.memo = transaction.memo

        await self.session.commit()
        await self.session.refresh(db_transaction)
        return db_transaction

    async def delete(self, user_id: int, transaction_id: int) -> bool:
        """Delete transaction by ID."""
        db_transaction = await self.get_by_id(user_id, transaction_id)
        if not db_transaction:
            return False

        await self.session.delete(db_transaction)
        await self.session.commit()
        return True

    async def get_year_summary(self, user_id: int, day: date) -> List[schemas.CategoryMonthTotal]:
        """
        Sum transaction amounts of the year containing ``day``.

        Returns one row per (month, category) pair that has transactions,
        ordered by month and category.
        """
        start, end = year_window(day)
        month = extract("month", Transaction.date).label("month")
        result = await self.session.execute(
            select(month, Transaction.category_id, func.sum(Transaction.amount).label("total_amount"))
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .group_by(month, Transaction.category_id)
            .order_by(month, Transaction.category_id)
        )
        return [
            schemas.CategoryMonthTotal(
                month=int(row.month),
                category_id=row.category_id,
                total_amount=float(row.total_amount or 0),
            )
            for row in result.all()
        ]

    async def get_month_summary(self, user_id: int, day: date) -> schemas.MonthSummary:
        """Income and expense totals of the month containing ``day``."""
        start, end = month_window(day)
        result = await self.session.execute(
            select(Transaction.type, func.sum(Transaction.amount))
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .group_by(Transaction.type)
        )
        totals = {row[0]: float(row[1] or 0) for row in result.all()}
        income = totals.get(TransactionType.income.value, 0.0)
        expense = totals.get(TransactionType.expense.value, 0.0)
        return schemas.MonthSummary(
            start=start,
            end=end,
            income=income,
            expense=expense,
            balance=income - expense,
        )
