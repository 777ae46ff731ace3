"""Script to seed demo data into the database."""

import asyncio
from datetime import date, timedelta

from sqlalchemy import delete

from components.category.models import Category, TransactionType
from components.core.config import get_settings
from components.core.database import DatabaseManager
from components.core.dates import local_today, next_registration_date
from components.core.security import get_password_hash
from components.transaction.models import Transaction
from components.user.models import User
import components.core.init_db  # noqa: F401  # registers all models


async def seed_data():
    """Seed demo data into the database."""
    settings = get_settings()
    db_manager = DatabaseManager(settings=settings)
    today = local_today(settings.TIMEZONE)
    await db_manager.create_schema()

    async with db_manager.get_db() as db:
        # Clear existing data
        await db.execute(delete(Transaction))
        await db.execute(delete(Category))
        await db.execute(delete(User))

        user = User(
            login="demo",
            password=get_password_hash("password123"),
            registration_date=date(2024, 1, 1)
        )
        db.add(user)
        await db.flush()

        categories = [
            Category(user_id=user.id, name="Salary", type=TransactionType.income.value,
                     registration_date=25, amount=3000,
                     registration_next_date=next_registration_date(25, today)),
            Category(user_id=user.id, name="Rent", type=TransactionType.expense.value,
                     registration_date=1, amount=1200,
                     registration_next_date=next_registration_date(1, today)),
            Category(user_id=user.id, name="Groceries", type=TransactionType.expense.value),
            Category(user_id=None, name="Other", type=TransactionType.expense.value,
                     description="Shared legacy category"),
        ]
        db.add_all(categories)
        await db.flush()

        groceries = categories[2]
        for i in range(10):
            db.add(Transaction(
                user_id=user.id,
                category_id=groceries.id,
                date=today - timedelta(days=i * 3),
                amount=40 + i * 5,
                type=TransactionType.expense.value,
                memo="groceries",
            ))
        await db.commit()

    await db_manager.dispose()


if __name__ == "__main__":
    asyncio.run(seed_data())
