"""Row builders and lookups shared by the tests."""

from datetime import date

from sqlalchemy import select

from components.category.models import Category
from components.core.security import get_password_hash
from components.transaction.models import Transaction
from components.user.models import User

CRON_SECRET = "test-cron-secret"


async def add_user(session, login="alice"):
    user = User(login=login, password=get_password_hash("secret"), registration_date=date(2024, 1, 1))
    session.add(user)
    await session.commit()
    return user


async def add_category(session, **fields):
    values = {"name": "Rent", "type": "expense", "is_deleted": False}
    values.update(fields)
    category = Category(**values)
    session.add(category)
    await session.commit()
    return category


async def fetch_category(db_manager, category_id):
    async with db_manager.get_db() as session:
        return await session.get(Category, category_id)


async def fetch_transactions(db_manager, category_id=None):
    async with db_manager.get_db() as session:
        query = select(Transaction).order_by(Transaction.id)
        if category_id is not None:
            query = query.where(Transaction.category_id == category_id)
        result = await session.execute(query)
        return list(result.scalars().all())


async def register(client, login="alice", password="secret"):
    """Register a user through the API and return auth headers."""
    response = await client.post("/auth/register", json={"login": login, "password": password})
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
